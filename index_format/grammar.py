"""Structural validator for mutt index_format lines.

The expected line is produced by an index_format such as:

    %4C  %Z  %-9.9e  [S:%d]  %D  [LIST: %-16.16B]  %-30.30F ...

e.g.

    23666  N    [S:2015-10-26 12:55:52]  2015-10-26 12:55:52  [LIST: ads             ]  sender@example.com ...

The grammar is an ordered tuple of field specs, each documenting its own
bounds. The specs are joined into one anchored pattern so the regex engine can
backtrack across field boundaries (the status column may hold spaces, and the
thread column is empty for most messages).
"""

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Field specs
# ---------------------------------------------------------------------------

# YYYY-M-D H:MM, month/day/hour one or two digits
_DATE_TIME = r"\d{4}-\d{1,2}-\d{1,2}\s{1,10}\d{1,2}:\d{2}"

LIST_LANDMARK = "[LIST:"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    fragment: str
    description: str


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(
        name="message_number",
        fragment=r"(?P<message_number>[ \t]{0,15}\d{1,15}  )",
        description="right-justified message sequence number (%4C), then two spaces",
    ),
    FieldSpec(
        name="status",
        fragment=r"(?P<status>[^\n]{3}  )",
        description="three-column status flags (%Z), then two spaces",
    ),
    FieldSpec(
        name="thread",
        fragment=(
            r"(?:(?P<thread_lead>\s{0,15})"
            r"(?P<thread_value>[^\s\[]\S{0,14})"
            r"(?P<thread_trail>\s{2,10}))?"
        ),
        description="optional thread size or N/M position, left-justified, 2-10 spaces of filler",
    ),
    FieldSpec(
        name="left_timestamp",
        fragment=(
            r"(?P<left_landmark>\[S:)"
            r"(?P<left_timestamp>" + _DATE_TIME + r")"
            r"(?P<left_trailer>:\d{2}\]\s{1,500})"
        ),
        description="sender-local date in [S:...] brackets, seconds split off, 1-500 spaces",
    ),
    FieldSpec(
        name="right_timestamp",
        fragment=(
            r"(?P<right_timestamp>" + _DATE_TIME + r")"
            r"(?P<right_trailer>:\d{2}\s{1,10})"
        ),
        description="reader-local date, seconds split off, 1-10 spaces",
    ),
    FieldSpec(
        name="list_name",
        fragment=r"\[LIST:(?P<list_name_raw>\s{0,50}[^\]]{1,50})\]",
        description="list or mailbox name (%B) with its padding; brackets not captured",
    ),
    FieldSpec(
        name="remainder",
        fragment=r"(?P<remainder>\s{1,500}(?s:.*))",
        description="1-500 spaces and everything after, never interpreted",
    ),
)

# Timestamp-only lines: the same columns up to the reader-local date, with
# anything at all after its seconds.
TIMESTAMP_FIELDS: tuple[FieldSpec, ...] = FIELDS[:4] + (
    FieldSpec(
        name="right_timestamp",
        fragment=(
            r"(?P<right_timestamp>" + _DATE_TIME + r")"
            r"(?P<right_trailer>:\d{2})"
        ),
        description="reader-local date, seconds split off",
    ),
    FieldSpec(
        name="remainder",
        fragment=r"(?P<remainder>(?s:.*))",
        description="everything after the seconds, never interpreted",
    ),
)

# ASCII-only \d and \s, as the format only ever emits ASCII digits and padding
INDEX_LINE_PATTERN = re.compile("".join(f.fragment for f in FIELDS), re.ASCII)
TIMESTAMP_LINE_PATTERN = re.compile("".join(f.fragment for f in TIMESTAMP_FIELDS), re.ASCII)


# ---------------------------------------------------------------------------
# Line record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineRecord:
    raw_line: str
    prefix: str
    thread_lead: str
    thread_value: str
    thread_trail: str
    left_landmark: str
    left_timestamp: str
    left_trailer: str
    right_timestamp: str
    right_trailer: str
    list_name_raw: str | None
    remainder: str

    @property
    def thread_field(self) -> str:
        return self.thread_lead + self.thread_value + self.thread_trail

    @property
    def list_name(self) -> str | None:
        """List name with its padding trimmed; None for timestamp-only lines."""
        if self.list_name_raw is None:
            return None
        return self.list_name_raw.strip()


def validate(line: str, list_field: bool = True) -> LineRecord | None:
    """Match *line* against the index grammar.

    With list_field=False the line only has to carry the two timestamps; any
    [LIST: ...] field is left in the remainder untouched.

    Returns None when the line does not have the expected shape; callers pass
    such lines through unchanged.
    """
    pattern = INDEX_LINE_PATTERN if list_field else TIMESTAMP_LINE_PATTERN
    m = pattern.match(line)
    if not m:
        return None

    return LineRecord(
        raw_line=line,
        prefix=m.group("message_number") + m.group("status"),
        thread_lead=m.group("thread_lead") or "",
        thread_value=m.group("thread_value") or "",
        thread_trail=m.group("thread_trail") or "",
        left_landmark=m.group("left_landmark"),
        left_timestamp=m.group("left_timestamp"),
        left_trailer=m.group("left_trailer"),
        right_timestamp=m.group("right_timestamp"),
        right_trailer=m.group("right_trailer"),
        list_name_raw=m.groupdict().get("list_name_raw"),
        remainder=m.group("remainder"),
    )
