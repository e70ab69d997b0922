"""Rewrites matched index lines into a more compact, column-stable form.

Two fields are reworked:

  * the sender-local timestamp is blanked when it is textually identical to
    the reader-local one, keeping the reader-local timestamp in its column;
  * the [LIST: name] field is shortened to [name], or blanked entirely for
    names that carry no information (the default mailbox, a catch-all).

All widths are counted in grapheme clusters.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Iterable

from index_format.config import DEFAULT_IGNORABLE_LIST_NAMES
from index_format.grammar import LineRecord, validate
from index_format.graphemes import grapheme_count, pad

logger = logging.getLogger(__name__)

# Thread position of a message that is alone in its thread
_SINGLETON_THREAD = "1/1"


class ListWidthError(RuntimeError):
    """The list name does not fit in the width observed on input."""


class Outcome(enum.Enum):
    UNMATCHED = "unmatched"
    COLLAPSED = "collapsed"
    DATES_DIFFER = "dates_differ"


@dataclass(frozen=True)
class ReformatResult:
    text: str
    outcome: Outcome


def format_thread(record: LineRecord) -> str:
    """Blank the thread value "1/1"; anything else is kept as is."""
    value = record.thread_value
    if value == _SINGLETON_THREAD:
        value = pad(len(_SINGLETON_THREAD))
    return record.thread_lead + value + record.thread_trail


def collapse_timestamps(record: LineRecord) -> tuple[str, bool]:
    """Rebuild the line up to the reader-local seconds suffix.

    Returns the rebuilt text and whether the sender-local timestamp was
    collapsed into blanks.
    """
    head = record.prefix + format_thread(record)

    if record.left_timestamp == record.right_timestamp:
        replaced = record.left_landmark + record.left_timestamp + record.left_trailer
        text = head + pad(grapheme_count(replaced)) + record.right_timestamp + record.right_trailer
        return text, True

    logger.info("dates are different; passing through unchanged")
    text = (
        head
        + record.left_landmark
        + record.left_timestamp
        + record.left_trailer
        + record.right_timestamp
        + record.right_trailer
    )
    return text, False


def format_list_name(record: LineRecord, ignorable_list_names: Iterable[str]) -> str:
    """Render the list-name field as [name] or as blanks of the same width.

    The field width is that of the raw capture plus the two brackets; the
    "LIST:" landmark itself is dropped.
    """
    needed_width = 2 + grapheme_count(record.list_name_raw)
    name = record.list_name

    if name in ignorable_list_names:
        logger.debug("suppressing list name %r", name)
        return pad(needed_width)

    remaining = needed_width - grapheme_count(name) - 2
    if remaining < 0:
        raise ListWidthError(
            f"list name {name!r} needs more than the {needed_width} columns observed on input"
        )
    return f"[{name}]" + pad(remaining)


def reformat_record(record: LineRecord, ignorable_list_names: Iterable[str]) -> ReformatResult:
    """Reassemble a validated line."""
    head, collapsed = collapse_timestamps(record)
    if record.list_name_raw is None:
        text = head + record.remainder
    else:
        text = head + format_list_name(record, tuple(ignorable_list_names)) + record.remainder
    outcome = Outcome.COLLAPSED if collapsed else Outcome.DATES_DIFFER
    return ReformatResult(text=text, outcome=outcome)


def reformat_with_outcome(
    line: str,
    ignorable_list_names: Iterable[str] = DEFAULT_IGNORABLE_LIST_NAMES,
    list_field: bool = True,
) -> ReformatResult:
    """Reformat *line*, reporting which path was taken."""
    record = validate(line, list_field)
    if record is None:
        logger.warning("input line did not match expected index format; passing through unchanged")
        return ReformatResult(text=line, outcome=Outcome.UNMATCHED)

    logger.info("input line matched")
    return reformat_record(record, ignorable_list_names)


def reformat(
    line: str,
    ignorable_list_names: Iterable[str] = DEFAULT_IGNORABLE_LIST_NAMES,
    list_field: bool = True,
) -> str:
    """Return the reformatted line, or *line* itself when it does not match."""
    return reformat_with_outcome(line, ignorable_list_names, list_field).text
