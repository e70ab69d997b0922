import pytest

SAMPLE_LINE = (
    "23666  N    [S:2015-10-26 12:55:52]  2015-10-26 12:55:52  "
    "[LIST: ads             ]  sender@example.com (b: 1.3K; l: 144) subject"
)


def build_line(
    number="23666",
    status="N  ",
    thread="",
    left="2015-10-26 12:55",
    right="2015-10-26 12:55",
    list_name="ads",
    list_width=16,
    tail="sender@example.com (b: 1.3K; l: 144) subject",
):
    """Assemble an index line the way the mutt index_format lays it out."""
    thread_field = f"{thread:<9}  " if thread else ""
    return (
        f"{number:>5}  {status}  {thread_field}"
        f"[S:{left}:52]  {right}:52  "
        f"[LIST: {list_name:<{list_width}}]  {tail}"
    )


@pytest.fixture
def sample_line():
    return SAMPLE_LINE


@pytest.fixture
def make_line():
    return build_line
