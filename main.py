"""mutt-index-format: compact a mutt index_format line for the pager.

Meant to be used as an index_format filter (a format string ending in '|'):

    set index_format="mutt-index-format \"%4C  %Z  %-9.9e  [S:%d]  %D  [LIST: %-16.16B]  %-30.30F (b: %6c; l: %6l) %s\"|"
"""

import logging
import os
import sys
from argparse import SUPPRESS, ArgumentParser

from index_format.config import ConfigError, load_config, load_yaml_config
from index_format.reformatter import ListWidthError, reformat

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="mutt-index-format",
        description="Compact a mutt index_format line for display in the pager.",
    )
    parser.add_argument(
        "line",
        nargs="?",
        help="The formatted index line to rewrite",
    )
    parser.add_argument(
        "extra",
        nargs="*",
        help=SUPPRESS,
    )
    parser.add_argument(
        "--config",
        default=os.environ.get("INDEX_FORMAT_CONFIG"),
        help="YAML config file (default: $INDEX_FORMAT_CONFIG)",
    )
    parser.add_argument(
        "--ignore-list",
        action="append",
        metavar="NAME",
        help="List/mailbox name to blank out (repeatable)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Rewrite every line read from standard input instead",
    )
    parser.add_argument(
        "--timestamps-only",
        action="store_true",
        help="Only collapse the timestamps; lines need no [LIST: ...] field",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report informational diagnostics on stderr",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Report debug diagnostics on stderr",
    )
    return parser


def run(args) -> int:
    """Reformat the requested line(s) and return the exit status."""
    try:
        config = load_config(args, load_yaml_config(args.config))
    except ConfigError as exc:
        logger.critical("%s", exc)
        return 1

    logging.getLogger().setLevel(config.log_level)

    if args.extra:
        logger.debug("ignoring %d extra argument(s)", len(args.extra))

    if args.stdin:
        lines = (line.rstrip("\n") for line in sys.stdin)
    else:
        lines = iter([args.line])

    try:
        for line in lines:
            print(reformat(line, config.ignorable_list_names, not config.timestamps_only))
    except ListWidthError as exc:
        logger.critical("%s; bailing out", exc)
        return 1
    return 0


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(name)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args()
    if args.line is None and not args.stdin:
        parser.error("required index line not provided")
    if args.line is not None and args.stdin:
        parser.error("an index line argument cannot be combined with --stdin")

    try:
        status = run(args)
        sys.stdout.flush()
    except KeyboardInterrupt:
        status = 0
    except BrokenPipeError:
        # Reader went away; stdout goes to devnull so the final flush at exit
        # does not fail again.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        status = 0
    sys.exit(status)


if __name__ == "__main__":
    main()
