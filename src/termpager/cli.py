"""Command-line interface for termpager."""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .errors import PagerError, from_exception, invalid_argument, print_error
from .pagers import BasicPager, NullPager
from .screen import is_tty
from .selection import create_pager


def _open_prompt_input(args: argparse.Namespace):
    """Stream page break answers are read from.

    When the text itself arrives on stdin, answers have to come from the
    terminal instead.
    """
    if args.file not in (None, "-"):
        return None
    try:
        return open("/dev/tty", "r", encoding="utf-8")
    except OSError:
        return None


def _read_text(args: argparse.Namespace) -> str:
    if args.file in (None, "-"):
        return sys.stdin.read()
    with open(args.file, "r", encoding="utf-8") as f:
        return f.read()


def cmd_page(args: argparse.Namespace) -> int:
    """Handle paging a file or stdin."""
    for name in ("width", "height"):
        value = getattr(args, name)
        if value is not None and value < 1:
            print_error(
                invalid_argument(f"--{name}", str(value), "must be positive"),
                json_mode=args.json,
            )
            return 1

    try:
        text = _read_text(args)
    except OSError as e:
        print_error(from_exception(e), json_mode=args.json)
        return 1

    prompt_input = None
    try:
        if args.no_pager:
            pager = NullPager(enabled=False)
        elif args.basic:
            prompt_input = _open_prompt_input(args)
            pager = BasicPager(width=args.width, height=args.height, input=prompt_input)
        else:
            prompt_input = _open_prompt_input(args)
            pager = create_pager(
                command=args.command,
                width=args.width,
                height=args.height,
                input=prompt_input,
            )

        if isinstance(pager, NullPager):
            passed = pager.write(text)
            if not is_tty(pager.output):
                sys.stdout.write(passed)
            pager.close()
            return 0

        pager.page(text)
        return 0
    except PagerError as e:
        print_error(from_exception(e), json_mode=args.json)
        return 1
    finally:
        if prompt_input is not None:
            prompt_input.close()


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="termpager",
        description="Paginate text in the terminal",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("file", nargs="?", help="File to page (default: stdin)")
    parser.add_argument(
        "--command",
        action="append",
        help="Pager command to use; may be repeated to give fallbacks",
    )
    parser.add_argument(
        "--basic", action="store_true", help="Use the built-in pager"
    )
    parser.add_argument(
        "--no-pager", action="store_true", help="Write text without paging"
    )
    parser.add_argument("--width", type=int, help="Page width (built-in pager)")
    parser.add_argument("--height", type=int, help="Page height (built-in pager)")
    parser.add_argument(
        "--json", action="store_true", help="Report errors as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log pager selection to stderr"
    )
    parser.set_defaults(func=cmd_page)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
