import argparse
import logging
import sys
from typing import Callable, List, Optional

from newsie import __version__
from newsie.config import Settings, configure_logging, load_settings
from newsie.core import FeedSession
from newsie.exceptions import NewsieError, PostNumberError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="newsie",
        description="Read the Arch Linux news feed from the terminal.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", metavar="command")

    browse = commands.add_parser(
        "browse",
        help="Browse through unread posts; quits when all have been viewed or on 'n'.",
    )
    browse.add_argument(
        "-a", "--all",
        action="store_true",
        help="Browse all posts, read and unread.",
    )

    commands.add_parser("clear", help="Mark all posts as read.")

    fetch = commands.add_parser(
        "fetch",
        help="Report the number of unread posts (also used as the exit status).",
    )
    fetch.add_argument(
        "-p", "--prompt",
        action="store_true",
        help="Ask whether to browse the unread posts right away.",
    )

    ls = commands.add_parser("ls", help="List unread posts.")
    ls.add_argument(
        "-a", "--all",
        action="store_true",
        help="List all posts, read and unread.",
    )

    read = commands.add_parser("read", help="Read one post (the first by default).")
    read.add_argument(
        "-n", "--number",
        type=int,
        default=1,
        metavar="POST_NO",
        help="Post number as shown by 'ls' / 'ls --all' (default = 1).",
    )
    return parser


def parse_args(argv: List[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def run_command(args: argparse.Namespace, session: FeedSession) -> int:
    if args.command == "browse":
        session.browse(args.all)
    elif args.command == "clear":
        cleared = session.clear_all()
        print(f"Marked {cleared} post(s) as read.")
    elif args.command == "fetch":
        status, msg = session.fetch_status(args.prompt)
        print(msg, end="")
        return status
    elif args.command == "ls":
        for line in session.list_items(args.all):
            print(line)
    elif args.command == "read":
        try:
            print(session.read_item(args.number))
        except PostNumberError:
            print("Invalid post number.")
    return 0


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
    session_factory: Callable[[Settings], FeedSession] = FeedSession.initialize,
) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.command is None:
        build_parser().print_help()
        return 0

    settings = settings or load_settings()
    configure_logging(settings)
    try:
        session = session_factory(settings)
        return run_command(args, session)
    except NewsieError as exc:
        logger.debug("Fatal error", exc_info=True)
        print(f"Exiting: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
