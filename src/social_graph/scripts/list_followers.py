# src/social_graph/scripts/list_followers.py
"""Print the followers (or friends) of an account, one per line.

OAuth values are read from the SOCIAL_GRAPH_* environment variables.

Example:
    python -m social_graph.scripts.list_followers rustlang --limit 50
"""

import argparse
import itertools
import logging
import sys
from collections.abc import Sequence

from social_graph.auth import Credentials
from social_graph.core.settings import settings
from social_graph.errors import GraphError
from social_graph.services import users
from social_graph.transport import Transport


def format_item(item: object) -> str:
    """Render a user as ``id @screen_name (name)``, IDs as-is."""
    if isinstance(item, int):
        return str(item)
    return f"{item.id} @{item.screen_name} ({item.name})"  # type: ignore[attr-defined]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the followers or friends of an account")
    parser.add_argument("account", help="Screen name, or numeric ID with --numeric")
    parser.add_argument(
        "--numeric",
        action="store_true",
        help="Treat the account argument as a numeric user ID.",
    )
    parser.add_argument(
        "--following",
        action="store_true",
        help="List the accounts this account follows instead of its followers.",
    )
    parser.add_argument("--ids", action="store_true", help="Only print numeric IDs.")
    parser.add_argument("--page-size", type=int, default=None, help="Items per request.")
    parser.add_argument("--limit", type=int, default=None, help="Stop after this many items.")
    parser.add_argument("--verbose", action="store_true", help="Log each request.")
    args = parser.parse_args(argv)
    account: int | str = args.account
    if args.numeric:
        try:
            account = int(args.account)
        except ValueError:
            parser.error(f"--numeric expects a numeric user ID, got {args.account!r}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        credentials = Credentials.from_settings(settings)
    except ValueError as exc:
        print(f"[list_followers] ERROR: {exc}", file=sys.stderr)
        return 2

    if args.following:
        listing = users.friends_ids if args.ids else users.friends_of
    else:
        listing = users.followers_ids if args.ids else users.followers_of

    with Transport() as transport:
        try:
            iterator = listing(account, credentials, transport)
            if args.page_size is not None:
                iterator = iterator.with_page_size(args.page_size)
            for resp in itertools.islice(iterator, args.limit):
                print(format_item(resp.response))
        except GraphError as exc:
            print(f"[list_followers] ERROR: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
