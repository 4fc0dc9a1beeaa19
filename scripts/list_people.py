"""
DB Views — Person Listing Script

Prints people from the person view: one person by id, the admin list,
the banned list, or a search/sort/paginate query.

Usage:
    python scripts/list_people.py --admins
    python scripts/list_people.py --banned
    python scripts/list_people.py --person-id 42
    python scripts/list_people.py --search "ali" --sort New --page 2 --limit 20
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

# Resolve project root so this script can be run from any working directory
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from db_views.config import SortType
from db_views.database import create_db_engine
from db_views.errors import DbViewsError
from db_views.log import configure_logging
from db_views.views import PersonQuery, PersonView


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List people from the person view.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/list_people.py --admins
  python scripts/list_people.py --search "ali" --sort New --limit 5
""",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--admins", action="store_true", help="List instance admins.")
    mode.add_argument("--banned", action="store_true", help="List currently banned people.")
    mode.add_argument("--person-id", type=int, default=None, help="Show a single person.")
    parser.add_argument("--search", type=str, default=None, help="Match name or display name.")
    parser.add_argument(
        "--sort",
        type=str,
        default=None,
        choices=[s.value for s in SortType],
        help="Platform sort directive (default: comment score).",
    )
    parser.add_argument("--page", type=int, default=None, help="1-based page number.")
    parser.add_argument("--limit", type=int, default=None, help="Page size.")
    parser.add_argument("--database-url", type=str, default=None, help="Override DATABASE_URL.")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Log level.")
    return parser.parse_args(argv)


def format_view(view: PersonView) -> str:
    person, counts = view.person, view.counts
    label = f"{person.name} ({person.display_name})" if person.display_name else person.name
    return (
        f"{person.id:>6}  {label:<40}  posts={counts.post_count} "
        f"post_score={counts.post_score} comments={counts.comment_count} "
        f"comment_score={counts.comment_score}"
    )


async def run(args: argparse.Namespace) -> list[PersonView]:
    engine, session_factory = create_db_engine(args.database_url)
    try:
        if args.person_id is not None:
            return [await PersonView.read(session_factory, args.person_id)]
        if args.admins:
            return await PersonView.admins(session_factory)
        if args.banned:
            return await PersonView.banned(session_factory)
        query = PersonQuery(
            sort=SortType(args.sort) if args.sort else None,
            search_term=args.search,
            page=args.page,
            limit=args.limit,
        )
        return await query.list(session_factory)
    finally:
        await engine.dispose()


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        views = await run(args)
    except DbViewsError as e:
        print(f"Failed to list people: {e}", file=sys.stderr)
        return 1

    for view in views:
        print(format_view(view))
    if not views:
        print("No people matched.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
