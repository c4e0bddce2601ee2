"""
Command-line interface for reactscout.

Drives the react.dev page objects from the shell, mostly for checking
selectors against the live site after markup changes.
"""

import argparse
import logging
import sys

from .config import InteractionConfig, SessionConfig
from .errors import ReactScoutError


def _configs(args):
    interaction = InteractionConfig.from_env()
    if args.base_url:
        interaction = interaction.with_overrides(base_url=args.base_url)
    session = SessionConfig(browser=args.browser, headless=args.headless)
    return session, interaction


def _save_report(session, args):
    if args.report:
        session.capture.save_report(args.report)
        print(f"📊 Report saved to: {args.report}")


def search_command(args):
    """Open the search overlay, run a query and print the results."""
    from .session import open_session

    session_config, interaction_config = _configs(args)
    print(f"🔍 Searching {interaction_config.base_url} for {args.query!r}")

    with open_session(session_config, interaction_config) as session:
        try:
            session.home.navigate_home()
            session.search.open_via_keyboard()
            state = session.search.search(args.query)
            print(f"Results state: {state.value}")

            titles = session.search.results()
            for i, title in enumerate(titles):
                print(f"  [{i}] {title}")

            if args.select is not None:
                session.search.select_result(args.select)
                print(f"➡️  Navigated to: {session.page.url}")
        finally:
            _save_report(session, args)


def inspect_command(args):
    """Print what the home page chrome exposes."""
    from .session import open_session

    session_config, interaction_config = _configs(args)
    print(f"🔍 Inspecting {interaction_config.base_url}")

    with open_session(session_config, interaction_config) as session:
        try:
            home = session.home
            idle = home.navigate_home()
            print(f"Network idle reached: {idle}")
            print(f"Appearance: {home.current_appearance().value}")

            labels = home.navigation_labels()
            print(f"Navigation ({len(labels)}):")
            for label in labels:
                print(f"  - {label}")

            print(f"Compact menu available: {home.open_compact_menu()}")
            print(f"Search opens: {home.open_search()}")
        finally:
            _save_report(session, args)


def _add_common_arguments(parser):
    parser.add_argument("--base-url", help="Site to drive (default: https://react.dev)")
    parser.add_argument(
        "--browser",
        choices=["chromium", "firefox", "webkit"],
        default="chromium",
        help="Browser to launch (default: chromium)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        default=True,
        help="Run browser in headless mode (default: True)",
    )
    parser.add_argument(
        "--headed",
        action="store_false",
        dest="headless",
        help="Run browser in headed mode (show browser window)",
    )
    parser.add_argument("--report", help="Write a session report to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log probe outcomes")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="reactscout - page objects for react.dev",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List search results for a query
  reactscout search useState

  # Search and open the second result
  reactscout search "custom hook" --select 1

  # Show navigation, appearance and search availability
  reactscout inspect --headed
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Run a query through the search overlay")
    search_parser.add_argument("query", help="Text to search for")
    search_parser.add_argument(
        "--select", type=int, help="Open the result at this index after searching"
    )
    _add_common_arguments(search_parser)
    search_parser.set_defaults(func=search_command)

    inspect_parser = subparsers.add_parser("inspect", help="Inspect the home page chrome")
    _add_common_arguments(inspect_parser)
    inspect_parser.set_defaults(func=inspect_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except ReactScoutError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
