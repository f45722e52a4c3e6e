"""Command line front end: python -m madaris <command>."""

import argparse
import getpass
import sys

from madaris.config import API_BASE_URL
from madaris.runner import open_dashboard, summary_line
from madaris.schema import SearchCriteria


def _add_criteria_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", default="", help="School name contains")
    parser.add_argument("--city", default="", help="City contains")
    parser.add_argument("--manager", default="", help="Contract manager name contains")
    parser.add_argument("--phone", default="", help="Phone number contains")
    parser.add_argument("--email", default="", help="Email contains")


def _criteria(args: argparse.Namespace) -> SearchCriteria:
    return SearchCriteria(
        school_name=args.name,
        city=args.city,
        contract_manager_name=args.manager,
        phone_number=args.phone,
        email=args.email,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="madaris", description="School registry admin client")
    parser.add_argument("--api-url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--storage", default=None, help="Session storage file")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and save the session")
    login.add_argument("username")
    login.add_argument("--password", default=None, help="Prompted for when omitted")

    sub.add_parser("logout", help="Forget the saved session")
    sub.add_parser("whoami", help="Show the logged-in operator")
    sub.add_parser("list", help="List all schools")

    search = sub.add_parser("search", help="Search schools")
    _add_criteria_args(search)

    export = sub.add_parser("export", help="Export schools to schools.xlsx")
    export.add_argument("--out", default=".", help="Output directory")
    _add_criteria_args(export)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    dashboard = open_dashboard(storage_path=args.storage, base_url=args.api_url)

    if args.command == "login":
        password = args.password if args.password is not None else getpass.getpass("Password: ")
        feedback = dashboard.login(args.username, password)
        print(feedback.message)
        return 0 if feedback.ok else 1

    if args.command == "logout":
        dashboard.logout()
        return 0

    if args.command == "whoami":
        identity = dashboard.session_store.identity
        if identity is None:
            print("Not logged in")
            return 1
        print(f"{identity.username} ({identity.name})")
        return 0

    feedback = dashboard.load()
    if not feedback.ok:
        print(feedback.message)
        return 1

    if args.command in ("search", "export"):
        criteria = _criteria(args)
        if args.command == "search" or not criteria.is_blank():
            feedback = dashboard.search(criteria)
            if not feedback.ok:
                print(feedback.message)
                return 1

    if args.command == "export":
        feedback = dashboard.export(args.out)
        print(feedback.message)
        return 0 if feedback.ok else 1

    print(f"{dashboard.heading}: {feedback.message}")
    for school in dashboard.results:
        print(f"  {summary_line(school)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
