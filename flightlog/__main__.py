"""
Command line entry point.

    python -m flightlog import-mandm statement.json --user-id 42
"""
import argparse
import asyncio
import json
import sys

from .context import SessionUser, user_session
from .errors import FlightlogError
from .importers import process_mandm_file
from .logging_utils import configure_logging, new_request_id


async def _import_mandm(path: str, user_id: str) -> int:
    with open(path, encoding="utf-8") as f:
        content = f.read()

    with user_session(SessionUser(id=user_id, username=f"cli-{user_id}")):
        try:
            result = await process_mandm_file(content)
        except FlightlogError as e:
            print(f"Import failed: {e}", file=sys.stderr)
            return 1

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="flightlog", description="flightlog utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    mandm = sub.add_parser("import-mandm", help="Convert a Miles & More JSON export to flights")
    mandm.add_argument("file", help="Path to the exported JSON file")
    mandm.add_argument("--user-id", required=True, help="Id of the user the flights belong to")

    args = parser.parse_args(argv)

    configure_logging()
    new_request_id()

    if args.command == "import-mandm":
        return asyncio.run(_import_mandm(args.file, args.user_id))
    return 2


if __name__ == "__main__":
    sys.exit(main())
