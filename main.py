import argparse
import sys
from typing import List, Optional

from alice_bio.core.config import settings
from alice_bio.core.logging import configure_logging
from alice_bio.db.ddl import DIALECTS, render_schema_sql
from alice_bio.db.init_db import init_db


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alice-bio", description=f"{settings.APP_NAME} {settings.APP_VERSION}"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("init-db", help="Create the managed tables on DATABASE_URL")
    sql = commands.add_parser("sql", help="Print the job-table DDL")
    sql.add_argument("--dialect", choices=sorted(DIALECTS), default="postgresql")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    if args.command == "init-db":
        init_db()
    elif args.command == "sql":
        sys.stdout.write(render_schema_sql(args.dialect))
    return 0


if __name__ == "__main__":
    sys.exit(main())
