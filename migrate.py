import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.db.provision import provision, render_ddl


def run_migrations(create_db: bool = True):
    print("Running database migrations...")
    engine = provision(settings, create_db=create_db)
    engine.dispose()
    print("Migrations completed successfully.")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Create the posts database and (re)create the posts table. "
                    "Existing posts are dropped.")
    parser.add_argument("--sql", action="store_true",
                        help="print the DDL script instead of running it")
    parser.add_argument("--dialect", default="mysql", choices=["mysql", "sqlite"],
                        help="dialect used with --sql (default: mysql)")
    parser.add_argument("--skip-create-database", action="store_true",
                        help="assume the database already exists")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)

    if args.sql:
        sys.stdout.write(render_ddl(args.dialect, settings))
        return 0

    try:
        run_migrations(create_db=not args.skip_create_database)
    except SQLAlchemyError as e:
        print(f"Migration failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
