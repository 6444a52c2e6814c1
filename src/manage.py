"""Catalog service database management CLI.

Creates and drops the catalogue's SQL schema using the setup_db/drop_db
utilities in catalogue.utils.db. Only sqlite and postgresql providers
have a schema; the memory provider is left alone.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db
    PROTEAN_ENV=production python src/manage.py drop-db
"""

import argparse
import sys


def _catalogue():
    from catalogue.domain import catalogue

    print("Initializing catalogue domain...")
    catalogue.init()
    return catalogue


def setup_database():
    """Create the catalogue database schema."""
    from catalogue.utils.db import setup_db

    domain = _catalogue()
    print("Creating catalogue database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the catalogue database schema."""
    from catalogue.utils.db import drop_db

    domain = _catalogue()
    print("Dropping catalogue database schema...")
    drop_db(domain)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Catalog service database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
