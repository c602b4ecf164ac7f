"""Lenscart database management CLI.

Creates and drops the SQL schemas of every domain. Domains backed by the
memory provider are left alone.

Usage:
    python src/manage.py setup-db                       # Create all tables
    python src/manage.py drop-db --domain ordering      # Drop one domain's tables
"""

import argparse
import sys

from server import DOMAIN_NAMES, _get_domain

from shared.db import drop_db, setup_db


def _targets(domains):
    return domains or DOMAIN_NAMES


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    for name in _targets(domains):
        print(f"Initializing {name} domain...")
        domain = _get_domain(name)
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    for name in _targets(domains):
        print(f"Initializing {name} domain...")
        domain = _get_domain(name)
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Lenscart database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("setup-db", "Create all database tables"), ("drop-db", "Drop all database tables")):
        subparser = subparsers.add_parser(command, help=help_text)
        subparser.add_argument(
            "--domain",
            choices=DOMAIN_NAMES,
            nargs="*",
            help="Specific domain(s) to target (default: all)",
        )

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
