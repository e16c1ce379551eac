"""Order notifications database management CLI.

Creates and drops the in-app ``notifications`` table through the domain's
configured providers. Run with PROTEAN_ENV=production to target PostgreSQL.

Usage:
    python src/manage.py setup-db   # Create tables
    python src/manage.py drop-db    # Drop tables
"""

import argparse
import sys


def setup_databases():
    from order_notifications.domain import order_notifications
    from order_notifications.notification.notification import InAppNotification  # noqa: F401
    from order_notifications.utils.db import setup_db

    print("Initializing order_notifications domain...")
    order_notifications.init()
    print("Creating database schema...")
    setup_db(order_notifications)
    print("Done.")


def drop_databases():
    from order_notifications.domain import order_notifications
    from order_notifications.notification.notification import InAppNotification  # noqa: F401
    from order_notifications.utils.db import drop_db

    print("Initializing order_notifications domain...")
    order_notifications.init()
    print("Dropping database schema...")
    drop_db(order_notifications)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Order notifications database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
