#!/usr/bin/env python3
"""
Reset a user's password in the Customer Manager MongoDB database.

This script DOES NOT read or reveal any existing passwords. It simply sets a new password
hash (PBKDF2-HMAC-SHA256, format "salthex$hashhex") for the specified username.

Usage:
    python reset_password.py --username maria --password "NewStrongPass!234"

Connection settings come from MONGO_URI / MONGO_DB_NAME / USERS_COLLECTION unless
given on the command line. If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from pymongo import MongoClient

from customer_manager_api.app.core.config import Settings
from customer_manager_api.app.core.security import hash_password


def main():
    settings = Settings.from_env()
    ap = argparse.ArgumentParser(description="Reset a Customer Manager user password (MongoDB).")
    ap.add_argument("--uri", default=settings.mongo_uri, help="MongoDB connection URI")
    ap.add_argument("--db", default=settings.mongo_db_name, help="Database name")
    ap.add_argument("--username", required=True, help="Username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    client = MongoClient(args.uri)
    try:
        users = client[args.db][settings.users_collection]
        result = users.update_one({"username": args.username}, {"$set": {"password": hash_password(new_password)}})
        if result.matched_count == 0:
            print(f"[!] No user found with username: {args.username}", file=sys.stderr)
            sys.exit(2)
        print(f"[+] Password updated for user: {args.username}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
