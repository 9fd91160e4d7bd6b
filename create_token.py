"""Mint an access token for a user id using the configured SECRET.

Usage:
    SECRET=... python create_token.py <user id> [hours]
"""

import sys
from datetime import timedelta

from customer_manager_api.app.core.config import Settings
from customer_manager_api.app.core.security import create_access_token


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: create_token.py <user id> [hours]", file=sys.stderr)
        sys.exit(1)
    settings = Settings.from_env()
    hours = int(argv[1]) if len(argv) > 1 else settings.token_expire_hours
    token = create_access_token({"id": argv[0]}, settings.secret, timedelta(hours=hours), settings.token_algorithm)
    print(token)


if __name__ == "__main__":
    main()
