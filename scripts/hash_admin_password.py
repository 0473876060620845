"""Print a bcrypt hash for the ADMIN_PASSWORD_HASH setting.

Usage:
    python scripts/hash_admin_password.py <password>
"""

from __future__ import annotations

import sys

from app.admin.auth import hash_password


def main() -> None:
    if len(sys.argv) != 2:
        print("Usage: python scripts/hash_admin_password.py <password>")
        sys.exit(1)
    print(hash_password(sys.argv[1]))


if __name__ == "__main__":
    main()
