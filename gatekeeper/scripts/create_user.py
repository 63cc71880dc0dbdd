"""
Create a user (e.g. first admin) without going through /signup. Run from project root:
  python -m gatekeeper.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m gatekeeper.scripts.create_user admin your-secure-password admin
"""
import argparse
import logging
import sys

from gatekeeper.api.deps import get_authenticator
from gatekeeper.core.config import get_settings
from gatekeeper.core.database import SessionLocal, init_db
from gatekeeper.core.errors import GatekeeperError
from gatekeeper.core.permissions import DEFAULT_ROLE, known_roles

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Gatekeeper user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("role", nargs="?", default=DEFAULT_ROLE, choices=list(known_roles()))
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    init_db()
    db = SessionLocal()
    try:
        user, _token = get_authenticator().signup(db, args.username, args.password, args.role)
    except GatekeeperError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
