"""
Create or update a user (e.g. the CEO reviewer or the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role] [--station CODE] [--update]
Example:
  python -m app.scripts.create_user ceo a-strong-password ceo
  python -m app.scripts.create_user ceo new-password ceo --update
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.security import PASSWORD_MIN_LEN, USERNAME_MAX_LEN, USERNAME_MIN_LEN, hash_password
from app.models.user import USER_ROLES, User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Station PMS user.")
    parser.add_argument("username", help=f"Username ({USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (at least {PASSWORD_MIN_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=list(USER_ROLES))
    parser.add_argument("--station", default=None, help="Station code the user is affiliated with")
    parser.add_argument(
        "--update",
        action="store_true",
        help="Reset password and role if the user already exists",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        print("Invalid username length.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN:
        print(f"Password must be at least {PASSWORD_MIN_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing and not args.update:
            print(f"User '{username}' already exists (use --update to reset it).", file=sys.stderr)
            return 1
        if existing:
            existing.password_hash = hash_password(args.password)
            existing.role = args.role
            if args.station is not None:
                existing.station_code = args.station
            db.commit()
            print(f"Updated user '{username}' with role '{args.role}'.")
            return 0
        user = User(
            username=username,
            password_hash=hash_password(args.password),
            role=args.role,
            station_code=args.station,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
