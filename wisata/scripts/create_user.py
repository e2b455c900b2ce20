"""
Create an account (e.g. a tourism admin). Run from project root:
  python -m wisata.scripts.create_user EMAIL PASSWORD [role] [--name NAME]
Example:
  python -m wisata.scripts.create_user admin@example.com your-secure-password TOURISM_ADMIN --name "Dinas Pariwisata"
"""
import argparse
import logging
import sys

from pydantic import EmailStr, TypeAdapter, ValidationError

from wisata.core.database import SessionLocal
from wisata.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from wisata.models.user import Role
from wisata.services.credentials import SqlCredentialStore, normalize_email
from wisata.services.errors import DuplicateEmail, UpstreamUnavailable

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

# Same email rules as the login and register request bodies.
_email_adapter = TypeAdapter(EmailStr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Wisata account.")
    parser.add_argument("email", help="Account email (unique)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.TOURISM_ADMIN.value,
        choices=[r.value for r in Role],
    )
    parser.add_argument("--name", default=None, help="Display name")
    args = parser.parse_args(argv)

    try:
        email = normalize_email(_email_adapter.validate_python(args.email.strip()))
    except ValidationError:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        store = SqlCredentialStore(db)
        if store.find_by_email(email) is not None:
            print(f"Account '{email}' already exists.", file=sys.stderr)
            return 1
        store.create(
            email=email,
            password_hash=hash_password(args.password),
            role=args.role,
            name=args.name,
        )
        logger.info("Created account '%s' with role '%s'.", email, args.role)
        return 0
    except DuplicateEmail:
        print(f"Account '{email}' already exists.", file=sys.stderr)
        return 1
    except UpstreamUnavailable:
        logger.error("Database unavailable; account not created.")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
