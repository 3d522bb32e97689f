"""Populate the database with demo accounts.

    python -m docflow.scripts.seed --count 1000
    python -m docflow.scripts.seed --count 0 --admin-email admin@example.com --admin-password s3cret!
"""
import argparse
import logging
from sqlalchemy.orm import Session
from docflow.config import settings
from docflow.db.session import SessionLocal, init_db
from docflow.logging_setup import setup_logging
from docflow.users.service import create_user, get_user_by_email, update_role

logger = logging.getLogger(__name__)


def seed_users(db: Session, count: int) -> int:
    created = 0
    for i in range(1, count + 1):
        email = f"user{i}@example.com"
        if get_user_by_email(db, email):
            continue
        create_user(db, email, f"password{i}")
        created += 1
    return created


def ensure_admin(db: Session, email: str, password: str):
    user = get_user_by_email(db, email)
    if user is None:
        return create_user(db, email, password, role="admin")
    if user.role != "admin":
        return update_role(db, user.id, "admin")
    return user


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed docflow with demo users")
    parser.add_argument("--count", type=int, default=1000)
    parser.add_argument("--admin-email")
    parser.add_argument("--admin-password")
    args = parser.parse_args(argv)

    if bool(args.admin_email) != bool(args.admin_password):
        parser.error("--admin-email and --admin-password go together")

    setup_logging(settings.log_level)
    init_db()
    db = SessionLocal()
    try:
        created = seed_users(db, args.count)
        logger.info("Seeded %d users", created)
        if args.admin_email:
            admin = ensure_admin(db, args.admin_email, args.admin_password)
            logger.info("Admin account ready: %s", admin.email)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
