import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from inventory_api.core.constants import ROLE_USER, USER_ROLES
from inventory_api.core.dates import utcnow
from inventory_api.core.exceptions import AlreadyExistsError, NotFoundError, ValidationError
from inventory_api.core.security import hash_password, verify_password
from inventory_api.core.text import clean_name
from inventory_api.database.session import unit_of_work
from inventory_api.models.user import User

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User")
    return user


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    return (
        db.execute(select(User).where(func.lower(User.email) == _normalize_email(email)))
        .scalars()
        .first()
    )


def _ensure_unique_email(db: Session, email: str, *, exclude_id: Optional[int] = None) -> None:
    existing = find_user_by_email(db, email)
    if existing is not None and existing.id != exclude_id:
        raise AlreadyExistsError("User", "Email already exists" if exclude_id else None)


def list_users(db: Session) -> list[User]:
    rows = db.execute(select(User).order_by(User.created_at.desc(), User.id.desc())).scalars().all()
    return list(rows)


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
) -> User:
    if not (name or "").strip() or not email or not password:
        raise ValidationError("Please fill in all required fields")
    if role not in USER_ROLES:
        raise ValidationError(f"Invalid role: {role}")
    _ensure_unique_email(db, email)

    user = User(
        name=name.strip(),
        email=_normalize_email(email),
        password_hash=hash_password(password),
        role=role,
        is_active=True,
    )
    with unit_of_work(db):
        db.add(user)
    db.refresh(user)
    logger.info(
        "Created %s user %s (%s)", user.role, user.id, user.email,
        extra={"user_id": user.id},
    )
    return user


def update_user(db: Session, user_id: int, changes: dict) -> User:
    user = get_user(db, user_id)

    name = clean_name(changes["name"]) if changes.get("name") else None
    email = None
    if changes.get("email"):
        _ensure_unique_email(db, changes["email"], exclude_id=user.id)
        email = _normalize_email(changes["email"])
    role = changes.get("role")
    if role and role not in USER_ROLES:
        raise ValidationError(f"Invalid role: {role}")

    with unit_of_work(db):
        if name is not None:
            user.name = name
        if email is not None:
            user.email = email
        if role:
            user.role = role
        if changes.get("is_active") is not None:
            user.is_active = bool(changes["is_active"])
        if changes.get("password"):
            user.password_hash = hash_password(changes["password"])
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int, *, acting_user_id: int) -> str:
    user = get_user(db, user_id)
    if user.id == acting_user_id:
        raise ValidationError("Cannot delete your own account")
    with unit_of_work(db):
        db.delete(user)
    logger.info("Deleted user %s", user_id, extra={"user_id": user_id})
    return "User removed"


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """Return the active user matching the credentials and stamp ``last_login``."""
    user = find_user_by_email(db, email or "")
    if user is None or not user.is_active:
        return None
    if not verify_password(password or "", user.password_hash):
        return None
    with unit_of_work(db):
        user.last_login = utcnow()
    db.refresh(user)
    return user


__all__ = [
    "authenticate",
    "create_user",
    "delete_user",
    "find_user_by_email",
    "get_user",
    "list_users",
    "update_user",
]
