import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from assetverse.config import settings
from assetverse.errors import NotFound
from assetverse.models.user import User, Role
from assetverse.schemas.user import UserRegister, UserUpdate
from assetverse.security import Identity

logger = logging.getLogger(__name__)

DEFAULT_SUBSCRIPTION = "basic"


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == email))


def get_current_user(db: Session, identity: Identity) -> User:
    user = get_user_by_email(db, identity.email)
    if not user:
        raise NotFound("User profile not found")
    return user


def register_user(db: Session, identity: Identity, data: UserRegister) -> tuple[User, bool]:
    """Create the profile for ``identity``. Registering twice returns the existing profile."""
    existing = get_user_by_email(db, identity.email)
    if existing:
        return existing, False

    user = User(
        uid=identity.uid,
        email=identity.email,
        name=data.name,
        role=data.role,
        photo_url=data.photo_url,
        date_of_birth=data.date_of_birth,
    )
    if data.role == Role.hr:
        user.company_name = data.company_name
        user.company_logo = data.company_logo
        user.subscription = DEFAULT_SUBSCRIPTION
        user.package_limit = settings.DEFAULT_PACKAGE_LIMIT
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return get_user_by_email(db, identity.email), False
    db.refresh(user)
    logger.info("Registered %s user %s", user.role.value, user.email)
    return user, True


def update_profile(db: Session, identity: Identity, data: UserUpdate) -> User:
    user = get_current_user(db, identity)
    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("name") is None:
        update_data.pop("name", None)
    if user.role != Role.hr:
        update_data.pop("company_logo", None)
    for field, value in update_data.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user
