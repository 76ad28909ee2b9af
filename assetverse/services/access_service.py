"""Caller scoping.

Routes never compare role strings themselves: they ask for an ``HRScope`` or
an ``EmployeeScope`` and hand it to the services, which embed the scope's
email in every query they run.
"""
from dataclasses import dataclass
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from assetverse.errors import Forbidden
from assetverse.models.user import User, Role
from assetverse.security import Identity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HRScope:
    email: str
    name: str
    company_name: str | None
    company_logo: str | None


@dataclass(frozen=True)
class EmployeeScope:
    email: str
    name: str


def get_profile(db: Session, identity: Identity) -> User | None:
    return db.scalar(select(User).where(User.email == identity.email))


def require_hr(db: Session, identity: Identity) -> HRScope:
    user = get_profile(db, identity)
    if not user or user.role != Role.hr:
        logger.warning("HR access refused for %s", identity.email)
        raise Forbidden("HR access only")
    return HRScope(
        email=user.email,
        name=user.name,
        company_name=user.company_name,
        company_logo=user.company_logo,
    )


def require_employee(db: Session, identity: Identity) -> EmployeeScope:
    user = get_profile(db, identity)
    if not user or user.role != Role.employee:
        logger.warning("Employee access refused for %s", identity.email)
        raise Forbidden("Employee access only")
    return EmployeeScope(email=user.email, name=user.name)
