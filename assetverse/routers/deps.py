from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from assetverse.database import get_db
from assetverse.errors import Unauthenticated
from assetverse.security import Identity
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.access_service as access_svc

bearer_scheme = HTTPBearer(auto_error=False)


def get_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """Verified caller identity from the bearer token."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthenticated("Unauthorized access")
    identity = request.app.state.token_verifier.verify(credentials.credentials)
    if identity is None:
        raise Unauthenticated("Invalid or expired token")
    return identity


def require_hr(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> HRScope:
    return access_svc.require_hr(db, identity)


def require_employee(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> EmployeeScope:
    return access_svc.require_employee(db, identity)
