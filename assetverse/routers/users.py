from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.routers.deps import get_identity
from assetverse.schemas.user import UserRegister, UserUpdate, UserResponse, RegisterResponse
from assetverse.security import Identity
import assetverse.services.user_service as svc

router = APIRouter(tags=["users"])


@router.post("/users", response_model=RegisterResponse, status_code=201)
def register_user(
    data: UserRegister,
    response: Response,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    user, created = svc.register_user(db, identity, data)
    if not created:
        response.status_code = 200
    return {"created": created, "user": user}


@router.get("/user", response_model=UserResponse)
def current_user(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    return svc.get_current_user(db, identity)


@router.patch("/user", response_model=UserResponse)
def update_user(data: UserUpdate, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    return svc.update_profile(db, identity, data)
