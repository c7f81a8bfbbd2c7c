from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.user import AuthResponse, UserCreate, UserLogin
from services import auth_service

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


# 1. Sign-up API
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    return auth_service.register(db, user.name, user.email, user.password)


# 2. Login API
@router.post("/login", response_model=AuthResponse)
def login(user_req: UserLogin, db: Session = Depends(get_db)):
    return auth_service.login(db, user_req.email, user_req.password)
