# app/routers/users.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.config.settings import Settings
from app.database import get_db, get_settings
from app.schemas.user import LogoutOut, UserCreate, UserLogin, UserOut, UserUpdate
from app.services.users_service import UsersService
from app.utils.auth import CurrentUser, get_current_user

router = APIRouter()

@router.post("/create", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a new account; the token is returned in the Authorization header"""
    user, token = UsersService.register(db, payload, settings)
    response.headers["Authorization"] = f"Bearer {token}"
    return user

@router.post("/login", response_model=UserOut)
def login(
    payload: UserLogin,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user, token = UsersService.login(db, payload, settings)
    response.headers["Authorization"] = f"Bearer {token}"
    return user

@router.post("/logout", response_model=LogoutOut)
def logout(response: Response):
    """Stateless logout: clear the header, the client discards its token"""
    response.headers["Authorization"] = ""
    return UsersService.logout()

@router.put("/update", response_model=UserOut)
def update_user(
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return UsersService.update_profile(db, current_user, payload)

@router.get("/profile", response_model=UserOut)
def get_profile(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return UsersService.profile(db, current_user)
