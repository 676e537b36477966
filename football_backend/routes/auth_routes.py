# auth_routes.py
# Registration, login and the current user's profile.

from fastapi import APIRouter, Depends

from football_backend.core.security import get_current_user
from football_backend.models import TokenResponse, User, UserLogin, UserRead, UserRegister
from football_backend.repositories.record_store import SqlRecordStore, get_record_store
from football_backend.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(data: UserRegister, store: SqlRecordStore = Depends(get_record_store)):
    return AuthService(store).register(data)


@router.post("/login", response_model=TokenResponse)
def login(data: UserLogin, store: SqlRecordStore = Depends(get_record_store)):
    return AuthService(store).login(data.email, data.password)


@router.get("/profile", response_model=UserRead)
def profile(user: User = Depends(get_current_user)):
    return user
