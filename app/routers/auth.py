import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User, normalize_email
from app.schemas.user import RegisterRequest, LoginRequest, AuthResponse, UserOut
from app.utils.auth import hash_password, verify_password, create_token, CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@lru_cache(maxsize=1)
def _dummy_credentials() -> tuple[bytes, bytes]:
    return hash_password("not-a-real-password")


def _auth_response(user: User) -> AuthResponse:
    token, expires_at = create_token(user)
    return AuthResponse(access_token=token, expires_at_utc=expires_at, user_id=user.id, email=user.email)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    email = normalize_email(request.email)
    exists = db.query(User).filter(User.email == email).first()
    if exists:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered.")

    password_hash, password_salt = hash_password(request.password)
    new_user = User(email=email, password_hash=password_hash, password_salt=password_salt)
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent registration won the unique index
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered.")
    db.refresh(new_user)
    logger.info("Registered user %s", new_user.id)
    return _auth_response(new_user)


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    email = normalize_email(request.email)
    db_user = db.query(User).filter(User.email == email).first()
    if db_user is None:
        # unknown emails pay the same key derivation cost as wrong passwords
        verify_password(request.password, *_dummy_credentials())
    if not db_user or not verify_password(request.password, db_user.password_hash, db_user.password_salt):
        logger.info("Rejected login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _auth_response(db_user)


@router.get("/me", response_model=UserOut)
def me(current_user: CurrentUser):
    return current_user
