"""
API routes for registration and login
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_auth_service
from ..exceptions import DuplicateEmailError, InvalidCredentialsError
from ..models.user import AuthResponse, LoginRequest, RegisterRequest
from ..services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Register a new user. The password is stored as a bcrypt hash.
    """
    try:
        user = await auth.register(request.email, request.password, request.role)
        return AuthResponse(message="User registered successfully!", user=user)

    except DuplicateEmailError:
        raise HTTPException(status_code=409, detail="User with this email already exists.")
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(status_code=500, detail="Server error during registration.")


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Verify credentials and return the user's identity
    """
    try:
        user = await auth.login(request.email, request.password)
        return AuthResponse(message="Logged in successfully!", user=user)

    except InvalidCredentialsError:
        raise HTTPException(status_code=401, detail="Invalid email or password.")
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Server error during login.")
