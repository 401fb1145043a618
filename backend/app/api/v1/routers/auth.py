from fastapi import APIRouter, HTTPException, Response, status, Depends
from app.core.security import verify_password, create_access_token
from app.api.v1.deps import get_current_user
from app.models.user import User
from app.schemas.auth import LoginRequest, LoginResponse, UserOut

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate user and create access token.

    Validates user credentials and creates a JWT access token upon successful
    authentication. The token is returned in the response body and also set
    as an HttpOnly cookie for browser-based clients.

    Returns:
        dict: Response containing:
            - success: bool (always True on success)
            - data: dict with:
                - user: User information (id, username)
                - accessToken: JWT token string

    Raises:
        HTTPException (401): If credentials are invalid
    """
    user = await User.get_or_none(username=payload.username)
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Invalid credentials"})
    token = create_access_token(str(user.id), user.username)
    response.set_cookie("accessToken", token, httponly=True, secure=False, samesite="lax")
    data = LoginResponse(user=UserOut(id=str(user.id), username=user.username), accessToken=token)
    return {"success": True, "data": data.model_dump()}

@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """Return the user behind the current token."""
    return {"success": True, "data": UserOut(id=str(user.id), username=user.username).model_dump()}

@router.post("/logout")
async def logout(response: Response):
    """
    Log out by clearing the access token cookie.

    Note:
        The JWT itself remains valid until it expires.
    """
    response.delete_cookie("accessToken")
    return {"success": True}
