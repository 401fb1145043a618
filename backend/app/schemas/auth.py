"""
Pydantic schemas for authentication endpoints.
Defines request/response models for login and user information.
"""
from pydantic import BaseModel

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str  # User login name
    password: str  # Plain text, checked against the stored hash server-side

class UserOut(BaseModel):
    """
    User information model returned in authentication responses.
    Contains basic user details without sensitive information.
    """
    id: str
    username: str

class LoginResponse(BaseModel):
    """
    Response model for successful login.
    Returns user information and access token for authenticated requests.
    """
    user: UserOut
    accessToken: str  # JWT access token for API authentication
