"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from wisata.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class LoginRequest(BaseModel):
    """Credentials for login (either track)."""

    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class PublicUser(BaseModel):
    """Safe projection of an account: never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str | None = None
    role: str


class LoginResponse(BaseModel):
    """Body returned on successful login; token is also set as an HttpOnly cookie."""

    message: str = "Login successful"
    user: PublicUser
    token: str = Field(..., description="JWT for clients that cannot use cookies")


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out"


class IdentityResponse(BaseModel):
    """Successful identity check for one track (failures are a 401 with a message)."""

    authenticated: bool = True
    user: PublicUser


class RegisterRequest(BaseModel):
    """Consumer self-registration."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    phone_number: str = Field(..., min_length=1, max_length=64, alias="phoneNumber")
    address: str = Field(..., min_length=1, max_length=1024)


class RegisterResponse(BaseModel):
    message: str = "Registration successful"
    user: PublicUser


class SuperAdminInitRequest(BaseModel):
    """Credentials for the first super admin account."""

    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class SuperAdminInitResponse(BaseModel):
    message: str = "Super admin created successfully"
    user: PublicUser


class SuperAdminCheckResponse(BaseModel):
    """Whether a super admin exists yet (drives the first-run setup page)."""

    exists: bool
    count: int
