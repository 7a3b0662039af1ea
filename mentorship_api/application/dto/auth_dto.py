from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    """DTO for mentor or mentee signup request"""
    name: str
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class LoginRequest(BaseModel):
    """DTO for mentor or mentee login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class MessageResponse(BaseModel):
    """DTO for a plain confirmation message"""
    message: str


class LoginResponse(BaseModel):
    """DTO for a successful login"""
    message: str = "Login successful"
    token: str
