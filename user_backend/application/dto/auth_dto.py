from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request (multipart form fields)"""
    name: str = Field(min_length=3, max_length=31)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=32)
    password: str = Field(min_length=6, max_length=256)
    address: str = Field(min_length=3, max_length=256)

    model_config = ConfigDict(str_strip_whitespace=True)


class VerifyAccountRequest(BaseModel):
    """DTO for account verification request"""
    token: Optional[str] = None


class RegistrationResponse(BaseModel):
    """DTO for a submitted (not yet verified) registration"""
    message: str
    name: str
