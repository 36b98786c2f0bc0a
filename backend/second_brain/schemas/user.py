"""User and auth schemas"""
from pydantic import BaseModel, Field, field_validator


class UserCredentials(BaseModel):
    """Sign-up payload"""
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserLogin(BaseModel):
    """Login payload, no length rules so every mismatch is a 401"""
    username: str
    password: str

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v


class MessageResponse(BaseModel):
    """Plain status response"""
    status: str = "success"
    message: str


class TokenResponse(BaseModel):
    """Login response"""
    status: str = "success"
    message: str = "Login successful"
    token: str
