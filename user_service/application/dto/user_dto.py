from typing import Optional

from pydantic import BaseModel, StrictStr


class CreateUserRequest(BaseModel):
    """DTO for user creation request; absent fields default to empty"""
    email: StrictStr = ""
    name: StrictStr = ""


class CreateUserResponse(BaseModel):
    """DTO for user creation response"""
    id: int


class UpdateUserRequest(BaseModel):
    """DTO for full user replacement request"""
    email: StrictStr = ""
    name: StrictStr = ""


class UpdateEmailRequest(BaseModel):
    """DTO for email-only update request; email may be null or absent"""
    email: Optional[StrictStr] = None


class UserResponse(BaseModel):
    """DTO for user response"""
    id: int
    email: str
    name: str


class ErrorResponse(BaseModel):
    """DTO for error bodies"""
    error: str
