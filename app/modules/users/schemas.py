from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    wallet_address: str = Field(min_length=1, alias="walletAddress")
    username: str
    profile_picture_url: Optional[str] = Field(default=None, alias="profilePictureUrl")
    is_verified: bool = Field(default=False, alias="isVerified")

    class Config:
        populate_by_name = True


class UserUpdate(BaseModel):
    username: Optional[str] = None
    profile_picture_url: Optional[str] = Field(default=None, alias="profilePictureUrl")
    is_verified: Optional[bool] = Field(default=None, alias="isVerified")

    class Config:
        populate_by_name = True


class UserResponse(BaseModel):
    uid: str
    wallet_address: str = Field(alias="walletAddress")
    username: str
    profile_picture_url: Optional[str] = Field(default=None, alias="profilePictureUrl")
    is_verified: bool = Field(default=False, alias="isVerified")
    first_login: Optional[datetime] = Field(default=None, alias="firstLogin")
    last_login: Optional[datetime] = Field(default=None, alias="lastLogin")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True
