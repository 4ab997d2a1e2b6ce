from pydantic import BaseModel, Field
from typing import Optional, List, Tuple
from datetime import datetime


class CommunityCreate(BaseModel):
    id: str = Field(min_length=1, pattern=r"^[a-z0-9][a-z0-9-]*$")
    name: str
    description: str
    color: str
    category: str
    rules: Tuple[str, ...] = ()
    moderators: Tuple[str, ...] = ()
    is_active: bool = Field(default=True, alias="isActive")

    class Config:
        frozen = True
        populate_by_name = True


class CommunityResponse(BaseModel):
    id: str
    name: str
    description: str
    member_count: int = Field(default=0, alias="memberCount")
    color: str
    category: str
    rules: List[str] = []
    moderators: List[str] = []
    is_active: bool = Field(default=True, alias="isActive")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True
