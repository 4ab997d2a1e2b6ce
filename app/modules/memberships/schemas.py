from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class MembershipCreate(BaseModel):
    wallet_address: str = Field(min_length=1, alias="walletAddress")

    class Config:
        populate_by_name = True


class MembershipResponse(BaseModel):
    id: str
    wallet_address: str = Field(alias="walletAddress")
    community_id: str = Field(alias="communityId")
    joined_at: Optional[datetime] = Field(default=None, alias="joinedAt")
    is_active: bool = Field(default=True, alias="isActive")

    class Config:
        populate_by_name = True


class MembershipStatusResponse(BaseModel):
    wallet_address: str = Field(alias="walletAddress")
    community_id: str = Field(alias="communityId")
    is_member: bool = Field(alias="isMember")

    class Config:
        populate_by_name = True


class UserCommunitiesResponse(BaseModel):
    wallet_address: str = Field(alias="walletAddress")
    community_ids: List[str] = Field(alias="communityIds")

    class Config:
        populate_by_name = True


class JoinManyRequest(BaseModel):
    community_ids: List[str] = Field(alias="communityIds")

    class Config:
        populate_by_name = True


class JoinManyResponse(BaseModel):
    wallet_address: str = Field(alias="walletAddress")
    joined: List[str]

    class Config:
        populate_by_name = True


class AutoJoinResult(BaseModel):
    """Outcome of the best-effort default-community join run after registration."""
    wallet_address: str = Field(alias="walletAddress")
    community_id: str = Field(alias="communityId")
    joined: bool = False
    already_member: bool = Field(default=False, alias="alreadyMember")
    error: Optional[str] = None

    class Config:
        populate_by_name = True

    @property
    def ok(self) -> bool:
        return self.error is None
