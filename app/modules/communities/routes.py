from fastapi import APIRouter, Depends, HTTPException, status
from google.cloud import firestore
from app.database.firestore_client import get_firestore
from app.modules.communities.schemas import CommunityCreate, CommunityResponse
from app.modules.communities.service import CommunityService
from app.modules.memberships.schemas import MembershipCreate, MembershipResponse, MembershipStatusResponse
from app.modules.memberships.routes import get_membership_service
from app.modules.memberships.service import MembershipService
from typing import List

router = APIRouter(prefix="/communities", tags=["communities"])


def get_community_service(db: firestore.Client = Depends(get_firestore)) -> CommunityService:
    return CommunityService(db)


@router.get("", response_model=List[CommunityResponse])
async def list_communities(service: CommunityService = Depends(get_community_service)):
    """List active communities ordered by member count"""
    return service.get_all_communities()


@router.post("", response_model=CommunityResponse, status_code=201)
async def create_community(
    community_data: CommunityCreate,
    service: CommunityService = Depends(get_community_service)
):
    """Create a community; the slug must not be taken"""
    if service.community_exists(community_data.id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Community already exists")
    return service.create_community(community_data)


@router.get("/{community_id}", response_model=CommunityResponse)
async def get_community(
    community_id: str,
    service: CommunityService = Depends(get_community_service)
):
    community = service.get_community_by_id(community_id)
    if community is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Community not found")
    return community


@router.post("/{community_id}/members", response_model=MembershipResponse)
async def join_community(
    community_id: str,
    member_data: MembershipCreate,
    service: MembershipService = Depends(get_membership_service)
):
    """Join a community. Joining again returns the existing membership."""
    return service.join_community(member_data.wallet_address, community_id)


@router.get("/{community_id}/members/{wallet_address}", response_model=MembershipStatusResponse)
async def get_member_status(
    community_id: str,
    wallet_address: str,
    service: MembershipService = Depends(get_membership_service)
):
    return MembershipStatusResponse(
        wallet_address=wallet_address,
        community_id=community_id,
        is_member=service.is_community_member(wallet_address, community_id),
    )


@router.delete("/{community_id}/members/{wallet_address}", status_code=204)
async def leave_community(
    community_id: str,
    wallet_address: str,
    service: MembershipService = Depends(get_membership_service)
):
    """Leave a community (no-op when not a member)"""
    service.leave_community(wallet_address, community_id)
    return None
