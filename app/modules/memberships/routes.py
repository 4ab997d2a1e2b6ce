from fastapi import APIRouter, Depends
from google.cloud import firestore
from app.database.firestore_client import get_firestore
from app.modules.memberships.schemas import JoinManyRequest, JoinManyResponse, UserCommunitiesResponse
from app.modules.memberships.service import MembershipService

router = APIRouter(prefix="/memberships", tags=["memberships"])


def get_membership_service(db: firestore.Client = Depends(get_firestore)) -> MembershipService:
    return MembershipService(db)


@router.get("/{wallet_address}", response_model=UserCommunitiesResponse)
async def get_user_communities(
    wallet_address: str,
    service: MembershipService = Depends(get_membership_service)
):
    """IDs of the communities a wallet has joined"""
    return UserCommunitiesResponse(
        wallet_address=wallet_address,
        community_ids=service.get_user_communities(wallet_address),
    )


@router.post("/{wallet_address}/batch", response_model=JoinManyResponse)
async def join_multiple_communities(
    wallet_address: str,
    join_data: JoinManyRequest,
    service: MembershipService = Depends(get_membership_service)
):
    """Join several communities in one request; already-joined ones are skipped"""
    joined = service.join_multiple_communities(wallet_address, join_data.community_ids)
    return JoinManyResponse(wallet_address=wallet_address, joined=joined)
