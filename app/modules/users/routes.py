from fastapi import APIRouter, Depends, HTTPException, status
from google.cloud import firestore
from app.database.firestore_client import get_firestore
from app.modules.memberships.routes import get_membership_service
from app.modules.memberships.service import MembershipService
from app.modules.users.schemas import UserCreate, UserUpdate, UserResponse
from app.modules.users.service import UserService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: firestore.Client = Depends(get_firestore)) -> UserService:
    return UserService(db)


@router.post("", response_model=UserResponse)
async def register_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service),
    memberships: MembershipService = Depends(get_membership_service)
):
    """Create or refresh a user on login, then auto-join the default community"""
    user = service.create_or_update_user(user_data)
    result = memberships.auto_join_default(user_data.wallet_address)
    if not result.ok:
        logger.error(f"Auto-join of {result.community_id} failed for {result.wallet_address}: {result.error}")
    elif result.joined:
        logger.info(f"User {result.wallet_address} auto-joined {result.community_id}")
    return user


@router.get("/{wallet_address}", response_model=UserResponse)
async def get_user(
    wallet_address: str,
    service: UserService = Depends(get_user_service)
):
    user = service.get_user_by_address(wallet_address)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/{wallet_address}", response_model=UserResponse)
async def update_user(
    wallet_address: str,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    """Update profile fields that are present in the body"""
    service.update_user(wallet_address, user_data)
    return service.get_user_by_address(wallet_address)


@router.post("/{wallet_address}/login", status_code=204)
async def record_login(
    wallet_address: str,
    service: UserService = Depends(get_user_service)
):
    """Refresh lastLogin"""
    service.update_last_login(wallet_address)
    return None
