from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from google.cloud import firestore
from app.database.firestore_client import get_firestore
from app.modules.bootstrap.schemas import InitializeResponse, InitializationStatusResponse
from app.modules.bootstrap.service import BootstrapService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/firebase-init", tags=["bootstrap"])


def get_bootstrap_service(db: firestore.Client = Depends(get_firestore)) -> BootstrapService:
    return BootstrapService(db)


def _error_response(error: str, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": error, "details": str(exc)})


@router.post("", response_model=InitializeResponse)
async def initialize(service: BootstrapService = Depends(get_bootstrap_service)):
    """Seed the default communities"""
    try:
        created = service.initialize()
    except Exception as e:
        logger.exception("Firestore initialization failed")
        return _error_response("Firebase initialization failed", e)
    return InitializeResponse(
        success=True,
        message="Firebase initialized with default communities",
        created=created,
    )


@router.get("", response_model=InitializationStatusResponse)
async def initialization_status(service: BootstrapService = Depends(get_bootstrap_service)):
    """Readiness check for the default communities"""
    try:
        initialized = service.check_initialization(strict=True)
    except Exception as e:
        logger.exception("Error checking Firestore initialization")
        return _error_response("Failed to check Firebase initialization", e)
    return InitializationStatusResponse(
        initialized=initialized,
        message="Firebase is properly initialized" if initialized else "Firebase needs initialization",
    )
