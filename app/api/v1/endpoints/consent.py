"""
Consent Endpoints

Endpoints:
----------
- GET   /consent          - Current decision and banner visibility
- POST  /consent/accept   - Accept cookies
- POST  /consent/decline  - Decline cookies
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_consent_manager
from app.schemas.consent import ConsentResponse, ConsentState
from app.services.consent_service import ConsentManager

router = APIRouter(prefix="/consent", tags=["Consent"])


def _response(state: ConsentState) -> ConsentResponse:
    return ConsentResponse(state=state, banner_visible=state == ConsentState.UNSET)


@router.get("", response_model=ConsentResponse, summary="Read the consent decision")
async def read_consent(manager: ConsentManager = Depends(get_consent_manager)):
    return _response(await manager.read())


@router.post("/accept", response_model=ConsentResponse, summary="Accept cookies")
async def accept_consent(manager: ConsentManager = Depends(get_consent_manager)):
    return _response(await manager.accept())


@router.post("/decline", response_model=ConsentResponse, summary="Decline cookies")
async def decline_consent(manager: ConsentManager = Depends(get_consent_manager)):
    return _response(await manager.decline())
