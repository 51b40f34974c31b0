from fastapi import HTTPException, Depends, Header, status
import logging

from app.core.config import settings
from app.storage import get_kv_store, KeyValueStore, NamespacedKeyValueStore
from app.repositories.material_repo import MaterialRepository
from app.repositories.test_result_repo import TestResultRepository
from app.services.notification_service import NotificationService
from app.services.consent_service import ConsentManager
from app.services.generation_service import GenerationService
from app.services.material_service import MaterialService
from app.services.test_result_service import TestResultService

logger = logging.getLogger(__name__)


# =====================================================
# Identity
# =====================================================
# Authentication is done by the hosted auth provider in front of this
# service; the gateway forwards the verified user id.

async def get_current_user_id(
    x_user_id: str = Header(..., alias="X-User-Id"),
) -> str:
    user_id = x_user_id.strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing user identity",
        )
    return user_id


async def get_client_id(
    x_client_id: str = Header(..., alias="X-Client-Id"),
) -> str:
    """Browser-local identity the consent flag is stored under."""
    client_id = x_client_id.strip()
    if not client_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing client id",
        )
    return client_id


# =====================================================
# Services
# =====================================================

def get_store() -> KeyValueStore:
    return get_kv_store()


def get_notification_service(
    user_id: str = Depends(get_current_user_id),
    store: KeyValueStore = Depends(get_store),
) -> NotificationService:
    return NotificationService(NamespacedKeyValueStore(store, f"user:{user_id}"))


def get_consent_manager(
    client_id: str = Depends(get_client_id),
    store: KeyValueStore = Depends(get_store),
) -> ConsentManager:
    return ConsentManager(NamespacedKeyValueStore(store, f"client:{client_id}"))


def get_generation_service(
    notifications: NotificationService = Depends(get_notification_service),
) -> GenerationService:
    return GenerationService(notifications)


def get_material_service(
    user_id: str = Depends(get_current_user_id),
    store: KeyValueStore = Depends(get_store),
) -> MaterialService:
    return MaterialService(
        MaterialRepository(NamespacedKeyValueStore(store, f"user:{user_id}")),
        moderation_store=NamespacedKeyValueStore(store, settings.MODERATION_NAMESPACE),
        user_id=user_id,
    )


def get_test_result_service(
    user_id: str = Depends(get_current_user_id),
    store: KeyValueStore = Depends(get_store),
    notifications: NotificationService = Depends(get_notification_service),
) -> TestResultService:
    return TestResultService(
        TestResultRepository(NamespacedKeyValueStore(store, f"user:{user_id}")),
        notifications=notifications,
    )
