import pytest

from app.core.config import settings
from app.schemas.consent import ConsentState
from app.services.consent_service import ConsentManager


@pytest.mark.asyncio
async def test_unset_until_decided(store):
    manager = ConsentManager(store)
    assert await manager.read() == ConsentState.UNSET
    assert await manager.banner_visible() is True


@pytest.mark.asyncio
async def test_decline_hides_banner_for_good(store):
    manager = ConsentManager(store)
    await manager.decline()

    for _ in range(3):
        assert await manager.read() == ConsentState.DECLINED
        assert await manager.banner_visible() is False

    assert await store.get("testprep_ai_cookie_consent_v1") == "declined"


@pytest.mark.asyncio
async def test_accept_persists_across_managers(store):
    await ConsentManager(store).accept()
    assert await ConsentManager(store).read() == ConsentState.ACCEPTED


@pytest.mark.asyncio
async def test_clearing_store_resets(store):
    manager = ConsentManager(store)
    await manager.accept()
    store.clear()
    assert await manager.read() == ConsentState.UNSET


@pytest.mark.asyncio
async def test_version_bump_resets_everyone(store):
    await ConsentManager(store, storage_key="testprep_ai_cookie_consent_v1").accept()
    v2 = ConsentManager(store, storage_key="testprep_ai_cookie_consent_v2")
    assert await v2.read() == ConsentState.UNSET


@pytest.mark.asyncio
async def test_unrecognized_value_reads_as_unset(store):
    await store.set("testprep_ai_cookie_consent_v1", "maybe")
    assert await ConsentManager(store).read() == ConsentState.UNSET


@pytest.mark.asyncio
async def test_bumped_key_version_resets_consent(store, monkeypatch):
    await ConsentManager(store).accept()

    monkeypatch.setattr(settings, "CONSENT_STORAGE_KEY", "testprep_ai_cookie_consent_v2")
    manager = ConsentManager(store)

    assert manager.storage_key == "testprep_ai_cookie_consent_v2"
    assert await manager.banner_visible() is True
