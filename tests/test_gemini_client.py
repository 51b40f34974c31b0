import pytest

from app.ai.flows import FlowExecutionError, summarize_note
from app.ai.llm import (
    GeminiEngine,
    MisconfiguredMissingCredential,
    Ready,
    check_gemini_health,
    initialize_ai,
    reset_ai_client,
)
from app.ai.llm.gemini_client import data_uri_to_part


@pytest.fixture(autouse=True)
def fresh_client():
    reset_ai_client()
    yield
    reset_ai_client()


def test_missing_key_reports_misconfiguration(caplog):
    status = initialize_ai(api_key="")

    assert isinstance(status, MisconfiguredMissingCredential)
    assert status.setting == "GEMINI_API_KEY"
    assert check_gemini_health() is False
    assert "GEMINI_API_KEY" in caplog.text


def test_key_present_reports_ready():
    status = initialize_ai(api_key="test-key")
    assert isinstance(status, Ready)
    assert check_gemini_health() is True


@pytest.mark.asyncio
async def test_flows_fail_while_misconfigured():
    initialize_ai(api_key="")
    engine = GeminiEngine()

    for _ in range(2):
        with pytest.raises(FlowExecutionError):
            await summarize_note({"noteContent": "Some note"}, engine=engine)


def test_data_uri_to_part():
    part = data_uri_to_part("data:image/png;base64,aGVsbG8=")
    assert part.inline_data.mime_type == "image/png"
    assert part.inline_data.data == b"hello"

    with pytest.raises(ValueError):
        data_uri_to_part("not-a-data-uri")
