import json

import httpx
import pytest

from app.services.whatsapp import WhatsAppClient, WhatsAppAPIError
from app.services.conversation import prompts


@pytest.fixture
def captured(monkeypatch):
    """Sustituye el transporte de httpx y registra las peticiones enviadas."""
    requests = []
    responses = {"status": 200, "body": {"messages": [{"id": "wamid.OUT"}]}}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(responses["status"], json=responses["body"])

    real_client = httpx.AsyncClient

    def client_factory(*args, **kwargs):
        return real_client(*args, transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return {"requests": requests, "responses": responses}


@pytest.mark.asyncio
async def test_send_text_payload(captured):
    result = await WhatsAppClient().send_message("111", prompts.FALLBACK_TEXT)

    request = captured["requests"][0]
    assert str(request.url) == "https://graph.facebook.com/v20.0/123456789/messages"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert json.loads(request.content) == {
        "messaging_product": "whatsapp",
        "to": "111",
        "type": "text",
        "text": {"preview_url": False, "body": prompts.FALLBACK_TEXT},
    }
    assert result["messages"][0]["id"] == "wamid.OUT"


@pytest.mark.asyncio
async def test_send_interactive_payload(captured):
    await WhatsAppClient().send_message("111", prompts.welcome_menu(), reply_to="wamid.IN")

    payload = json.loads(captured["requests"][0].content)
    assert payload["type"] == "interactive"
    assert payload["interactive"]["type"] == "button"
    assert payload["context"] == {"message_id": "wamid.IN"}


@pytest.mark.asyncio
async def test_http_error_raises_domain_error(captured):
    captured["responses"].update(status=401, body={"error": {"message": "Invalid OAuth access token"}})

    with pytest.raises(WhatsAppAPIError) as exc_info:
        await WhatsAppClient().send_text("111", "hello")

    assert "Invalid OAuth access token" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_error_raises_domain_error(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    real_client = httpx.AsyncClient
    monkeypatch.setattr(httpx, "AsyncClient", lambda *args, **kwargs: real_client(*args, transport=httpx.MockTransport(handler), **kwargs))

    with pytest.raises(WhatsAppAPIError) as exc_info:
        await WhatsAppClient().send_message("111", prompts.welcome_menu())

    assert "Connection refused" in str(exc_info.value)
