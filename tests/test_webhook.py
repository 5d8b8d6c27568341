import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.v1.webhook import get_conversation_manager
from app.main import create_app
from app.models.conversation import ConversationStep
from app.services.conversation import ConversationManager, prompts
from app.services.whatsapp import WhatsAppAPIError, WhatsAppClient


@pytest.fixture
def client(manager):
    application = create_app()
    application.dependency_overrides[get_conversation_manager] = lambda: manager
    return TestClient(application)


def _text(body, sender="111"):
    return {"entry": [{"changes": [{"value": {"messages": [
        {"from": sender, "id": "wamid.IN", "timestamp": "1700000000", "type": "text", "text": {"body": body}}
    ]}}]}]}


def _reply(option_id, kind="button_reply", sender="111"):
    return {"entry": [{"changes": [{"value": {"messages": [
        {"from": sender, "id": "wamid.IN", "timestamp": "1700000000", "type": "interactive",
         "interactive": {"type": kind, kind: {"id": option_id, "title": option_id}}}
    ]}}]}]}


# --- Verificación ---

def test_verification_echoes_challenge(client):
    response = client.get("/webhook", params={"hub.mode": "subscribe", "hub.verify_token": "secret-verify", "hub.challenge": "1158201444"})

    assert response.status_code == 200
    assert response.text == "1158201444"


@pytest.mark.parametrize("params", [
    {"hub.mode": "subscribe", "hub.verify_token": "wrong", "hub.challenge": "1158201444"},
    {"hub.mode": "unsubscribe", "hub.verify_token": "secret-verify", "hub.challenge": "1158201444"},
    {"hub.challenge": "1158201444"},
])
def test_verification_rejected(client, params):
    response = client.get("/webhook", params=params)

    assert response.status_code == 403
    assert "1158201444" not in response.text


# --- Entrega de eventos ---

def test_root(client):
    assert client.get("/").status_code == 200


def test_text_message_is_processed(client, whatsapp_client, store):
    response = client.post("/webhook", json=_text("hi"))

    assert response.status_code == 200
    assert response.json()["status"] == "processed"
    assert store.get("111").step == ConversationStep.MENU
    whatsapp_client.send_message.assert_awaited_once()


def test_list_reply_is_routed(client, store):
    client.post("/webhook", json=_text("hi"))
    client.post("/webhook", json=_reply("BTN_SEARCH"))
    client.post("/webhook", json=_reply("CFG_3BHK", kind="list_reply"))

    assert store.get("111").config == "3BHK"
    assert store.get("111").step == ConversationStep.ASK_BUDGET


@pytest.mark.parametrize("body", [{}, {"entry": []}, {"entry": [{"changes": [{"value": {}}]}]}, {"entry": 42}])
def test_message_less_payload_is_acknowledged(client, whatsapp_client, body):
    response = client.post("/webhook", json=body)

    assert response.status_code == 200
    assert response.json()["status"] == "ignored"
    whatsapp_client.send_message.assert_not_awaited()


def test_non_json_body_is_acknowledged(client, whatsapp_client):
    response = client.post("/webhook", content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json()["status"] == "ignored"


def test_status_update_is_acknowledged(client, whatsapp_client):
    body = {"entry": [{"changes": [{"value": {"statuses": [
        {"id": "wamid.OUT", "status": "read", "timestamp": "1700000000", "recipient_id": "111"}
    ]}}]}]}

    response = client.post("/webhook", json=body)

    assert response.json() == {"status": "status_received", "count": 1}
    whatsapp_client.send_message.assert_not_awaited()


def test_send_failure_still_acknowledged(client, whatsapp_client, store):
    whatsapp_client.send_message.side_effect = WhatsAppAPIError("Invalid OAuth access token")

    response = client.post("/webhook", json=_text("hi"))

    assert response.status_code == 200
    assert response.json()["status"] == "error"
    assert store.get("111").step == ConversationStep.MENU


def test_unexpected_error_still_acknowledged(client, whatsapp_client):
    whatsapp_client.send_message.side_effect = RuntimeError("boom")

    response = client.post("/webhook", json=_text("hi"))

    assert response.status_code == 200
    assert response.json()["status"] == "error"


def test_connection_error_still_acknowledged(monkeypatch, store, router):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    real_client = httpx.AsyncClient
    monkeypatch.setattr(httpx, "AsyncClient", lambda *args, **kwargs: real_client(*args, transport=httpx.MockTransport(handler), **kwargs))

    application = create_app()
    manager = ConversationManager(store=store, whatsapp_client=WhatsAppClient(), flow_router=router)
    application.dependency_overrides[get_conversation_manager] = lambda: manager

    response = TestClient(application).post("/webhook", json=_text("hi"))

    assert response.status_code == 200
    assert response.json() == {"status": "error", "reason": "send_failed"}
    assert store.get("111").step == ConversationStep.MENU


def test_interactive_reply_without_type_gets_fallback(client, whatsapp_client, store):
    client.post("/webhook", json=_text("hi"))
    whatsapp_client.send_message.reset_mock()
    body = {"entry": [{"changes": [{"value": {"messages": [
        {"from": "111", "id": "wamid.IN", "timestamp": "1700000000", "type": "interactive", "interactive": {}}
    ]}}]}]}

    response = client.post("/webhook", json=body)

    assert response.json()["status"] == "processed"
    whatsapp_client.send_message.assert_awaited_once_with(to="111", content=prompts.FALLBACK_TEXT)
    assert store.get("111").step == ConversationStep.MENU
