import os

# Configuración mínima antes de importar la aplicación
os.environ.setdefault("WHATSAPP_TOKEN", "test-token")
os.environ.setdefault("PHONE_NUMBER_ID", "123456789")
os.environ.setdefault("VERIFY_TOKEN", "secret-verify")

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.models.conversation import ConversationState, ConversationStep
from app.models.message import InboundEvent
from app.services.conversation import ConversationManager, ConversationStore, FlowRouter


@pytest.fixture
def router():
    return FlowRouter("https://nivaararealty.com/")


@pytest.fixture
def store():
    return ConversationStore()


@pytest.fixture
def whatsapp_client():
    client = MagicMock()
    client.send_message = AsyncMock(return_value={"messages": [{"id": "wamid.OUT"}]})
    return client


@pytest.fixture
def manager(store, whatsapp_client, router):
    return ConversationManager(store=store, whatsapp_client=whatsapp_client, flow_router=router)


# --- Helpers para crear eventos ---
def text_event(text: str, from_number: str = "111") -> InboundEvent:
    return InboundEvent(from_number=from_number, message_id="wamid.IN", message_type="text", text=text.strip())


def option_event(option_id: str, from_number: str = "111") -> InboundEvent:
    return InboundEvent(from_number=from_number, message_id="wamid.IN", message_type="interactive", option_id=option_id)


def menu_state(**fields) -> ConversationState:
    return ConversationState(step=ConversationStep.MENU, **fields)
