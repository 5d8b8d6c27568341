from pydantic import BaseModel, Field
from typing import List, Dict, Any, Optional

class InteractiveButtonReply(BaseModel):
    id: str
    title: Optional[str] = None

class InteractiveListReply(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None

class Interactive(BaseModel):
    type: str = "unknown"  # "button_reply" o "list_reply"
    button_reply: Optional[InteractiveButtonReply] = None
    list_reply: Optional[InteractiveListReply] = None

class Message(BaseModel):
    from_: str = Field(alias="from")      # "from" es palabra reservada
    id: Optional[str] = None
    timestamp: Optional[str] = None
    type: str = "unknown"
    text: Optional[Dict[str, Any]] = None    # para mensajes de texto
    interactive: Optional[Interactive] = None  # para mensajes interactivos

class Contact(BaseModel):
    wa_id: Optional[str] = None
    profile: Optional[Dict[str, Any]] = None

class Status(BaseModel):
    id: Optional[str] = None
    status: Optional[str] = None
    timestamp: Optional[str] = None
    recipient_id: Optional[str] = None

class Value(BaseModel):
    messages: List[Message] = Field(default_factory=list)
    contacts: List[Contact] = Field(default_factory=list)
    statuses: List[Status] = Field(default_factory=list)  # Para estados de mensajes

class Change(BaseModel):
    value: Value

class WhatsAppEntry(BaseModel):
    changes: List[Change] = Field(default_factory=list)

class WebhookPayload(BaseModel):
    entry: List[WhatsAppEntry] = Field(default_factory=list)


class InboundEvent(BaseModel):
    """Evento entrante ya normalizado: texto libre o ID de opción seleccionada."""
    from_number: str
    message_id: Optional[str] = None
    message_type: str = "unknown"
    text: str = ""                      # cuerpo recortado, solo para mensajes de texto
    option_id: Optional[str] = None     # ID de button_reply o list_reply
