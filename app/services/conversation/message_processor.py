import logging
from typing import Optional, Dict, Any

from pydantic import ValidationError

from app.models.message import WebhookPayload, Message, Interactive, InboundEvent

logger = logging.getLogger(__name__)

class MessageProcessor:
    """
    Responsabilidad única: Procesar y validar el payload del webhook.
    Convierte la estructura anidada de la Cloud API en un InboundEvent.
    """

    def parse_payload(self, raw: Any) -> Optional[Dict[str, Any]]:
        """
        Extrae y valida el mensaje del payload de WhatsApp.

        Args:
            raw: Cuerpo JSON recibido en el webhook

        Returns:
            Optional[Dict]: {"type": "status_update", "statuses": [...]},
            {"type": "chat_message", "event": InboundEvent} o None si no hay nada que procesar
        """
        try:
            payload = WebhookPayload.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"[WEBHOOK] Payload inválido: {e.error_count()} errores")
            return None

        try:
            change = payload.entry[0].changes[0]
        except IndexError:
            logger.debug("[WEBHOOK] Payload sin entry/changes")
            return None

        # Verificar si hay mensajes
        if change.value.messages:
            return {
                "type": "chat_message",
                "event": self.to_event(change.value.messages[0])
            }

        # Verificar si es actualización de estado
        if change.value.statuses:
            return {
                "type": "status_update",
                "statuses": change.value.statuses
            }

        return None

    def to_event(self, message: Message) -> InboundEvent:
        """Normaliza un mensaje: texto recortado o ID de opción interactiva."""
        text = ""
        option_id = None

        if message.type == "text" and message.text:
            text = (message.text.get("body") or "").strip()
        elif message.type == "interactive" and message.interactive:
            option_id = self._extract_option_id(message.interactive)
        else:
            logger.debug(f"[WEBHOOK] Tipo de mensaje sin contenido enrutable: {message.type}")

        return InboundEvent(
            from_number=message.from_,
            message_id=message.id,
            message_type=message.type,
            text=text,
            option_id=option_id
        )

    def _extract_option_id(self, interactive: Interactive) -> Optional[str]:
        """Extrae el ID de opción de button_reply o list_reply."""
        if interactive.type == "button_reply" and interactive.button_reply:
            return interactive.button_reply.id

        elif interactive.type == "list_reply" and interactive.list_reply:
            return interactive.list_reply.id

        logger.warning(f"Tipo interactivo no soportado: {interactive.type}")
        return None
