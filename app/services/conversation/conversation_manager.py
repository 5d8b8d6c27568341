import logging
from typing import Optional, Dict, Any

from app.core.config import get_settings
from app.models.message import InboundEvent
from app.services.whatsapp import WhatsAppClient
from app.services.conversation.store import ConversationStore
from app.services.conversation.flow_router import FlowRouter

logger = logging.getLogger(__name__)

class ConversationManager:
    """
    Responsabilidad única: Orquestar el procesamiento de conversaciones.
    Lee el estado, delega la decisión al FlowRouter, guarda el nuevo estado
    y envía los mensajes resultantes.
    """

    def __init__(
        self,
        store: Optional[ConversationStore] = None,
        whatsapp_client: Optional[WhatsAppClient] = None,
        flow_router: Optional[FlowRouter] = None,
    ):
        self.store = store if store is not None else ConversationStore()
        self.whatsapp_client = whatsapp_client if whatsapp_client is not None else WhatsAppClient()
        self.flow_router = flow_router if flow_router is not None else FlowRouter(get_settings().LISTING_URL)

    async def handle_event(self, event: InboundEvent) -> Dict[str, Any]:
        """
        Procesa un evento entrante.

        El estado se guarda antes de enviar: si un envío falla la transición se
        conserva y la excepción se propaga al webhook, que la registra y
        responde 200 igualmente. Los mensajes posteriores al fallo no se envían.

        Returns:
            Dict: Resumen del procesamiento (paso resultante y mensajes enviados)
        """
        logger.info(f"Procesando mensaje de {event.from_number}")

        current_state = self.store.get_or_create(event.from_number)
        result = self.flow_router.route(current_state, event)
        self.store.save(event.from_number, result.state)

        sent_ids = []
        for message in result.messages:
            wa_response = await self.whatsapp_client.send_message(
                to=event.from_number,
                content=message
            )
            if wa_response and wa_response.get("messages"):
                sent_ids.append(wa_response["messages"][0].get("id"))

        return {
            "status": "processed",
            "message_id": event.message_id,
            "step": result.state.step.value,
            "sent": len(result.messages),
            "sent_message_ids": sent_ids
        }
