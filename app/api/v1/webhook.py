from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from app.core.config import get_settings
from app.services.whatsapp import WhatsAppAPIError
from app.services.conversation import ConversationManager, MessageProcessor
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook")
message_processor = MessageProcessor()


@lru_cache
def get_conversation_manager() -> ConversationManager:
    """Instancia global del conversation manager (estado en memoria del proceso)."""
    return ConversationManager()

# ============================================================================
# ENDPOINTS PRINCIPALES
# ============================================================================

@router.get("")
async def verify_webhook(
    hub_mode: str = Query("", alias="hub.mode"),
    hub_challenge: str = Query("", alias="hub.challenge"),
    hub_verify_token: str = Query("", alias="hub.verify_token"),
):
    """Verifica el webhook de WhatsApp Business API."""
    if hub_mode == "subscribe" and hub_verify_token == get_settings().VERIFY_TOKEN:
        logger.info("[WEBHOOK] Verificación exitosa")
        return PlainTextResponse(content=hub_challenge, status_code=200)

    logger.warning("[WEBHOOK] Verificación rechazada")
    raise HTTPException(status_code=403, detail="Verification failed")


@router.post("")
async def receive_update(
    request: Request,
    conversation_manager: ConversationManager = Depends(get_conversation_manager),
):
    """
    Endpoint principal para recibir actualizaciones de WhatsApp.
    Responsabilidad: Orquestación y manejo de errores.

    Siempre responde 200 para que Meta no reintente la entrega.
    """
    try:
        # 1. Leer y extraer mensaje del payload
        try:
            raw = await request.json()
        except ValueError:
            logger.warning("[WEBHOOK] Cuerpo no es JSON válido")
            return {"status": "ignored", "reason": "invalid_json"}

        message_data = message_processor.parse_payload(raw)
        if not message_data:
            return {"status": "ignored", "reason": "no_valid_message"}

        # 2. Manejar actualizaciones de estado si es el caso
        if message_data["type"] == "status_update":
            return _handle_status_update(message_data["statuses"])

        # 3. Procesar mensaje de chat
        return await conversation_manager.handle_event(message_data["event"])

    except WhatsAppAPIError as exc:
        logger.error(f"Error enviando mensaje a WhatsApp: {exc}")
        return {"status": "error", "reason": "send_failed"}
    except Exception as e:
        logger.error(f"Error procesando webhook: {e}", exc_info=True)
        return {"status": "error", "reason": "internal_error"}

# ============================================================================
# FUNCIONES PRIVADAS - MANEJO DE ESTADOS
# ============================================================================

def _handle_status_update(statuses: List) -> Dict[str, Any]:
    """
    Registra actualizaciones de estado de mensajes (sent, delivered, read, failed).
    """
    for status_update in statuses:
        logger.debug(f"Estado actualizado - ID: {status_update.id}, Estado: {status_update.status}")

    return {"status": "status_received", "count": len(statuses)}
