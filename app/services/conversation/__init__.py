"""
Módulo de gestión de conversaciones para el bot de WhatsApp de Nivaara.

"""

# Clase principal - usada por webhook
from .conversation_manager import ConversationManager

# Componentes internos (para testing o uso avanzado)
from .message_processor import MessageProcessor
from .flow_router import FlowRouter, RouteResult
from .store import ConversationStore

__all__ = [
    "ConversationManager",

    # Componentes internos - para testing/debugging
    "MessageProcessor",
    "FlowRouter",
    "RouteResult",
    "ConversationStore",
]
