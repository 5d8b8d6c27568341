import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from app.models.conversation import ConversationState, ConversationStep
from app.models.message import InboundEvent
from app.services.conversation import prompts

logger = logging.getLogger(__name__)

OutboundMessage = Union[str, Dict]

GREETING_COMMANDS = ("hi", "hello")
CALLBACK_COMMAND = "callback"

REASON_VALUES = {
    "RSN_SELF": "Self Use",
    "RSN_INVEST": "Investment",
}


@dataclass
class RouteResult:
    """Resultado de enrutar un evento: nuevo estado y mensajes a enviar en orden."""
    state: ConversationState
    messages: List[OutboundMessage] = field(default_factory=list)


class FlowRouter:
    """
    Responsabilidad única: decidir el siguiente estado y los mensajes salientes.

    No realiza I/O: recibe el estado actual y el evento, y devuelve una copia
    del estado actualizada junto con los mensajes. El envío lo hace el
    ConversationManager.
    """

    def __init__(self, listing_url: Optional[str] = None):
        """
        Inicializa el router de flujos.

        Args:
            listing_url: URL del listado de propiedades usada en el resumen final
        """
        self.listing_url = listing_url or prompts.DEFAULT_LISTING_URL

        # Tabla de despacho por ID de opción
        self.handlers: Dict[str, Callable[[ConversationState, str], List[OutboundMessage]]] = {
            prompts.BTN_SEARCH: self._handle_search,
            prompts.BTN_WHY: self._handle_why,
            prompts.BTN_EXPERT: self._handle_expert,
        }
        for option_id, _ in prompts.CONFIG_OPTIONS:
            self.handlers[option_id] = self._handle_config
        for option_id, _ in prompts.BUDGET_OPTIONS:
            self.handlers[option_id] = self._handle_budget
        for option_id in REASON_VALUES:
            self.handlers[option_id] = self._handle_reason

    def route(self, state: ConversationState, event: InboundEvent) -> RouteResult:
        """
        Clasifica un evento entrante. El orden de las reglas importa:
        1. "hi"/"hello" o paso START -> menú principal
        2. "callback" -> captura de lead
        3. ID de opción -> tabla de despacho (fallback si no se reconoce)

        Args:
            state: Estado actual del usuario (no se modifica)
            event: Evento entrante normalizado

        Returns:
            RouteResult: Estado actualizado y mensajes a enviar
        """
        new_state = state.model_copy(deep=True)
        command = event.text.strip().lower()

        if command in GREETING_COMMANDS or state.step == ConversationStep.START:
            new_state.step = ConversationStep.MENU
            logger.info(f"[ROUTER] {event.from_number}: menú principal")
            return RouteResult(new_state, [prompts.welcome_menu()])

        if command == CALLBACK_COMMAND:
            new_state.step = ConversationStep.LEAD_CAPTURE
            logger.info(f"[ROUTER] {event.from_number}: solicitud de llamada")
            return RouteResult(new_state, [prompts.CALLBACK_TEXT])

        handler = self.handlers.get(event.option_id) if event.option_id else None
        if handler is None:
            logger.debug(f"[ROUTER] {event.from_number}: entrada no reconocida (option_id={event.option_id!r})")
            return RouteResult(new_state, [prompts.FALLBACK_TEXT])

        messages = handler(new_state, event.option_id)
        logger.info(f"[ROUTER] {event.from_number}: {event.option_id} -> {new_state.step.value}")
        return RouteResult(new_state, messages)

    # ==================== HANDLERS POR OPCIÓN ====================

    def _handle_search(self, state: ConversationState, option_id: str) -> List[OutboundMessage]:
        state.step = ConversationStep.ASK_CONFIG
        return [prompts.config_list()]

    def _handle_why(self, state: ConversationState, option_id: str) -> List[OutboundMessage]:
        # Solo informativo: el paso no cambia
        return [prompts.WHY_NIVAARA_TEXT, prompts.welcome_menu()]

    def _handle_expert(self, state: ConversationState, option_id: str) -> List[OutboundMessage]:
        state.step = ConversationStep.LEAD_CAPTURE
        return [prompts.EXPERT_TEXT]

    def _handle_config(self, state: ConversationState, option_id: str) -> List[OutboundMessage]:
        state.config = option_id.replace("CFG_", "", 1)
        state.step = ConversationStep.ASK_BUDGET
        return [prompts.budget_list()]

    def _handle_budget(self, state: ConversationState, option_id: str) -> List[OutboundMessage]:
        state.budget = option_id.replace("BUD_", "", 1).replace("_", " ")
        state.step = ConversationStep.ASK_REASON
        return [prompts.reason_buttons()]

    def _handle_reason(self, state: ConversationState, option_id: str) -> List[OutboundMessage]:
        state.reason = REASON_VALUES[option_id]
        state.step = ConversationStep.DONE
        return [prompts.final_summary(state, self.listing_url), prompts.welcome_menu()]
