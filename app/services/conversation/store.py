import logging
import threading
from typing import Dict, Optional

from app.models.conversation import ConversationState

logger = logging.getLogger(__name__)


class ConversationStore:
    """
    Responsabilidad única: guardar el estado de conversación por usuario.

    Almacenamiento en memoria, válido solo durante la vida del proceso.
    Sin expiración ni borrado. Para una implementación persistente basta con
    respetar la misma interfaz (get_or_create / save).
    """

    def __init__(self):
        self._states: Dict[str, ConversationState] = {}
        self._lock = threading.Lock()

    def get_or_create(self, user_id: str) -> ConversationState:
        """Obtiene el estado del usuario o crea uno nuevo en START."""
        with self._lock:
            state = self._states.get(user_id)
            if state is None:
                state = ConversationState()
                self._states[user_id] = state
                logger.debug(f"[STORE] Nuevo estado para {user_id}")
            return state

    def get(self, user_id: str) -> Optional[ConversationState]:
        with self._lock:
            return self._states.get(user_id)

    def save(self, user_id: str, state: ConversationState) -> None:
        """Reemplaza el estado del usuario (la última escritura gana)."""
        with self._lock:
            self._states[user_id] = state

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)
