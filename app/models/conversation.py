from enum import Enum
from typing import Optional
from pydantic import BaseModel


class ConversationStep(str, Enum):
    """Posición descriptiva del usuario dentro del flujo."""
    START = "START"
    MENU = "MENU"
    ASK_CONFIG = "ASK_CONFIG"
    ASK_BUDGET = "ASK_BUDGET"
    ASK_REASON = "ASK_REASON"
    LEAD_CAPTURE = "LEAD_CAPTURE"
    DONE = "DONE"


class ConversationState(BaseModel):
    """
    Estado de conversación de un usuario.

    Solo START influye en el enrutamiento; el resto de pasos es informativo.
    config, budget y reason se llenan a medida que el usuario elige opciones.
    """
    step: ConversationStep = ConversationStep.START
    config: Optional[str] = None    # 1BHK, 2BHK, 3BHK, 4PLUS
    budget: Optional[str] = None    # BELOW 50, 50 75, 75 1CR, 1CR PLUS
    reason: Optional[str] = None    # Self Use, Investment
