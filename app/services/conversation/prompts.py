"""
Mensajes salientes del bot de Nivaara Realty.

Cada función devuelve un str (texto simple) o un dict interactivo listo
para WhatsAppClient.send_message.
"""
from typing import Dict, Optional

from app.models.conversation import ConversationState
from app.shared.whatsapp import create_simple_interactive

DEFAULT_LISTING_URL = "https://nivaararealty.com/"
PLACEHOLDER = "-"

# IDs de opciones enviados en los botones/listas
BTN_SEARCH = "BTN_SEARCH"
BTN_WHY = "BTN_WHY"
BTN_EXPERT = "BTN_EXPERT"

CONFIG_OPTIONS = [
    ("CFG_1BHK", "1 BHK"),
    ("CFG_2BHK", "2 BHK"),
    ("CFG_3BHK", "3 BHK"),
    ("CFG_4PLUS", "4+ BHK"),
]

BUDGET_OPTIONS = [
    ("BUD_BELOW_50", "Below ₹50L"),
    ("BUD_50_75", "₹50–75L"),
    ("BUD_75_1CR", "₹75L–1Cr"),
    ("BUD_1CR_PLUS", "₹1Cr+"),
]

REASON_OPTIONS = [
    ("RSN_SELF", "Self Use"),
    ("RSN_INVEST", "Investment"),
]

CALLBACK_TEXT = "📞 Please share your *Name + Preferred Area + Budget* and our advisor will call you shortly."
EXPERT_TEXT = "📞 Sure — please share your *Name + Preferred Area + Budget* and we’ll call you."
FALLBACK_TEXT = "Type *HI* to start over, or *CALLBACK* for an expert call."

WHY_NIVAARA_TEXT = (
    "✅ *Why choose Nivaara?*\n"
    "• Comprehensive real estate consultancy across residential, commercial, land and investment deals.\n"
    "• Operates pan‑India and internationally, with a base in Pune and deep market expertise.\n"
    "• End‑to‑end service: from search to paperwork, we manage everything.\n"
    "• Trust & transparency with verified properties and honest guidance.\n"
    "\nTap *Search Property* to explore listings or *Talk to Expert* for personalised advice."
)


def welcome_menu() -> Dict:
    """Menú principal con los tres botones de entrada."""
    return create_simple_interactive(
        "👋 Hi! Welcome to *Nivaara Realty* 🏡\n\n"
        "We simplify your real estate journey across Pune and beyond.\n"
        "Please choose an option below to get started ⬇️",
        [
            (BTN_SEARCH, "Search Property"),
            (BTN_WHY, "Why Nivaara?"),
            (BTN_EXPERT, "Talk to Expert"),
        ],
    )


def config_list() -> Dict:
    return create_simple_interactive(
        "🏠 Select configuration",
        CONFIG_OPTIONS,
        button_text="Choose",
        section_title="Configuration",
        force_list=True,
    )


def budget_list() -> Dict:
    return create_simple_interactive(
        "💰 Choose your price range",
        BUDGET_OPTIONS,
        button_text="Select",
        section_title="Price Range",
        force_list=True,
    )


def reason_buttons() -> Dict:
    return create_simple_interactive(
        "Almost done! Why are you looking to buy?",
        REASON_OPTIONS,
    )


def final_summary(state: ConversationState, listing_url: Optional[str] = None) -> str:
    """
    Resumen de las selecciones del usuario con enlace al listado.
    Los campos sin valor se muestran como "-".
    """
    link = listing_url or DEFAULT_LISTING_URL
    return (
        "✅ Great! Here’s what you selected:\n"
        f"• Configuration: {state.config or PLACEHOLDER}\n"
        f"• Budget: {state.budget or PLACEHOLDER}\n"
        f"• Purpose: {state.reason or PLACEHOLDER}\n\n"
        f"👉 Browse matching properties here: {link}\n"
        "Or type *CALLBACK* to connect with our expert."
    )
