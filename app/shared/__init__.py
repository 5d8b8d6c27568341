"""
Módulo de componentes compartidos para el bot de WhatsApp.
Contiene helpers reutilizables para diferentes partes de la aplicación.
"""

from .whatsapp import (
    WhatsAppButtons,
    WhatsAppLists,
    WhatsAppHelper,
    create_simple_interactive,
)

__all__ = [
    'WhatsAppButtons',
    'WhatsAppLists',
    'WhatsAppHelper',
    'create_simple_interactive',
]
