from typing import List, Dict

class WhatsAppButtons:
    """
    Factory para crear botones interactivos de WhatsApp.
    Responsabilidad única: generar estructuras de botones válidas para WhatsApp.
    """

    MAX_BUTTONS = 3  # WhatsApp limita a 3 botones por mensaje
    MAX_TITLE_LENGTH = 20  # Máximo 20 caracteres para título de botón
    MAX_ID_LENGTH = 256

    @staticmethod
    def create_buttons_response(text: str, buttons: List[Dict]) -> Dict:
        """
        Crea una respuesta con botones para WhatsApp.

        Args:
            text: Texto del mensaje
            buttons: Lista de botones con formato [{"id": "BTN_SEARCH", "title": "Search Property"}, ...]

        Returns:
            Dict: Estructura de mensaje con botones para WhatsApp

        Raises:
            ValueError: Si hay más de 3 botones, IDs repetidos o faltan campos
        """
        if len(buttons) > WhatsAppButtons.MAX_BUTTONS:
            raise ValueError(f"WhatsApp permite máximo {WhatsAppButtons.MAX_BUTTONS} botones, recibidos: {len(buttons)}")

        if not buttons:
            raise ValueError("Debe proporcionar al menos un botón")

        # Validar y truncar títulos si es necesario
        validated_buttons = []
        seen_ids = set()
        for btn in buttons:
            if not btn.get("id") or not btn.get("title"):
                raise ValueError("Cada botón debe tener 'id' y 'title'")
            if btn["id"] in seen_ids:
                raise ValueError(f"ID de botón repetido: {btn['id']}")
            seen_ids.add(btn["id"])

            validated_buttons.append({
                "type": "reply",
                "reply": {
                    "id": btn["id"][:WhatsAppButtons.MAX_ID_LENGTH],
                    "title": btn["title"][:WhatsAppButtons.MAX_TITLE_LENGTH]
                }
            })

        return {
            "type": "interactive",
            "interactive": {
                "type": "button",
                "body": {"text": text},
                "action": {
                    "buttons": validated_buttons
                }
            }
        }

    @staticmethod
    def can_use_buttons(items_count: int) -> bool:
        """
        Verifica si se pueden usar botones según la cantidad de elementos.

        Args:
            items_count: Cantidad de elementos a mostrar

        Returns:
            bool: True si se pueden usar botones, False si se debe usar lista
        """
        return items_count <= WhatsAppButtons.MAX_BUTTONS
