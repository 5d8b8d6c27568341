from typing import List, Dict

class WhatsAppLists:
    """
    Factory para crear listas interactivas de WhatsApp.
    Responsabilidad única: generar estructuras de listas válidas para WhatsApp.
    """

    MAX_ROWS = 10                  # WhatsApp limita a 10 filas por lista
    MAX_SECTION_TITLE_LENGTH = 24  # Máximo 24 caracteres para título de sección
    MAX_ROW_TITLE_LENGTH = 24      # Máximo 24 caracteres para título de fila
    MAX_ROW_DESCRIPTION_LENGTH = 72 # Máximo 72 caracteres para descripción de fila
    MAX_BUTTON_TEXT_LENGTH = 20    # Máximo 20 caracteres para texto del botón

    @staticmethod
    def create_list_response(
        text: str,
        options: List[Dict],
        button_text: str = "Select",
        section_title: str = "Options"
    ) -> Dict:
        """
        Crea una respuesta con lista para WhatsApp.

        Args:
            text: Texto del mensaje
            options: Lista de opciones con formato [{"id": "CFG_1BHK", "title": "1 BHK", "description": "..."}]
            button_text: Texto del botón principal
            section_title: Título de la sección

        Returns:
            Dict: Estructura de mensaje con lista para WhatsApp

        Raises:
            ValueError: Si no hay opciones, hay demasiadas o faltan campos requeridos
        """
        if not options:
            raise ValueError("Debe proporcionar al menos una opción")

        if len(options) > WhatsAppLists.MAX_ROWS:
            raise ValueError(f"WhatsApp permite máximo {WhatsAppLists.MAX_ROWS} filas, recibidas: {len(options)}")

        # Validar y truncar campos
        validated_rows = []
        for opt in options:
            if not opt.get("id") or not opt.get("title"):
                raise ValueError("Cada opción debe tener 'id' y 'title'")

            row = {
                "id": opt["id"],
                "title": opt["title"][:WhatsAppLists.MAX_ROW_TITLE_LENGTH],
            }
            # La Cloud API rechaza descripciones vacías
            if opt.get("description"):
                row["description"] = opt["description"][:WhatsAppLists.MAX_ROW_DESCRIPTION_LENGTH]
            validated_rows.append(row)

        return {
            "type": "interactive",
            "interactive": {
                "type": "list",
                "body": {"text": text},
                "action": {
                    "button": button_text[:WhatsAppLists.MAX_BUTTON_TEXT_LENGTH],
                    "sections": [{
                        "title": section_title[:WhatsAppLists.MAX_SECTION_TITLE_LENGTH],
                        "rows": validated_rows
                    }]
                }
            }
        }
