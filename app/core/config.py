from functools import lru_cache
from pathlib import Path
from typing import List
from dotenv import load_dotenv
import os

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


class ConfigurationError(Exception):
    """Configuración obligatoria ausente o inválida."""


class Settings:
    REQUIRED = ("WHATSAPP_TOKEN", "PHONE_NUMBER_ID", "VERIFY_TOKEN")

    def __init__(self):
        # WhatsApp Cloud API settings
        self.WHATSAPP_TOKEN: str = os.getenv("WHATSAPP_TOKEN")
        self.PHONE_NUMBER_ID: str = os.getenv("PHONE_NUMBER_ID")
        self.VERIFY_TOKEN: str = os.getenv("VERIFY_TOKEN")
        self.GRAPH_API_VERSION: str = os.getenv("GRAPH_API_VERSION", "v20.0")
        self.BASE_URL: str = f"https://graph.facebook.com/{self.GRAPH_API_VERSION}"

        # Server
        # Se convierte a int en validate()
        self.PORT = os.getenv("PORT", "3000")

        # Bot content
        self.LISTING_URL: str = os.getenv("LISTING_URL", "https://nivaararealty.com/")

    def missing(self) -> List[str]:
        return [name for name in self.REQUIRED if not getattr(self, name)]

    def validate(self) -> "Settings":
        """
        Verifica que las variables obligatorias estén presentes y que PORT sea numérico.

        Raises:
            ConfigurationError: Si falta alguna variable obligatoria o PORT es inválido
        """
        missing = self.missing()
        if missing:
            raise ConfigurationError(
                f"Faltan variables de entorno obligatorias: {', '.join(missing)}. "
                "Configura WHATSAPP_TOKEN, PHONE_NUMBER_ID y VERIFY_TOKEN."
            )

        try:
            self.PORT = int(self.PORT)
        except (TypeError, ValueError):
            raise ConfigurationError(f"PORT debe ser un número entero, recibido: {self.PORT!r}") from None
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
