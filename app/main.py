import app.logging_config
import sys
import pytz
import logging
import uvicorn
from datetime import datetime
from fastapi import FastAPI
from app.core.config import get_settings, ConfigurationError
from app.api.v1.webhook import router as webhook_router

INDIA_TZ = pytz.timezone('Asia/Kolkata')
APP_NAME = "Nivaara Realty – WhatsApp"

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Raises:
        ConfigurationError: Si falta configuración obligatoria; no se acepta tráfico
    """
    try:
        get_settings().validate()
    except ConfigurationError as e:
        logger.critical(f"[CONFIG] {e}")
        raise

    india_time = datetime.now(INDIA_TZ)
    logger.info(f"[TIMEZONE] Hora actual en Pune: {india_time.strftime('%d/%m/%Y %H:%M:%S %Z')}")

    application = FastAPI(title=APP_NAME)
    application.include_router(webhook_router)

    @application.get("/")
    async def root():
        return {"message": APP_NAME}

    return application


def run():
    """Punto de entrada: valida configuración y levanta uvicorn en PORT."""
    try:
        application = create_app()
    except ConfigurationError:
        sys.exit(1)

    port = get_settings().PORT
    logger.info(f"Nivaara bot escuchando en el puerto {port}")
    uvicorn.run(application, host="0.0.0.0", port=port, log_config=None)


if __name__ == "__main__":
    run()
