"""
Configuração via variáveis de ambiente (.env carregado se existir).
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} não é inteiro; usando {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} deve ser positivo; usando {default}")
        return default
    return value


class Config:
    """Configuração da aplicação lida do ambiente no momento da criação."""

    def __init__(self):
        self.SECRET_KEY = os.getenv("SECRET_KEY", "orderdesk_dev_secret")
        self.ORDERS_PAGE_SIZE = _int_env("ORDERS_PAGE_SIZE", 10)
        self.ORDERS_SEED_FILE: Optional[str] = os.getenv("ORDERS_SEED_FILE") or None
        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.DEBUG_ROUTES = os.getenv("DEBUG_ROUTES") == "1"
        self.TESTING = False

    def as_flask_config(self) -> dict:
        return {key: value for key, value in vars(self).items() if key.isupper()}
