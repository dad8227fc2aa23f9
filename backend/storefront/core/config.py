"""
Configuración centralizada de la aplicación

Author: TM3
Date: 2026-10-19
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Dropship Storefront API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Catalog, checkout and fulfillment forwarding for the storefront"
    API_HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Flat-file storage
    DATA_DIR: Path = BACKEND_DIR / "data"
    PRODUCTS_FILE: Optional[Path] = None
    ORDERS_FILE: Optional[Path] = None
    PUBLIC_DIR: Path = BACKEND_DIR / "public"

    # CORS - comma-separated or JSON array
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    # PayPal
    PAYPAL_CLIENT_ID: str = ""
    PAYPAL_CLIENT_SECRET: str = ""
    PAYPAL_ENVIRONMENT: str = "sandbox"
    PAYPAL_CURRENCY: str = "EUR"

    # DSers
    DSERS_API_KEY: str = ""
    DSERS_API_SECRET: str = ""
    DSERS_BASE_URL: str = "https://openapi.dsers.com"

    HTTP_TIMEOUT_SECONDS: float = 30.0

    # Protects POST /api/sync/* when set
    SYNC_API_KEY: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def products_path(self) -> Path:
        return self.PRODUCTS_FILE or self.DATA_DIR / "products.json"

    @property
    def orders_path(self) -> Path:
        return self.ORDERS_FILE or self.DATA_DIR / "orders.json"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance, also used as a FastAPI dependency"""
    return Settings()
