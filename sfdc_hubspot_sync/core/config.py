"""
Configuracion central del sync Salesforce -> HubSpot.
Gestiona variables de entorno (o archivo .env) y valores por defecto.

El unico secreto es HUBSPOT_TOKEN; el resto son ajustes opcionales.
"""
from functools import lru_cache
from typing import List

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings

from sfdc_hubspot_sync.shared.exceptions.base import ConfigurationError


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.
    """

    # HubSpot
    HUBSPOT_TOKEN: str = Field(default="")
    HUBSPOT_BASE_URL: str = Field(default="https://api.hubapi.com")
    HUBSPOT_TIMEOUT_S: float = Field(default=30.0)

    # Reglas de mapeo
    # Nombre del field del Lead que indica si se trata como Contact o Account.
    LEAD_DISCRIMINATOR_FIELD: str = Field(default="contact_or_account")
    SFDC_ID_DEDUPLICATE: bool = Field(default=False)
    # Sufijos de dos niveles (lista separada por comas), e.g. "co.uk,com.au"
    COMPOUND_DOMAIN_SUFFIXES: str = Field(default="co.uk")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="")

    @computed_field
    @property
    def compound_domain_suffixes(self) -> List[str]:
        """Sufijos compuestos normalizados (minusculas, sin vacios)."""
        return parse_suffix_list(self.COMPOUND_DOMAIN_SUFFIXES)

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


def parse_suffix_list(raw: str) -> List[str]:
    """
    Parsea una lista de sufijos separada por comas.
    Ignora espacios y el punto inicial opcional (".co.uk" == "co.uk").
    """
    suffixes = []
    for item in (raw or "").split(","):
        suffix = item.strip().lower().lstrip(".")
        if suffix:
            suffixes.append(suffix)
    return suffixes


@lru_cache
def get_settings() -> Settings:
    """
    Retorna la instancia de configuracion (se construye una sola vez).
    Usar get_settings.cache_clear() para releer el entorno.
    """
    return Settings()


def require_hubspot_token(settings: Settings) -> str:
    """Retorna el token de HubSpot o levanta ConfigurationError si falta."""
    token = settings.HUBSPOT_TOKEN.strip()
    if not token:
        raise ConfigurationError(
            "Falta variable de entorno obligatoria: HUBSPOT_TOKEN",
            setting="HUBSPOT_TOKEN",
        )
    return token
