"""
Tipos de la API CRM v3 de HubSpot que usa el sync.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class HubSpotCredentials:
    token: str


class HubSpotApiError(RuntimeError):
    """Error de integración con HubSpot (HTTP no 2xx o error de transporte)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class HubSpotObject:
    """Objeto CRM mínimo: id + propiedades devueltas."""

    object_id: str
    properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> HubSpotObject:
        object_id = payload.get("id")
        if not object_id:
            raise HubSpotApiError("HubSpot devolvió un objeto sin 'id'")
        properties = payload.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise HubSpotApiError(f"HubSpot devolvió 'properties' mal formado en el objeto {object_id}")
        return cls(object_id=str(object_id), properties=dict(properties))
