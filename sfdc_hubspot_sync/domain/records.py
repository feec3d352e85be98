"""
Tipos del record entrante de Salesforce.

Se mantienen libres de I/O para poder testearlos fácilmente.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class RecordType(str, Enum):
    """Tipos de trigger que sabemos procesar."""

    CONTACT = "Contact"
    ACCOUNT = "Account"
    LEAD = "Lead"


@dataclass(frozen=True)
class SalesforceRecord:
    """
    Record de Salesforce tal como llega en el trigger.

    - record_id: campo `ID` del trigger
    - record_type: campo `type`, sin validar (para poder reportar tipos desconocidos)
    - fields: vista de solo lectura de todo el payload
    """

    record_id: str
    record_type: Optional[str]
    fields: Mapping[str, Any]

    @classmethod
    def from_trigger(cls, payload: Mapping[str, Any]) -> SalesforceRecord:
        data = dict(payload)
        raw_id = data.get("ID")
        return cls(
            record_id="" if raw_id is None else str(raw_id),
            record_type=data.get("type"),
            fields=MappingProxyType(data),
        )

    @property
    def resolved_type(self) -> Optional[RecordType]:
        try:
            return RecordType(self.record_type)
        except ValueError:
            return None

    def get(self, field: str, default: Any = None) -> Any:
        return self.fields.get(field, default)

    def __contains__(self, field: object) -> bool:
        return field in self.fields
