"""
Ledger de IDs de Salesforce guardado en una propiedad de HubSpot.

El ledger es una lista ordenada de IDs separados por ';' ("003AAA;003BBB").
Solo se agregan IDs, nunca se quitan.

Flujo de reconciliación:
- Busca en HubSpot el objeto existente por clave natural (email / domain)
- Lee su ledger actual (si existe)
- Agrega el nuevo ID al final

Un error en la búsqueda no es fatal: se loguea y se sigue con el ID nuevo solo.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from loguru import logger

from sfdc_hubspot_sync.domain.mappings import HubSpotObjectType
from sfdc_hubspot_sync.infrastructure.external.hubspot import HubSpotApiError, HubSpotClient
from sfdc_hubspot_sync.shared.exceptions.sync import LookupFailureError

LEDGER_SEPARATOR = ";"


def split_ledger(ledger: Optional[str]) -> List[str]:
    """Separa el ledger en IDs, ignorando entradas vacías."""
    if not ledger:
        return []
    return [item for item in ledger.split(LEDGER_SEPARATOR) if item]


def append_id(ledger: Optional[str], new_id: str, *, deduplicate: bool = False) -> str:
    """
    Agrega `new_id` al final del ledger.

    Con deduplicate=True, un ID que ya está en el ledger no se repite.
    """
    if not ledger:
        return new_id
    if deduplicate and new_id in split_ledger(ledger):
        return ledger
    return f"{ledger}{LEDGER_SEPARATOR}{new_id}"


@dataclass(frozen=True)
class LedgerResolution:
    """Resultado de reconciliar el ledger de un record."""

    value: str
    existing: str = ""
    lookup_error: Optional[LookupFailureError] = None


class SfdcIdReconciler:
    """
    Lee el ledger existente en HubSpot y le agrega el ID nuevo.

    Uso:
        reconciler = SfdcIdReconciler(client)
        resolution = await reconciler.reconcile(
            HubSpotObjectType.CONTACTS, "email", "a@b.com", "sfdc_contact_id", "003BBB"
        )
        resolution.value  # "003AAA;003BBB"
    """

    def __init__(self, client: HubSpotClient, *, deduplicate: bool = False) -> None:
        self._client = client
        self._deduplicate = deduplicate

    async def reconcile(
        self,
        object_type: HubSpotObjectType,
        search_property: str,
        search_value: Any,
        ledger_property: str,
        new_id: str,
        *,
        record_id: Optional[str] = None,
    ) -> LedgerResolution:
        record_id = record_id or new_id

        if not search_value:
            logger.warning(
                f"Record {record_id}: sin valor para '{search_property}', se omite la búsqueda en HubSpot"
            )
            return LedgerResolution(value=new_id)

        try:
            results = await self._client.search_objects(
                object_type,
                search_property,
                search_value,
                properties=[ledger_property],
            )
        except HubSpotApiError as e:
            error = LookupFailureError(record_id, HubSpotObjectType(object_type).value, str(e))
            logger.error(error.message)
            return LedgerResolution(value=new_id, lookup_error=error)

        existing = ""
        if results:
            raw = results[0].properties.get(ledger_property)
            existing = str(raw) if raw else ""

        value = append_id(existing, new_id, deduplicate=self._deduplicate)
        logger.debug(f"Record {record_id}: ledger {ledger_property} '{existing}' -> '{value}'")
        return LedgerResolution(value=value, existing=existing)
