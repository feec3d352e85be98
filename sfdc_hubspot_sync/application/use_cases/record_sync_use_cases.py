"""
Casos de uso para sincronizar triggers de Salesforce hacia HubSpot.

Diseño (resumen):
- Router: enruta el trigger por `type` (Contact / Account / Lead)
- Contact: clave natural = email (tal cual)
- Account: clave natural = dominio normalizado del website
- Lead: se trata como Contact o Account según un field discriminador
- Para cada record: búsqueda del ledger existente -> armado de propiedades -> escritura

Estrategia de errores:
- Ningún error se propaga: se loguea con el ID del record y se devuelve en el
  SyncOutcome. Un record fallido nunca afecta al siguiente.
- No hay reintentos: un record cuya escritura falla se pierde (se loguea).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from loguru import logger

from sfdc_hubspot_sync.application.services.domain_normalizer import (
    DEFAULT_COMPOUND_SUFFIXES,
    website_to_domain,
)
from sfdc_hubspot_sync.application.services.property_mapper import map_properties
from sfdc_hubspot_sync.application.services.sfdc_id_ledger import SfdcIdReconciler
from sfdc_hubspot_sync.domain.mappings import (
    ACCOUNT_TARGET,
    CONTACT_TARGET,
    LEAD_AS_ACCOUNT_TARGET,
    LEAD_AS_CONTACT_TARGET,
    ObjectSyncTarget,
)
from sfdc_hubspot_sync.domain.records import RecordType, SalesforceRecord
from sfdc_hubspot_sync.infrastructure.external.hubspot import HubSpotApiError, HubSpotClient
from sfdc_hubspot_sync.shared.exceptions.sync import (
    AmbiguousLeadClassificationError,
    MissingRequiredFieldError,
    SyncException,
    UnrecognizedRecordTypeError,
    WriteFailureError,
)

DEFAULT_LEAD_DISCRIMINATOR_FIELD = "contact_or_account"

TriggerInput = Union[SalesforceRecord, Mapping[str, Any]]


class SyncStatus(str, Enum):
    SYNCED = "synced"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SyncOutcome:
    """
    Resultado de procesar un trigger.

    - SYNCED: se escribió en HubSpot
    - FAILED: la escritura en HubSpot falló (no se reintenta)
    - SKIPPED: no se intentó escribir (tipo desconocido, Lead ambiguo, falta un field)
    """

    record_id: str
    status: SyncStatus
    object_type: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    hubspot_id: Optional[str] = None
    error: Optional[SyncException] = None
    warnings: Tuple[SyncException, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is SyncStatus.SYNCED


class RecordSyncUseCases:
    """
    Orquestador Salesforce -> HubSpot para un trigger a la vez.
    """

    def __init__(
        self,
        client: HubSpotClient,
        *,
        reconciler: Optional[SfdcIdReconciler] = None,
        lead_discriminator_field: str = DEFAULT_LEAD_DISCRIMINATOR_FIELD,
        compound_suffixes: Iterable[str] = DEFAULT_COMPOUND_SUFFIXES,
    ) -> None:
        self._client = client
        self._reconciler = reconciler or SfdcIdReconciler(client)
        self._lead_discriminator_field = lead_discriminator_field
        self._compound_suffixes = tuple(compound_suffixes)

    async def handle_trigger(self, trigger: TriggerInput) -> SyncOutcome:
        """
        Punto de entrada: enruta el trigger según su `type`.
        """
        record = trigger if isinstance(trigger, SalesforceRecord) else SalesforceRecord.from_trigger(trigger)
        record_type = record.resolved_type

        if record_type is RecordType.CONTACT:
            return await self.sync_contact(record)
        if record_type is RecordType.ACCOUNT:
            return await self.sync_account(record)
        if record_type is RecordType.LEAD:
            return await self.sync_lead(record)

        error = UnrecognizedRecordTypeError(record.record_id, record.record_type)
        logger.error(error.message)
        return SyncOutcome(record_id=record.record_id, status=SyncStatus.SKIPPED, error=error)

    async def handle_triggers(self, triggers: Iterable[TriggerInput]) -> List[SyncOutcome]:
        """Procesa varios triggers en secuencia, uno por uno."""
        outcomes: List[SyncOutcome] = []
        for trigger in triggers:
            outcomes.append(await self.handle_trigger(trigger))
        return outcomes

    async def sync_contact(
        self, record: SalesforceRecord, target: ObjectSyncTarget = CONTACT_TARGET
    ) -> SyncOutcome:
        email = record.get("email")
        if not email:
            return self._skip_missing_field(record, "email", target)
        return await self._sync(record, target, natural_key=email)

    async def sync_account(
        self, record: SalesforceRecord, target: ObjectSyncTarget = ACCOUNT_TARGET
    ) -> SyncOutcome:
        website = record.get("website")
        if not website:
            return self._skip_missing_field(record, "website", target)
        domain = website_to_domain(website, compound_suffixes=self._compound_suffixes)
        return await self._sync(record, target, natural_key=domain)

    async def sync_lead(self, record: SalesforceRecord) -> SyncOutcome:
        """
        Un Lead indica en un field (configurable) si es Contact o Account.
        """
        value = record.get(self._lead_discriminator_field)

        if value == RecordType.CONTACT.value:
            return await self.sync_contact(record, LEAD_AS_CONTACT_TARGET)
        if value == RecordType.ACCOUNT.value:
            return await self.sync_account(record, LEAD_AS_ACCOUNT_TARGET)

        error = AmbiguousLeadClassificationError(record.record_id, self._lead_discriminator_field, value)
        logger.error(error.message)
        return SyncOutcome(record_id=record.record_id, status=SyncStatus.SKIPPED, error=error)

    async def _sync(self, record: SalesforceRecord, target: ObjectSyncTarget, *, natural_key: Any) -> SyncOutcome:
        if not record.record_id:
            return self._skip_missing_field(record, "ID", target)

        # La escritura siempre espera el resultado de la búsqueda
        resolution = await self._reconciler.reconcile(
            target.object_type,
            target.natural_key_property,
            natural_key,
            target.ledger_property,
            record.record_id,
            record_id=record.record_id,
        )
        warnings = (resolution.lookup_error,) if resolution.lookup_error else ()

        properties: Dict[str, Any] = {
            target.natural_key_property: natural_key,
            target.ledger_property: resolution.value,
        }
        map_properties(record, properties, target.mappings)

        label = target.object_type.singular
        try:
            created = await self._client.create_object(target.object_type, properties)
        except HubSpotApiError as e:
            error = WriteFailureError(record.record_id, label, str(e))
            logger.error(error.message)
            return SyncOutcome(
                record_id=record.record_id,
                status=SyncStatus.FAILED,
                object_type=target.object_type.value,
                properties=properties,
                error=error,
                warnings=warnings,
            )

        logger.info(
            f"HubSpot {label} upserted for Salesforce {target.sfdc_object} ID: {record.record_id}"
        )
        return SyncOutcome(
            record_id=record.record_id,
            status=SyncStatus.SYNCED,
            object_type=target.object_type.value,
            properties=properties,
            hubspot_id=created.object_id,
            warnings=warnings,
        )

    def _skip_missing_field(self, record: SalesforceRecord, field_name: str, target: ObjectSyncTarget) -> SyncOutcome:
        error = MissingRequiredFieldError(record.record_id, field_name)
        logger.error(error.message)
        return SyncOutcome(
            record_id=record.record_id,
            status=SyncStatus.SKIPPED,
            object_type=target.object_type.value,
            error=error,
        )
