"""
Excepciones del pipeline Salesforce -> HubSpot.

Ninguna de estas excepciones se propaga fuera del caso de uso: se construyen
en el punto donde ocurre el problema, se loguean con el ID del record de
Salesforce y se adjuntan al SyncOutcome.
"""
from typing import Any, Optional

from sfdc_hubspot_sync.shared.exceptions.base import AppException


class SyncException(AppException):
    """Excepción base para errores de sincronización de un record."""

    def __init__(self, message: str, record_id: Optional[str], error_code: str = "SYNC_ERROR", details=None):
        payload = {"record_id": record_id}
        payload.update(details or {})
        super().__init__(
            message=message,
            error_code=error_code,
            details=payload
        )
        self.record_id = record_id


class UnrecognizedRecordTypeError(SyncException):
    """El trigger no es Contact, Account ni Lead."""

    def __init__(self, record_id: Optional[str], record_type: Any):
        super().__init__(
            message=(
                f"Trigger received Record ID {record_id} that was not a "
                f"Contact, Account or Lead (type={record_type!r})"
            ),
            record_id=record_id,
            error_code="UNRECOGNIZED_RECORD_TYPE",
            details={"record_type": record_type}
        )


class AmbiguousLeadClassificationError(SyncException):
    """El Lead no indica si es Contact o Account."""

    def __init__(self, record_id: Optional[str], discriminator_field: str, value: Any):
        super().__init__(
            message=(
                f"New Salesforce Lead (ID: {record_id}) that was neither a "
                f"Contact nor Account ({discriminator_field}={value!r})"
            ),
            record_id=record_id,
            error_code="AMBIGUOUS_LEAD_CLASSIFICATION",
            details={"discriminator_field": discriminator_field, "value": value}
        )


class MissingRequiredFieldError(SyncException):
    """Falta un field obligatorio (email, website, ID) en el record."""

    def __init__(self, record_id: Optional[str], field: str):
        super().__init__(
            message=f"Record {record_id} no contiene el field requerido '{field}'",
            record_id=record_id,
            error_code="MISSING_REQUIRED_FIELD",
            details={"field": field}
        )


class LookupFailureError(SyncException):
    """Falló la búsqueda del record existente en HubSpot."""

    def __init__(self, record_id: Optional[str], object_type: str, reason: str):
        super().__init__(
            message=f"Error fetching existing {object_type} for record {record_id}: {reason}",
            record_id=record_id,
            error_code="LOOKUP_FAILURE",
            details={"object_type": object_type, "reason": reason}
        )


class WriteFailureError(SyncException):
    """Falló la escritura (create/update) en HubSpot."""

    def __init__(self, record_id: Optional[str], object_type: str, reason: str):
        super().__init__(
            message=f"Error upserting HubSpot {object_type} for record {record_id}: {reason}",
            record_id=record_id,
            error_code="WRITE_FAILURE",
            details={"object_type": object_type, "reason": reason}
        )
