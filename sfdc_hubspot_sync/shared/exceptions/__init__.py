from sfdc_hubspot_sync.shared.exceptions.base import AppException, ConfigurationError
from sfdc_hubspot_sync.shared.exceptions.sync import (
    AmbiguousLeadClassificationError,
    LookupFailureError,
    MissingRequiredFieldError,
    SyncException,
    UnrecognizedRecordTypeError,
    WriteFailureError,
)

__all__ = [
    "AppException",
    "ConfigurationError",
    "SyncException",
    "UnrecognizedRecordTypeError",
    "AmbiguousLeadClassificationError",
    "MissingRequiredFieldError",
    "LookupFailureError",
    "WriteFailureError",
]
