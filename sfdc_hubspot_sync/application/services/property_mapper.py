"""
Copia fields de Salesforce a propiedades de HubSpot según una tabla de mapeo.
"""
from typing import Any, Dict

from sfdc_hubspot_sync.domain.mappings import MappingTable
from sfdc_hubspot_sync.domain.records import SalesforceRecord


def map_properties(
    record: SalesforceRecord,
    properties: Dict[str, Any],
    mappings: MappingTable,
) -> Dict[str, Any]:
    """
    Copia al bag `properties` cada field de la tabla presente en el record.

    Un field ausente no genera propiedad; un field presente se copia aunque
    su valor sea vacío o None. Modifica y retorna `properties`.
    """
    for sfdc_field, hubspot_property in mappings.items():
        if sfdc_field in record:
            properties[hubspot_property] = record.get(sfdc_field)
    return properties
