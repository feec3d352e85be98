"""
Mapeos Salesforce -> HubSpot por tipo de objeto.

Este es el punto recomendado para tener control sobre:
- qué fields de Salesforce se copian y con qué nombre de propiedad en HubSpot
- en qué propiedad de HubSpot se acumulan los IDs de Salesforce
- qué propiedad se usa como clave natural (email / domain)

Este módulo no realiza I/O: solo define configuración.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

# Salesforce field -> HubSpot property
MappingTable = Mapping[str, str]


class HubSpotObjectType(str, Enum):
    """Segmento de URL del objeto en la API CRM v3 de HubSpot."""

    CONTACTS = "contacts"
    COMPANIES = "companies"

    @property
    def singular(self) -> str:
        return "company" if self is HubSpotObjectType.COMPANIES else "contact"


# Propiedad de HubSpot donde se guarda el ledger de IDs de Salesforce.
SFDC_ID_PROPERTIES: Mapping[str, str] = MappingProxyType(
    {
        "contact": "sfdc_contact_id",
        "account": "sfdc_account_id",
    }
)

CONTACT_MAPPINGS: MappingTable = MappingProxyType(
    {
        "First Name": "firstname",
        "Last Name": "lastname",
        "Email": "email",
        "Phone": "phone",
    }
)

ACCOUNT_MAPPINGS: MappingTable = MappingProxyType(
    {
        "Name": "name",
        "Phone": "phone",
        "Annual Revenue": "annualrevenue",
    }
)

LEAD_AS_CONTACT_MAPPINGS: MappingTable = MappingProxyType(
    {
        "FirstName": "firstname",
        "LastName": "lastname",
        "Company": "company",
        "Phone": "phone",
    }
)

LEAD_AS_ACCOUNT_MAPPINGS: MappingTable = MappingProxyType(
    {
        "AccountName": "name",
        "Website": "website",
        "industry_c": "industry",
    }
)


@dataclass(frozen=True)
class ObjectSyncTarget:
    """
    Destino de un record en HubSpot.

    - sfdc_object: tipo de objeto Salesforce con el que se etiqueta el ledger
    - object_type: objeto HubSpot a escribir
    - natural_key_property: propiedad usada para buscar el record existente
    - mappings: tabla de mapeo de fields adicionales
    """

    sfdc_object: str
    object_type: HubSpotObjectType
    natural_key_property: str
    mappings: MappingTable

    @property
    def ledger_property(self) -> str:
        return SFDC_ID_PROPERTIES[self.sfdc_object]


CONTACT_TARGET = ObjectSyncTarget(
    sfdc_object="contact",
    object_type=HubSpotObjectType.CONTACTS,
    natural_key_property="email",
    mappings=CONTACT_MAPPINGS,
)

ACCOUNT_TARGET = ObjectSyncTarget(
    sfdc_object="account",
    object_type=HubSpotObjectType.COMPANIES,
    natural_key_property="domain",
    mappings=ACCOUNT_MAPPINGS,
)

# Un Lead se escribe igual que un Contact/Account, solo cambia la tabla de mapeo.
LEAD_AS_CONTACT_TARGET = ObjectSyncTarget(
    sfdc_object="contact",
    object_type=HubSpotObjectType.CONTACTS,
    natural_key_property="email",
    mappings=LEAD_AS_CONTACT_MAPPINGS,
)

LEAD_AS_ACCOUNT_TARGET = ObjectSyncTarget(
    sfdc_object="account",
    object_type=HubSpotObjectType.COMPANIES,
    natural_key_property="domain",
    mappings=LEAD_AS_ACCOUNT_MAPPINGS,
)
