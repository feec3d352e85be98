"""
Integración con la API CRM v3 de HubSpot.
"""

from .hubspot_client import HubSpotClient, build_equality_search
from .types import HubSpotApiError, HubSpotCredentials, HubSpotObject

__all__ = [
    "HubSpotClient",
    "HubSpotCredentials",
    "HubSpotApiError",
    "HubSpotObject",
    "build_equality_search",
]
