"""
Cliente mínimo de la API CRM v3 de HubSpot (sin SDKs externos).

Requisitos cubiertos:
- httpx (async)
- búsqueda por igualdad (filterGroups / EQ)
- creación de objetos con un bag de propiedades

Sin reintentos ni backoff: un error se reporta una vez y el caller decide.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import httpx

from sfdc_hubspot_sync.domain.mappings import HubSpotObjectType

from .types import HubSpotApiError, HubSpotCredentials, HubSpotObject

ObjectTypeLike = Union[HubSpotObjectType, str]


def build_equality_search(
    property_name: str,
    value: Any,
    *,
    properties: Optional[Sequence[str]] = None,
    limit: int = 1,
) -> dict[str, Any]:
    """
    Construye el body de /search para un filtro `property_name == value`.

    `properties` limita las propiedades devueltas; HubSpot solo devuelve un
    set por defecto si no se piden explícitamente.
    """
    body: dict[str, Any] = {
        "filterGroups": [
            {
                "filters": [
                    {
                        "propertyName": property_name,
                        "operator": "EQ",
                        "value": value,
                    }
                ]
            }
        ],
        "limit": limit,
    }
    if properties:
        body["properties"] = list(properties)
    return body


class HubSpotClient:
    """
    Cliente HTTP de HubSpot.

    Importante:
    - No hace upsert real: create_object siempre hace POST de creación.
      La deduplicación por clave natural queda del lado de HubSpot / caller.
    - Se puede usar como async context manager para cerrar el pool.
    """

    def __init__(
        self,
        credentials: HubSpotCredentials,
        *,
        base_url: str = "https://api.hubapi.com",
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._creds = credentials
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout_s,
            transport=transport,
        )

    async def __aenter__(self) -> HubSpotClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search_objects(
        self,
        object_type: ObjectTypeLike,
        property_name: str,
        value: Any,
        *,
        properties: Optional[Sequence[str]] = None,
        limit: int = 1,
    ) -> list[HubSpotObject]:
        """
        Busca objetos cuyo `property_name` sea igual a `value`.
        """
        path = f"/crm/v3/objects/{_object_path(object_type)}/search"
        body = build_equality_search(property_name, value, properties=properties, limit=limit)
        payload = await self._request_json("POST", path, payload=body)
        results = payload.get("results") or []
        if not isinstance(results, list) or not all(isinstance(item, dict) for item in results):
            raise HubSpotApiError(f"HubSpot devolvió 'results' mal formado en POST {path}")
        return [HubSpotObject.from_payload(item) for item in results]

    async def create_object(
        self, object_type: ObjectTypeLike, properties: dict[str, Any]
    ) -> HubSpotObject:
        """
        Crea un objeto con el bag de propiedades dado.
        """
        path = f"/crm/v3/objects/{_object_path(object_type)}"
        payload = await self._request_json("POST", path, payload={"properties": properties})
        return HubSpotObject.from_payload(payload)

    async def _request_json(
        self, method: str, path: str, *, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Request HTTP autenticado.

        - 2xx: retorna el JSON
        - resto: HubSpotApiError con status y body
        - error de transporte (timeout, conexión): HubSpotApiError encadenado
        """
        headers = {
            "Authorization": f"Bearer {self._creds.token}",
            "Content-Type": "application/json",
        }

        try:
            resp = await self._client.request(method, path, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise HubSpotApiError(f"HubSpot request {method} {path} falló: {e}") from e

        if 200 <= resp.status_code < 300:
            try:
                data = resp.json()
            except ValueError as e:
                raise HubSpotApiError(
                    f"HubSpot devolvió un body no JSON en {method} {path}",
                    status_code=resp.status_code,
                ) from e
            if not isinstance(data, dict):
                raise HubSpotApiError(
                    f"HubSpot devolvió un body que no es objeto JSON en {method} {path}",
                    status_code=resp.status_code,
                )
            return data

        raise HubSpotApiError(
            f"HubSpot request falló {resp.status_code}: {resp.text}",
            status_code=resp.status_code,
        )


def _object_path(object_type: ObjectTypeLike) -> str:
    return HubSpotObjectType(object_type).value
