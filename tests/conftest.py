"""
Configuración de fixtures para pytest.
"""
from __future__ import annotations

import json
from typing import Any, AsyncGenerator, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from loguru import logger

from sfdc_hubspot_sync.infrastructure.external.hubspot import HubSpotClient, HubSpotCredentials

TEST_TOKEN = "pat-test-token"


class FakeHubSpot:
    """
    HubSpot falso sobre httpx.MockTransport.

    - search_results: objeto HubSpot ("contacts"/"companies") -> lista de resultados
    - search_status / create_status: status HTTP a devolver
    - search_exception: excepción de transporte a levantar en /search
    - search_body: JSON crudo a devolver en /search (para respuestas mal formadas)
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.search_results: Dict[str, List[Dict[str, Any]]] = {}
        self.search_status = 200
        self.create_status = 201
        self.search_exception: Optional[Exception] = None
        self.search_body: Any = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content) if request.content else {}
        path = request.url.path

        if path.endswith("/search"):
            if self.search_exception is not None:
                raise self.search_exception
            if self.search_status != 200:
                return httpx.Response(self.search_status, json={"message": "search failed"})
            if self.search_body is not None:
                return httpx.Response(200, json=self.search_body)
            object_type = path.split("/")[-2]
            results = self.search_results.get(object_type, [])
            return httpx.Response(200, json={"total": len(results), "results": results})

        if self.create_status >= 300:
            return httpx.Response(self.create_status, json={"message": "create failed"})
        return httpx.Response(
            self.create_status,
            json={"id": "9001", "properties": body.get("properties", {})},
        )

    @property
    def searches(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/search")]

    @property
    def writes(self) -> List[httpx.Request]:
        return [r for r in self.requests if not r.url.path.endswith("/search")]

    def written_properties(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.writes[index].content)["properties"]


@pytest.fixture
def fake_hubspot() -> FakeHubSpot:
    return FakeHubSpot()


@pytest_asyncio.fixture
async def hubspot_client(fake_hubspot: FakeHubSpot) -> AsyncGenerator[HubSpotClient, None]:
    client = HubSpotClient(
        HubSpotCredentials(token=TEST_TOKEN),
        transport=httpx.MockTransport(fake_hubspot.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
def log_records():
    """Captura los records emitidos por loguru durante el test."""
    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
