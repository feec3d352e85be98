"""
CLI: Salesforce trigger -> HubSpot (one-way sync).

Uso recomendado:
  - Invocarlo desde el mecanismo que entrega los triggers de Salesforce
    (un proceso por trigger, o un archivo con una lista de triggers).

Variables de entorno requeridas:
  - HUBSPOT_TOKEN

Ejecución:
  sfdc-hubspot-sync --trigger-file trigger.json
  cat trigger.json | python -m sfdc_hubspot_sync
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

from sfdc_hubspot_sync.application.services.sfdc_id_ledger import SfdcIdReconciler
from sfdc_hubspot_sync.application.use_cases.record_sync_use_cases import (
    RecordSyncUseCases,
    SyncOutcome,
)
from sfdc_hubspot_sync.core.config import Settings, get_settings, require_hubspot_token
from sfdc_hubspot_sync.core.logging_setup import configure_logging
from sfdc_hubspot_sync.infrastructure.external.hubspot import HubSpotClient, HubSpotCredentials
from sfdc_hubspot_sync.shared.exceptions.base import ConfigurationError

EXIT_OK = 0
EXIT_USAGE = 2


def parse_triggers(raw: str) -> List[dict[str, Any]]:
    """
    Acepta un objeto JSON (un trigger) o una lista de objetos.
    Levanta ValueError si el contenido no tiene esa forma.
    """
    data = json.loads(raw)
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(item, dict) for item in data):
        return data
    raise ValueError("El input debe ser un objeto JSON o una lista de objetos")


async def run_triggers(triggers: Sequence[dict[str, Any]], settings: Settings) -> List[SyncOutcome]:
    credentials = HubSpotCredentials(token=require_hubspot_token(settings))
    async with HubSpotClient(
        credentials,
        base_url=settings.HUBSPOT_BASE_URL,
        timeout_s=settings.HUBSPOT_TIMEOUT_S,
    ) as client:
        use_cases = RecordSyncUseCases(
            client,
            reconciler=SfdcIdReconciler(client, deduplicate=settings.SFDC_ID_DEDUPLICATE),
            lead_discriminator_field=settings.LEAD_DISCRIMINATOR_FIELD,
            compound_suffixes=settings.compound_domain_suffixes,
        )
        return await use_cases.handle_triggers(triggers)


def _read_input(trigger_file: Optional[str]) -> str:
    if trigger_file and trigger_file != "-":
        with open(trigger_file, encoding="utf-8") as fh:
            return fh.read()
    return sys.stdin.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sincroniza triggers de Salesforce hacia HubSpot.")
    parser.add_argument(
        "--trigger-file",
        default=None,
        help="Archivo JSON con un trigger o una lista de triggers ('-' o vacío = stdin).",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Archivo .env a cargar antes de leer la configuración.",
    )
    args = parser.parse_args(argv)

    load_dotenv(args.env_file, override=False)
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

    try:
        require_hubspot_token(settings)
    except ConfigurationError as e:
        logger.error(e.message)
        return EXIT_USAGE

    try:
        triggers = parse_triggers(_read_input(args.trigger_file))
    except (OSError, ValueError) as e:
        logger.error(f"No se pudo leer el trigger: {e}")
        return EXIT_USAGE

    logger.info(f"Procesando {len(triggers)} trigger(s) de Salesforce...")
    outcomes = asyncio.run(run_triggers(triggers, settings))

    for outcome in outcomes:
        print(
            f"{outcome.record_id or '-'}\t{outcome.status.value}\t"
            f"{outcome.object_type or '-'}\t{outcome.hubspot_id or '-'}"
        )

    synced = sum(1 for o in outcomes if o.ok)
    logger.info(f"Sync finalizado: {synced}/{len(outcomes)} record(s) escritos en HubSpot")
    # Los fallos por record no cambian el exit code (fail-open)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
