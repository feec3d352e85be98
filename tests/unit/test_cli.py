"""
Tests del entry point de línea de comandos.
"""
import json

import httpx
import pytest
from loguru import logger

from sfdc_hubspot_sync import cli
from sfdc_hubspot_sync.core.config import get_settings
from sfdc_hubspot_sync.infrastructure.external.hubspot import HubSpotClient


@pytest.fixture
def patched_client(monkeypatch, fake_hubspot):
    """Hace que el CLI hable con el HubSpot falso."""
    transport = httpx.MockTransport(fake_hubspot.handler)

    def _client(credentials, **kwargs):
        return HubSpotClient(credentials, transport=transport, **kwargs)

    monkeypatch.setattr(cli, "HubSpotClient", _client)
    return fake_hubspot


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HUBSPOT_TOKEN", "pat-cli")
    monkeypatch.delenv("LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
    # main() reconfigura loguru sobre el stderr capturado por pytest
    logger.remove()


def test_parse_triggers_accepts_object_or_list():
    assert cli.parse_triggers('{"type": "Contact"}') == [{"type": "Contact"}]
    assert cli.parse_triggers('[{"ID": "1"}, {"ID": "2"}]') == [{"ID": "1"}, {"ID": "2"}]


@pytest.mark.parametrize("raw", ["42", '["a"]', "not json"])
def test_parse_triggers_rejects_other_shapes(raw):
    with pytest.raises(ValueError):
        cli.parse_triggers(raw)


def test_main_processes_trigger_file(env, patched_client, capsys):
    trigger_file = env / "trigger.json"
    trigger_file.write_text(
        json.dumps(
            [
                {"type": "Contact", "ID": "003BBB", "email": "contact@example.com"},
                {"type": "Event", "ID": "00UXXX"},
            ]
        ),
        encoding="utf-8",
    )

    exit_code = cli.main(["--trigger-file", str(trigger_file)])

    assert exit_code == 0
    assert len(patched_client.writes) == 1
    assert patched_client.writes[0].headers["Authorization"] == "Bearer pat-cli"
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("003BBB\tsynced\tcontacts")
    assert out[1].startswith("00UXXX\tskipped")


def test_main_without_token_exits_with_usage_error(env, patched_client, monkeypatch):
    monkeypatch.delenv("HUBSPOT_TOKEN", raising=False)
    trigger_file = env / "trigger.json"
    trigger_file.write_text('{"type": "Contact"}', encoding="utf-8")

    assert cli.main(["--trigger-file", str(trigger_file)]) == cli.EXIT_USAGE
    assert patched_client.requests == []


def test_main_with_invalid_json_exits_with_usage_error(env, patched_client):
    trigger_file = env / "trigger.json"
    trigger_file.write_text("{not json", encoding="utf-8")

    assert cli.main(["--trigger-file", str(trigger_file)]) == cli.EXIT_USAGE
    assert patched_client.requests == []
