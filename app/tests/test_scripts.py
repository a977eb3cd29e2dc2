import asyncio
import signal
from types import SimpleNamespace

import app.scripts.free_port as free_port_module
import app.scripts.seed_events as seed_module
from app.services.events.mock_store import MOCK_NOTICE
from app.services.events.mongo_store import SEED_CONFIRMATION


def _fake_lsof(stdout: str, returncode: int = 0):
    def run(cmd, **kwargs):
        assert cmd[:2] == ["lsof", "-ti"]
        return SimpleNamespace(stdout=stdout, stderr="", returncode=returncode)

    return run


def test_free_port_kills_listeners(monkeypatch, capsys) -> None:
    monkeypatch.setattr(free_port_module.subprocess, "run", _fake_lsof("101\n202\n"))
    kills = []

    def fake_kill(pid, sig):
        if pid == 202:
            raise ProcessLookupError(pid)
        kills.append((pid, sig))

    killed = free_port_module.free_port(3000, kill=fake_kill)

    assert killed == [101]
    assert kills == [(101, signal.SIGKILL)]
    assert "Found 2 process(es) using port 3000" in capsys.readouterr().out


def test_free_port_reports_already_free(monkeypatch, capsys) -> None:
    monkeypatch.setattr(free_port_module.subprocess, "run", _fake_lsof("", returncode=1))

    assert free_port_module.free_port(3000, kill=lambda pid, sig: None) == []
    assert "already free" in capsys.readouterr().out


def test_seed_script_without_mongo_is_advisory(monkeypatch) -> None:
    async def unreachable(config):
        return None, None

    monkeypatch.setattr(seed_module, "connect_to_mongo", unreachable)

    assert asyncio.run(seed_module.run_seed_events()) == MOCK_NOTICE


def test_seed_script_seeds_collection(monkeypatch, fake_collection) -> None:
    async def connected(config):
        return None, fake_collection

    monkeypatch.setattr(seed_module, "connect_to_mongo", connected)

    assert asyncio.run(seed_module.run_seed_events()) == SEED_CONFIRMATION
    assert len(fake_collection.documents) == 4
