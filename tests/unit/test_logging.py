"""Unit tests for logging helpers and call-tracing decorators."""

import json
import logging
import os
import subprocess
import sys

import pytest

from es_scaler.app.decorators import log_call, timed
from es_scaler.infrastructure.logger import StandardLogger, configure_logging


class _Component:
    def __init__(self, logger):
        self._logger = logger

    @log_call()
    @timed("component.work")
    def work(self, value):
        return value * 2

    @log_call()
    def fail(self):
        raise RuntimeError("boom")


@pytest.mark.unit
def test_decorators_use_injected_logger(logger):
    assert _Component(logger).work(2) == 4
    messages = [call.args[0] for call in logger.debug.call_args_list]
    assert "Call: work" in messages
    assert "Return: work -> 4" in messages
    assert any(m.startswith("component.work: ") for m in messages)


@pytest.mark.unit
def test_log_call_reraises(logger):
    with pytest.raises(RuntimeError, match="boom"):
        _Component(logger).fail()
    logger.error.assert_called_once_with("Exception in fail: boom")


@pytest.mark.unit
def test_standard_logger_writes_to_named_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger="es_scaler.test"):
        log = StandardLogger(name="es_scaler.test")
        log.info("hello")
        log.error("bad", ValueError("x"))
    assert [r.levelname for r in caplog.records] == ["INFO", "ERROR"]
    assert caplog.records[1].exc_info is not None


@pytest.mark.unit
def test_configure_logging_json(capsys):
    configure_logging(level_name="DEBUG")
    logging.getLogger("es_scaler.json").debug("structured")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "structured"
    assert record["levelname"] == "DEBUG"


@pytest.mark.unit
def test_configure_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("ES_SCALER_LOG_LEVEL", "warning")
    configure_logging(json_format=False)
    assert logging.getLogger().level == logging.WARNING


@pytest.mark.unit
def test_package_import_loads_no_subpackage():
    code = (
        "import sys, es_scaler; "
        "loaded = [m for m in sys.modules if m.startswith('es_scaler.') or m == 'opensearchpy']; "
        "sys.exit(1 if loaded else 0)"
    )
    env = dict(os.environ, PYTHONPATH=os.pathsep.join(p for p in sys.path if p))
    assert subprocess.run([sys.executable, "-c", code], env=env).returncode == 0
