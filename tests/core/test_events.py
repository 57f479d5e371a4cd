# tests/core/test_events.py
"""
Testes do Event Log estruturado.

Os testes asseguram que:
- eventos são dicionários com nível, mensagem, timestamp e escopo
- logs derivados por `bind` compartilham a lista de eventos
- eventos são repassados ao logger `galaxy_planner`
- nomes de nível desconhecidos são rejeitados
"""

import logging

import pytest

try:
    from galaxy_planner.core.events import LOGGER_NAME, EventLog, configure_logging, level_number
except Exception as e:  # noqa: BLE001
    EventLog = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente se `core.events` não puder ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing src/galaxy_planner/core/events.py (EventLog, configure_logging).\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_event_shape_and_order():
    _require_imports()
    log = EventLog()
    log.info("first")
    log.error("second", namespace="app")

    assert [e["message"] for e in log.events] == ["first", "second"]
    assert log.events[1]["level"] == "error"
    assert log.events[1]["namespace"] == "app"
    assert log.events[0]["timestamp"].endswith("+00:00")


def test_bind_shares_events_and_merges_fields():
    _require_imports()
    root = EventLog().bind(type="galaxy")
    child = root.bind(env="prod")

    child.debug("planning")

    assert root.events is child.events
    assert root.events[0]["type"] == "galaxy"
    assert root.events[0]["env"] == "prod"
    assert "env" not in root.fields


def test_events_are_forwarded_to_logging(caplog):
    _require_imports()
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    EventLog().bind(env="dev").info("Planning...")

    records = [r for r in caplog.records if r.name == LOGGER_NAME]
    assert [r.getMessage() for r in records] == ["Planning..."]
    assert records[0].galaxy == {"env": "dev"}


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), ("WARN", logging.WARNING), ("panic", logging.CRITICAL), (20, 20)],
)
def test_level_number(name, expected):
    _require_imports()
    assert level_number(name) == expected


def test_unknown_level_is_rejected():
    _require_imports()
    with pytest.raises(ValueError):
        level_number("verbose")


def test_configure_logging_sets_package_level():
    _require_imports()
    logger = logging.getLogger(LOGGER_NAME)
    previous = logger.level
    try:
        configure_logging("info")
        assert logger.level == logging.INFO
        configure_logging("error")
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(previous)
