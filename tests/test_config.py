import importlib
from typing import Any, cast

from logkit import Level, LogConfig
from logkit.config import stdlib_level

pytest = cast(Any, importlib.import_module("pytest"))


def test_default_config():
    cfg = LogConfig()
    assert cfg.service_name == "app"
    assert cfg.service_version is None
    assert cfg.environment is None
    assert cfg.level is None
    assert cfg.static == {}


def test_config_overrides():
    cfg = LogConfig(service_name="orders", level="DEBUG", static={"team": "core"})
    assert cfg.service_name == "orders"
    assert cfg.level == "DEBUG"
    assert cfg.static["team"] == "core"


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (Level.TRACE, 5),
        (Level.DEBUG, 10),
        (Level.INFO, 20),
        (Level.WARN, 30),
        (Level.ERROR, 40),
    ],
)
def test_stdlib_level(level: Level, expected: int):
    assert stdlib_level(level) == expected


def test_public_reexports_available():
    from logkit import LogConfig as exported_log_config
    from logkit.config import LogConfig as config_log_config

    assert exported_log_config is config_log_config
