import logging
from pathlib import Path

import yaml

from grid_astar.config import CONFIG, LoggingConfig, SearchConfig, load_config
from grid_astar.main import configure_logging


def test_config_module_loads_config():
    assert isinstance(CONFIG.search, SearchConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.search.frontier == "sorted"
    assert CONFIG.logging.global_level == "INFO"


def test_repo_config_contains_keys():
    data = yaml.safe_load((Path(__file__).resolve().parents[2] / "config.yaml").read_text())
    assert data["search"]["frontier"] == "sorted"
    assert "module_levels" in data["logging"]


def test_missing_config_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.search.frontier == "sorted"
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_config_values_parsed(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n"
        "  frontier: heap\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    grid_astar.persistence: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.search.frontier == "heap"
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"grid_astar.persistence": "WARNING"}


def test_empty_config_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).search.frontier == "sorted"


def test_configure_logging_applies_levels(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  global_level: WARNING\n"
        "  module_levels:\n"
        "    grid_astar.test_target: DEBUG\n"
        "    grid_astar.test_bogus: NOT_A_LEVEL\n"
    )
    configure_logging(load_config(path))
    assert logging.getLogger().getEffectiveLevel() == logging.WARNING
    assert logging.getLogger("grid_astar.test_target").level == logging.DEBUG
    assert logging.getLogger("grid_astar.test_bogus").level == logging.NOTSET


def test_configure_logging_warns_on_bad_global_level(tmp_path: Path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  global_level: CHATTY\n")
    configure_logging(load_config(path))
    assert logging.getLogger().getEffectiveLevel() == logging.INFO
    assert "Invalid global log level 'CHATTY'" in capsys.readouterr().err


def test_pyproject_uses_setuptools_namespaces_key():
    text = (Path(__file__).resolve().parents[2] / "pyproject.toml").read_text()
    assert "namespaces = true" in text
    assert "namespace = true" not in text
