from pathlib import Path

import pytest

from linkgraph.services import config as config_module


@pytest.fixture(autouse=True)
def restore_config_cache():
    """
    Ensure configuration cache is cleared between tests.
    """
    config_module.reload_config()
    yield
    config_module.reload_config()


def test_defaults_match_reference_layout(monkeypatch) -> None:
    for name in config_module.GraphConfig.model_fields:
        monkeypatch.delenv(f"LINKGRAPH_{name.upper()}", raising=False)

    cfg = config_module.reload_config()

    assert cfg.repulsion_constant == 5000.0
    assert cfg.attraction_constant == 0.05
    assert cfg.ideal_edge_length == 120.0
    assert cfg.gravity_constant == 0.01
    assert cfg.damping_factor == 0.85
    assert cfg.max_speed == 10.0
    assert cfg.tick_interval_ms == 16
    assert cfg.documents_path is None
    assert cfg.autostart is True


def test_env_overrides_are_applied(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LINKGRAPH_REPULSION_CONSTANT", "2500")
    monkeypatch.setenv("LINKGRAPH_AUTOSTART", "false")
    monkeypatch.setenv("LINKGRAPH_DOCUMENTS_PATH", str(tmp_path))
    monkeypatch.setenv("LINKGRAPH_LOG_LEVEL", "debug")

    cfg = config_module.reload_config()

    assert cfg.repulsion_constant == 2500.0
    assert cfg.autostart is False
    assert cfg.documents_path == tmp_path.resolve()
    assert cfg.log_level == "DEBUG"


def test_get_config_is_cached(monkeypatch) -> None:
    first = config_module.get_config()
    monkeypatch.setenv("LINKGRAPH_MAX_SPEED", "99")

    assert config_module.get_config() is first
    assert config_module.reload_config().max_speed == 99.0


def test_empty_documents_path_means_unset(monkeypatch) -> None:
    monkeypatch.setenv("LINKGRAPH_DOCUMENTS_PATH", "")

    assert config_module.reload_config().documents_path is None


def test_rejects_inverted_zoom_range(monkeypatch) -> None:
    monkeypatch.setenv("LINKGRAPH_ZOOM_MIN", "4")
    monkeypatch.setenv("LINKGRAPH_ZOOM_MAX", "2")

    with pytest.raises(ValueError):
        config_module.reload_config()


def test_rejects_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LINKGRAPH_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        config_module.reload_config()


def test_rejects_damping_above_one() -> None:
    with pytest.raises(ValueError):
        config_module.GraphConfig(damping_factor=1.5)
