from netguard.core.config import CoreConfig, config_from_env, get_config


def test_config_defaults() -> None:
    assert config_from_env() == CoreConfig(debug=False, log_verbosity="medium")


def test_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("NETGUARD_DEBUG", "yes")
    monkeypatch.setenv("NETGUARD_LOG_VERBOSITY", "HIGH")

    config = config_from_env()

    assert config.debug is True
    assert config.log_verbosity == "high"


def test_unknown_verbosity_falls_back_to_medium(monkeypatch) -> None:
    monkeypatch.setenv("NETGUARD_LOG_VERBOSITY", "extrahigh")

    assert config_from_env().log_verbosity == "medium"


def test_explicit_debug_overrides_environment(monkeypatch) -> None:
    monkeypatch.setenv("NETGUARD_DEBUG", "1")

    assert config_from_env(debug=False).debug is False


def test_get_config_is_cached(monkeypatch) -> None:
    first = get_config()
    monkeypatch.setenv("NETGUARD_DEBUG", "1")

    assert get_config() is first
    get_config.cache_clear()
    assert get_config().debug is True
