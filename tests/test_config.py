from celestial.config import DEFAULT_CHART_SIZE, DEFAULT_ORACLE_URL, Settings


def test_defaults(monkeypatch):
    for name in ("CELESTIAL_ORACLE_URL", "CELESTIAL_ORACLE_TIMEOUT",
                 "CELESTIAL_CHART_SIZE", "CELESTIAL_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env(dotenv=False)
    assert settings.oracle_url == DEFAULT_ORACLE_URL
    assert settings.chart_size == DEFAULT_CHART_SIZE
    assert settings.output_dir == "chart_data"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CELESTIAL_ORACLE_URL", "http://localhost:9999/ai")
    monkeypatch.setenv("CELESTIAL_ORACLE_TIMEOUT", "2.5")
    monkeypatch.setenv("CELESTIAL_CHART_SIZE", "480")
    settings = Settings.from_env(dotenv=False)
    assert settings.oracle_url == "http://localhost:9999/ai"
    assert settings.oracle_timeout == 2.5
    assert settings.chart_size == 480


def test_bad_number_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("CELESTIAL_CHART_SIZE", "huge")
    settings = Settings.from_env(dotenv=False)
    assert settings.chart_size == DEFAULT_CHART_SIZE
    assert "CELESTIAL_CHART_SIZE" in caplog.text
