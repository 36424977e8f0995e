from stress_scenarios.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("REQUIRE_FX_VOL_SHIFT_TYPE", raising=False)
    monkeypatch.delenv("ALLOW_DUPLICATE_LABELS", raising=False)
    config = Settings(_env_file=None)
    assert config.REQUIRE_FX_VOL_SHIFT_TYPE is False
    assert config.ALLOW_DUPLICATE_LABELS is False
    assert config.MAX_UPLOAD_BYTES == 5_000_000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("REQUIRE_FX_VOL_SHIFT_TYPE", "true")
    monkeypatch.setenv("ALLOW_DUPLICATE_LABELS", "1")
    monkeypatch.setenv("STRESS_CONFIG_PATH", "/data/stresstest.xml")
    config = Settings(_env_file=None)
    assert config.REQUIRE_FX_VOL_SHIFT_TYPE is True
    assert config.ALLOW_DUPLICATE_LABELS is True
    assert config.STRESS_CONFIG_PATH == "/data/stresstest.xml"
