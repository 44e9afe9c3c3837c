from backend.core.config import Settings


def test_allowed_origins_accepts_comma_separated_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.com, http://b.com,")

    config = Settings(_env_file=None)

    assert config.ALLOWED_ORIGINS == ["http://a.com", "http://b.com"]


def test_allowed_origins_defaults_to_wildcard(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    config = Settings(_env_file=None)

    assert config.ALLOWED_ORIGINS == ["*"]


def test_field_flags_read_from_env(monkeypatch):
    monkeypatch.setenv("ENFORCE_FIELD_REGEX", "true")
    monkeypatch.setenv("REPORT_ALL_MISSING_FIELDS", "1")

    config = Settings(_env_file=None)

    assert config.ENFORCE_FIELD_REGEX is True
    assert config.REPORT_ALL_MISSING_FIELDS is True
