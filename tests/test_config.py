"""Tests for settings loading."""

from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "MONGO_URI", "MONGO_DATABASE", "PRODUCT_COLLECTION"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.mongo_database == "products"
    assert settings.product_collection == "Product"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.mongo_uri == "mongodb://db:27017"


def test_cors_origins_accepts_comma_separated_string():
    settings = Settings(_env_file=None, cors_origins="https://a.example, https://b.example")

    assert settings.get_cors_origins_list() == ["https://a.example", "https://b.example"]


def test_cors_origins_accepts_json_string():
    settings = Settings(_env_file=None, cors_origins='["https://a.example"]')

    assert settings.get_cors_origins_list() == ["https://a.example"]
