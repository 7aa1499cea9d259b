import pytest

VALID_SETTINGS_DATA = {
    "ENVIRONMENT": "production",
    "FASTAPI_API_KEY_HEADER": "test_key_header",
    "FASTAPI_API_KEY": "test_key",
    "FASTAPI_CORS_ORIGINS": ["http://localhost"],
    "COMPANY_ID_HEADER": "X-Company-Id",
    "POSTGRES_USER": "postgres",
    "POSTGRES_PASSWORD": "postgres",
    "POSTGRES_HOST": "localhost",
    "POSTGRES_PORT": 5432,
    "POSTGRES_DB": "postgres",
    "PILLAR_SCORING_STRATEGY": "placeholder",
}
COMPANY_ID = "company_123"
HEADERS = {
    VALID_SETTINGS_DATA["FASTAPI_API_KEY_HEADER"]: VALID_SETTINGS_DATA[
        "FASTAPI_API_KEY"
    ],
    VALID_SETTINGS_DATA["COMPANY_ID_HEADER"]: COMPANY_ID,
}


@pytest.fixture(scope="function", autouse=True)
def mock_get_settings(monkeypatch):
    """
    Mock the get_settings function to return a test configuration.
    """
    from src.fleet_readiness.config import Settings, get_settings

    def _get_settings():
        return Settings(**VALID_SETTINGS_DATA)

    get_settings.cache_clear()
    monkeypatch.setattr("src.fleet_readiness.config.get_settings", _get_settings)
    monkeypatch.setattr(
        "src.fleet_readiness.middleware.auth.get_settings", _get_settings
    )
