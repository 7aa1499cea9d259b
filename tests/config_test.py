import pytest

from src.fleet_readiness.config import Settings, parse_cors
from tests.mocks.config_mocks import VALID_SETTINGS_DATA


def test_parse_cors_comma_separated():
    assert parse_cors("http://a.test, http://b.test") == [
        "http://a.test",
        "http://b.test",
    ]


def test_parse_cors_passthrough():
    assert parse_cors(["http://a.test"]) == ["http://a.test"]
    assert parse_cors('["http://a.test"]') == '["http://a.test"]'


def test_parse_cors_rejects_other_types():
    with pytest.raises(ValueError):
        parse_cors(42)


def test_settings_from_values():
    settings = Settings(**VALID_SETTINGS_DATA)
    assert settings.COMPANY_ID_HEADER == "X-Company-Id"
    assert settings.PILLAR_SCORING_STRATEGY == "placeholder"
    assert settings.all_cors_origins == ["http://localhost"]
