# nosec B101


import pytest
from pydantic import ValidationError

from moneybank.config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv('BANK_CURRENCIES', raising=False)
    monkeypatch.delenv('RATES_CACHE_BACKEND', raising=False)

    settings = Settings(_env_file=None)

    assert settings.RATES_CACHE_BACKEND == 'file'
    assert settings.RATES_CACHE_TTL_SECONDS == 86400
    assert settings.PROVIDER_RETRY_ATTEMPTS == 3
    assert settings.currency_codes == []


def test_reads_environment_case_insensitively(monkeypatch):
    monkeypatch.setenv('bank_currencies', ' eur, usd ,,JPY ')
    monkeypatch.setenv('RATES_CACHE_BACKEND', 'redis')
    monkeypatch.setenv('PROVIDER_TIMEOUT', '3')

    settings = Settings(_env_file=None)

    assert settings.currency_codes == ['EUR', 'USD', 'JPY']
    assert settings.RATES_CACHE_BACKEND == 'redis'
    assert settings.PROVIDER_TIMEOUT == 3


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv('FIXERIO_API_KEY', raising=False)
    env_file = tmp_path / '.env'
    env_file.write_text('FIXERIO_API_KEY=from-file\nUNRELATED=ignored\n')

    settings = Settings(_env_file=env_file)

    assert settings.FIXERIO_API_KEY == 'from-file'


def test_unknown_cache_backend_rejected(monkeypatch):
    monkeypatch.setenv('RATES_CACHE_BACKEND', 'memcached')

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()
