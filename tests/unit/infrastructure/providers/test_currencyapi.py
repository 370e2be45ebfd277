# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from moneybank.infrastructure.providers.currencyapi import CurrencyAPIProvider
from moneybank.domain.exceptions.currency import ProviderError, ProviderUnavailableError


def test_api_key_sent_as_header():
    provider = CurrencyAPIProvider(api_key='test_key')

    assert provider._client.headers['apikey'] == 'test_key'
    assert provider._client.headers['accept'] == 'application/json'


@pytest.mark.asyncio
async def test_fetch_rates_success():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = {
        'meta': {'last_updated_at': '2025-11-05T23:59:59Z'},
        'data': {
            'EUR': {'code': 'EUR', 'value': 0.86},
            'JPY': {'code': 'JPY', 'value': 153.2},
        }
    }
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response

    provider = CurrencyAPIProvider(api_key='test_key', client=mock_client)
    rates = await provider.fetch_rates('USD', ['EUR', 'JPY'])

    assert rates == {'EUR': 0.86, 'JPY': 153.2}
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://api.currencyapi.com/v3/latest'
    assert call_args[1]['params'] == {'base_currency': 'USD', 'currencies': 'EUR,JPY'}


@pytest.mark.asyncio
async def test_fetch_rates_missing_value():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = {'data': {'EUR': {'code': 'EUR'}}}
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response

    provider = CurrencyAPIProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'Rate value missing' in str(exc_info.value)


@pytest.mark.asyncio
async def test_invalid_api_key_uses_json_message():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    error_response = Mock()
    error_response.status_code = 401
    error_response.text = '{"message": "Invalid authentication credentials"}'
    error_response.json.return_value = {'message': 'Invalid authentication credentials'}
    mock_client.get.side_effect = httpx.HTTPStatusError('Unauthorized', request=Mock(), response=error_response)

    provider = CurrencyAPIProvider(api_key='invalid', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert str(exc_info.value) == 'currencyapi.com HTTP error 401: Invalid authentication credentials'
    assert not isinstance(exc_info.value, ProviderUnavailableError)


@pytest.mark.asyncio
async def test_http_error_with_non_json_body_falls_back_to_text():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    error_response = Mock()
    error_response.status_code = 502
    error_response.text = 'Bad Gateway'
    error_response.json.side_effect = ValueError('not json')
    mock_client.get.side_effect = httpx.HTTPStatusError('Bad Gateway', request=Mock(), response=error_response)

    provider = CurrencyAPIProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailableError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'Bad Gateway' in str(exc_info.value)
