# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from moneybank.infrastructure.providers.fixerio import FixerIOProvider
from moneybank.domain.exceptions.currency import ProviderError, ProviderUnavailableError


def mock_client_returning(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


def mock_client_failing_with(status_code, text):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    error_response = Mock()
    error_response.status_code = status_code
    error_response.text = text
    mock_client.get.side_effect = httpx.HTTPStatusError('HTTP error', request=Mock(), response=error_response)
    return mock_client


@pytest.mark.asyncio
async def test_fetch_rates_success_returns_floats():
    mock_client = mock_client_returning({
        'success': True,
        'base': 'USD',
        'rates': {'EUR': 0.85, 'JPY': 110}
    })

    provider = FixerIOProvider(api_key='test_key', client=mock_client)

    rates = await provider.fetch_rates('USD', ['EUR', 'JPY'])

    assert rates == {'EUR': 0.85, 'JPY': 110.0}
    assert all(isinstance(rate, float) for rate in rates.values())
    mock_client.get.assert_called_once()
    call_args = mock_client.get.call_args
    assert 'http://data.fixer.io/api/latest' in call_args[0][0]
    assert call_args[1]['params']['access_key'] == 'test_key'
    assert call_args[1]['params']['base'] == 'USD'
    assert call_args[1]['params']['symbols'] == 'EUR,JPY'


@pytest.mark.asyncio
async def test_fetch_rates_without_symbols_asks_for_everything():
    mock_client = mock_client_returning({'success': True, 'rates': {'EUR': 0.85}})

    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    await provider.fetch_rates('USD')

    assert 'symbols' not in mock_client.get.call_args[1]['params']


@pytest.mark.asyncio
async def test_fetch_rates_api_returns_error():
    mock_client = mock_client_returning({
        'success': False,
        'error': {
            'code': 101,
            'info': 'Invalid API key'
        }
    })

    provider = FixerIOProvider(api_key="invalid_key", client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'Invalid API key' in str(exc_info.value)
    assert not isinstance(exc_info.value, ProviderUnavailableError)


@pytest.mark.asyncio
async def test_fetch_rates_empty_rates_in_response():
    mock_client = mock_client_returning({'success': True, 'rates': {}})

    provider = FixerIOProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'returned no rates for USD' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_malformed_rate():
    mock_client = mock_client_returning({'success': True, 'rates': {'EUR': 'n/a'}})

    provider = FixerIOProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'malformed rate' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_http_500_error_is_retryable():
    mock_client = mock_client_failing_with(500, 'Internal Server Error')

    provider = FixerIOProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailableError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'HTTP error 500' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_http_429_rate_limit():
    mock_client = mock_client_failing_with(429, 'Rate limit exceeded')

    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderUnavailableError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert '429' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_http_401_is_permanent():
    mock_client = mock_client_failing_with(401, 'Unauthorized')

    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert not isinstance(exc_info.value, ProviderUnavailableError)
    assert 'Unauthorized' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_network_timeout():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')
    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderUnavailableError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'request failed' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_rates_connection_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Connection refused')
    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderUnavailableError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'request failed' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_rates_invalid_json_response():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status = Mock()

    mock_response.json.side_effect = ValueError('Invalid JSON')
    mock_client.get.return_value = mock_response

    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates('USD', ['EUR'])

    assert 'parsing error' in str(exc_info.value).lower()


# ============================================================================
# TEST: Edge Cases
# ============================================================================

@pytest.mark.asyncio
async def test_fetch_rates_with_very_small_rate():
    mock_client = mock_client_returning({'success': True, 'rates': {'BTC': 0.00001234}})

    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    rates = await provider.fetch_rates('USD', ['BTC'])

    assert rates['BTC'] == 0.00001234


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    provider = FixerIOProvider(api_key='test_key', client=mock_client)
    await provider.close()

    mock_client.aclose.assert_awaited_once()


def test_provider_identity():
    provider = FixerIOProvider(api_key='test_key', client=AsyncMock(spec=httpx.AsyncClient))

    assert provider.name == 'fixerio'
    assert provider.timeout == 10
