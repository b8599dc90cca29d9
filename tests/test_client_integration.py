import httpx
import pytest

from ip_sonar import ApiError, IpSonarClient, LocaleCode, LookupParameters
from tests.fake_api import API_KEY, app


def make_client(api_key: str | None = API_KEY, **kwargs) -> IpSonarClient:
    """Client wired to the in-process fake API."""
    return IpSonarClient(api_key=api_key, transport=httpx.ASGITransport(app=app), **kwargs)


@pytest.mark.asyncio
async def test_lookup_my_ip_returns_caller_record() -> None:
    client = make_client()

    result = await client.lookup_my_ip()

    assert result.ip == "127.0.0.1"
    assert result.city_name == "Berlin"
    assert result.is_in_eu is True


@pytest.mark.asyncio
async def test_lookup_ip_with_fields_and_locale() -> None:
    client = make_client(default_params=LookupParameters(locale_code=LocaleCode.de))

    result = await client.lookup_ip("8.8.8.8", params={"fields": "ip,country_name"})

    assert result.model_dump(exclude_none=True) == {"ip": "8.8.8.8", "country_name": "Vereinigte Staaten"}


@pytest.mark.asyncio
async def test_lookup_ipv6_address() -> None:
    client = make_client()

    result = await client.lookup_ip("2001:4860:4860::8888")

    assert result.ip == "2001:4860:4860::8888"
    assert result.country_code == "US"


@pytest.mark.asyncio
async def test_unknown_address_maps_to_api_error() -> None:
    client = make_client()

    with pytest.raises(ApiError) as exc_info:
        await client.lookup_ip("203.0.113.10")

    assert exc_info.value.status == 404
    assert exc_info.value.message == "IP address not found"
    assert exc_info.value.body == {"message": "IP address not found"}


@pytest.mark.asyncio
async def test_missing_api_key_is_rejected() -> None:
    client = make_client(api_key=None)

    with pytest.raises(ApiError) as exc_info:
        await client.lookup_my_ip()

    assert exc_info.value.status == 401
    assert exc_info.value.api_message == "Invalid API key"


@pytest.mark.asyncio
async def test_batch_lookup_returns_records_in_input_order() -> None:
    client = make_client()

    result = await client.batch_lookup(["1.1.1.1", "8.8.8.8", "198.51.100.1"], params={"fields": "ip,country_code"})

    assert [record.ip for record in result.data] == ["1.1.1.1", "8.8.8.8", "198.51.100.1"]
    assert [record.country_code for record in result.data] == ["AU", "US", None]
