import asyncio

from ip_sonar import ClientConfiguration, IpSonarError, LookupParameters, create_client
from ip_sonar.logger import configure_logging, logger


async def main() -> None:
    """Run a self lookup, a single lookup and a batch lookup against the live API.

    Set IP_SONAR_API_KEY to authenticate; without it the API's anonymous limits apply.
    """
    client = create_client(ClientConfiguration.from_env())

    try:
        my_ip = await client.lookup_my_ip(
            params=LookupParameters(fields="ip,country_code,country_name,city_name,timezone", locale_code="en")
        )
        logger.info(
            f"Your IP ip={my_ip.ip} country={my_ip.country_name} ({my_ip.country_code}) "
            f"city={my_ip.city_name} timezone={my_ip.timezone}"
        )
    except IpSonarError as exc:
        logger.error(f"Self lookup failed kind={exc.kind.value} status={exc.status} error={exc}")

    try:
        google_dns = await client.lookup_ip("8.8.8.8", params={"fields": "ip,country_name,city_name,latitude,longitude"})
        logger.info(
            f"Google DNS ip={google_dns.ip} location={google_dns.city_name}, {google_dns.country_name} "
            f"coordinates={google_dns.latitude},{google_dns.longitude}"
        )
    except IpSonarError as exc:
        logger.error(f"Lookup failed kind={exc.kind.value} status={exc.status} error={exc}")

    try:
        batch = await client.batch_lookup(
            ["8.8.8.8", "1.1.1.1", "208.67.222.222"],
            params={"fields": "ip,country_name,city_name"},
        )
        for index, record in enumerate(batch.data, start=1):
            logger.info(f"Batch result {index}. {record.ip}: {record.city_name}, {record.country_name}")
    except IpSonarError as exc:
        logger.error(f"Batch lookup failed kind={exc.kind.value} status={exc.status} error={exc}")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
