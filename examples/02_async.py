"""
Async usage - query with the aiohttp client
"""
import asyncio
import os

from diapy import APIConfig, AsyncAPIClient, Credentials


async def main():
    credentials = Credentials(os.environ["DIA_USERNAME"], os.environ["DIA_PASSWORD"])
    config = APIConfig.for_domain(os.environ.get("DIA_DOMAIN", "salsa.democracyinaction.org"))

    async with AsyncAPIClient(credentials, config) as dia:
        supporters = await dia.get("supporter", {
            "where": "Email LIKE '%@domain.org'",
            "limit": 10,
        })
        for supporter in supporters:
            print(supporter.get("Email"))


if __name__ == "__main__":
    asyncio.run(main())
