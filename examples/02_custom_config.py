"""
Custom configuration: another Seafile server, proxy, timeouts
"""
import asyncio

from seafshare import ShareClient, APIConfig, ProxyConfig, TimeoutConfig


async def main():
    config = APIConfig(
        base_url="https://seafile.example.org",
        proxy=ProxyConfig(url="http://proxy.local:3128"),
        timeout=TimeoutConfig(connect=10.0),  # total stays unbounded for big files
        extra_headers={'Accept-Language': 'en'},
    )
    
    async with ShareClient(config) as client:
        result = await client.upload("abc123def456", "dataset.tar.gz", "secret")
        print(result.as_line())


if __name__ == "__main__":
    asyncio.run(main())
