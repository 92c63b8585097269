"""
Upload a file into a password-protected share
"""
import asyncio
import getpass
import logging

from seafshare import ShareClient, InvalidCredentialsError, setup_logging


async def main():
    setup_logging(logging.INFO)
    password = getpass.getpass("Share password: ")
    
    async with ShareClient() as client:
        try:
            result = await client.upload("abc123def456", "report.pdf", password)
        except InvalidCredentialsError:
            print("Wrong password or share link")
            return
        
        print(f"Uploaded: {result.name} ({result.size} bytes), id {result.id}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
