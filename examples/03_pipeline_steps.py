"""
Run the pipeline steps by hand on one ShareSession
"""
import asyncio

from seafshare import ShareSession
from seafshare.core.share import fetch, extract_form_token, submit_password, extract_session_id
from seafshare.core.upload import get_upload_url, upload_file


async def main():
    token = "abc123def456"
    
    async with ShareSession(token) as session:
        page = await fetch(session, token)
        csrf = extract_form_token(page)
        
        page = await submit_password(session, token, csrf, "secret")
        session_id = extract_session_id(page)
        print(f"Upload session: {session_id}")
        
        url = await get_upload_url(session, token, session_id)
        result = await upload_file(session, url, "notes.txt")
        print(result.as_line())


if __name__ == "__main__":
    asyncio.run(main())
