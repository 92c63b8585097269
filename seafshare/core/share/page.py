"""
Share page retrieval and password submission.

Both stages talk to the same URL; the server answers the POST with the
authenticated page whether or not the password was right.
"""
from typing import Union

from bs4 import BeautifulSoup, ParserRejectedMarkup

from ..api.protocols import HttpTransport
from ..api.urls import share_url
from ..exceptions import ParseError
from ..logging import get_logger

logger = get_logger('seafshare.share.page')

CSRF_FIELD = 'csrfmiddlewaretoken'


def parse_html(content: Union[bytes, str]) -> BeautifulSoup:
    """
    Parse a response body as an HTML document.
    
    Raw bodies are handed to BeautifulSoup undecoded; it takes the encoding
    from a BOM or <meta charset> and otherwise guesses, so stray bytes in a
    page never make it unreadable.
    
    Args:
        content: Raw body or already decoded text
    
    Returns:
        Parsed document
    
    Raises:
        ParseError: If the body is empty or rejected by the parser
    """
    if not content.strip():
        raise ParseError("Page body is empty")
    
    try:
        return BeautifulSoup(content, 'html.parser')
    except ParserRejectedMarkup as e:
        raise ParseError(f"Page could not be parsed as HTML: {e}") from e


async def fetch(session: HttpTransport, token: str) -> BeautifulSoup:
    """
    Fetch the share landing page.
    
    Cookies the server sets here stay in the session's jar; the later
    stages need them.
    
    Raises:
        NetworkError: On transport failure or error status
        ParseError: If the body is not HTML
    """
    url = share_url(session.base_url, token)
    logger.info(f"Fetching share page {url}")
    body = await session.get(url)
    return parse_html(body)


async def submit_password(
    session: HttpTransport,
    token: str,
    anti_forgery_token: str,
    password: str
) -> BeautifulSoup:
    """
    Post the share password form.
    
    The password is forwarded as-is, empty strings included.
    
    Args:
        session: Transport that fetched the share page
        token: Share token
        anti_forgery_token: Value recovered by extract_form_token()
        password: Plaintext share password
        
    Returns:
        The page the server answers with (authenticated or not)
    """
    url = share_url(session.base_url, token)
    logger.info("Submitting share password")
    body = await session.post_form(
        url,
        {
            CSRF_FIELD: anti_forgery_token,
            'token': token,
            'password': password,
        },
        headers={'Referer': url}
    )
    return parse_html(body)
