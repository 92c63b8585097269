"""Anti-forgery token extraction from the share password form."""
from bs4 import BeautifulSoup

from ..exceptions import FormNotFoundError, InputNotFoundError, TokenMissingError

FORM_SELECTOR = 'form#share-passwd-form'


def extract_form_token(doc: BeautifulSoup) -> str:
    """
    Read the anti-forgery token from the share password form.
    
    The token is the value of the first input inside the form.
    
    Raises:
        FormNotFoundError: No password form on the page (bad share token,
            or the share has no password)
        InputNotFoundError: The form has no input element
        TokenMissingError: The first input has no value attribute
    """
    form = doc.select_one(FORM_SELECTOR)
    if form is None:
        raise FormNotFoundError("Share password form not found")
    
    field = form.find('input')
    if field is None:
        raise InputNotFoundError("Share password form has no input")
    
    value = field.get('value')
    if value is None:
        raise TokenMissingError("Share password form carries no csrfmiddlewaretoken")
    
    return value
