"""URL builders for the share-folder endpoints."""


def share_url(base_url: str, token: str) -> str:
    """Share landing page; the password form posts back to the same URL."""
    return f"{base_url}/u/d/{token}/"


def upload_link_url(base_url: str, token: str) -> str:
    """AJAX endpoint that hands out one-time upload URLs."""
    return f"{base_url}/ajax/u/d/{token}/upload/"
