"""Pytest fixtures for seafshare tests."""
import pytest


BASE_URL = "https://cloud.example.org"
SHARE_TOKEN = "abc123"
CSRF_TOKEN = "Xq3VvJ0bN7kP2wZ9"
SESSION_ID = "12345678-1234-1234-1234-123456789012"
UPLOAD_URL = "https://cloud.example.org/seafhttp/upload-aj/0a1b2c3d"


SHARE_PAGE = """<!DOCTYPE html>
<html>
<head><title>Upload Link</title></head>
<body>
<div class="wrapper">
  <form action="" method="post" id="share-passwd-form">
    <input type="hidden" name="csrfmiddlewaretoken" value="{csrf}">
    <input type="hidden" name="token" value="{token}">
    <label for="password">Password</label>
    <input type="password" name="password" id="password" autofocus>
    <button type="submit" class="submit">Submit</button>
  </form>
</div>
</body>
</html>
"""

AUTHENTICATED_PAGE = """<!DOCTYPE html>
<html>
<head>
<script type="text/javascript" src="/media/assets/scripts/dist/runtime.js"></script>
<script type="text/javascript">
var SEAFILE_GLOBAL = {{ siteRoot: '/', lang: 'en' }};
</script>
</head>
<body>
<div id="upload-link-panel"></div>
<script type="text/javascript">
window.uploadLink = {{
    dirName: 'inbox',
    ajaxUrlForUpload: '/ajax/u/d/0123456789abcdef0123/upload/?r={session_id}',
    maxFileSize: 0
}};
</script>
</body>
</html>
"""

WRONG_PASSWORD_PAGE = """<!DOCTYPE html>
<html>
<body>
  <form action="" method="post" id="share-passwd-form">
    <input type="hidden" name="csrfmiddlewaretoken" value="{csrf}">
    <p class="error">Please enter a correct password.</p>
  </form>
  <script type="text/javascript">
  var SEAFILE_GLOBAL = {{ siteRoot: '/' }};
  </script>
</body>
</html>
"""


class FakeTransport:
    """
    HttpTransport double.
    
    Replays queued responses in order (bytes are returned, exceptions are
    raised) and records every call.
    """
    
    def __init__(self, responses=(), base_url=BASE_URL):
        self.base_url = base_url
        self.responses = list(responses)
        self.calls = []
    
    def _next(self):
        if not self.responses:
            raise AssertionError("Unexpected request: no response queued")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, str):
            return response.encode('utf-8')
        return response
    
    @property
    def methods(self):
        return [call[0] for call in self.calls]
    
    async def get(self, url, params=None, headers=None):
        self.calls.append(('GET', url, {'params': params, 'headers': headers}))
        return self._next()
    
    async def post_form(self, url, data, headers=None):
        self.calls.append(('POST', url, {'data': dict(data), 'headers': headers}))
        return self._next()
    
    async def post_multipart(self, url, fields, files):
        self.calls.append(('MULTIPART', url, {'fields': dict(fields), 'files': dict(files)}))
        return self._next()


@pytest.fixture
def share_page():
    """Unauthenticated share page with the password form."""
    return SHARE_PAGE.format(csrf=CSRF_TOKEN, token=SHARE_TOKEN)


@pytest.fixture
def authenticated_page():
    """Page returned after a correct password."""
    return AUTHENTICATED_PAGE.format(session_id=SESSION_ID)


@pytest.fixture
def wrong_password_page():
    """Page returned after a wrong password."""
    return WRONG_PASSWORD_PAGE.format(csrf=CSRF_TOKEN)


@pytest.fixture
def upload_file_path(tmp_path):
    """A 10-byte local file."""
    path = tmp_path / "notes.txt"
    path.write_bytes(b"0123456789")
    return path


@pytest.fixture
def fake_transport():
    """Factory for FakeTransport instances."""
    def make(*responses):
        return FakeTransport(responses)
    return make
