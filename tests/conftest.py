import json

import httpx
import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("GITHUB_PAT", "PENUMBRA_VERSION", "GITHUB_API_URL", "DISPATCH_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was handed."""

    def __init__(self, status_code=204, text="", exc=None):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if exc is not None:
                raise exc
            return httpx.Response(status_code, text=text)

        super().__init__(handler)

    def body(self, index=0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def recording_transport():
    return RecordingTransport
