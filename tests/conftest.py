import json

import pytest
import requests


def make_response(status=200, body=b"", url="https://api.example.com/"):
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.headers["Content-Type"] = "application/json"
    resp.url = url
    return resp


class FakeSession(requests.Session):
    """Session whose send() hands the prepared request to a responder instead of the network."""

    def __init__(self, transport):
        super().__init__()
        self.trust_env = False
        self.transport = transport

    def send(self, request, **kwargs):
        self.transport.calls.append((request, kwargs))
        result = self.transport.responder(request)
        if isinstance(result, BaseException):
            raise result
        return result


class FakeTransport:
    def __init__(self):
        self.calls = []
        self.responder = lambda request: make_response(200, {})

    def respond(self, status=200, body=b""):
        self.responder = lambda request: make_response(status, body, url=request.url)

    def fail(self, exc):
        self.responder = lambda request: exc

    def session_factory(self):
        return FakeSession(self)

    @property
    def last_request(self):
        return self.calls[-1][0]


@pytest.fixture
def transport():
    return FakeTransport()
