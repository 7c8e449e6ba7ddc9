# tests/conftest.py
import logging
from datetime import datetime, timedelta, timezone

import httpx
import pytest


@pytest.fixture(autouse=True)
def setup_test_logging(caplog):
    """
    Automatically captures logging at DEBUG level for every test.
    """
    caplog.set_level(logging.DEBUG)


def iso_in(seconds):
    """An Ore-style ``expires`` value the given number of seconds from now."""
    when = datetime.now(timezone.utc) + timedelta(seconds=seconds)
    return when.isoformat()


class FakeOre:
    """
    A scripted Ore server behind an httpx.MockTransport.

    ``auth_responses`` is consumed one per POST to /authenticate; every
    request is recorded in ``requests``.
    """

    def __init__(self, auth_responses=(), versions=None):
        self.auth_responses = list(auth_responses)
        self.versions = versions if versions is not None else {}
        self.requests = []

    @property
    def auth_requests(self):
        return [r for r in self.requests if r.url.path.endswith('/authenticate')]

    def __call__(self, request):
        self.requests.append(request)
        if request.url.path.endswith('/authenticate'):
            resp = self.auth_responses.pop(0)
            if isinstance(resp, Exception):
                raise resp
            return resp

        # /api/v2/projects/<id>/versions
        parts = request.url.path.strip('/').split('/')
        plugin_id = parts[-2]
        if plugin_id not in self.versions:
            return httpx.Response(404)
        offset = int(request.url.params['offset'])
        limit = int(request.url.params['limit'])
        return httpx.Response(200, json={'result': self.versions[plugin_id][offset:offset + limit]})

    def client(self):
        return httpx.Client(transport=httpx.MockTransport(self))


def session_response(token='abc', seconds=3600):
    return httpx.Response(200, json={'session': token, 'expires': iso_in(seconds), 'type': 'public'})
