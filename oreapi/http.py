import contextlib

import httpx

from . import config

#: Sent with every request so that no proxy hands us a stale answer
NO_CACHE_HEADERS = {
    'Cache-Control': 'no-store,max-age=0,no-cache',
    'Pragma': 'no-cache',
    'Expires': '0',
}


def default_headers():
    return {**NO_CACHE_HEADERS, 'User-Agent': config.USER_AGENT}


@contextlib.contextmanager
def client():
    with httpx.Client(headers=default_headers(), timeout=config.TIMEOUT) as client:
        yield client
