"""
Shared helpers for HTTP-level tests.
"""

BASE_URL = "https://gloapi.gitkraken.com/v1/glo"
BASE_PATH = "/v1/glo"


def find_calls(mocked, method: str, path: str):
    """
    Return (url, call) pairs recorded by aioresponses for a method and URL path.

    aioresponses keys requests by normalized URL, so the query string is
    compared through `url.query` rather than by raw text.
    """
    return [
        (url, call)
        for (recorded_method, url), calls in mocked.requests.items()
        if recorded_method == method and url.path == f"{BASE_PATH}/{path}"
        for call in calls
    ]
