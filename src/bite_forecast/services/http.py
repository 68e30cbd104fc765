"""
Shared HTTP session with retry and backoff.

Forecast and weather-history requests go through one ``requests.Session``
mounting ``TimeoutHTTPAdapter``. The adapter retries 429 and 5xx replies
with exponential backoff and gives every request a timeout unless the
caller picked one.

Usage::

    from bite_forecast.services.http import get_json

    payload = get_json(OPENWEATHER_FORECAST_URL, params={"lat": 46.2, "lon": -93.6})
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

USER_AGENT = "bite-forecast/0.1"

#: Three retries at 1s, 2s, 4s; OpenWeather rate limits surface as 429.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 20  # seconds


class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTPAdapter that fills in a timeout when the request carries none."""

    def __init__(self, *args: Any, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(
        self,
        request: requests.PreparedRequest,
        stream: bool = False,
        timeout: Any = None,
        verify: bool | str = True,
        cert: Any = None,
        proxies: Any = None,
    ) -> requests.Response:
        return super().send(
            request,
            stream=stream,
            timeout=self.timeout if timeout is None else timeout,
            verify=verify,
            cert=cert,
            proxies=proxies,
        )


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """JSON session for the forecast and history APIs, mounted on both schemes."""
    adapter = TimeoutHTTPAdapter(max_retries=retry or DEFAULT_RETRY, timeout=timeout)
    s = requests.Session()
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return s


#: Module-level session shared by all datasources.
session: requests.Session = create_session()


def get_json(url: str, params: dict[str, Any] | None = None) -> Any:
    """
    GET a URL through the shared session and decode the JSON body.

    Raises:
        requests.HTTPError: Non-2xx response after retries.
    """
    resp = session.get(url, params=params)
    logger.debug("GET %s -> %s", resp.url, resp.status_code)
    resp.raise_for_status()
    return resp.json()
