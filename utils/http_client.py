"""Thin HTTP client: one attempt per call, JSON decoding, typed errors."""
import time
import logging
import requests

logger = logging.getLogger("btctarget.http")


class APIError(Exception):
    """API request error with status code and response body."""
    def __init__(self, message, status_code=None, response_body=None, source=None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.source = source


class HTTPClient:
    """Session-backed GET client.

    There is no retry loop here: a failed request surfaces immediately and the
    next poll tick is the retry.
    """

    def __init__(self, base_url, timeout=15, user_agent="BTCTargetTracker/1.0"):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": "application/json",
        })

    def get(self, path="", params=None):
        """GET a JSON document. Raises APIError on any failure."""
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url

        try:
            start = time.time()
            resp = self.session.get(url, params=params, timeout=self.timeout)
            latency = int((time.time() - start) * 1000)
            logger.debug(f"GET {url} → {resp.status_code} ({latency}ms)")
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request error for {url}: {e}", source=url) from e

        if resp.status_code != 200:
            raise APIError(
                f"HTTP {resp.status_code} from {url}",
                status_code=resp.status_code,
                response_body=resp.text,
                source=url,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON from {url}", status_code=200,
                           response_body=resp.text, source=url) from e

    def close(self):
        self.session.close()
