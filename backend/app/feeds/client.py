from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Tuple

import requests
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from app.core.exceptions import FeedError
from app.core.logger import setup_logger

logger = setup_logger("feeds")


def is_retryable(error: BaseException) -> bool:
    """Retry connection errors, timeouts and 5xx responses, never 4xx."""
    if isinstance(error, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(error, requests.HTTPError):
        return error.response is not None and error.response.status_code >= 500
    return False


class FeedClient:
    """Fetches the Android and iOS top-100 game feeds."""

    def __init__(
            self,
            android_url: str,
            ios_url: str,
            timeout: float = 10.0,
            retry_attempts: int = 3,
            retry_wait: float = 1.0,
            session: Optional[requests.Session] = None
    ):
        self.android_url = android_url
        self.ios_url = ios_url
        self.timeout = timeout
        self.retry_attempts = max(1, retry_attempts)
        self.retry_wait = retry_wait
        self.session = session or requests.Session()

    def _get(self, url: str) -> requests.Response:
        logger.debug(f"Requesting feed {url}")
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response

    def fetch(self, url: str) -> Any:
        retrying = Retrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_wait, max=10),
            retry=retry_if_exception(is_retryable),
            reraise=True
        )
        try:
            response = retrying(self._get, url)
        except requests.RequestException as e:
            logger.error(f"Error fetching feed {url}: {str(e)}")
            raise FeedError(f"Error fetching feed: {str(e)}", url=url) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Feed {url} did not return valid JSON: {str(e)}")
            raise FeedError("Feed did not return valid JSON", url=url) from e

        logger.info(f"Fetched feed {url}")
        return data

    def fetch_all(self) -> Tuple[Any, Any]:
        """
        Fetch both feeds in parallel and return ``(android, ios)``.

        Either failure aborts the whole operation.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            android = executor.submit(self.fetch, self.android_url)
            ios = executor.submit(self.fetch, self.ios_url)
            return android.result(), ios.result()
