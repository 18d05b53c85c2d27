"""Reading override sources from local files or remote URLs."""

import logging
from pathlib import Path
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from pref_overrides.config import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    RETRY_STATUS_CODES,
)
from pref_overrides.lib.overrides.errors import SourceError

logger = logging.getLogger(__name__)


class SourceFetcher:
    """Fetches override source text from a path or an http(s) URL."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: int = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
    ):
        """
        Initialize the fetcher.

        Args:
            user_agent (str): User agent string to use for requests
            timeout (int): Request timeout in seconds
            retries (int): Number of retries for failed requests
            backoff_factor (float): Backoff factor for retry delay
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.retries = retries
        self.backoff_factor = backoff_factor
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create and configure a requests session."""
        session = requests.Session()

        # Configure retries with backoff
        retry_strategy = Retry(
            total=self.retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=RETRY_STATUS_CODES,
            allowed_methods=["GET", "HEAD"],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "text/plain,application/javascript,*/*;q=0.8",
            }
        )

        return session

    @staticmethod
    def is_remote(location: str) -> bool:
        """Whether the location is an http(s) URL rather than a local path."""
        return urlparse(location).scheme in ("http", "https")

    def fetch(self, location: str) -> str:
        """
        Return the text of an override source.

        Args:
            location (str): Local file path or http(s) URL

        Returns:
            str: The source text

        Raises:
            SourceError: If the source cannot be read or downloaded
        """
        if self.is_remote(location):
            return self._fetch_remote(location)
        return self._fetch_local(location)

    def _fetch_local(self, location: str) -> str:
        path = Path(location)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceError(f"Cannot read {path}: {e}") from e

        logger.debug(f"Read {len(text)} characters from {path}")
        return text

    def _fetch_remote(self, url: str) -> str:
        if self.session is None:
            raise SourceError("Fetcher is closed")

        logger.info(f"Downloading overrides from {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise SourceError(f"Failed to download {url}: {e}") from e

        return response.text

    def close(self) -> None:
        """Close the session and release resources."""
        if self.session:
            self.session.close()
            self.session = None

    def __enter__(self):
        """Context manager entry point."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit point."""
        self.close()
