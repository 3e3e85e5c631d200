"""
Content loader for the command line tool.

Reads markup from a file, from standard input or over HTTP(S).
"""

import logging
import sys
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException
from urllib3.util.retry import Retry

from .config import Config

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Raised when the input cannot be read or fetched."""


class ContentLoader:
    """Loads markup text from a path, ``-`` for stdin, or a URL."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the loader.

        Args:
            config: Configuration; the ``network.*`` keys are read
        """
        config = config or Config()
        self.timeout = config.get("network.timeout", 30)
        self.max_retries = config.get("network.max_retries", 3)
        self.user_agent = config.get("network.user_agent")
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """HTTP session with retries, created on first use."""
        if self._session is None:
            session = requests.Session()
            if self.user_agent:
                session.headers['User-Agent'] = self.user_agent
            session.headers['Accept'] = 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8'

            retry_strategy = Retry(
                total=self.max_retries,
                backoff_factor=0.3,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["HEAD", "GET"]
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount('http://', adapter)
            session.mount('https://', adapter)

            self._session = session
            logger.debug(f"HTTP session created (timeout: {self.timeout}, max_retries: {self.max_retries})")
        return self._session

    @staticmethod
    def is_url(source: str) -> bool:
        return source.startswith(("http://", "https://"))

    def load(self, source: Optional[str]) -> str:
        """
        Load markup text.

        Args:
            source: File path, URL, or None / ``-`` for standard input

        Returns:
            str: The text

        Raises:
            LoaderError: If the source cannot be read
        """
        if source is None or source == "-":
            logger.debug("Reading standard input")
            return sys.stdin.read()
        if self.is_url(source):
            return self.fetch(source)
        return self.read_file(source)

    def read_file(self, path: str) -> str:
        logger.debug(f"Reading {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LoaderError(f"Cannot read {path}: {e}") from e

    def fetch(self, url: str) -> str:
        """
        Fetch a URL.

        Raises:
            LoaderError: On network errors and error status codes
        """
        logger.debug(f"GET request to {url}")
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except RequestException as e:
            raise LoaderError(f"Error fetching {url}: {e}") from e
        return response.text

    def close(self) -> None:
        """Close the HTTP session, if one was opened."""
        if self._session is not None:
            self._session.close()
            self._session = None
