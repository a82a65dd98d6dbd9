from typing import Dict, Optional

import httpx
from loguru import logger

from floorball_cal.config.settings import settings
from floorball_cal.utils.misc_utils import build_url
from .html_document import Document


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class NetworkError(ScraperError):
    """Exception raised when the upstream site cannot be reached (DNS, connect, timeout)."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Request to {path} failed: {cause}")


class FetchError(ScraperError):
    """Exception raised when the upstream site answers with a non-success status."""

    def __init__(self, path: str, status_code: int):
        self.path = path
        self.status_code = status_code
        super().__init__(f"Request to {path} failed with status {status_code}")


class TeamNotFoundError(ScraperError):
    """Exception raised when a team id is not listed on its club's page."""

    def __init__(self, club_id: str, team_id: str):
        self.club_id = club_id
        self.team_id = team_id
        super().__init__(f"Team {team_id} not found for club {club_id}")


class BaseScraper:
    """Fetches pages from the upstream site and parses them into documents.

    Failures are never retried: transport problems surface as NetworkError,
    non-2xx answers as FetchError.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ):
        self.base_url = base_url or settings.base_url
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
        )
        self.client.headers.update(self.default_headers())

    @staticmethod
    def default_headers() -> Dict[str, str]:
        return {
            "User-Agent": settings.user_agent,
            "Accept-Language": settings.accept_language,
        }

    def build_url(self, path: str) -> str:
        return build_url(path, self.base_url)

    async def fetch_document(self, path: str) -> Document:
        """Fetches ``path`` relative to the site origin and parses the HTML body."""
        url = self.build_url(path)
        logger.debug(f"Fetching {url}")
        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Request error while fetching {path}: {e!r}")
            raise NetworkError(path, e) from e

        if not response.is_success:
            logger.warning(f"Request to {path} answered with status {response.status_code}")
            raise FetchError(path, response.status_code)

        logger.debug(f"Request successful: {response.status_code} for {url}")
        return Document.parse(response.text)

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug("Closed HTTP client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
