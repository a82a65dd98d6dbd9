from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, Tuple, Union

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from floorball_cal.scrapers.saisonmanager_scraper import SaisonManagerScraper  # noqa: E402

BASE_URL = "https://saisonmanager.de"

PageSpec = Union[str, Tuple[int, str], Exception]


def _handler(pages: Dict[str, PageSpec], seen: list) -> Callable[[httpx.Request], httpx.Response]:
    def handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        page = pages.get(request.url.path)
        if page is None:
            return httpx.Response(404, text="not found")
        if isinstance(page, Exception):
            raise page
        if isinstance(page, tuple):
            status, body = page
            return httpx.Response(status, text=body)
        return httpx.Response(200, text=page, headers={"Content-Type": "text/html; charset=utf-8"})

    return handle


@pytest.fixture
def make_scraper():
    """Builds a scraper whose client answers from an in-memory ``{path: page}`` map.

    The list of requests the client received is exposed as ``scraper.requests``.
    """

    def factory(pages: Dict[str, PageSpec]) -> SaisonManagerScraper:
        seen: list = []
        client = httpx.AsyncClient(transport=httpx.MockTransport(_handler(pages, seen)))
        scraper = SaisonManagerScraper(client=client, base_url=BASE_URL)
        scraper.requests = seen
        return scraper

    return factory
