"""Tests for the loguru configuration."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest
from loguru import logger

from floorball_cal.logging.setup import quiet_transport_filter, setup_logging


def _record(name: str, level: str) -> dict:
    return {"name": name, "level": SimpleNamespace(no=logger.level(level).no)}


@pytest.fixture
def filtered_sink():
    """A temporary sink behind the transport filter, collecting (name, level, message)."""
    setup_logging("INFO")
    captured: list[tuple[str, str, str]] = []

    def sink(message) -> None:
        record = message.record
        captured.append((record["name"], record["level"].name, record["message"]))

    sink_id = logger.add(sink, level="INFO", filter=quiet_transport_filter)
    yield captured
    logger.remove(sink_id)


def test_standard_logging_is_intercepted(filtered_sink):
    logging.getLogger("floorball_cal.tests").warning("upstream slow")
    assert ("floorball_cal.tests", "WARNING", "upstream slow") in filtered_sink


def test_intercepted_records_keep_stdlib_logger_name(filtered_sink):
    logging.getLogger("httpx").warning("connection reset")
    assert filtered_sink == [("httpx", "WARNING", "connection reset")]


def test_httpx_info_lines_are_dropped(filtered_sink):
    logging.getLogger("httpx").info('HTTP Request: GET https://saisonmanager.de/ "HTTP/1.1 200 OK"')
    logging.getLogger("httpcore.connection").info("connect_tcp.started")
    assert filtered_sink == []


def test_transport_debug_records_are_dropped_below_debug_level():
    assert quiet_transport_filter(_record("httpx._client", "INFO")) is False
    assert quiet_transport_filter(_record("httpcore.connection", "DEBUG")) is False
    assert quiet_transport_filter(_record("httpx._client", "WARNING")) is True
    assert quiet_transport_filter(_record("floorball_cal.scrapers.base_scraper", "INFO")) is True
