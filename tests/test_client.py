"""
TrailClient tests with a mocked requests session.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from usdc_trail.config.settings import DEFAULT_REQUEST_TIMEOUT_SEC
from usdc_trail.core.exceptions import FetchError
from usdc_trail.ingestion.client import TrailClient

BASE_URL = "https://usdc.example.test/api/usdcTrail/transactions"
BASE_PARAMS = {"txnType": "MAINNET", "showPending": "false", "txnHash": ""}


def _client_with_body(body):
    session = MagicMock()
    resp = MagicMock()
    resp.json.return_value = body
    session.get.return_value = resp
    return TrailClient(BASE_URL, BASE_PARAMS, timeout=5, session=session), session


def test_fetch_page_sends_offset_and_limit(make_item):
    body = {"resources": [make_item(0), make_item(1)], "metadata": {"count": 2}}
    client, session = _client_with_body(body)

    records = client.fetch_page(2000, 1000)

    assert [r.id for r in records] == ["tx-0", "tx-1"]
    session.get.assert_called_once_with(
        BASE_URL,
        params={**BASE_PARAMS, "offset": 2000, "limit": 1000},
        timeout=5,
    )


def test_fetch_page_ignores_metadata_count(make_item):
    body = {"resources": [make_item(0)], "metadata": {"count": 99999}}
    client, _ = _client_with_body(body)
    assert len(client.fetch_page(0, 1000)) == 1


def test_fetch_page_null_resources_is_empty_page():
    client, _ = _client_with_body({"resources": None, "metadata": {"count": 0}})
    assert client.fetch_page(0, 1000) == []


def test_fetch_page_network_failure_is_fetch_error():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("connection refused")
    client = TrailClient(BASE_URL, BASE_PARAMS, session=session)

    with pytest.raises(FetchError) as exc_info:
        client.fetch_page(0, 1000)
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
    assert exc_info.value.offset == 0


def test_fetch_page_http_error_status_is_fetch_error():
    session = MagicMock()
    resp = MagicMock()
    resp.raise_for_status.side_effect = requests.HTTPError("502 Server Error")
    session.get.return_value = resp
    client = TrailClient(BASE_URL, BASE_PARAMS, session=session)

    with pytest.raises(FetchError, match="502"):
        client.fetch_page(1000, 1000)


def test_fetch_page_malformed_json_is_fetch_error():
    session = MagicMock()
    resp = MagicMock()
    resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    session.get.return_value = resp
    client = TrailClient(BASE_URL, BASE_PARAMS, session=session)

    with pytest.raises(FetchError, match="invalid JSON") as exc_info:
        client.fetch_page(0, 1000)
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_fetch_page_missing_resources_is_fetch_error():
    client, _ = _client_with_body({"metadata": {"count": 0}})
    with pytest.raises(FetchError, match="no resources"):
        client.fetch_page(0, 1000)


def test_fetch_page_record_missing_field_is_fetch_error(make_item):
    item = make_item(0)
    del item["burnHash"]
    client, _ = _client_with_body({"resources": [item]})
    with pytest.raises(FetchError, match="burnHash"):
        client.fetch_page(0, 1000)


def test_fetch_page_validates_offset_and_limit():
    client, session = _client_with_body({"resources": []})
    with pytest.raises(ValueError):
        client.fetch_page(-1, 1000)
    with pytest.raises(ValueError):
        client.fetch_page(0, 0)
    session.get.assert_not_called()


def test_close_leaves_injected_session_open():
    session = MagicMock()
    with TrailClient(BASE_URL, BASE_PARAMS, session=session):
        pass
    session.close.assert_not_called()


def test_default_timeout_comes_from_settings():
    assert TrailClient(BASE_URL, session=MagicMock()).timeout == DEFAULT_REQUEST_TIMEOUT_SEC
