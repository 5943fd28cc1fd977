import json

import pytest

from scbtables.errors import TransportError


class FakeTransport:
    """In-memory Transport returning canned bodies and recording calls."""

    def __init__(self, metadata_body=None, data_body=None):
        self.metadata_body = metadata_body
        self.data_body = data_body
        self.calls = []

    def get(self, url, headers):
        self.calls.append(("GET", url, dict(headers), None))
        if self.metadata_body is None:
            raise TransportError(f"GET {url} returned an empty body")
        return self.metadata_body

    def post(self, url, headers, body):
        self.calls.append(("POST", url, dict(headers), body))
        if self.data_body is None:
            raise TransportError(f"POST {url} returned an empty body")
        return self.data_body


@pytest.fixture
def metadata():
    return {
        "title": "Import Price Index",
        "variables": [
            {"code": "SPIN2007", "time": False, "values": ["B-E", "B"]},
            {"code": "Tid", "time": True, "values": ["2020M01", "2020M02"]},
        ],
    }


@pytest.fixture
def data():
    return {
        "columns": [
            {"code": "SPIN2007", "text": "product group", "type": "d"},
            {"code": "ContentsCode", "text": "Price index", "type": "c"},
            {"code": "Tid", "text": "month", "type": "t"},
            {"code": "Change", "text": "Monthly change", "type": "c"},
        ],
        "data": [
            {"key": ["B-E", "2020M01"], "values": ["123.4", "0.5"]},
            {"key": ["B-E", "2020M02"], "values": ["124.1", ".."]},
            {"key": ["B", "2020M01"], "values": ["98.0", "-1.2"]},
        ],
    }


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def fake_transport(metadata, data):
    return FakeTransport(
        metadata_body="\ufeff" + json.dumps(metadata),
        data_body="\ufeff" + json.dumps(data),
    )
