"""Shared fixtures: no configured key by default, and canned requests responses."""

from __future__ import annotations

import json

import pytest
import requests
from pydantic import SecretStr

from gsa_perdiem.config import settings


def make_response(status_code: int, body, url: str = "https://api.gsa.gov/travel/perdiem") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(body).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    resp.url = url
    return resp


@pytest.fixture(autouse=True)
def _no_configured_key(monkeypatch):
    monkeypatch.setattr(settings, "GSA_API_KEY", SecretStr(""))


@pytest.fixture
def configured_key(monkeypatch):
    monkeypatch.setattr(settings, "GSA_API_KEY", SecretStr("cfg-key-123"))
    return "cfg-key-123"


RATES_BODY = {
    "request": None,
    "errors": None,
    "rates": [
        {
            "oconusInfo": None,
            "rate": [{"city": "District of Columbia", "zip": None, "meals": 79}],
            "state": "DC",
            "year": 2025,
            "isOconus": "false",
        }
    ],
    "version": None,
}

ZIP_MAPPINGS_BODY = [
    {"Zip": "20001", "DID": "81", "ST": "DC"},
    {"Zip": "20002", "DID": "81", "ST": "DC"},
]
