"""
credentials.py
--------------
Credential descriptor for the GSA Per Diem API.
Declares the API key field, the header authentication rule and the self-test request.
"""
import logging
from typing import Optional

from .config import BASE_URL, settings
from .errors import MissingCredentialError
from .schemas import Credential, CredentialField, ResolvedRequest

logger = logging.getLogger(__name__)

NAME = "gsaPerDiemApi"
DISPLAY_NAME = "GSA Per Diem API"
DOCUMENTATION_URL = "https://open.gsa.gov/api/perdiem/"

AUTH_HEADER = "X-API-KEY"
TEST_PATH = "/v2/rates/conus/zipcodes/2024"

PROPERTIES = [
    CredentialField(
        display_name="API Key",
        name="apiKey",
        password=True,
        description="Your GSA API key. Register for a free key at https://open.gsa.gov/api/perdiem/",
    ),
]


def describe() -> dict:
    """Serializable descriptor for host UIs. Never carries a key value."""
    return {
        "name": NAME,
        "display_name": DISPLAY_NAME,
        "documentation_url": DOCUMENTATION_URL,
        "properties": [p.model_dump() for p in PROPERTIES],
        "authenticate": {"type": "header", "headers": {AUTH_HEADER: "apiKey"}},
        "test": {"method": "GET", "base_url": BASE_URL, "url": TEST_PATH},
    }


def resolve_credential(api_key: Optional[str] = None) -> Credential:
    """
    Picks the explicit key if one is given, otherwise the configured GSA_API_KEY.
    Raises MissingCredentialError when neither is set.
    """
    key = api_key if api_key is not None else settings.GSA_API_KEY.get_secret_value()
    if not key or not key.strip():
        raise MissingCredentialError(f"No API key configured for {NAME}")
    return Credential(api_key=key)


def attach_auth(request: ResolvedRequest, credential: Credential) -> ResolvedRequest:
    headers = {**request.headers, AUTH_HEADER: credential.api_key.get_secret_value()}
    return request.model_copy(update={"headers": headers})


def build_test_request(credential: Credential) -> ResolvedRequest:
    request = ResolvedRequest(
        method="GET",
        url=f"{BASE_URL}{TEST_PATH}",
        headers={"Accept": "application/json"},
    )
    logger.debug("Built credential test request for %s", NAME)
    return attach_auth(request, credential)
