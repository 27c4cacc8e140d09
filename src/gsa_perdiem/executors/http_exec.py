"""
http_exec.py
------------
Implements HTTPExecutor, the generic runner for resolved requests.
Error statuses and network failures propagate as requests exceptions.
"""
import logging

import requests

from .base import BaseExecutor
from ..config import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class HTTPExecutor(BaseExecutor):
    def __init__(self, timeout: float = REQUEST_TIMEOUT):
        self.timeout = timeout

    def execute(self, params, context):
        """Set params["decode"] to False to skip JSON decoding; body is then None."""
        method = params.get("method", "GET").upper()
        url = params["url"]
        # headers may carry the API key, so only method and url are logged
        logger.info("%s %s", method, url)
        resp = requests.request(
            method, url, headers=params.get("headers") or {}, timeout=self.timeout
        )
        resp.raise_for_status()
        body = resp.json() if params.get("decode", True) else None
        return {"status_code": resp.status_code, "body": body}
