"""
perdiem_exec.py
---------------
Implements PerDiemExecutor, the GSA Per Diem connector as a host executor.
Resolves the selected operation, attaches the API key, runs the request through
HTTPExecutor and applies the operation's extraction rule.
"""
import logging

import requests

from .base import BaseExecutor
from .http_exec import HTTPExecutor
from .. import credentials, node
from ..dispatch import coerce_selection, extract_output, resolve_request
from ..schemas import CredentialTestResult

logger = logging.getLogger(__name__)

PARAMETER_NAMES = [p.name for p in node.PARAMETERS]


def register(register_executor):
    register_executor(node.NAME, PerDiemExecutor)


def _credential_from_context(context):
    stored = ((context or {}).get("credentials") or {}).get(credentials.NAME) or {}
    return credentials.resolve_credential(stored.get("apiKey"))


class PerDiemExecutor(BaseExecutor):
    def __init__(self, http: HTTPExecutor = None):
        self.http = http or HTTPExecutor()

    def execute(self, params, context):
        resource, operation = coerce_selection(
            params.get("resource", node.DEFAULT_RESOURCE), params.get("operation")
        )
        inputs = {name: params[name] for name in PARAMETER_NAMES if name in params}

        # Both raise before any network call
        request = resolve_request(resource, operation, inputs)
        credential = _credential_from_context(context)

        request = credentials.attach_auth(request, credential)
        response = self.http.execute(request.model_dump(include={"method", "url", "headers"}), context)
        return {
            "resource": resource.value,
            "operation": operation.value,
            "url": request.url,
            "result": extract_output(response["body"], request.extract_property),
        }

    def test_credential(self, context) -> CredentialTestResult:
        credential = _credential_from_context(context)
        request = credentials.build_test_request(credential)
        try:
            # pass/fail is decided by status alone
            params = {**request.model_dump(include={"method", "url", "headers"}), "decode": False}
            response = self.http.execute(params, context)
        except requests.HTTPError as e:
            logger.warning("Credential test for %s failed with HTTP %s", credentials.NAME, e.response.status_code)
            return CredentialTestResult(success=False, status_code=e.response.status_code, message=str(e))
        except requests.RequestException as e:
            logger.warning("Credential test for %s failed: %s", credentials.NAME, e)
            return CredentialTestResult(success=False, message=str(e))
        return CredentialTestResult(success=True, status_code=response["status_code"], message="Connection successful")
