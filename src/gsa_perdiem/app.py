"""
app.py
--------
FastAPI application entrypoint. Exposes the GSA Per Diem node and credential
descriptors, operation execution, and the credential self-test.
"""
import logging

import requests
from fastapi import FastAPI, HTTPException
from typing import List, Optional

from gsa_perdiem import credentials, node
from gsa_perdiem.config import settings
from gsa_perdiem.errors import ConfigurationError
from gsa_perdiem.registry import get_executor
from gsa_perdiem.schemas import (
    CredentialTestRequest,
    CredentialTestResult,
    ExecuteRequest,
    ExecuteResult,
    Resource,
)

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="GSA Per Diem Connector API")


def _context(api_key) -> dict:
    if api_key is None:
        return {}
    return {"credentials": {credentials.NAME: {"apiKey": api_key.get_secret_value()}}}


def _upstream_error(e: requests.RequestException) -> HTTPException:
    if isinstance(e, requests.HTTPError) and e.response is not None:
        return HTTPException(status_code=e.response.status_code, detail=e.response.text)
    return HTTPException(status_code=502, detail=f"Upstream request failed: {e}")


# -------------------------------
# Node descriptor
# -------------------------------
@app.get(f"/nodes/{node.NAME}")
def get_node_descriptor():
    return node.describe()


@app.get(f"/nodes/{node.NAME}/resources/{{resource}}/operations")
def list_operations(resource: Resource) -> List[dict]:
    return [
        {
            "name": option.name,
            "value": option.value.value,
            "action": option.action,
            "description": option.description,
            "subtitle": node.subtitle(resource, option.value),
            "parameters": [
                p.model_dump(mode="json") for p in node.visible_parameters(resource, option.value)
            ],
        }
        for option in node.operations_for(resource)
    ]


@app.post(f"/nodes/{node.NAME}/execute", response_model=ExecuteResult)
def execute_operation(request: ExecuteRequest):
    executor = get_executor(node.NAME)
    params = {**request.parameters, "resource": request.resource, "operation": request.operation}
    try:
        return executor.execute(params, _context(request.api_key))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except requests.RequestException as e:
        logger.warning("%s/%s failed upstream: %s", request.resource.value, request.operation.value, e)
        raise _upstream_error(e)


# -------------------------------
# Credential descriptor
# -------------------------------
@app.get(f"/credentials/{credentials.NAME}")
def get_credential_descriptor():
    return credentials.describe()


@app.post(f"/credentials/{credentials.NAME}/test", response_model=CredentialTestResult)
def test_credential(request: Optional[CredentialTestRequest] = None):
    executor = get_executor(node.NAME)
    api_key = request.api_key if request is not None else None
    try:
        return executor.test_credential(_context(api_key))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
