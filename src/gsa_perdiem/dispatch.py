"""
dispatch.py
-----------
Resolves a (resource, operation, parameters) selection into a concrete request.
Validation here is limited to required fields; the remote API decides the rest.
"""
import logging
import string
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from .config import BASE_URL
from .errors import ConfigurationError, MissingParameterError
from .node import REQUEST_HEADERS, ROUTES, get_resource
from .schemas import Operation, ResolvedRequest, Resource, Route

logger = logging.getLogger(__name__)

_FORMATTER = string.Formatter()


def _coerce(enum_cls, value, kind: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigurationError(f"Unknown {kind}: {value}") from None


def coerce_selection(resource, operation=None) -> Tuple[Resource, Operation]:
    """Validates a raw selection; a missing operation falls back to the resource default."""
    resource = _coerce(Resource, resource, "resource")
    if operation is None:
        return resource, get_resource(resource).default_operation
    return resource, _coerce(Operation, operation, "operation")


def placeholders(template: str) -> List[str]:
    return [field for _, field, _, _ in _FORMATTER.parse(template) if field]


def get_route(resource: Union[Resource, str], operation: Union[Operation, str]) -> Route:
    resource = _coerce(Resource, resource, "resource")
    operation = _coerce(Operation, operation, "operation")
    option = ROUTES.get((resource, operation))
    if option is None:
        allowed = ", ".join(o.value.value for o in get_resource(resource).operations)
        raise ConfigurationError(
            f"Operation {operation.value} is not available for resource {resource.value} "
            f"(expected one of: {allowed})"
        )
    return option.route


def validate_parameters(route: Route, params: Mapping[str, Any], operation: str = "") -> Dict[str, str]:
    """
    Returns the required parameters as stripped strings.
    Raises MissingParameterError listing every blank or absent one.
    """
    values = {}
    missing = []
    for name in placeholders(route.path):
        value = params.get(name)
        value = "" if value is None else str(value).strip()
        if not value:
            missing.append(name)
        else:
            values[name] = value
    if missing:
        raise MissingParameterError(operation or route.path, missing)
    return values


def render_path(template: str, params: Mapping[str, str]) -> str:
    # Each value is one path segment: "/" and spaces get percent-encoded
    return template.format(**{name: quote(params[name], safe="") for name in placeholders(template)})


def resolve_request(
    resource: Union[Resource, str],
    operation: Union[Operation, str],
    params: Mapping[str, Any],
    base_url: str = BASE_URL,
) -> ResolvedRequest:
    resource = _coerce(Resource, resource, "resource")
    operation = _coerce(Operation, operation, "operation")
    route = get_route(resource, operation)
    values = validate_parameters(route, params, operation=operation.value)
    url = f"{base_url.rstrip('/')}{render_path(route.path, values)}"
    logger.debug("Resolved %s/%s to %s %s", resource.value, operation.value, route.method, url)
    return ResolvedRequest(
        method=route.method,
        url=url,
        headers=dict(REQUEST_HEADERS),
        extract_property=route.extract_property,
    )


def extract_output(body: Any, extract_property: Optional[str]) -> Any:
    """Lifts one top-level property out of a decoded body; None when it is absent."""
    if extract_property is None:
        return body
    if isinstance(body, dict):
        return body.get(extract_property)
    return None
