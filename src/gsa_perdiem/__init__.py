# Re-export main modules and objects for easier imports
from .schemas import Resource, Operation, Route, ResolvedRequest, Credential
from .errors import PerDiemError, ConfigurationError, MissingParameterError, MissingCredentialError
from .dispatch import get_route, resolve_request, extract_output
from .credentials import attach_auth, build_test_request
from .registry import get_executor, register_executor
from .config import settings
