"""
errors.py
---------
Exceptions raised before a request leaves the connector.
Remote failures are not wrapped: they surface as requests exceptions.
"""
from typing import Iterable


class PerDiemError(Exception):
    pass


class ConfigurationError(PerDiemError):
    pass


class MissingParameterError(ConfigurationError):
    def __init__(self, operation: str, missing: Iterable[str]):
        self.operation = operation
        self.missing = list(missing)
        super().__init__(
            f"Missing required parameters for {operation}: {', '.join(self.missing)}"
        )


class MissingCredentialError(ConfigurationError):
    pass
