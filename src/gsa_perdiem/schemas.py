"""
schemas.py
----------
Defines the enums and Pydantic schemas shared by the connector:
resources, operations, descriptor entries, resolved requests and API payloads.
"""
from pydantic import BaseModel, Field, SecretStr
from typing import Any, Dict, List, Optional
import enum


# Enums

class Resource(str, enum.Enum):
    PER_DIEM_RATE = "perDiemRate"
    CONUS_DATA = "conusData"


class Operation(str, enum.Enum):
    GET_BY_CITY_STATE_YEAR = "getByCityStateYear"
    GET_BY_STATE_YEAR = "getByStateYear"
    GET_BY_ZIP_YEAR = "getByZipYear"
    GET_LODGING_RATES = "getLodgingRates"
    GET_ZIP_MAPPINGS = "getZipMappings"


# Descriptor entries

class Route(BaseModel):
    method: str = "GET"
    path: str  # template, placeholders as {name}
    extract_property: Optional[str] = None  # top-level JSON property to lift out
    class Config:
        frozen = True


class OperationOption(BaseModel):
    name: str
    value: Operation
    action: str
    description: str
    route: Route
    class Config:
        frozen = True


class ResourceOption(BaseModel):
    name: str
    value: Resource
    default_operation: Operation
    operations: List[OperationOption]
    class Config:
        frozen = True


class DisplayOptions(BaseModel):
    resource: List[Resource]
    operation: Optional[List[Operation]] = None  # None shows the field for every operation

    def matches(self, resource: Resource, operation: Operation) -> bool:
        if resource not in self.resource:
            return False
        return self.operation is None or operation in self.operation

    class Config:
        frozen = True


class ParameterField(BaseModel):
    display_name: str
    name: str
    type: str = "string"
    required: bool = True
    default: str = ""
    placeholder: str
    description: str
    show: DisplayOptions
    class Config:
        frozen = True


class CredentialField(BaseModel):
    display_name: str
    name: str
    type: str = "string"
    password: bool = False
    default: str = ""
    description: str
    class Config:
        frozen = True


# Requests

class ResolvedRequest(BaseModel):
    method: str = "GET"
    url: str
    headers: Dict[str, str] = {}
    extract_property: Optional[str] = None
    class Config:
        frozen = True


class Credential(BaseModel):
    api_key: SecretStr = Field(alias="apiKey")
    class Config:
        frozen = True
        populate_by_name = True


# API payloads

class ExecuteRequest(BaseModel):
    resource: Resource
    operation: Operation
    parameters: Dict[str, str] = {}
    api_key: Optional[SecretStr] = None


class ExecuteResult(BaseModel):
    resource: Resource
    operation: Operation
    url: str
    result: Any = None


class CredentialTestRequest(BaseModel):
    api_key: Optional[SecretStr] = None


class CredentialTestResult(BaseModel):
    success: bool
    status_code: Optional[int] = None
    message: str = ""
