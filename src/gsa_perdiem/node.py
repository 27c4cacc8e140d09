"""
node.py
-------
Node descriptor for the GSA Per Diem connector.

RESOURCES is the dispatch table: each resource carries its operation menu and
each operation its route (method, path template, extracted property).
PARAMETERS lists the input fields with the display rules that decide when a
field is shown and required.
"""
from typing import Dict, List, Tuple

from .config import BASE_URL
from . import credentials
from .schemas import (
    DisplayOptions,
    Operation,
    OperationOption,
    ParameterField,
    Resource,
    ResourceOption,
    Route,
)

NAME = "gsaPerDiem"
DISPLAY_NAME = "GSA Per Diem"
DESCRIPTION = "Look up GSA per diem reimbursement rates for federal travel lodging and meals"
DEFAULT_RESOURCE = Resource.PER_DIEM_RATE
REQUEST_HEADERS = {"Accept": "application/json"}

FISCAL_YEAR_DESCRIPTION = (
    "The federal fiscal year (October 1 - September 30). "
    "For example, FY2025 runs from Oct 1, 2024 to Sep 30, 2025."
)

RESOURCES: List[ResourceOption] = [
    ResourceOption(
        name="Per Diem Rate",
        value=Resource.PER_DIEM_RATE,
        default_operation=Operation.GET_BY_CITY_STATE_YEAR,
        operations=[
            OperationOption(
                name="Get by City/State/Year",
                value=Operation.GET_BY_CITY_STATE_YEAR,
                action="Get per diem rates by city state and year",
                description="Retrieve per diem rates for a specific city, state, and fiscal year",
                route=Route(
                    path="/v2/rates/city/{city}/state/{state}/year/{year}",
                    extract_property="rates",
                ),
            ),
            OperationOption(
                name="Get by State/Year",
                value=Operation.GET_BY_STATE_YEAR,
                action="Get per diem rates by state and year",
                description="Retrieve per diem rates for all counties and cities within a state for a fiscal year",
                route=Route(
                    path="/v2/rates/state/{state}/year/{year}",
                    extract_property="rates",
                ),
            ),
            OperationOption(
                name="Get by ZIP/Year",
                value=Operation.GET_BY_ZIP_YEAR,
                action="Get per diem rates by ZIP code and year",
                description="Retrieve per diem rates based on ZIP code and fiscal year",
                route=Route(
                    path="/v2/rates/zip/{zip}/year/{year}",
                    extract_property="rates",
                ),
            ),
        ],
    ),
    ResourceOption(
        name="CONUS Data",
        value=Resource.CONUS_DATA,
        default_operation=Operation.GET_LODGING_RATES,
        operations=[
            OperationOption(
                name="Get Lodging Rates",
                value=Operation.GET_LODGING_RATES,
                action="Get CONUS lodging rates by year",
                description="Retrieve lodging rate information for all locations in the Continental US for a fiscal year",
                route=Route(path="/v2/rates/conus/lodging/{year}"),
            ),
            OperationOption(
                name="Get ZIP Code Mappings",
                value=Operation.GET_ZIP_MAPPINGS,
                action="Get ZIP code to destination ID mappings",
                description="Retrieve the mapping of ZIP codes to Destination IDs and state locations for a fiscal year",
                route=Route(path="/v2/rates/conus/zipcodes/{year}"),
            ),
        ],
    ),
]

PARAMETERS: List[ParameterField] = [
    ParameterField(
        display_name="City",
        name="city",
        placeholder="e.g. Washington",
        description="The city to look up per diem rates for",
        show=DisplayOptions(
            resource=[Resource.PER_DIEM_RATE],
            operation=[Operation.GET_BY_CITY_STATE_YEAR],
        ),
    ),
    ParameterField(
        display_name="State Abbreviation",
        name="state",
        placeholder="e.g. DC",
        description="The two-letter state abbreviation",
        show=DisplayOptions(
            resource=[Resource.PER_DIEM_RATE],
            operation=[Operation.GET_BY_CITY_STATE_YEAR, Operation.GET_BY_STATE_YEAR],
        ),
    ),
    ParameterField(
        display_name="ZIP Code",
        name="zip",
        placeholder="e.g. 20001",
        description="The ZIP code to look up per diem rates for",
        show=DisplayOptions(
            resource=[Resource.PER_DIEM_RATE],
            operation=[Operation.GET_BY_ZIP_YEAR],
        ),
    ),
    ParameterField(
        display_name="Fiscal Year",
        name="year",
        placeholder="e.g. 2025",
        description=FISCAL_YEAR_DESCRIPTION,
        show=DisplayOptions(resource=[Resource.PER_DIEM_RATE, Resource.CONUS_DATA]),
    ),
]


def _build_route_table() -> Dict[Tuple[Resource, Operation], OperationOption]:
    table = {}
    for resource in RESOURCES:
        for option in resource.operations:
            table[(resource.value, option.value)] = option
    return table


ROUTES = _build_route_table()


def get_resource(resource: Resource) -> ResourceOption:
    for option in RESOURCES:
        if option.value == resource:
            return option
    raise KeyError(resource)


def operations_for(resource: Resource) -> List[OperationOption]:
    return list(get_resource(resource).operations)


def visible_parameters(resource: Resource, operation: Operation) -> List[ParameterField]:
    return [p for p in PARAMETERS if p.show.matches(resource, operation)]


def required_parameters(resource: Resource, operation: Operation) -> List[str]:
    return [p.name for p in visible_parameters(resource, operation) if p.required]


def subtitle(resource: Resource, operation: Operation) -> str:
    return f"{operation.value}: {resource.value}"


def describe() -> dict:
    """Serializable node descriptor for host UIs and tool registries."""
    return {
        "name": NAME,
        "display_name": DISPLAY_NAME,
        "description": DESCRIPTION,
        "group": ["transform"],
        "version": 1,
        "subtitle": "{operation}: {resource}",
        "defaults": {"name": DISPLAY_NAME},
        "inputs": ["main"],
        "outputs": ["main"],
        "usable_as_tool": True,
        "credentials": [{"name": credentials.NAME, "required": True}],
        "request_defaults": {"base_url": BASE_URL, "headers": dict(REQUEST_HEADERS)},
        "default_resource": DEFAULT_RESOURCE.value,
        "resources": [r.model_dump(mode="json") for r in RESOURCES],
        "parameters": [p.model_dump(mode="json") for p in PARAMETERS],
    }
