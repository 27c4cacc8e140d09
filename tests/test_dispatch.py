"""Dispatch table lookup, required-parameter validation and path rendering."""

from __future__ import annotations

import pytest

from gsa_perdiem.dispatch import (
    coerce_selection,
    extract_output,
    get_route,
    placeholders,
    render_path,
    resolve_request,
)
from gsa_perdiem.errors import ConfigurationError, MissingParameterError
from gsa_perdiem.node import ROUTES, required_parameters
from gsa_perdiem.schemas import Operation, Resource

BASE = "https://api.gsa.gov/travel/perdiem"


class TestRouteTable:
    @pytest.mark.parametrize("resource,operation", list(ROUTES))
    def test_placeholders_match_required_parameters(self, resource, operation):
        route = get_route(resource, operation)
        assert set(placeholders(route.path)) == set(required_parameters(resource, operation))

    @pytest.mark.parametrize("resource,operation", list(ROUTES))
    def test_no_placeholder_survives_substitution(self, resource, operation):
        params = {name: "x" for name in required_parameters(resource, operation)}
        url = resolve_request(resource, operation, params).url
        assert "{" not in url and "}" not in url

    @pytest.mark.parametrize("resource,operation", list(ROUTES))
    def test_every_route_is_get(self, resource, operation):
        assert get_route(resource, operation).method == "GET"

    def test_extraction_rules(self):
        assert get_route("perDiemRate", "getByCityStateYear").extract_property == "rates"
        assert get_route("perDiemRate", "getByStateYear").extract_property == "rates"
        assert get_route("perDiemRate", "getByZipYear").extract_property == "rates"
        assert get_route("conusData", "getLodgingRates").extract_property is None
        assert get_route("conusData", "getZipMappings").extract_property is None

    def test_operation_from_other_resource_is_rejected(self):
        with pytest.raises(ConfigurationError, match="not available for resource conusData"):
            get_route("conusData", "getByZipYear")

    def test_unknown_resource_is_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown resource"):
            get_route("oconusData", "getLodgingRates")

    def test_unknown_operation_is_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown operation"):
            get_route("perDiemRate", "getByCounty")


class TestResolveRequest:
    def test_city_state_year(self):
        req = resolve_request(
            Resource.PER_DIEM_RATE,
            Operation.GET_BY_CITY_STATE_YEAR,
            {"city": "Washington", "state": "DC", "year": "2025"},
        )
        assert req.method == "GET"
        assert req.url == f"{BASE}/v2/rates/city/Washington/state/DC/year/2025"
        assert req.extract_property == "rates"
        assert req.headers == {"Accept": "application/json"}

    def test_zip_mappings(self):
        req = resolve_request("conusData", "getZipMappings", {"year": "2024"})
        assert req.url == f"{BASE}/v2/rates/conus/zipcodes/2024"
        assert req.extract_property is None

    def test_extra_parameters_are_ignored(self):
        req = resolve_request("conusData", "getLodgingRates", {"year": "2024", "city": "Boston"})
        assert req.url == f"{BASE}/v2/rates/conus/lodging/2024"

    def test_values_are_stripped(self):
        req = resolve_request("perDiemRate", "getByStateYear", {"state": " VA ", "year": "2025 "})
        assert req.url == f"{BASE}/v2/rates/state/VA/year/2025"

    def test_missing_parameter_is_rejected(self):
        with pytest.raises(MissingParameterError) as exc:
            resolve_request("perDiemRate", "getByStateYear", {"year": "2025"})
        assert exc.value.missing == ["state"]
        assert exc.value.operation == "getByStateYear"

    def test_blank_parameter_is_rejected(self):
        with pytest.raises(MissingParameterError) as exc:
            resolve_request("perDiemRate", "getByZipYear", {"zip": "   ", "year": "2025"})
        assert exc.value.missing == ["zip"]

    def test_all_missing_parameters_are_reported(self):
        with pytest.raises(MissingParameterError) as exc:
            resolve_request("perDiemRate", "getByCityStateYear", {})
        assert exc.value.missing == ["city", "state", "year"]

    def test_custom_base_url(self):
        req = resolve_request("conusData", "getLodgingRates", {"year": "2023"}, base_url="http://localhost:8080/")
        assert req.url == "http://localhost:8080/v2/rates/conus/lodging/2023"


class TestRenderPath:
    def test_spaces_are_encoded(self):
        path = render_path("/v2/rates/city/{city}/state/{state}/year/{year}",
                           {"city": "New York", "state": "NY", "year": "2025"})
        assert path == "/v2/rates/city/New%20York/state/NY/year/2025"

    def test_slash_stays_inside_segment(self):
        assert render_path("/v2/rates/zip/{zip}/year/{year}", {"zip": "../x", "year": "2025"}) == \
            "/v2/rates/zip/..%2Fx/year/2025"


class TestCoerceSelection:
    def test_defaults_operation_per_resource(self):
        assert coerce_selection("perDiemRate") == (Resource.PER_DIEM_RATE, Operation.GET_BY_CITY_STATE_YEAR)
        assert coerce_selection("conusData") == (Resource.CONUS_DATA, Operation.GET_LODGING_RATES)

    def test_explicit_operation(self):
        assert coerce_selection("conusData", "getZipMappings") == (Resource.CONUS_DATA, Operation.GET_ZIP_MAPPINGS)


class TestExtractOutput:
    def test_no_rule_passes_body_through(self):
        body = {"a": 1}
        assert extract_output(body, None) is body

    def test_property_is_lifted(self):
        assert extract_output({"rates": [1, 2], "version": None}, "rates") == [1, 2]

    def test_absent_property_gives_none(self):
        assert extract_output({"errors": ["bad"]}, "rates") is None

    def test_non_object_body_gives_none(self):
        assert extract_output([1, 2], "rates") is None
