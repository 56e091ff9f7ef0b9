"""Unit / integration tests for the FastAPI adapter."""
from typing import Any

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from starlette.datastructures import QueryParams

from querykit.adapters.fastapi import (
    FastAPIExceptionMapper,
    FilterSpecDep,
    filter_spec_dependency,
    query_params_to_raw,
)
from querykit.application.filtering import FilterSpecification
from querykit.application.schema import FieldSchema
from querykit.config.settings import CompilerSettings
from querykit.config.validation import ConfigError
from querykit.kernel.errors import DomainError, ValidationError

SCHEMA = FieldSchema.from_dict(
    {
        "search_fields": ["first_name", "last_name"],
        "filterable_fields": {
            "id": "uuid",
            "age": "integer",
            "gender": {"type": "enum", "values": ["MALE", "FEMALE", "OTHER"]},
            "date_of_birth": "date",
        },
        "sortable_fields": ["created_at", "last_name"],
        "default_sort": {"field": "created_at", "order": "DESC"},
    }
)

# Module level so the route signature resolves without string annotations.
PatientFilters = FilterSpecDep(SCHEMA)

UUID_A = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
UUID_B = "9b2c7a3e-1111-4c2d-8e3f-000000000002"


def make_app() -> FastAPI:
    app = FastAPI()
    FastAPIExceptionMapper().register(app)

    @app.get("/patients")
    async def list_patients(spec: PatientFilters) -> dict[str, Any]:
        return spec.to_dict()

    @app.get("/domain")
    async def domain_failure() -> None:
        raise DomainError("patient archived")

    return app


# ---------------------------------------------------------------------------
# query_params_to_raw
# ---------------------------------------------------------------------------


class TestQueryParamsToRaw:
    def test_single_values_stay_scalar(self) -> None:
        assert query_params_to_raw(QueryParams("age=3&gender=male")) == {"age": "3", "gender": "male"}

    def test_repeated_keys_become_lists(self) -> None:
        assert query_params_to_raw(QueryParams("a=1&a=2&b=3")) == {"a": ["1", "2"], "b": "3"}


# ---------------------------------------------------------------------------
# FilterSpecDep
# ---------------------------------------------------------------------------


class TestFilterSpecDep:
    def test_compiles_query_string(self) -> None:
        client = TestClient(make_app())
        resp = client.get("/patients", params={"gender": "female", "age_gte": "18", "limit": "500"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["predicates"]["gender"] == "FEMALE"
        assert body["predicates"]["age"] == [{"operator": "gte", "operand": 18}]
        assert body["pagination"] == {"limit": 100, "offset": 0}
        assert body["sort"] == [{"field": "created_at", "direction": "DESC"}]

    def test_repeated_keys_flattened_for_in(self) -> None:
        client = TestClient(make_app())
        resp = client.get(f"/patients?id_in={UUID_A}&id_in={UUID_B}")
        assert resp.status_code == 200
        assert resp.json()["predicates"]["id"] == [{"operator": "in", "operand": [UUID_A, UUID_B]}]

    def test_search_and_sort(self) -> None:
        client = TestClient(make_app())
        body = client.get("/patients?search=smith&sort_by=last_name&sort_order=asc").json()
        assert body["search"]["term"] == "smith"
        assert [c["field"] for c in body["search"]["any"]] == ["first_name", "last_name"]
        assert body["sort"] == [{"field": "last_name", "direction": "ASC"}]

    def test_invalid_parameter_is_400(self) -> None:
        client = TestClient(make_app())
        resp = client.get("/patients?date_of_birth=1985-13-01")
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "invalid_date"
        assert body["errors"][0]["field"] == "date_of_birth"
        assert body["errors"][0]["value"] == "1985-13-01"

    def test_settings_forwarded(self) -> None:
        app = FastAPI()
        FastAPIExceptionMapper().register(app)
        dep = filter_spec_dependency(SCHEMA, CompilerSettings(max_in_values=1))

        @app.get("/capped")
        async def capped(request_spec: FilterSpecification = Depends(dep)) -> dict[str, Any]:
            return request_spec.to_dict()

        resp = TestClient(app).get("/capped?age_in=1,2")
        assert resp.status_code == 400
        assert resp.json()["code"] == "too_many_values"


# ---------------------------------------------------------------------------
# FastAPIExceptionMapper
# ---------------------------------------------------------------------------


class TestFastAPIExceptionMapper:
    def test_mappings(self) -> None:
        assert FastAPIExceptionMapper().mappings == [
            (ValidationError, 400),
            (DomainError, 422),
            (ConfigError, 500),
        ]

    def test_domain_error_is_422(self) -> None:
        resp = TestClient(make_app()).get("/domain")
        assert resp.status_code == 422
        assert resp.json()["code"] == "domain_error"
