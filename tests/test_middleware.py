"""Tests for request logging helpers."""

from geoql.logging import (
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)
from geoql.middleware import operation_name_from_payload, sanitize_query_params


class TestOperationName:
    def test_explicit_operation_name_wins(self):
        payload = {"operationName": "Cities", "query": "query Other { cities { id } }"}
        assert operation_name_from_payload(payload) == "Cities"

    def test_named_query(self):
        assert operation_name_from_payload({"query": "query Japan { country(id: 3) { id } }"}) == (
            "Japan"
        )

    def test_named_mutation(self):
        payload = {"query": 'mutation AddItaly { addCountries(name: "Italy") { id } }'}
        assert operation_name_from_payload(payload) == "mutation:AddItaly"

    def test_anonymous_operations(self):
        assert operation_name_from_payload({"query": "{ cities { id } }"}) == "unnamed_operation"
        assert operation_name_from_payload({"query": "mutation { deleteCity(id: 1) { id } }"}) == (
            "mutation:unnamed_operation"
        )

    def test_string_arguments_are_not_mistaken_for_operations(self):
        payload = {"query": 'mutation { addCity(name: "query Foo", countryId: 1) { id } }'}
        assert operation_name_from_payload(payload) == "mutation:unnamed_operation"

        payload = {"query": '{ cities { name } } # mutation Sneaky'}
        assert operation_name_from_payload(payload) == "unnamed_operation"

    def test_leading_comments_are_skipped(self):
        payload = {"query": "# query Hidden\n  query Real { cities { id } }"}
        assert operation_name_from_payload(payload) == "Real"

    def test_anonymous_query_with_variables(self):
        payload = {"query": "query($id: Int) { city(id: $id) { id } }"}
        assert operation_name_from_payload(payload) == "unnamed_operation"

    def test_introspection(self):
        assert operation_name_from_payload({"query": "{ __schema { types { name } } }"}) == (
            "__introspection"
        )

    def test_missing_query(self):
        assert operation_name_from_payload({}) is None


def test_sanitize_query_params_redacts_graphql_payload():
    params = {"query": "{ cities { id } }", "variables": "{}", "page": "1"}
    assert sanitize_query_params(params) == {
        "query": "[REDACTED]",
        "variables": "[REDACTED]",
        "page": "1",
    }


def test_request_context_round_trip():
    set_request_context(request_id="abc")
    assert get_request_id() == "abc"
    clear_request_context()
    assert get_request_id() is None


def test_generated_request_ids_are_unique():
    ids = {generate_request_id() for _ in range(50)}
    assert len(ids) == 50
