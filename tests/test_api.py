from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from geoql import __version__
from geoql.api.app import create_app
from geoql.database import create_store


@pytest.fixture
def client():
    app = create_app(store=create_store())
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "version": __version__}


def test_graphql_query(client):
    resp = client.post(
        "/graphql",
        json={"query": "query Japan { country(id: 3) { name cities { name } } }"},
    )

    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "data": {
            "country": {"name": "Japan", "cities": [{"name": "Tokyo"}, {"name": "Osaka"}]}
        }
    }


def test_graphql_mutation_is_visible_to_later_requests(client):
    created = client.post(
        "/graphql",
        json={
            "query": "mutation AddCountry($name: String!) { addCountries(name: $name) { id } }",
            "variables": {"name": "Italy"},
        },
    ).json()
    fetched = client.post("/graphql", json={"query": "{ countries { id name } }"}).json()

    assert created == {"data": {"addCountries": {"id": 4}}}
    assert fetched["data"]["countries"][-1] == {"id": 4, "name": "Italy"}


def test_not_found_is_reported_as_error_entry(client):
    resp = client.post("/graphql", json={"query": "mutation { deleteCountry(id: 9) { id } }"})

    body = resp.json()
    assert resp.status_code == 200
    assert body["data"] == {"deleteCountry": None}
    assert [e["message"] for e in body["errors"]] == ["Country not found"]


def test_apps_do_not_share_stores():
    first = create_app(store=create_store())
    second = create_app(store=create_store())

    with TestClient(first) as a, TestClient(second) as b:
        a.post("/graphql", json={"query": "mutation { deleteCity(id: 1) { id } }"})
        remaining = b.post("/graphql", json={"query": "{ cities { id } }"}).json()

    assert len(remaining["data"]["cities"]) == 6


def test_responses_carry_request_id(client):
    first = client.get("/health")
    second = client.post("/graphql", json={"query": "{ cities { id } }"})

    assert first.headers["X-Request-ID"]
    assert second.headers["X-Request-ID"]
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]
