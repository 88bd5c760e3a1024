"""
Integration tests for the customer API over HTTP
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from customers_api.api.app import create_app


@pytest.fixture
def client(database_url):
    app = create_app(database_url)
    with TestClient(app) as test_client:
        yield test_client


def graphql(client, query, variables=None):
    payload = {"query": query}
    if variables is not None:
        payload["variables"] = variables
    resp = client.post("/graphql", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.mark.integration
def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert "X-Request-ID" in resp.headers


@pytest.mark.integration
def test_graphiql_page(client):
    resp = client.get("/graphiql")

    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert '"/graphql"' in resp.text


@pytest.mark.integration
def test_customer_lifecycle(client):
    body = graphql(
        client,
        """
        mutation {
          registerCustomer(name: "Ada", age: 30, email: "Ada@X.com", address: "1 Main St") {
            id name age email address
          }
        }
        """,
    )
    assert "errors" not in body
    created = body["data"]["registerCustomer"]
    assert uuid.UUID(created["id"])
    assert created == {
        "id": created["id"],
        "name": "Ada",
        "age": 30,
        "email": "ada@x.com",
        "address": "1 Main St",
    }

    query = "query Get($id: String!) { customer(id: $id) { id name age email address } }"
    assert graphql(client, query, {"id": created["id"]})["data"]["customer"] == created

    body = graphql(
        client,
        "mutation Update($id: String!, $email: String!) {"
        " updateCustomerEmail(id: $id, email: $email) { id email } }",
        {"id": created["id"], "email": "New@X.com"},
    )
    assert body["data"]["updateCustomerEmail"] == {"id": created["id"], "email": "new@x.com"}

    listed = graphql(client, "{ customers { id email } }")["data"]["customers"]
    assert listed == [{"id": created["id"], "email": "new@x.com"}]

    body = graphql(
        client,
        "mutation Delete($id: String!) { deleteCustomer(id: $id) }",
        {"id": created["id"]},
    )
    assert body["data"]["deleteCustomer"] is True

    body = graphql(client, query, {"id": created["id"]})
    assert body["data"] is None
    assert body["errors"][0]["message"] == "customer does not exist"
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


@pytest.mark.integration
def test_destroy_customers(client):
    for i in range(3):
        body = graphql(
            client,
            "mutation R($email: String!) {"
            ' registerCustomer(name: "C", age: 1, email: $email, address: "A") { id } }',
            {"email": f"c{i}@x.com"},
        )
        assert "errors" not in body

    assert graphql(client, "mutation { destroyCustomers }")["data"]["destroyCustomers"] == 3
    assert graphql(client, "{ customers { id } }")["data"]["customers"] == []
    assert graphql(client, "mutation { destroyCustomers }")["data"]["destroyCustomers"] == 0


@pytest.mark.integration
def test_malformed_id_reported_as_error(client):
    body = graphql(client, 'mutation { deleteCustomer(id: "not-a-uuid") }')

    assert body["data"] is None
    assert body["errors"][0]["path"] == ["deleteCustomer"]
    assert body["errors"][0]["extensions"]["code"] == "INVALID_ARGUMENT"


@pytest.mark.integration
def test_startup_fails_without_store(tmp_path):
    missing = tmp_path / "missing-dir" / "customers.db"
    app = create_app(f"sqlite+aiosqlite:///{missing}")

    with pytest.raises(Exception):
        with TestClient(app):
            pass
