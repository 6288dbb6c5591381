"""API tests for the /users endpoints through FastAPI's TestClient."""
from unittest.mock import MagicMock

import bson
from bson import ObjectId
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure

from user_api.application.services.user_service import UserService
from user_api.di.base_container import BaseContainer
from user_api.domain.exceptions import DatabaseConnectionError
from user_api.domain.repositories.user_repository import UserRepository
from user_api.infrastructure.db.mongo_user_repository import MongoUserRepository
from user_api.main import ROOT_MESSAGE, create_application

AL = {"name": "Al", "email": "A@X.com", "age": 30}
TOO_OLD = [10 ** 20, "99999999999999999999", 1e300]


def _create(client, **fields):
    payload = {**AL, **fields}
    response = client.post("/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestRootAndHealth:

    def test_root_returns_plain_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == ROOT_MESSAGE

    def test_health_reports_database(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "up"}


class TestCreateUser:

    def test_create_returns_201_with_normalized_record(self, client):
        response = client.post("/users", json=AL)

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "a@x.com"
        assert body["name"] == "Al"
        assert body["age"] == 30
        assert ObjectId.is_valid(body["id"])
        assert body["createdAt"] == body["updatedAt"]
        assert body["createdAt"].endswith("Z")

    def test_create_without_age_omits_it(self, client):
        body = _create(client, age=None)

        assert "age" not in body

    def test_trims_name_and_email(self, client):
        body = _create(client, name="  Bea  ", email="  Bea@Example.COM ")

        assert body["name"] == "Bea"
        assert body["email"] == "bea@example.com"

    def test_duplicate_email_fails_with_400(self, client):
        _create(client)

        response = client.post("/users", json={"name": "Other", "email": " a@x.COM"})

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to create user"
        assert "already registered" in response.json()["error"]

    def test_short_name_fails_with_400(self, client):
        response = client.post("/users", json={"name": "A", "email": "a@x.com"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Failed to create user"
        assert "name" in body["error"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "a@x.com"},
            {"name": "Al"},
            {"name": "Al", "email": "a@x.com", "age": -1},
            {"name": "Al", "email": "a@x.com", "age": "old"},
        ],
    )
    def test_invalid_fields_fail_with_400(self, client, payload):
        response = client.post("/users", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to create user"

    def test_non_object_body_fails_with_400(self, client):
        response = client.post("/users", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"

    def test_client_cannot_choose_id_or_timestamps(self, client):
        body = _create(client, id="abc", createdAt="1999-01-01T00:00:00Z")

        assert body["id"] != "abc"
        assert not body["createdAt"].startswith("1999")


class TestListUsers:

    def test_empty_list(self, client):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_returns_exactly_n_records(self, client):
        for i in range(4):
            _create(client, email=f"user{i}@x.com")

        response = client.get("/users")

        assert response.status_code == 200
        assert len(response.json()) == 4


class TestGetUser:

    def test_existing_user_returns_id(self, client):
        created = _create(client)

        response = client.get(f"/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "User found", "id": created["id"]}

    def test_missing_user_returns_404(self, client):
        response = client.get(f"/users/{ObjectId()}")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_malformed_id_returns_400(self, client):
        response = client.get("/users/not-an-object-id")

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to get user"


class TestUpdateUser:

    def test_partial_update(self, client):
        created = _create(client)

        response = client.put(f"/users/{created['id']}", json={"age": 31, "email": " NEW@X.com "})

        assert response.status_code == 200
        body = response.json()
        assert body["age"] == 31
        assert body["email"] == "new@x.com"
        assert body["name"] == "Al"
        assert body["createdAt"] == created["createdAt"]

    def test_null_age_clears_it(self, client):
        created = _create(client)

        response = client.put(f"/users/{created['id']}", json={"age": None})

        assert response.status_code == 200
        assert "age" not in response.json()

    def test_empty_body_keeps_record(self, client):
        created = _create(client)

        response = client.put(f"/users/{created['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "Al"

    def test_nonexistent_id_returns_404(self, client):
        response = client.put(f"/users/{ObjectId()}", json={"age": 31})

        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_invalid_field_returns_400(self, client):
        created = _create(client)

        response = client.put(f"/users/{created['id']}", json={"name": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to update user"

    def test_duplicate_email_returns_400(self, client):
        _create(client)
        other = _create(client, email="other@x.com")

        response = client.put(f"/users/{other['id']}", json={"email": "a@x.com"})

        assert response.status_code == 400

    def test_malformed_id_returns_400(self, client):
        response = client.put("/users/123", json={"age": 1})

        assert response.status_code == 400


class TestDeleteUser:

    def test_delete_then_delete_again(self, client):
        created = _create(client)

        first = client.delete(f"/users/{created['id']}")
        second = client.delete(f"/users/{created['id']}")

        assert first.status_code == 200
        assert first.json() == {"message": "User deleted", "id": created["id"]}
        assert second.status_code == 404
        assert client.get("/users").json() == []

    def test_malformed_id_returns_400(self, client):
        response = client.delete("/users/123")

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to delete user"


class TestStartup:

    def test_connection_failure_aborts_startup(self, container, settings):
        def unreachable():
            raise DatabaseConnectionError("MongoDB connection failed: no servers")

        container.add_startup_hook(unreachable)
        app = create_application(container=container, settings=settings)

        with pytest.raises(DatabaseConnectionError):
            with TestClient(app):
                pass

    def test_shutdown_hooks_run_when_client_closes(self, settings):
        calls = []
        container = BaseContainer()
        container.add_startup_hook(lambda: calls.append("connect"))
        container.add_shutdown_hook(lambda: calls.append("close"))
        app = create_application(container=container, settings=settings)

        with TestClient(app):
            assert calls == ["connect"]

        assert calls == ["connect", "close"]


def _client_for(service, settings):
    container = BaseContainer()
    container.register_singleton(UserService, service)
    return TestClient(create_application(container=container, settings=settings))


class TestAgeUpperBound:
    """Ages that do not fit in a BSON int64 are rejected before they reach the store."""

    @pytest.fixture
    def collection(self):
        collection = MagicMock()

        def insert_one(doc):
            # pymongo encodes the document before sending it
            bson.encode(doc)
            return MagicMock(inserted_id=ObjectId())

        collection.insert_one.side_effect = insert_one
        return collection

    @pytest.fixture
    def mongo_client(self, collection, settings):
        connection = MagicMock()
        connection.get_collection.return_value = collection
        service = UserService(user_repository=MongoUserRepository(connection))
        with _client_for(service, settings) as test_client:
            yield test_client

    @pytest.mark.parametrize("age", TOO_OLD)
    def test_create_on_mongo_returns_400(self, mongo_client, collection, age):
        response = mongo_client.post("/users", json={"name": "Al", "email": "a@x.com", "age": age})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Failed to create user"
        assert body["error"].startswith("User validation failed: age:")
        collection.insert_one.assert_not_called()

    @pytest.mark.parametrize("age", TOO_OLD)
    def test_update_on_mongo_returns_400(self, mongo_client, collection, age):
        response = mongo_client.put(f"/users/{ObjectId()}", json={"age": age})

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to update user"
        collection.find_one_and_update.assert_not_called()

    def test_largest_int64_age_is_stored(self, mongo_client):
        age = 2 ** 63 - 1

        response = mongo_client.post("/users", json={"name": "Al", "email": "a@x.com", "age": age})

        assert response.status_code == 201
        assert response.json()["age"] == age

    @pytest.mark.parametrize("age", TOO_OLD)
    def test_in_memory_backend_agrees(self, client, age):
        response = client.post("/users", json={"name": "Al", "email": "a@x.com", "age": age})

        assert response.status_code == 400
        assert response.json()["error"].startswith("User validation failed: age:")


class UnavailableUserRepository(UserRepository):
    """Repository whose every call fails the way an unreachable MongoDB does."""

    def _fail(self, *args, **kwargs):
        raise OperationFailure("not authorized on user_api to execute command")

    create = find_all = find_by_id = update = delete = _fail

    def ping(self) -> bool:
        return False


class TestStoreFailures:
    """Store errors surface as {message, error} with the operation's message."""

    @pytest.fixture
    def failing_client(self, settings):
        service = UserService(user_repository=UnavailableUserRepository())
        with _client_for(service, settings) as test_client:
            yield test_client

    def test_list_returns_500(self, failing_client):
        response = failing_client.get("/users")

        assert response.status_code == 500
        body = response.json()
        assert set(body) == {"message", "error"}
        assert body["message"] == "Failed to fetch users"
        assert "not authorized" in body["error"]

    @pytest.mark.parametrize(
        "method,path,json,message",
        [
            ("POST", "/users", AL, "Failed to create user"),
            ("GET", f"/users/{ObjectId()}", None, "Failed to get user"),
            ("PUT", f"/users/{ObjectId()}", {"age": 31}, "Failed to update user"),
            ("DELETE", f"/users/{ObjectId()}", None, "Failed to delete user"),
        ],
    )
    def test_other_operations_return_400(self, failing_client, method, path, json, message):
        response = failing_client.request(method, path, json=json)

        assert response.status_code == 400
        body = response.json()
        assert set(body) == {"message", "error"}
        assert body["message"] == message
        assert "not authorized" in body["error"]

    def test_health_reports_database_down(self, failing_client):
        response = failing_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "down"}
