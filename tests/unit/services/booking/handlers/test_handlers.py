import json
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from services.booking.applications import BookingLifecycleManager
from services.booking.handlers import (
    create,
    delete,
    delete_all,
    get,
    list_by_user,
    update,
)

NOW = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-test"
    )
    aws_request_id: str = "request-1"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture(autouse=True)
def wired_manager(monkeypatch, store):
    manager = BookingLifecycleManager(store=store, clock=lambda: NOW)
    for module in (create, update, get, list_by_user, delete, delete_all):
        monkeypatch.setattr(module, "get_manager", lambda: manager)
    return manager


def _event(path_parameters=None, body=None):
    return {
        "resource": "/",
        "path": "/",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json"},
        "pathParameters": path_parameters,
        "queryStringParameters": None,
        "requestContext": {"requestId": "request-1"},
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


def _body(response):
    return json.loads(response["body"])


def _create(lambda_context, number_of_rooms=2, user_id="user-1"):
    return create.lambda_handler(
        _event(
            {"user_id": user_id},
            {
                "room_id": "room-1",
                "check_in_date": "2024-01-01",
                "check_out_date": "2024-01-04",
                "number_of_rooms": number_of_rooms,
            },
        ),
        lambda_context,
    )


class TestCreateHandler:
    def test_created(self, lambda_context):
        response = _create(lambda_context)

        assert response["statusCode"] == 201
        body = _body(response)
        assert body["status"] == "success"
        assert body["data"]["cost_amount"] == "600.00"
        assert body["data"]["nights"] == 3

    def test_insufficient_inventory_is_conflict(self, lambda_context):
        response = _create(lambda_context, number_of_rooms=5)

        assert response["statusCode"] == 409
        body = _body(response)
        assert body["error"] == "InsufficientInventory"
        assert body["retryable"] is False

    def test_missing_user_is_not_found(self, lambda_context):
        response = _create(lambda_context, user_id="ghost")

        assert response["statusCode"] == 404
        assert _body(response)["resource"] == "User"

    def test_invalid_body(self, lambda_context):
        response = create.lambda_handler(
            _event({"user_id": "user-1"}, {"room_id": "room-1"}), lambda_context
        )
        assert response["statusCode"] == 400
        assert _body(response)["error"] == "InvalidRange"

    def test_missing_path_parameter(self, lambda_context):
        response = create.lambda_handler(_event(None, {}), lambda_context)
        assert response["statusCode"] == 400
        assert _body(response)["message"] == "user_id is required"

    def test_reversed_dates(self, lambda_context):
        response = create.lambda_handler(
            _event(
                {"user_id": "user-1"},
                {
                    "room_id": "room-1",
                    "check_in_date": "2024-01-04",
                    "check_out_date": "2024-01-01",
                    "number_of_rooms": 1,
                },
            ),
            lambda_context,
        )
        assert response["statusCode"] == 400


class TestBookingHandlers:
    def test_get(self, lambda_context):
        booking_id = _body(_create(lambda_context))["data"]["booking_id"]

        response = get.lambda_handler(
            _event({"booking_id": booking_id}), lambda_context
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"]["booking_id"] == booking_id

    def test_get_missing(self, lambda_context):
        response = get.lambda_handler(_event({"booking_id": "missing"}), lambda_context)
        assert response["statusCode"] == 404

    def test_update(self, lambda_context):
        booking_id = _body(_create(lambda_context))["data"]["booking_id"]

        response = update.lambda_handler(
            _event(
                {"booking_id": booking_id},
                {
                    "room_id": "room-2",
                    "check_in_date": "2024-01-01",
                    "check_out_date": "2024-01-02",
                    "number_of_rooms": 1,
                },
            ),
            lambda_context,
        )

        assert response["statusCode"] == 200
        data = _body(response)["data"]
        assert data["room_id"] == "room-2"
        assert data["cost_amount"] == "250.00"

    def test_delete_twice(self, lambda_context):
        booking_id = _body(_create(lambda_context))["data"]["booking_id"]
        event = _event({"booking_id": booking_id})

        first = delete.lambda_handler(event, lambda_context)
        second = delete.lambda_handler(event, lambda_context)

        assert first["statusCode"] == 200
        assert _body(first)["data"] == {"deleted_count": 1}
        assert second["statusCode"] == 404


class TestUserBookingHandlers:
    def test_list(self, lambda_context):
        _create(lambda_context)

        response = list_by_user.lambda_handler(
            _event({"user_id": "user-1"}), lambda_context
        )

        assert response["statusCode"] == 200
        (summary,) = _body(response)["data"]
        assert summary["hotel"] == {"hotel_id": "hotel-1", "name": "Grand Hotel"}
        assert summary["room"]["name"] == "Deluxe Twin"

    def test_list_empty(self, lambda_context):
        response = list_by_user.lambda_handler(
            _event({"user_id": "user-2"}), lambda_context
        )
        assert response["statusCode"] == 404
        assert _body(response)["error"] == "Empty"

    def test_delete_all(self, lambda_context):
        _create(lambda_context, number_of_rooms=1)
        _create(lambda_context, number_of_rooms=1)

        response = delete_all.lambda_handler(
            _event({"user_id": "user-1"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"] == {"deleted_count": 2}
