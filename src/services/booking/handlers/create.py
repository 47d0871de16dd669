from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.handlers.dependencies import get_manager
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response import (
    missing_parameter_response,
    to_api_response,
    validation_error_response,
)

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler（POST /users/{user_id}/bookings）"""
    user_id = (event.path_parameters or {}).get("user_id")
    if not user_id:
        return missing_parameter_response("user_id")

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return validation_error_response(e)

    logger.info(
        "Received create booking request",
        extra={"user_id": user_id, "room_id": request.room_id},
    )
    outcome = get_manager().create_booking(
        user_id=user_id,
        room_id=request.room_id,
        check_in_date=request.check_in_date,
        check_out_date=request.check_out_date,
        number_of_rooms=request.number_of_rooms,
    )
    return to_api_response(outcome, success_status=201)
