from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.handlers.dependencies import get_manager
from services.booking.handlers.request_models import UpdateBookingRequest
from services.booking.handlers.response import (
    missing_parameter_response,
    to_api_response,
    validation_error_response,
)

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約変更 Lambda Handler（PUT /bookings/{booking_id}）"""
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return missing_parameter_response("booking_id")

    try:
        request = UpdateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return validation_error_response(e)

    logger.info(
        "Received update booking request",
        extra={"booking_id": booking_id, "room_id": request.room_id},
    )
    outcome = get_manager().update_booking_by_id(
        booking_id=booking_id,
        room_id=request.room_id,
        check_in_date=request.check_in_date,
        check_out_date=request.check_out_date,
        number_of_rooms=request.number_of_rooms,
    )
    return to_api_response(outcome)
