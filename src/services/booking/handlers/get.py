from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import get_manager
from services.booking.handlers.response import (
    missing_parameter_response,
    to_api_response,
)

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler（GET /bookings/{booking_id}）"""
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return missing_parameter_response("booking_id")

    logger.info("Fetching booking", extra={"booking_id": booking_id})
    return to_api_response(get_manager().get_booking_by_id(booking_id))
