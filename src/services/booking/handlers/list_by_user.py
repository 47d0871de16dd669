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
    """ユーザーの予約一覧 Lambda Handler（GET /users/{user_id}/bookings）"""
    user_id = (event.path_parameters or {}).get("user_id")
    if not user_id:
        return missing_parameter_response("user_id")

    logger.info("Listing bookings", extra={"user_id": user_id})
    return to_api_response(get_manager().get_all_bookings_by_user(user_id))
