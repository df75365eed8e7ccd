from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from reservations.room.applications.find_booked_rooms import FindBookedRoomsService
from reservations.room.handlers.request_models import FindBookedRoomsRequest
from reservations.room.handlers.response_models import to_room_list_response
from reservations.room.infrastructure import DynamoDBRoomByGuestAndDateRepository
from reservations.shared.domain import DomainException
from reservations.shared.utils import api_response, error_response, get_logger

logger = get_logger("booking-service")


repository = DynamoDBRoomByGuestAndDateRepository()
service = FindBookedRoomsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """宿泊客の予約済み客室検索 Lambda Handler"""
    path_params = event.path_parameters or {}
    query = event.query_string_parameters or {}
    logger.info(
        "Received find booked rooms request",
        extra={"guest_id": path_params.get("guest_id"), "date": query.get("date")},
    )

    try:
        request = FindBookedRoomsRequest.model_validate(
            {"guest_id": path_params.get("guest_id"), "date": query.get("date")}
        )
        rooms = service.find_booked_rooms_for_guest_and_date(
            request.guest_id, request.date
        )
        return api_response(200, to_room_list_response(rooms))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to find booked rooms", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to find booked rooms")
        return error_response(e)
