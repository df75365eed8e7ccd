from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from reservations.room.applications.perform_booking import PerformBookingService
from reservations.room.domain.value_object import BookingRequest
from reservations.room.handlers.request_models import BookRoomRequest
from reservations.room.handlers.response_models import to_booking_response
from reservations.room.infrastructure import (
    DynamoDBRoomByGuestAndDateRepository,
    DynamoDBRoomByHotelAndDateRepository,
)
from reservations.shared.domain import DomainException
from reservations.shared.utils import (
    api_response,
    error_response,
    get_logger,
    request_body,
)

logger = get_logger("booking-service")


service = PerformBookingService(
    room_by_hotel_and_date_repository=DynamoDBRoomByHotelAndDateRepository(),
    room_by_guest_and_date_repository=DynamoDBRoomByGuestAndDateRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室予約 Lambda Handler"""
    logger.info("Received book room request")

    try:
        request = BookRoomRequest.model_validate(request_body(event))
        booking_request = service.perform_booking(
            BookingRequest(
                guest_id=request.guest_id,
                hotel_id=request.hotel_id,
                room_number=request.room_number,
                date=request.date,
            )
        )
        return api_response(201, to_booking_response(booking_request))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to book the room", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to book the room")
        return error_response(e)
