from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from reservations.hotel.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from reservations.room.applications.add_room import AddRoomService
from reservations.room.domain.value_object import Room
from reservations.room.handlers.request_models import AddRoomRequest, OpenRoomRequest
from reservations.room.handlers.response_models import (
    to_room_list_response,
    to_room_response,
)
from reservations.room.infrastructure import (
    DynamoDBRoomByHotelAndDateRepository,
    DynamoDBRoomRepository,
)
from reservations.shared.domain import DomainException
from reservations.shared.utils import (
    api_response,
    error_response,
    get_logger,
    request_body,
)

logger = get_logger("room-service")


service = AddRoomService(
    hotel_repository=DynamoDBHotelRepository(),
    room_repository=DynamoDBRoomRepository(),
    room_by_hotel_and_date_repository=DynamoDBRoomByHotelAndDateRepository(),
)


def _with_path_params(event: APIGatewayProxyEventV2) -> dict:
    """パスパラメータ（hotel_id, room_number）をボディにマージする"""
    return {**request_body(event), **(event.path_parameters or {})}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室登録 Lambda Handler"""
    logger.info("Received add room request")

    try:
        request = AddRoomRequest.model_validate(_with_path_params(event))
        room = service.add_room_to_hotel(
            Room(hotel_id=request.hotel_id, room_number=request.room_number)
        )
        return api_response(201, to_room_response(room))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to add room", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to add room")
        return error_response(e)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def open_dates_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室の日付別予約枠登録 Lambda Handler"""
    logger.info("Received open room dates request")

    try:
        request = OpenRoomRequest.model_validate(_with_path_params(event))
        room = Room(hotel_id=request.hotel_id, room_number=request.room_number)
        opened = [
            service.open_room_for_date(room, booking_date)
            for booking_date in request.dates
        ]
        return api_response(201, to_room_list_response(opened))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to open room dates", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to open room dates")
        return error_response(e)
