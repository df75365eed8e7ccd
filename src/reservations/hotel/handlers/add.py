from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from reservations.hotel.applications.add_hotel import AddHotelService
from reservations.hotel.domain.entity import Hotel
from reservations.hotel.domain.value_object import Address
from reservations.hotel.handlers.request_models import AddHotelRequest
from reservations.hotel.handlers.response_models import to_response
from reservations.hotel.infrastructure.dynamodb_hotel_by_city_repository import (
    DynamoDBHotelByCityRepository,
)
from reservations.hotel.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from reservations.shared.domain import DomainException
from reservations.shared.utils import (
    api_response,
    error_response,
    get_logger,
    request_body,
)

logger = get_logger("hotel-service")


service = AddHotelService(
    hotel_repository=DynamoDBHotelRepository(),
    hotel_by_city_repository=DynamoDBHotelByCityRepository(),
)


def _to_hotel(request: AddHotelRequest) -> Hotel:
    """リクエストボディから Hotel を構築する"""
    return Hotel(
        id=request.id,
        name=request.name,
        phone=request.phone,
        address=Address(
            street=request.address.street,
            city=request.address.city,
            state_or_province=request.address.state_or_province,
            postal_code=request.address.postal_code,
            country=request.address.country,
        ),
    )


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル登録 Lambda Handler"""
    logger.info("Received add hotel request")

    try:
        request = AddHotelRequest.model_validate(request_body(event))
        hotel = service.add_hotel(_to_hotel(request))
        return api_response(201, to_response(hotel))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to add hotel", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to add hotel")
        return error_response(e)
