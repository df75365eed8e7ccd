from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from reservations.hotel.applications.find_hotels import FindHotelsService
from reservations.hotel.handlers.request_models import FindHotelsRequest
from reservations.hotel.handlers.response_models import to_list_response
from reservations.hotel.infrastructure.dynamodb_hotel_by_city_repository import (
    DynamoDBHotelByCityRepository,
)
from reservations.hotel.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from reservations.shared.domain import DomainException
from reservations.shared.utils import api_response, error_response, get_logger

logger = get_logger("hotel-service")


service = FindHotelsService(
    hotel_repository=DynamoDBHotelRepository(),
    hotel_by_city_repository=DynamoDBHotelByCityRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """都市別ホテル検索 Lambda Handler"""
    query = event.query_string_parameters or {}
    logger.info("Received find hotels request", extra={"city": query.get("city")})

    try:
        request = FindHotelsRequest.model_validate(query)
        hotels = service.find_all_hotels_in_the_city(request.city)
        return api_response(200, to_list_response(hotels))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to find hotels", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to find hotels")
        return error_response(e)
