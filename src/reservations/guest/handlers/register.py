from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from reservations.guest.applications.register_guest import RegisterGuestService
from reservations.guest.domain.entity import Guest
from reservations.guest.handlers.request_models import RegisterGuestRequest
from reservations.guest.handlers.response_models import to_response
from reservations.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)
from reservations.shared.domain import DomainException
from reservations.shared.utils import (
    api_response,
    error_response,
    get_logger,
    request_body,
)

logger = get_logger("guest-service")


repository = DynamoDBGuestRepository()
service = RegisterGuestService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """宿泊客登録 Lambda Handler"""
    logger.info("Received register guest request")

    try:
        request = RegisterGuestRequest.model_validate(request_body(event))
        guest = service.register_new_guest(
            Guest(
                id=request.id,
                first_name=request.first_name,
                last_name=request.last_name,
            )
        )
        return api_response(201, to_response(guest))

    except (ValidationError, DomainException) as e:
        logger.warning("Failed to register guest", extra={"error": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to register guest")
        return error_response(e)
