"""
Lambda handler for cycle predictions.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from cycle_insights.services.cycle import get_upcoming_events, predict
from cycle_insights.utils.logging import logger
from cycle_insights.utils.middleware import handle_errors, json_response, parse_request

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle prediction request.

    Args:
        event: API Gateway Lambda proxy event with the cycle history in the body
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response with predicted dates and countdowns
    """
    request = parse_request(event)
    prediction = predict(request.history)

    if not prediction.has_prediction:
        logger.info("Not enough data to predict", extra={"cycles": len(request.cycles)})

    body = prediction.model_dump(mode="json", by_alias=True)
    body["upcoming"] = get_upcoming_events(prediction, request.reference_date).model_dump(
        mode="json", by_alias=True
    )
    return json_response(200, body)
