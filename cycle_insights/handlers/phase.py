"""
Lambda handler for cycle phase detection.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from cycle_insights.services.cycle import calculate_average_cycle_length
from cycle_insights.services.phase import compute_phase, get_phase_info
from cycle_insights.utils.logging import logger
from cycle_insights.utils.middleware import handle_errors, json_response, parse_request

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle phase detection request.

    Args:
        event: API Gateway Lambda proxy event with the cycle history in the body
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response with cycle day, phase and phase copy
    """
    request = parse_request(event)
    history = request.history

    average_cycle_length = calculate_average_cycle_length(history)
    result = compute_phase(
        history[0] if history else None,
        request.reference_date,
        average_cycle_length
    )

    logger.info("Phase computed", extra={
        "cycle_day": result.cycle_day,
        "cycle_phase": result.cycle_phase.value,
        "average_cycle_length": average_cycle_length
    })

    body = result.model_dump(mode="json", by_alias=True)
    body["phaseInfo"] = get_phase_info(result.cycle_phase).model_dump(mode="json")
    return json_response(200, body)
