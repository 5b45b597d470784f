"""
Lambda handler for the combined cycle summary.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from cycle_insights.services.summary import build_cycle_summary, format_cycle_context
from cycle_insights.utils.logging import logger
from cycle_insights.utils.middleware import handle_errors, json_response, parse_request

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    request = parse_request(event)
    summary = build_cycle_summary(request.history, request.reference_date)

    logger.info("Cycle summary built", extra={
        "cycle_phase": summary.phase.cycle_phase.value,
        "has_prediction": summary.prediction.has_prediction
    })

    body = summary.model_dump(mode="json", by_alias=True)
    body["context"] = format_cycle_context(summary)
    return json_response(200, body)
