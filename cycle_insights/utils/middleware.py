"""
Middleware functions for request processing.
"""
import json
from functools import wraps
from typing import Any, Callable, Dict

from pydantic import ValidationError

from cycle_insights.models.cycle import CycleHistoryRequest
from cycle_insights.services.exceptions import InvalidArgumentError
from cycle_insights.utils.logging import log_exception, logger

JSON_HEADERS = {"Content-Type": "application/json"}

def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    """
    Build an API Gateway Lambda proxy response.

    Args:
        status_code: HTTP status code
        body: JSON-serializable body, or an already serialized string

    Returns:
        API Gateway Lambda proxy response
    """
    if not isinstance(body, str):
        body = json.dumps(body, default=str)
    return {
        "statusCode": status_code,
        "headers": JSON_HEADERS,
        "body": body,
        "isBase64Encoded": False
    }

def parse_request(event: Dict[str, Any]) -> CycleHistoryRequest:
    """
    Parse the cycle history request from a Lambda proxy event.

    The body may be a JSON string (API Gateway) or an already decoded dict
    (direct invocation).

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
        ValidationError: If the body does not describe a cycle history
    """
    body = event.get("body")
    if body is None or body == "":
        body = {}
    elif isinstance(body, str):
        body = json.loads(body)

    request = CycleHistoryRequest.model_validate(body)
    logger.debug("Parsed cycle request", extra={
        "cycles": len(request.cycles),
        "reference_date": str(request.reference_date)
    })
    return request

def handle_errors(f: Callable) -> Callable:
    """
    Decorator translating handler exceptions into proxy responses.

    Malformed input becomes a 400 with a descriptive error. Anything else
    is logged and becomes a 500.

    Args:
        f: Handler function to wrap

    Returns:
        Wrapped handler function
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], *args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            return f(event, *args, **kwargs)
        except json.JSONDecodeError as e:
            logger.warning("Request body is not valid JSON", extra={"error": str(e)})
            return json_response(400, {"error": "Request body must be valid JSON"})
        except ValidationError as e:
            logger.warning("Invalid request", extra={"error_count": e.error_count()})
            return json_response(400, {
                "error": "Invalid request",
                "details": e.errors(include_url=False, include_context=False)
            })
        except InvalidArgumentError as e:
            logger.warning("Invalid argument", extra={"error": str(e)})
            return json_response(400, {"error": str(e)})
        except Exception as e:
            log_exception(logger, "Unhandled error in handler", extra={
                "error_type": e.__class__.__name__
            })
            return json_response(500, {"error": "Internal Server Error"})

    return wrapped
