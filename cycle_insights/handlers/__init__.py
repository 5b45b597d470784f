"""
Lambda handlers package for AWS Lambda functions.
"""
from .phase import handler as phase_handler
from .prediction import handler as prediction_handler
from .summary import handler as summary_handler

__all__ = ["phase_handler", "prediction_handler", "summary_handler"]
