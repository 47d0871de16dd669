from .http_response import api_response, error_response, success_response
from .logger import get_logger

__all__ = ["api_response", "error_response", "get_logger", "success_response"]
