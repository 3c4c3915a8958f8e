from .error_handler import error_response_middleware
from .security_headers import SecurityHeadersMiddleware

__all__ = ["error_response_middleware", "SecurityHeadersMiddleware"]
