"""Error handling infrastructure."""

from .error_middleware import EXIT_DOMAIN_ERROR, EXIT_SUCCESS, handle_domain_errors

__all__ = ["handle_domain_errors", "EXIT_SUCCESS", "EXIT_DOMAIN_ERROR"]
