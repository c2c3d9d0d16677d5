"""Error handling middleware for CLI handlers."""

from typing import Callable
import functools
import sys

from orderflow.domain.core.exceptions import DomainException
from orderflow.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_DOMAIN_ERROR = 1


def handle_domain_errors(handler_func: Callable[..., int]) -> Callable[..., int]:
    """
    Wrap a handler so domain errors become an exit status.

    The error is logged with its code and its message is written to stderr.
    Anything that is not a DomainException propagates unchanged.

    Args:
        handler_func: Handler returning an exit status

    Returns:
        Wrapped handler
    """

    @functools.wraps(handler_func)
    def wrapped_handler(*args, **kwargs) -> int:
        try:
            return handler_func(*args, **kwargs)
        except DomainException as e:
            logger.error(
                "Domain error",
                error_code=e.error_code,
                error=e.message,
                details=e.details,
            )
            print(f"Error: {e.message}", file=sys.stderr)
            return EXIT_DOMAIN_ERROR

    return wrapped_handler
