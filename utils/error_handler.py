"""
Error reporting at the drawing boundary.

The map UI does not handle exceptions from a completed drawing. A declined
shape is logged and turned into the title/message/suggestions dict from
utils.error_messages, which the UI shows next to the shape.
"""

import functools
from typing import Callable, Dict, Optional, Tuple, Type

from core.exceptions import AreaScopeError
from utils.error_messages import get_error_message
from utils.logger import get_logger, log_exception

logger = get_logger(__name__)


def report_error(exception: Exception, context: Optional[str] = None) -> Dict:
    """
    Log a failure and return the information the UI displays for it.

    AreaScope errors come from user input (too few points, a bad radius,
    a shape off the map) and are logged as warnings. Anything else is
    logged with its traceback.

    Args:
        exception: The exception that was raised
        context: What was being done, e.g. "completing a polygon"

    Returns:
        Dict with 'title', 'message', 'suggestions' and usually 'details'
    """
    if isinstance(exception, AreaScopeError):
        where = f" while {context}" if context else ""
        logger.warning(f"Declined{where}: {type(exception).__name__}: {exception}")
    else:
        log_exception(logger, exception, context)

    return get_error_message(exception)


def declined_as_result(
    context: str,
    error_type: Type[Exception] = AreaScopeError
) -> Callable:
    """
    Decorator turning a raising call into a (result, error_info) pair.

    The wrapped call returns (value, None) on success and
    (None, report_error(...)) when error_type is raised. Other exceptions
    propagate unchanged.

    Example:
        @declined_as_result("completing a drawing")
        def finish_drawing(self, geometry_type, *args, **kwargs):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Tuple[Optional[object], Optional[Dict]]:
            try:
                return func(*args, **kwargs), None
            except error_type as e:
                return None, report_error(e, context)

        return wrapper
    return decorator
