"""
User-friendly error messages for AreaScope.

Maps exception types to helpful messages the drawing UI can show when it
declines to complete a measurement.
"""

from core.exceptions import (
    InvalidGeometryError,
    InvalidInputError,
    CoordinateTransformError,
    FileOperationError
)


# Error message templates
ERROR_MESSAGES = {
    InvalidGeometryError: {
        "title": "Shape Cannot Be Measured",
        "message": "The drawn shape does not have enough valid points.",
        "suggestions": [
            "Polygons need at least 3 distinct points",
            "Lines need at least 2 points",
            "Circles need a radius greater than zero"
        ]
    },

    InvalidInputError: {
        "title": "Invalid Value",
        "message": "A measurement value could not be converted.",
        "suggestions": [
            "Values must be finite numbers",
            "Areas and distances cannot be negative"
        ]
    },

    CoordinateTransformError: {
        "title": "Coordinate Conversion Error",
        "message": "The map coordinates could not be converted to longitude/latitude.",
        "suggestions": [
            "Keep the shape within the visible map extent",
            "Avoid drawing across the poles"
        ]
    },

    FileOperationError: {
        "title": "File Error",
        "message": "The file could not be read or written.",
        "suggestions": [
            "Check that the file exists and is a valid export",
            "Check that you have write permission in the target folder"
        ]
    },

    # Generic fallback
    Exception: {
        "title": "Unexpected Error",
        "message": "An unexpected error occurred.",
        "suggestions": [
            "Try the operation again",
            "If the problem persists, check the application log"
        ]
    }
}


def get_error_message(exception: Exception) -> dict:
    """
    Get user-friendly error message for an exception.

    Args:
        exception: The exception that occurred

    Returns:
        Dictionary with title, message, suggestions and, when available, details
    """
    for exc_class in type(exception).__mro__:
        if exc_class in ERROR_MESSAGES:
            error_info = dict(ERROR_MESSAGES[exc_class])
            break
    else:
        error_info = dict(ERROR_MESSAGES[Exception])

    error_info['suggestions'] = list(error_info['suggestions'])

    # The specific message says more than the details tag
    if str(exception):
        error_info['details'] = str(exception)

    return error_info


def format_error_message(exception: Exception) -> str:
    """
    Format error message as a string for display.
    """
    error_info = get_error_message(exception)

    message = f"{error_info['message']}\n"

    if 'details' in error_info:
        message += f"\nDetails: {error_info['details']}\n"

    if error_info['suggestions']:
        message += "\nSuggestions:\n"
        for suggestion in error_info['suggestions']:
            message += f"• {suggestion}\n"

    return message.strip()
