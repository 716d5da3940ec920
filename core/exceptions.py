"""
Custom exception classes for AreaScope.

These exceptions provide better error categorization and enable
more specific error handling in the surrounding UI layer.
"""


class AreaScopeError(Exception):
    """Base exception for all AreaScope errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class InvalidGeometryError(AreaScopeError):
    """Raised when drawn geometry cannot be measured."""

    def __init__(self, geometry_type: str = None, reason: str = None):
        if geometry_type:
            message = f"Invalid {geometry_type} geometry"
        else:
            message = "Invalid geometry"

        if reason:
            message += f": {reason}"

        super().__init__(message, details=geometry_type)
        self.geometry_type = geometry_type
        self.reason = reason


class InvalidInputError(AreaScopeError):
    """Raised when a formatter receives a negative or non-finite value."""

    def __init__(self, field_name: str, value, reason: str = None):
        message = f"Invalid value for '{field_name}': {value!r}"
        if reason:
            message += f". {reason}"
        super().__init__(message, details=f"{field_name}={value!r}")
        self.field_name = field_name
        self.value = value


class CoordinateTransformError(AreaScopeError):
    """Raised when coordinate transformation fails."""

    def __init__(self, from_crs: str, to_crs: str, reason: str = None):
        message = f"Error transforming coordinates from {from_crs} to {to_crs}"
        if reason:
            message += f": {reason}"
        super().__init__(message, details=f"{from_crs} -> {to_crs}")


class FileOperationError(AreaScopeError):
    """Raised when file operations (read/write/import/export) fail."""

    def __init__(self, operation: str, filename: str, reason: str = None):
        message = f"Error during {operation}: {filename}"
        if reason:
            message += f". {reason}"
        super().__init__(message, details=f"{operation} - {filename}")
