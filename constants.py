# constants.py
"""
Application-wide constants for AreaScope.
Centralizes geodesy parameters, comparison reference sizes and default settings.
"""

# Application Information
APP_NAME = "AreaScope"
APP_VERSION = "1.0.0"
ORGANIZATION = "AreaScope"

# Geodesy
# Spherical Mercator radius; all geodesic metrics are computed on this sphere
EARTH_RADIUS_M = 6378137.0
WGS84_EPSG = 4326
WEB_MERCATOR_EPSG = 3857
WEB_MERCATOR_LIMIT = 20037508.342789244

# Geometry minimums
MIN_RING_VERTICES = 3
MIN_POLYLINE_VERTICES = 2

# Unit conversion
SQUARE_METERS_PER_HECTARE = 10000.0
ACRES_PER_HECTARE = 2.471
METERS_PER_KILOMETER = 1000.0
SQUARE_METERS_PER_SQUARE_KILOMETER = 1000000.0

# Comparison reference sizes (approximations, for illustration only)
FOOTBALL_FIELD_M2 = 5351.0
CITY_BLOCK_HA = 2.0  # NYC city block
CENTRAL_PARK_HA = 341.0  # Central Park, NYC

# Export
EXPORT_FORMAT_VERSION = "1.0"
JSON_FILE_EXTENSION = ".json"

# Default Values
DEFAULT_PRECISION = 2
DEFAULT_SETTINGS = {
    "use_metric": True,
    "precision": DEFAULT_PRECISION,
    "default_dir": "",
    "log_level": "INFO",
}
CONFIG_DIR_NAME = ".areascope"
CONFIG_FILE_NAME = "config.json"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "areascope.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 3
