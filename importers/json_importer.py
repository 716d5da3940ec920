# importers/json_importer.py
"""
JSON importer for measurements written by JSONExporter.

Accepts either a single measurement record or a history document.
Metrics are recomputed from the stored geometry on import.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from constants import JSON_FILE_EXTENSION
from core.exceptions import FileOperationError, InvalidGeometryError
from core.measurement import Measurement, measurement_from_record
from utils.logger import get_logger

logger = get_logger(__name__)


class JSONImporter:
    """
    Imports measurements from JSON files.
    """

    SUPPORTED_EXTENSIONS: List[str] = [JSON_FILE_EXTENSION]

    @classmethod
    def validate_file(cls, filepath: str) -> bool:
        """
        Raises:
            FileOperationError: If the file is missing or has the wrong extension
        """
        path = Path(filepath)

        if not path.is_file():
            raise FileOperationError("import", filepath, "The file does not exist")

        if path.suffix.lower() not in cls.SUPPORTED_EXTENSIONS:
            raise FileOperationError(
                "import",
                filepath,
                f"Supported extensions: {', '.join(cls.SUPPORTED_EXTENSIONS)}"
            )

        return True

    @staticmethod
    def validate_data(data: Any) -> Tuple[bool, str]:
        """
        Validate the structure of an exported document.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(data, dict):
            return False, "The file does not contain a JSON object"

        if "measurements" in data:
            if not isinstance(data["measurements"], list):
                return False, "The 'measurements' field must be a list"
            if not all(isinstance(r, dict) for r in data["measurements"]):
                return False, "Every entry in 'measurements' must be an object"
            return True, ""

        if "type" not in data:
            return False, "Missing 'type' field in measurement record"

        return True, ""

    @classmethod
    def import_file(cls, filepath: str) -> List[Measurement]:
        """
        Import measurements from a file, in stored order.

        Raises:
            FileOperationError: If the file cannot be read, parsed or a record is invalid
        """
        cls.validate_file(filepath)

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading JSON file {filepath}: {e}")
            raise FileOperationError("import", filepath, str(e))

        is_valid, error_msg = cls.validate_data(data)
        if not is_valid:
            raise FileOperationError("import", filepath, error_msg)

        records: List[Dict] = data["measurements"] if "measurements" in data else [data]

        measurements = []
        for position, record in enumerate(records):
            try:
                measurements.append(measurement_from_record(record))
            except (InvalidGeometryError, ValueError, TypeError) as e:
                logger.error(f"Invalid record {position} in {filepath}: {e}")
                raise FileOperationError("import", filepath, f"Record {position}: {e}")

        logger.info(f"Imported {len(measurements)} measurements from {filepath}")
        return measurements
