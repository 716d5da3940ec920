# exporters/json_exporter.py
"""
JSON exporter for measurements.

Two document shapes are written:
- a single measurement record (the panel's "Export JSON" action)
- a history document with metadata, a summary block and all records
"""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from constants import APP_NAME, APP_VERSION, EXPORT_FORMAT_VERSION, JSON_FILE_EXTENSION
from core.exceptions import FileOperationError
from core.formatter import to_hectares, to_kilometers
from core.measurement import Measurement
from utils.logger import get_logger

logger = get_logger(__name__)


class JSONExporter:
    """
    Exports measurements to JSON files.
    """

    @staticmethod
    def build_summary(measurements: Iterable[Measurement]) -> Dict[str, Any]:
        """
        Key figures over a set of measurements.

        Returns:
            Dict with total_measurements, total_area_ha (None if no shape has
            an area), total_distance_km (None if there are no lines) and the
            sorted list of measurement types present
        """
        measurements = list(measurements)
        areas = [m.area for m in measurements if m.area is not None]
        distances = [m.distance for m in measurements if m.distance is not None]

        return {
            "total_measurements": len(measurements),
            "total_area_ha": to_hectares(sum(areas)) if areas else None,
            "total_distance_km": to_kilometers(sum(distances)) if distances else None,
            "measurement_types": sorted({m.type.value for m in measurements}),
        }

    @staticmethod
    def build_history_document(measurements: Iterable[Measurement], project_name: Optional[str] = None) -> Dict[str, Any]:
        measurements = list(measurements)
        return {
            "version": EXPORT_FORMAT_VERSION,
            "metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "project_name": project_name,
                "report_id": str(uuid.uuid4()),
                "software": f"{APP_NAME} {APP_VERSION}",
            },
            "summary": JSONExporter.build_summary(measurements),
            "measurements": [m.to_record() for m in measurements],
        }

    @staticmethod
    def _write(data: Dict[str, Any], filename: str) -> Path:
        path = Path(filename)
        if path.suffix.lower() != JSON_FILE_EXTENSION:
            raise FileOperationError("export", filename, f"File name must end in {JSON_FILE_EXTENSION}")

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error exporting JSON file {filename}: {e}")
            raise FileOperationError("export", filename, str(e))

        logger.info(f"JSON file exported successfully: {filename}")
        return path

    @staticmethod
    def export_measurement(measurement: Measurement, filename: str) -> Path:
        """
        Write one measurement record.

        Raises:
            FileOperationError: If the file cannot be written
        """
        return JSONExporter._write(measurement.to_record(), filename)

    @staticmethod
    def export_history(measurements: Iterable[Measurement], filename: str, project_name: Optional[str] = None) -> Path:
        """
        Write a history document for all given measurements.

        Args:
            measurements: A MeasurementHistory or any iterable of measurements
            filename: Output path (.json)
            project_name: Optional project label for the metadata block

        Raises:
            FileOperationError: If there is nothing to export or the file cannot be written
        """
        measurements = list(measurements)
        if not measurements:
            raise FileOperationError("export", filename, "No measurements to export")

        document = JSONExporter.build_history_document(measurements, project_name)
        return JSONExporter._write(document, filename)
