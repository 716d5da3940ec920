# controllers/session.py
"""
Session start-up: settings, logging and the drawing controller.
"""

from typing import Optional

from controllers.history_controller import MeasurementHistory
from controllers.measurement_controller import MeasurementController
from core.geometry_types import CoordinateMode
from utils.config import load_settings
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def start_session(
    config_dir: Optional[str] = None,
    log_dir: Optional[str] = None,
    mode=CoordinateMode.GEOGRAPHIC,
    history: Optional[MeasurementHistory] = None
) -> MeasurementController:
    """
    Load user settings, configure logging and return a ready controller.

    Args:
        config_dir: Settings directory (~/.areascope if None)
        log_dir: Log directory (~/.areascope/logs if None)
        mode: Coordinate mode of the map the controller serves
        history: Existing history to continue, e.g. after an import

    Raises:
        FileOperationError: If the settings file exists but is unreadable
    """
    settings = load_settings(config_dir)
    log_file = setup_logging(log_dir, settings["log_level"])
    controller = MeasurementController.from_settings(settings, mode=mode, history=history)
    logger.info(
        f"Session started: {'metric' if controller.use_metric else 'imperial'} units, "
        f"precision {controller.precision}, log file {log_file}"
    )
    return controller
