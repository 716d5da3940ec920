"""
Controllers package for AreaScope.
Provides the drawing-completion controller, the session history and
session start-up.
"""

from controllers.history_controller import MeasurementHistory
from controllers.measurement_controller import MeasurementController
from controllers.session import start_session

__all__ = [
    'MeasurementHistory',
    'MeasurementController',
    'start_session'
]
