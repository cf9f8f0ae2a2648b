"""
Web service groups of the My Bus Tracker API.

Each group is a mixin over ``WebService``; ``MyBusTracker`` combines all
three.
"""

from .base import WebService
from .topological_service import TopologicalServices
from .disruptions_service import DisruptionsServices
from .bus_times_service import BusTimesService

__all__ = [
    "WebService",
    "TopologicalServices",
    "DisruptionsServices",
    "BusTimesService",
]
