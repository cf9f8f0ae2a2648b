"""
My Bus Tracker

An asyncio client library for the My Bus Tracker realtime transit
information service provided by the City of Edinburgh Council.

This library is not endorsed by or affiliated with City of Edinburgh
Council, Lothian Buses or Ineo Systrans. For the full web API guide, and
to request an API key, visit http://www.mybustracker.co.uk/?page=API%20Key
"""

from .version import __version__
from .api import (
    CommunicationException,
    DateOutOfBoundsException,
    InternalException,
    MyBusTracker,
    MyBusTrackerException,
    TooManyDeparturesException,
    TooManyTimetablesException,
    ValidationException,
)
from . import models

__all__ = [
    "__version__",
    "CommunicationException",
    "DateOutOfBoundsException",
    "InternalException",
    "MyBusTracker",
    "MyBusTrackerException",
    "TooManyDeparturesException",
    "TooManyTimetablesException",
    "ValidationException",
    "models",
]
