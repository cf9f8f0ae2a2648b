"""
API integration for the My Bus Tracker client.

This module handles communication with the My Bus Tracker web service,
including key derivation, request construction and response decoding.
"""

from .exceptions import (
    CommunicationException,
    DateOutOfBoundsException,
    InternalException,
    MyBusTrackerException,
    TooManyDeparturesException,
    TooManyTimetablesException,
    ValidationException,
)
from .api_key import ApiKey, generate_api_key
from .request_builder import BASE_URL, RequestBuilder
from .http_client import AioHttpClient, HTTPClient
from .api_manager import MyBusTracker

__all__ = [
    "CommunicationException",
    "DateOutOfBoundsException",
    "InternalException",
    "MyBusTrackerException",
    "TooManyDeparturesException",
    "TooManyTimetablesException",
    "ValidationException",
    "ApiKey",
    "generate_api_key",
    "BASE_URL",
    "RequestBuilder",
    "AioHttpClient",
    "HTTPClient",
    "MyBusTracker",
]
