"""
Version information for the My Bus Tracker client.

Centralized version management, also used to build the client
identification header sent with every request.
"""

from importlib.metadata import PackageNotFoundError, version

__app_name__ = "my-bus-tracker"
__app_display_name__ = "My Bus Tracker"
__description__ = "Asynchronous client for the My Bus Tracker web service"

try:
    __version__ = version(__app_name__)
except PackageNotFoundError:
    # Running from a source checkout without installed metadata
    __version__ = "unknown"

# API information
__api_provider__ = "City of Edinburgh Council - My Bus Tracker"
__api_url__ = "http://www.mybustracker.co.uk/"
__api_guide_version__ = "F"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_display_name__} v{__version__}"


def get_user_agent() -> str:
    """Get the User-Agent header value identifying this client."""
    return f"{__app_name__}/{__version__}"
