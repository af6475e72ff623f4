"""
Latch Client Library

A Python client for the Latch API. Requests are signed with the
application secret (HMAC-SHA1) using the 11PATHS authorization scheme.

Example usage:
    from latch_client import LatchApp

    latch = LatchApp.from_credentials("your-app-id", "your-secret")
    response = latch.status("account-id")
"""

from .app import FeatureMode, LatchApp
from .client import LatchClient
from .constants import (
    AUTHORIZATION_HEADER_NAME,
    AUTHORIZATION_METHOD,
    DATE_HEADER_NAME,
    DEFAULT_API_HOST,
    DEFAULT_CONFIG,
    X_11PATHS_HEADER_PREFIX,
)
from .exceptions import (
    ConfigurationError,
    HTTPError,
    InvalidHeaderError,
    LatchClientError,
    ResponseError,
    SigningError,
)
from .proxy import ProxyConfig
from .response import Error, LatchResponse
from .signer import (
    Credential,
    HttpMethod,
    SignableRequest,
    SignedHeaders,
    sign,
)
from .user import LatchUser

__version__ = "1.0.0"
__all__ = [
    "LatchApp",
    "LatchUser",
    "LatchClient",
    "FeatureMode",
    "ProxyConfig",
    "LatchResponse",
    "Error",
    "Credential",
    "HttpMethod",
    "SignableRequest",
    "SignedHeaders",
    "sign",
    "LatchClientError",
    "SigningError",
    "InvalidHeaderError",
    "ConfigurationError",
    "HTTPError",
    "ResponseError",
    "AUTHORIZATION_HEADER_NAME",
    "AUTHORIZATION_METHOD",
    "DATE_HEADER_NAME",
    "DEFAULT_API_HOST",
    "DEFAULT_CONFIG",
    "X_11PATHS_HEADER_PREFIX",
]
