"""
Constants for the Latch client library.
Values must match what the Latch API expects on the wire.
"""

# Signed request headers
AUTHORIZATION_HEADER_NAME = "Authorization"
DATE_HEADER_NAME = "X-11Paths-Date"
AUTHORIZATION_METHOD = "11PATHS"
AUTHORIZATION_HEADER_FIELD_SEPARATOR = " "

# Only headers in this namespace may be signed (case-insensitive)
X_11PATHS_HEADER_PREFIX = "X-11paths-"
X_11PATHS_HEADER_SEPARATOR = ":"

PARAM_SEPARATOR = "&"
PARAM_VALUE_SEPARATOR = "="
QUERYSTRING_DELIMITER = "?"

# UTC, second precision, no timezone marker
UTC_STRING_FORMAT = "%Y-%m-%d %H:%M:%S"

CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"

# API endpoints
DEFAULT_API_HOST = "https://latch.elevenpaths.com"
API_VERSION = "1.0"
API_BASE_URL = "/api/" + API_VERSION

API_CHECK_STATUS_URL = API_BASE_URL + "/status"
API_PAIR_URL = API_BASE_URL + "/pair"
API_PAIR_WITH_ID_URL = API_BASE_URL + "/pairWithId"
API_UNPAIR_URL = API_BASE_URL + "/unpair"
API_LOCK_URL = API_BASE_URL + "/lock"
API_UNLOCK_URL = API_BASE_URL + "/unlock"
API_HISTORY_URL = API_BASE_URL + "/history"
API_OPERATION_URL = API_BASE_URL + "/operation"

API_APPLICATION_URL = API_BASE_URL + "/application"
API_SUBSCRIPTION_URL = API_BASE_URL + "/subscription"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
}
