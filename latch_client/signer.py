"""
Request signing for the Latch API.

Builds the canonical string-to-sign from an HTTP request and signs it with
HMAC-SHA1 so the server can recompute the same signature. Every function in
this module is pure apart from reading the clock in get_current_utc().

Format of the string to sign (lines joined with "\\n"):

    METHOD
    timestamp
    serialized X-11paths- headers (may be empty)
    query string (path and encoded query)
    serialized body params (only present when non-empty)
"""

import base64
import datetime
import hashlib
import hmac
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Union
from urllib.parse import quote

from .constants import (
    AUTHORIZATION_HEADER_FIELD_SEPARATOR,
    AUTHORIZATION_HEADER_NAME,
    AUTHORIZATION_METHOD,
    DATE_HEADER_NAME,
    PARAM_SEPARATOR,
    PARAM_VALUE_SEPARATOR,
    UTC_STRING_FORMAT,
    X_11PATHS_HEADER_PREFIX,
    X_11PATHS_HEADER_SEPARATOR,
)
from .exceptions import InvalidHeaderError, SigningError

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Credential:
    """Application ID and secret issued by Latch."""

    app_id: str
    secret_key: str = field(repr=False)


@dataclass(frozen=True)
class SignableRequest:
    """
    A request as seen by the signer.

    Args:
        http_method: GET, POST, PUT or DELETE
        query_string: Path from the first slash, including the encoded query
        custom_headers: X-11paths- headers to sign, excluding the date header
        body_parameters: Form parameters sent in the body (not url-encoded)
    """

    http_method: Union[HttpMethod, str]
    query_string: str
    custom_headers: Optional[Mapping[str, str]] = None
    body_parameters: Optional[Mapping[str, str]] = None


@dataclass(frozen=True)
class SignedHeaders:
    """The two headers that authenticate a request."""

    authorization: str
    date: str

    def as_dict(self) -> Dict[str, str]:
        return {
            AUTHORIZATION_HEADER_NAME: self.authorization,
            DATE_HEADER_NAME: self.date,
        }


def get_current_utc() -> str:
    """Current UTC time formatted for the X-11Paths-Date header."""
    return datetime.datetime.now(datetime.timezone.utc).strftime(UTC_STRING_FORMAT)


def url_encode(value: str) -> str:
    """Percent-encode a value as UTF-8 (space becomes %20)."""
    return quote(value, safe='', encoding='utf-8')


def serialize_headers(headers: Optional[Mapping[str, str]]) -> str:
    """
    Serialize X-11paths- headers for signing.

    Keys are lower-cased and sorted, newlines in values are replaced by a
    space, and pairs are joined as "key:value" separated by single spaces.

    Raises:
        InvalidHeaderError: If a key does not start with X-11paths-, or two
            keys differ only by case
    """
    if not headers:
        return ""

    prefix = X_11PATHS_HEADER_PREFIX.lower()
    normalized = {}
    for key, value in headers.items():
        if not key.lower().startswith(prefix):
            raise InvalidHeaderError(
                f"Error serializing headers. Only specific {X_11PATHS_HEADER_PREFIX} "
                f"headers need to be signed, got {key!r}"
            )
        lowered = key.lower()
        if lowered in normalized:
            raise InvalidHeaderError(
                f"Error serializing headers. Duplicate header {key!r}"
            )
        normalized[lowered] = value.replace('\n', ' ')

    return AUTHORIZATION_HEADER_FIELD_SEPARATOR.join(
        f"{key}{X_11PATHS_HEADER_SEPARATOR}{normalized[key]}"
        for key in sorted(normalized)
    )


def serialize_params(params: Optional[Mapping[str, str]]) -> str:
    """
    Serialize body parameters for signing and for the form body.

    Sorted by raw key, key and value url-encoded, joined with "&". A None
    value is serialized as an empty value.
    """
    if not params:
        return ""

    return PARAM_SEPARATOR.join(
        f"{url_encode(key)}{PARAM_VALUE_SEPARATOR}{url_encode(params[key] or '')}"
        for key in sorted(params)
    )


def build_string_to_sign(request: SignableRequest, timestamp: str) -> str:
    method = request.http_method
    if isinstance(method, HttpMethod):
        method = method.value

    string_to_sign = "\n".join([
        method.upper().strip(),
        timestamp,
        serialize_headers(request.custom_headers),
        request.query_string.strip(),
    ])

    serialized_params = serialize_params(request.body_parameters)
    if serialized_params:
        string_to_sign += "\n" + serialized_params

    return string_to_sign


def _ascii_bytes(value: str) -> bytes:
    # Characters outside ASCII become "?", the server decodes the same way
    return value.encode('ascii', errors='replace')


def sign_data(secret_key: str, data: str) -> str:
    """
    Sign data with HMAC-SHA1.

    Args:
        secret_key: Application secret
        data: String to sign

    Returns:
        Base64 encoding of the raw HMAC-SHA1 digest

    Raises:
        SigningError: If the secret or the data is empty
    """
    if not data:
        raise SigningError("String to sign can not be null or empty.")
    if not secret_key:
        raise SigningError("Secret key used to sign can not be null or empty.")

    mac = hmac.new(_ascii_bytes(secret_key), _ascii_bytes(data), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode('ascii')


def sign(credential: Credential, request: SignableRequest,
         timestamp: Optional[str] = None) -> SignedHeaders:
    """
    Calculate the headers the server needs to verify a request.

    Args:
        credential: Application ID and secret
        request: Request to sign
        timestamp: Value for X-11Paths-Date; current UTC time if omitted

    Returns:
        SignedHeaders with the Authorization and X-11Paths-Date values

    Raises:
        SigningError: If the secret is empty, the app ID contains a space
            or a header is not signable
    """
    if AUTHORIZATION_HEADER_FIELD_SEPARATOR in credential.app_id:
        raise SigningError("Application ID can not contain spaces.")
    if timestamp is None:
        timestamp = get_current_utc()

    string_to_sign = build_string_to_sign(request, timestamp)
    signature = sign_data(credential.secret_key, string_to_sign)

    authorization = AUTHORIZATION_HEADER_FIELD_SEPARATOR.join(
        [AUTHORIZATION_METHOD, credential.app_id, signature]
    )
    logger.debug("Signed %s %s for app %s", request.http_method,
                 request.query_string, credential.app_id)

    return SignedHeaders(authorization=authorization, date=timestamp)


def _get_part_from_header(part: int, header: Optional[str]) -> str:
    if header:
        parts = header.split(AUTHORIZATION_HEADER_FIELD_SEPARATOR)
        if len(parts) > part:
            return parts[part]
    return ""


def get_auth_method_from_header(authorization_header: Optional[str]) -> str:
    """Authorization method (first field), e.g. "11PATHS"."""
    return _get_part_from_header(0, authorization_header)


def get_app_id_from_header(authorization_header: Optional[str]) -> str:
    """Application ID (second field)."""
    return _get_part_from_header(1, authorization_header)


def get_signature_from_header(authorization_header: Optional[str]) -> str:
    """Base64 signature (third field)."""
    return _get_part_from_header(2, authorization_header)
