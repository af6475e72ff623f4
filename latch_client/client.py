"""
Signed HTTP transport for the Latch API.

LatchClient owns the credential, the API host and a requests session; the
endpoint surfaces in app.py and user.py build URLs and delegate here.
"""

import logging
from typing import Dict, Mapping, Optional, Union

import requests

from .constants import (
    AUTHORIZATION_HEADER_FIELD_SEPARATOR,
    CONTENT_TYPE_FORM_URLENCODED,
    DEFAULT_API_HOST,
    DEFAULT_CONFIG,
    PARAM_SEPARATOR,
    PARAM_VALUE_SEPARATOR,
    QUERYSTRING_DELIMITER,
)
from .exceptions import ConfigurationError, HTTPError, ResponseError
from .proxy import ProxyConfig
from .response import LatchResponse
from .signer import (
    Credential,
    HttpMethod,
    SignableRequest,
    serialize_params,
    sign,
    url_encode,
)

logger = logging.getLogger(__name__)


class LatchClient:
    """
    Client for making signed requests to the Latch API.

    Each instance holds its own host, so clients pointed at different
    backends do not interfere with each other.
    """

    def __init__(self, app_id: str, secret_key: str, host: str = DEFAULT_API_HOST,
                 proxy: Optional[ProxyConfig] = None, **config):
        """
        Initialize Latch client.

        Args:
            app_id: Application (or user) ID issued by Latch
            secret_key: Secret issued by Latch, used as the HMAC key
            host: API host in URI form, e.g. "https://latch.elevenpaths.com"
            proxy: Optional outbound proxy
            **config: Configuration options (timeout)
        """
        if not app_id:
            raise ConfigurationError("app_id cannot be empty")
        if AUTHORIZATION_HEADER_FIELD_SEPARATOR in app_id:
            raise ConfigurationError("app_id cannot contain spaces")
        if not secret_key:
            raise ConfigurationError("secret_key cannot be empty")
        if not host:
            raise ConfigurationError("host cannot be empty")

        self.credential = Credential(app_id, secret_key)
        self.host = host.rstrip('/')
        self.proxy = proxy

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self.session = requests.Session()
        if proxy is not None:
            self.session.proxies.update(proxy.to_requests_proxies())

    def _validate_config(self):
        """Validate client configuration."""
        timeout = self.config['timeout']
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def app_id(self) -> str:
        return self.credential.app_id

    def set_proxy(self, proxy: ProxyConfig):
        """Route subsequent requests through a proxy."""
        self.proxy = proxy
        self.session.proxies.clear()
        self.session.proxies.update(proxy.to_requests_proxies())

    @staticmethod
    def build_query_string(path: str, query_params: Optional[Mapping[str, str]] = None) -> str:
        """Append url-encoded query params to path, skipping empty values."""
        if not query_params:
            return path

        pairs = [
            f"{key}{PARAM_VALUE_SEPARATOR}{url_encode(value)}"
            for key, value in query_params.items()
            if value
        ]
        if not pairs:
            return path
        return path + QUERYSTRING_DELIMITER + PARAM_SEPARATOR.join(pairs)

    def request(self, method: Union[HttpMethod, str], path: str,
                query_params: Optional[Mapping[str, str]] = None,
                data: Optional[Mapping[str, str]] = None,
                headers: Optional[Mapping[str, str]] = None) -> LatchResponse:
        """
        Make a signed HTTP request.

        Args:
            method: HTTP method
            path: API path starting with "/", already url-encoded
            query_params: Parameters appended to the query string
            data: Form parameters sent in the body of POST and PUT requests
            headers: Extra X-11paths- headers, signed along with the request

        Returns:
            LatchResponse parsed from the JSON body

        Raises:
            SigningError: If the request cannot be signed
            HTTPError: If the request fails
            ResponseError: If the response body is not a JSON object
        """
        method = HttpMethod(method.upper() if isinstance(method, str) else method)
        query_string = self.build_query_string(path, query_params)
        has_body = method in (HttpMethod.POST, HttpMethod.PUT)
        body_params = data if has_body else None

        signed = sign(
            self.credential,
            SignableRequest(method, query_string, headers, body_params),
        )

        request_headers: Dict[str, str] = dict(headers or {})
        request_headers.update(signed.as_dict())

        kwargs = {'headers': request_headers, 'timeout': self.config['timeout']}
        if has_body:
            request_headers['Content-Type'] = CONTENT_TYPE_FORM_URLENCODED
            kwargs['data'] = serialize_params(body_params)

        url = self.host + query_string
        logger.debug("%s %s", method.value, url)

        try:
            response = self.session.request(method.value, url, **kwargs)
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        try:
            return LatchResponse.from_json(response.text)
        except ResponseError:
            if response.status_code >= 400:
                raise HTTPError(
                    f"HTTP request failed with status {response.status_code}"
                )
            raise

    def get(self, path: str, query_params: Optional[Mapping[str, str]] = None,
            **kwargs) -> LatchResponse:
        """Make signed GET request."""
        return self.request(HttpMethod.GET, path, query_params=query_params, **kwargs)

    def post(self, path: str, data: Optional[Mapping[str, str]] = None, **kwargs) -> LatchResponse:
        """Make signed POST request."""
        return self.request(HttpMethod.POST, path, data=data, **kwargs)

    def put(self, path: str, data: Optional[Mapping[str, str]] = None, **kwargs) -> LatchResponse:
        """Make signed PUT request."""
        return self.request(HttpMethod.PUT, path, data=data, **kwargs)

    def delete(self, path: str, **kwargs) -> LatchResponse:
        """Make signed DELETE request."""
        return self.request(HttpMethod.DELETE, path, **kwargs)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
