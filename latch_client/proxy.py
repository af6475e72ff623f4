"""
Outbound proxy configuration for the Latch client.
"""

from typing import Dict, Optional
from urllib.parse import quote

from .exceptions import ConfigurationError


class ProxyConfig:
    """
    Fluent proxy builder.

    Example:
        proxy = ProxyConfig().set_host("proxy.local").set_port(3128).set_user("bob")
    """

    def __init__(self):
        self.host: Optional[str] = None
        self.port: Optional[int] = None
        self.user: Optional[str] = None
        self.password: Optional[str] = None
        self.domain: Optional[str] = None

    def set_host(self, host: str) -> "ProxyConfig":
        if not host:
            raise ConfigurationError("Host value can not be null or empty.")
        self.host = host
        return self

    def set_port(self, port: int) -> "ProxyConfig":
        if port is None or port <= 0:
            raise ConfigurationError("Port value must be positive.")
        self.port = port
        return self

    def set_user(self, user: Optional[str]) -> "ProxyConfig":
        if user:
            self.user = user
        return self

    def set_password(self, password: Optional[str]) -> "ProxyConfig":
        if password:
            self.password = password
        return self

    def set_domain(self, domain: Optional[str]) -> "ProxyConfig":
        if domain:
            self.domain = domain
        return self

    def url(self) -> Optional[str]:
        """Proxy URL with credentials, or None when no host is set."""
        if not self.host:
            return None

        scheme, sep, netloc = self.host.partition("://")
        if not sep:
            scheme, netloc = "http", self.host
        if self.port:
            netloc = f"{netloc}:{self.port}"

        if self.user and self.password:
            user = self.user
            if self.domain:
                user = f"{self.domain}\\{user}"
            netloc = f"{quote(user, safe='')}:{quote(self.password, safe='')}@{netloc}"

        return f"{scheme}://{netloc}"

    def to_requests_proxies(self) -> Dict[str, str]:
        """Mapping for requests.Session.proxies."""
        url = self.url()
        if url is None:
            return {}
        return {'http': url, 'https': url}

    def __repr__(self) -> str:
        return f"ProxyConfig(host={self.host!r}, port={self.port!r}, user={self.user!r})"
