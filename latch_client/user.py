"""
User API: subscription and application management.
"""

from typing import Optional

from .client import LatchClient
from .constants import API_APPLICATION_URL, API_SUBSCRIPTION_URL
from .response import LatchResponse
from .signer import url_encode


class LatchUser:
    """Latch user API, signed with a user ID and secret."""

    def __init__(self, client: LatchClient):
        self.client = client

    @classmethod
    def from_credentials(cls, user_id: str, secret_key: str, **kwargs) -> "LatchUser":
        return cls(LatchClient(user_id, secret_key, **kwargs))

    def get_subscription(self) -> LatchResponse:
        return self.client.get(API_SUBSCRIPTION_URL)

    def get_applications(self) -> LatchResponse:
        return self.client.get(API_APPLICATION_URL)

    def create_application(self, name: str, two_factor: str, lock_on_request: str,
                           contact_phone: Optional[str] = None,
                           contact_email: Optional[str] = None) -> LatchResponse:
        """Create an application. Returns its appId and secret in data."""
        data = {
            "name": name,
            "two_factor": two_factor,
            "lock_on_request": lock_on_request,
            "contactPhone": contact_phone or "",
            "contactEmail": contact_email or "",
        }
        return self.client.put(API_APPLICATION_URL, data)

    def update_application(self, application_id: str, name: str, two_factor: str,
                           lock_on_request: str, contact_phone: Optional[str] = None,
                           contact_email: Optional[str] = None) -> LatchResponse:
        data = {
            "name": name,
            "two_factor": two_factor,
            "lock_on_request": lock_on_request,
            "contactPhone": contact_phone or "",
            "contactEmail": contact_email or "",
        }
        return self.client.post(f"{API_APPLICATION_URL}/{url_encode(application_id)}", data)

    def remove_application(self, application_id: str) -> LatchResponse:
        return self.client.delete(f"{API_APPLICATION_URL}/{url_encode(application_id)}")

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
