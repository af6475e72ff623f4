"""
Application API: pairing, status checks, locks, history and operations.
"""

import datetime
from enum import Enum
from typing import Dict, Optional, Union

from .client import LatchClient
from .constants import (
    API_CHECK_STATUS_URL,
    API_HISTORY_URL,
    API_LOCK_URL,
    API_OPERATION_URL,
    API_PAIR_URL,
    API_PAIR_WITH_ID_URL,
    API_UNLOCK_URL,
    API_UNPAIR_URL,
)
from .response import LatchResponse
from .signer import url_encode

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

Instant = Union[datetime.datetime, int]


class FeatureMode(str, Enum):
    """Two factor and lock-on-request modes of an operation."""

    MANDATORY = "MANDATORY"
    OPT_IN = "OPT_IN"
    DISABLED = "DISABLED"


def millis_from_epoch(value: Instant) -> int:
    """Milliseconds since the Unix epoch; naive datetimes are taken as UTC."""
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return int((value - _EPOCH).total_seconds() * 1000)
    return int(value)


class LatchApp:
    """
    Latch application API.

    Example:
        with LatchApp.from_credentials("app-id", "secret") as latch:
            account_id = latch.pair("AbC123").data["accountId"]
            latch.status(account_id)
    """

    def __init__(self, client: LatchClient):
        self.client = client

    @classmethod
    def from_credentials(cls, app_id: str, secret_key: str, **kwargs) -> "LatchApp":
        """Build an app surface with its own LatchClient."""
        return cls(LatchClient(app_id, secret_key, **kwargs))

    def pair_with_id(self, account_id: str) -> LatchResponse:
        """Pair an account using its name. Only works against the test backend."""
        return self.client.get(f"{API_PAIR_WITH_ID_URL}/{url_encode(account_id)}")

    def pair(self, token: str) -> LatchResponse:
        """Pair an account with the token the user got from the mobile app."""
        return self.client.get(f"{API_PAIR_URL}/{url_encode(token)}")

    def status(self, account_id: str, operation_id: Optional[str] = None,
               silent: bool = False, no_otp: bool = False,
               otp_token: Optional[str] = None,
               otp_message: Optional[str] = None) -> LatchResponse:
        """
        Get the latch status of an account, or of one of its operations.

        Args:
            account_id: Account ID returned when pairing
            operation_id: Operation to check instead of the whole application
            silent: Do not send lock/unlock push notifications to the device
            no_otp: Do not generate an OTP even if the operation requires one
            otp_token: OTP to send to the user instead of a generated one
            otp_message: Custom message attached to the OTP

        Passing otp_token or otp_message sends the request as a POST, in
        which case no_otp does not apply.
        """
        url = f"{API_CHECK_STATUS_URL}/{url_encode(account_id)}"
        if operation_id:
            url += f"/op/{url_encode(operation_id)}"

        if otp_token or otp_message:
            if silent:
                url += "/silent"
            data: Dict[str, str] = {}
            if otp_token:
                data["otp"] = otp_token
            if otp_message:
                data["msg"] = otp_message
            return self.client.post(url, data)

        if no_otp:
            url += "/nootp"
        if silent:
            url += "/silent"
        return self.client.get(url)

    def unpair(self, account_id: str) -> LatchResponse:
        return self.client.get(f"{API_UNPAIR_URL}/{url_encode(account_id)}")

    def lock(self, account_id: str, operation_id: Optional[str] = None) -> LatchResponse:
        """Lock an account, or one operation of it."""
        return self.client.post(self._account_url(API_LOCK_URL, account_id, operation_id))

    def unlock(self, account_id: str, operation_id: Optional[str] = None) -> LatchResponse:
        """Unlock an account, or one operation of it."""
        return self.client.post(self._account_url(API_UNLOCK_URL, account_id, operation_id))

    def history(self, account_id: str, from_time: Optional[Instant] = None,
                to_time: Optional[Instant] = None) -> LatchResponse:
        """
        Get the activity history of an account.

        When either bound is given the range form is used: from_time defaults
        to the epoch and to_time to now. Bounds are datetimes or epoch millis.
        """
        url = f"{API_HISTORY_URL}/{url_encode(account_id)}"
        if from_time is not None or to_time is not None:
            start = millis_from_epoch(from_time) if from_time is not None else 0
            if to_time is None:
                to_time = datetime.datetime.now(datetime.timezone.utc)
            url += f"/{start}/{millis_from_epoch(to_time)}"
        return self.client.get(url)

    def get_operations(self, parent_operation_id: Optional[str] = None) -> LatchResponse:
        """List operations of the application, or suboperations of a parent."""
        url = API_OPERATION_URL
        if parent_operation_id:
            url += f"/{url_encode(parent_operation_id)}"
        return self.client.get(url)

    def create_operation(self, parent_id: str, name: str,
                         two_factor: FeatureMode = FeatureMode.DISABLED,
                         lock_on_request: FeatureMode = FeatureMode.DISABLED) -> LatchResponse:
        data = {
            "parentId": parent_id,
            "name": name,
            "two_factor": FeatureMode(two_factor).value,
            "lock_on_request": FeatureMode(lock_on_request).value,
        }
        return self.client.put(API_OPERATION_URL, data)

    def update_operation(self, operation_id: str, name: Optional[str] = None,
                         two_factor: Optional[FeatureMode] = None,
                         lock_on_request: Optional[FeatureMode] = None) -> LatchResponse:
        """Change the name or modes of an operation; None leaves a field as is."""
        data: Dict[str, str] = {}
        if name:
            data["name"] = name
        if two_factor is not None:
            data["two_factor"] = FeatureMode(two_factor).value
        if lock_on_request is not None:
            data["lock_on_request"] = FeatureMode(lock_on_request).value
        return self.client.post(f"{API_OPERATION_URL}/{url_encode(operation_id)}", data)

    def remove_operation(self, operation_id: str) -> LatchResponse:
        return self.client.delete(f"{API_OPERATION_URL}/{url_encode(operation_id)}")

    @staticmethod
    def _account_url(base: str, account_id: str, operation_id: Optional[str]) -> str:
        url = f"{base}/{url_encode(account_id)}"
        if operation_id:
            url += f"/op/{url_encode(operation_id)}"
        return url

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
