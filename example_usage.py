#!/usr/bin/env python3
"""
Basic usage examples for the Latch Python client library.

Set LATCH_APP_ID and LATCH_SECRET_KEY (and optionally LATCH_HOST and
LATCH_ACCOUNT_ID) before running.
"""

import logging
import os
import sys

from latch_client import (
    DEFAULT_API_HOST,
    Credential,
    FeatureMode,
    LatchApp,
    LatchClient,
    LatchClientError,
    SignableRequest,
    sign,
)


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG if os.environ.get("LATCH_DEBUG") else logging.INFO)

    app_id = os.environ.get("LATCH_APP_ID")
    secret_key = os.environ.get("LATCH_SECRET_KEY")
    host = os.environ.get("LATCH_HOST", DEFAULT_API_HOST)
    account_id = os.environ.get("LATCH_ACCOUNT_ID")

    if not (app_id and secret_key):
        print("Set LATCH_APP_ID and LATCH_SECRET_KEY to run the examples")
        return 1

    print("=== Latch Python Client Basic Usage Examples ===\n")

    # Example 1: sign a request without sending it
    print("1. Signing a request offline...")
    signed = sign(
        Credential(app_id, secret_key),
        SignableRequest("GET", "/api/1.0/status/abc"),
        timestamp="2020-01-01 00:00:00",
    )
    print(f"   Authorization: {signed.authorization}")
    print(f"   X-11Paths-Date: {signed.date}\n")

    client = LatchClient(app_id, secret_key, host=host)
    try:
        with LatchApp(client) as latch:
            # Example 2: list operations
            print("2. Listing operations...")
            response = latch.get_operations()
            if response.has_error:
                print(f"   ✗ {response.error}")
            else:
                print(f"   ✓ {response.data}")
            print()

            # Example 3: create and remove an operation
            print("3. Creating an operation...")
            response = latch.create_operation(app_id, "example-operation",
                                              two_factor=FeatureMode.OPT_IN)
            if response.has_error:
                print(f"   ✗ {response.error}")
            else:
                operation_id = response.data["operationId"]
                print(f"   ✓ Created {operation_id}")
                latch.remove_operation(operation_id)
                print(f"   ✓ Removed {operation_id}")
            print()

            # Example 4: check an account status
            if account_id:
                print("4. Checking account status...")
                response = latch.status(account_id, no_otp=True)
                if response.has_error:
                    print(f"   ✗ {response.error}")
                else:
                    status = response.data["operations"][app_id]["status"]
                    print(f"   ✓ Latch is {status}")
    except LatchClientError as e:
        print(f"Request failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
