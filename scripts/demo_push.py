#!/usr/bin/env python3
"""Demo: dispatch one notification to an iOS and an Android device.

Credentials come from the environment or a .env file
(APNS_CERTIFICATE_PATH, APNS_TEAM_ID, APNS_KEY_ID, FCM_CERTIFICATE_PATH).
Delivery goes through the stub providers, so nothing leaves the machine.

Usage:
    python scripts/demo_push.py [--title TITLE] [--content CONTENT]
"""

import argparse
import sys

from push_notifier import (
    DeliveryResult,
    Device,
    Devices,
    LoggingConfig,
    PushNotification,
    PushNotifierConfig,
    PushNotifierError,
    Server,
)
from push_notifier.log import setup_logging


def format_result(result: DeliveryResult) -> str:
    """One table row; devices without a platform or key show "-"."""
    status = "OK" if result.success else "FAILED"
    platform = str(result.platform or "-")
    device_key = result.device_key or "-"
    return f"  {platform:<8} {device_key:<28} {status}  {result.details}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a demo push notification")
    parser.add_argument("--title", default="Demo notification")
    parser.add_argument("--content", default="Hello from push_notifier")
    args = parser.parse_args()

    setup_logging(LoggingConfig().log_level)

    notification = PushNotification().set_title(args.title).set_content(args.content)
    devices = Devices([
        Device("iOS", "demo-ios-device-key"),
        Device("Android", "demo-android-device-key"),
    ])

    try:
        server = Server.from_config(PushNotifierConfig())
    except PushNotifierError as exc:
        print(exc)
        sys.exit(1)

    results = server.set_devices(devices).set_push_notification(notification).send()

    for result in results:
        print(format_result(result))


if __name__ == "__main__":
    main()
