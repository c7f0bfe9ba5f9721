"""Receiver configuration for the Half-Wit display.

Loads environment variables for the sender listener, the presence broadcast
and the display window.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Sender listener (TCP) configuration
RECEIVER_HOST = os.environ.get("RECEIVER_HOST", "0.0.0.0")
PREFERRED_PORT = int(os.environ.get("RECEIVER_PORT", "9100"))
RECEIVER_PORT_AUTO_FALLBACK = os.environ.get(
    "RECEIVER_PORT_AUTO_FALLBACK", "true").lower() == "true"

# UDP presence broadcast so senders can find the display
PREFERRED_DISCOVERY_PORT = int(os.environ.get("DISCOVERY_PORT", "9101"))
DISCOVERY_INTERVAL = int(os.environ.get("DISCOVERY_INTERVAL", "2"))
DISCOVERY_ENABLED = os.environ.get(
    "DISCOVERY_ENABLED", "true").lower() == "true"
DISCOVERY_PORT_AUTO_FALLBACK = os.environ.get(
    "DISCOVERY_PORT_AUTO_FALLBACK", "true").lower() == "true"

# Display
FULLSCREEN = os.environ.get("FULLSCREEN", "false").lower() == "true"
LOG_LEVEL = os.environ.get("RECEIVER_LOG_LEVEL", "info").lower()
