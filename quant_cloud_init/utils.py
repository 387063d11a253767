"""
Utility Functions Module for Quant Cloud Init

Functions:
    setup_logging: Configures application logging
    strip_protocol: Removes the URL scheme from a registry endpoint
"""

import logging
import re

PROTOCOL_RE = re.compile(r"^https?://")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def strip_protocol(endpoint: str) -> str:
    """Strip a leading http:// or https:// from a registry endpoint."""
    return PROTOCOL_RE.sub("", endpoint)
