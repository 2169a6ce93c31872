"""
Settings loaded from environment variables.
"""

import os
from dataclasses import dataclass

DEFAULT_REGION = "us-west-2"
# describe_load_balancers accepts at most 400 results per page
MAX_PAGE_SIZE = 400
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class Settings:
    """Runtime settings for elbsync."""
    region: str = DEFAULT_REGION
    cluster_name: str = ""
    page_size: int = MAX_PAGE_SIZE
    log_level: str = "WARNING"


def get_region() -> str:
    """
    Get the AWS region to talk to.

    Returns:
        ELBSYNC_REGION, then AWS_REGION, then AWS_DEFAULT_REGION, then us-west-2
    """
    for name in ("ELBSYNC_REGION", "AWS_REGION", "AWS_DEFAULT_REGION"):
        value = os.environ.get(name)
        if value:
            return value
    return DEFAULT_REGION


def get_page_size() -> int:
    """
    Get the describe_load_balancers page size.

    Raises:
        ValueError: If ELBSYNC_PAGE_SIZE is not an integer in 1..400
    """
    raw = os.environ.get("ELBSYNC_PAGE_SIZE", str(MAX_PAGE_SIZE))
    try:
        page_size = int(raw)
    except ValueError:
        raise ValueError(f"Invalid ELBSYNC_PAGE_SIZE: {raw!r}. Expected an integer")

    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"Invalid ELBSYNC_PAGE_SIZE: {page_size}. Must be between 1 and {MAX_PAGE_SIZE}")
    return page_size


def get_log_level() -> str:
    """
    Get the logging level name.

    Raises:
        ValueError: If ELBSYNC_LOG_LEVEL is not one of LOG_LEVELS
    """
    level = os.environ.get("ELBSYNC_LOG_LEVEL", "WARNING").upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid ELBSYNC_LOG_LEVEL: {level!r}. Expected one of {', '.join(LOG_LEVELS)}")
    return level


def load_settings() -> Settings:
    """Load settings from the environment."""
    return Settings(
        region=get_region(),
        cluster_name=os.environ.get("ELBSYNC_CLUSTER_NAME", ""),
        page_size=get_page_size(),
        log_level=get_log_level(),
    )
