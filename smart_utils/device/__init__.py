"""
Device Helpers.

Platform detection, device info, connectivity and screen metrics.
"""

from smart_utils.device.connectivity import (
    check_connectivity,
    classify_interface,
    has_internet_connection,
)
from smart_utils.device.platform_info import (
    detect_platform,
    get_device_info,
    is_android,
    is_desktop,
    is_ios,
    is_mobile,
    is_web,
)
from smart_utils.device.schemas import ConnectivityResult, DeviceInfo, PlatformFamily
from smart_utils.device.screen import is_landscape, is_portrait, screen_height, screen_width

__all__ = [
    # Platform
    "PlatformFamily",
    "detect_platform",
    "is_android",
    "is_ios",
    "is_web",
    "is_desktop",
    "is_mobile",
    "DeviceInfo",
    "get_device_info",
    # Connectivity
    "ConnectivityResult",
    "classify_interface",
    "check_connectivity",
    "has_internet_connection",
    # Screen
    "screen_width",
    "screen_height",
    "is_portrait",
    "is_landscape",
]
