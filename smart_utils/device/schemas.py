"""
Pydantic Schemas for Device Queries.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PlatformFamily(str, Enum):
    """Operating system families the helpers distinguish."""

    ANDROID = "Android"
    IOS = "iOS"
    WEB = "Web"
    WINDOWS = "Windows"
    MACOS = "macOS"
    LINUX = "Linux"
    UNKNOWN = "Unknown"

    @property
    def is_mobile(self) -> bool:
        return self in (PlatformFamily.ANDROID, PlatformFamily.IOS)

    @property
    def is_desktop(self) -> bool:
        return self in (PlatformFamily.WINDOWS, PlatformFamily.MACOS, PlatformFamily.LINUX)


class ConnectivityResult(str, Enum):
    """Kind of network link an interface provides."""

    WIFI = "wifi"
    MOBILE = "mobile"
    ETHERNET = "ethernet"
    VPN = "vpn"
    OTHER = "other"


# Links that count as internet access on their own
ONLINE_LINKS = {ConnectivityResult.WIFI, ConnectivityResult.MOBILE, ConnectivityResult.ETHERNET}


class DeviceInfo(BaseModel):
    """Basic facts about the device the process runs on."""

    platform: str = Field(..., description="Platform family name, 'Unknown' on failure")
    model: str = Field(default="", description="Device or machine model")
    brand: str = Field(default="", description="Manufacturer, where the OS reports it")
    os_version: str = Field(default="", description="Operating system release")
    extra: dict[str, Any] = Field(default_factory=dict, description="Platform-specific details")

    @classmethod
    def unknown(cls) -> "DeviceInfo":
        """Sentinel returned when the platform cannot be queried."""
        return cls(platform=PlatformFamily.UNKNOWN.value)
