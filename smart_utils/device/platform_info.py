"""
Platform Detection and Device Info.

Platform checks read sys.platform; every check accepts an explicit
platform string so callers and tests can ask about another system.
"""

import asyncio
import platform
import sys

import psutil

from smart_utils.device.schemas import DeviceInfo, PlatformFamily
from smart_utils.errors import UnavailableCapabilityError
from smart_utils.utils.logger import get_logger

logger = get_logger(__name__)

SYS_PLATFORMS = {
    "android": PlatformFamily.ANDROID,
    "ios": PlatformFamily.IOS,
    "emscripten": PlatformFamily.WEB,
    "wasi": PlatformFamily.WEB,
    "win32": PlatformFamily.WINDOWS,
    "cygwin": PlatformFamily.WINDOWS,
    "darwin": PlatformFamily.MACOS,
    "linux": PlatformFamily.LINUX,
}


def detect_platform(system: str | None = None) -> PlatformFamily:
    """
    Map a sys.platform value to a platform family.

    Args:
        system: sys.platform style string; defaults to the running interpreter

    Returns:
        Detected PlatformFamily, UNKNOWN when unrecognized
    """
    name = (system if system is not None else sys.platform).lower()
    family = SYS_PLATFORMS.get(name)
    if family is None and name.startswith("linux"):
        family = PlatformFamily.LINUX
    return family or PlatformFamily.UNKNOWN


def is_android(system: str | None = None) -> bool:
    return detect_platform(system) is PlatformFamily.ANDROID


def is_ios(system: str | None = None) -> bool:
    return detect_platform(system) is PlatformFamily.IOS


def is_web(system: str | None = None) -> bool:
    return detect_platform(system) is PlatformFamily.WEB


def is_desktop(system: str | None = None) -> bool:
    """True on Windows, macOS or Linux."""
    return detect_platform(system).is_desktop


def is_mobile(system: str | None = None) -> bool:
    """True on Android or iOS."""
    return detect_platform(system).is_mobile


def _collect_device_info(family: PlatformFamily) -> DeviceInfo:
    """Gather device facts synchronously. Raises on unsupported platforms."""
    if family is PlatformFamily.ANDROID:
        android = platform.android_ver()
        return DeviceInfo(
            platform=family.value,
            brand=android.manufacturer,
            model=android.model,
            os_version=android.release,
            extra={"device": android.device, "api_level": android.api_level},
        )

    if family is PlatformFamily.IOS:
        ios = platform.ios_ver()
        return DeviceInfo(
            platform=family.value,
            brand="Apple",
            model=ios.model,
            os_version=ios.release,
            extra={"system_name": ios.system},
        )

    if family is PlatformFamily.WEB:
        return DeviceInfo(platform=family.value, extra={"runtime": sys.platform})

    if family is PlatformFamily.UNKNOWN:
        raise UnavailableCapabilityError(f"No device info for platform {sys.platform!r}")

    uname = platform.uname()
    return DeviceInfo(
        platform=family.value,
        model=uname.machine,
        os_version=uname.release,
        extra={
            "node": uname.node,
            "cpu_count": psutil.cpu_count(),
            "memory_mb": psutil.virtual_memory().total // (1024 * 1024),
        },
    )


async def get_device_info(system: str | None = None) -> DeviceInfo:
    """
    Fetch basic device information (model, brand, OS version).

    Runs the blocking queries in a worker thread. Any failure degrades
    to DeviceInfo(platform="Unknown").
    """
    family = detect_platform(system)
    try:
        return await asyncio.to_thread(_collect_device_info, family)
    except (UnavailableCapabilityError, OSError, AttributeError, psutil.Error) as e:
        logger.debug(f"Device info unavailable: {e}")
        return DeviceInfo.unknown()
