"""
Connectivity Checks.

Classifies the host's active network interfaces and optionally confirms
reachability with a single HTTP probe.
"""

import re

import httpx
import psutil

from smart_utils.config import Settings, get_settings
from smart_utils.device.schemas import ONLINE_LINKS, ConnectivityResult
from smart_utils.utils.logger import get_logger

logger = get_logger(__name__)

# Interface name patterns, checked in order
INTERFACE_PATTERNS = [
    (re.compile(r"^(lo|loopback)", re.IGNORECASE), None),
    (re.compile(r"^(wl|wlan|wifi|wi-fi|ath|ra\d)", re.IGNORECASE), ConnectivityResult.WIFI),
    (re.compile(r"^(rmnet|ccmni|pdp_ip|wwan|ppp|usb)", re.IGNORECASE), ConnectivityResult.MOBILE),
    (re.compile(r"^(tun|tap|utun|wg|ipsec|vpn)", re.IGNORECASE), ConnectivityResult.VPN),
    (re.compile(r"^(eth|en|em|eno|ens|enp|ethernet)", re.IGNORECASE), ConnectivityResult.ETHERNET),
]


def classify_interface(name: str) -> ConnectivityResult | None:
    """
    Guess the link type of a network interface from its name.

    Returns:
        ConnectivityResult, or None for loopback interfaces
    """
    for pattern, result in INTERFACE_PATTERNS:
        if pattern.match(name):
            return result
    return ConnectivityResult.OTHER


def check_connectivity() -> list[ConnectivityResult]:
    """
    List the link types of all interfaces that are currently up.

    Returns an empty list when interface stats cannot be read.
    """
    try:
        stats = psutil.net_if_stats()
    except (OSError, psutil.Error) as e:
        logger.debug(f"Cannot read network interfaces: {e}")
        return []

    results: list[ConnectivityResult] = []
    for name, stat in stats.items():
        if not stat.isup:
            continue
        result = classify_interface(name)
        if result is not None and result not in results:
            results.append(result)
    return results


async def _probe(url: str, client: httpx.AsyncClient) -> bool:
    try:
        response = await client.head(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.debug(f"Connectivity probe to {url} failed: {e}")
        return False
    return True


async def has_internet_connection(
    probe_url: str | None = None,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> bool:
    """
    Check whether the device is online.

    True when a Wi-Fi, mobile or ethernet link is up and, if a probe
    URL is given (or configured), a HEAD request to it succeeds.

    Args:
        probe_url: URL to confirm reachability; defaults to
            settings.connectivity_probe_url
        client: Optional httpx client to send the probe with
        settings: Settings override

    Returns:
        True if online, False otherwise (never raises)
    """
    settings = settings or get_settings()

    if not ONLINE_LINKS.intersection(check_connectivity()):
        return False

    url = probe_url or settings.connectivity_probe_url
    if not url:
        return True

    if client is not None:
        return await _probe(url, client)

    timeout = httpx.Timeout(settings.connectivity_timeout_seconds)
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as own_client:
        return await _probe(url, own_client)
