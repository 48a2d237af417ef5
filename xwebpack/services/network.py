"""Best-effort detection of whether the package registry is reachable."""
import asyncio
import os
from typing import Mapping, Optional
from urllib.parse import urlparse

from xwebpack.core.config import get_config
from xwebpack.core.logger import get_logger
from xwebpack.models.process import PackageManager
from xwebpack.services.process import ProcessRunner

logger = get_logger(__name__)

# What `npm config get https-proxy` prints when nothing is configured
UNSET_PROXY_VALUES = {"", "null", "undefined"}


async def resolve_host(hostname: Optional[str]) -> bool:
    """Return True if hostname resolves via DNS."""
    if not hostname:
        return False
    loop = asyncio.get_running_loop()
    try:
        await loop.getaddrinfo(hostname, None)
    except (OSError, UnicodeError) as exc:
        logger.debug(f"DNS lookup for {hostname} failed: {exc}")
        return False
    return True


def get_proxy(
    runner: Optional[ProcessRunner] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Find the HTTPS proxy from the environment, then from npm's config."""
    environ = os.environ if environ is None else environ
    if environ.get('https_proxy'):
        return environ['https_proxy']

    runner = runner or ProcessRunner()
    try:
        result = runner.run_sync('npm', ['config', 'get', 'https-proxy'])
    except OSError as exc:
        logger.debug(f"Could not read npm https-proxy: {exc}")
        return None

    if result.returncode != 0:
        return None
    proxy = (result.stdout or "").strip()
    return None if proxy in UNSET_PROXY_VALUES else proxy


def proxy_hostname(proxy: str) -> Optional[str]:
    """Hostname part of a proxy URL; scheme-less values are accepted.

    Returns None for values urlparse rejects, e.g. an unclosed IPv6 bracket.
    """
    try:
        hostname = urlparse(proxy).hostname
        if hostname is None and '://' not in proxy:
            hostname = urlparse(f"//{proxy}").hostname
    except ValueError as exc:
        logger.debug(f"Ignoring malformed proxy {proxy!r}: {exc}")
        return None
    return hostname


async def check_if_online(
    manager: PackageManager,
    runner: Optional[ProcessRunner] = None,
    environ: Optional[Mapping[str, str]] = None,
    registry_host: Optional[str] = None,
) -> bool:
    """Guess whether the yarn registry is reachable. Never raises.

    npm handles being offline on its own, so it is always reported online.
    Behind a proxy external names usually do not resolve, so the proxy's own
    hostname is checked instead.
    """
    if manager is not PackageManager.YARN:
        return True

    host = registry_host or get_config().yarn_registry_host
    if await resolve_host(host):
        return True

    try:
        proxy = get_proxy(runner, environ)
    except Exception as exc:
        logger.debug(f"Proxy lookup failed: {exc}")
        proxy = None

    if not proxy:
        logger.debug(f"{host} did not resolve and no proxy is configured")
        return False

    logger.debug(f"{host} did not resolve, checking proxy {proxy}")
    return await resolve_host(proxy_hostname(proxy))
