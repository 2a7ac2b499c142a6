"""Shared HTTP client configuration."""

import locale
import platform
from http.cookiejar import CookieJar, DefaultCookiePolicy

import httpx

from ivko_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
DEFAULT_APP_NAME = "ivko-sdk"
DEFAULT_APP_BUILD = "0"


def build_user_agent(
    *,
    app_name: str = DEFAULT_APP_NAME,
    app_version: str = __version__,
    app_build: str = DEFAULT_APP_BUILD,
) -> str:
    """Compose the User-Agent string sent with every request.

    Format: ``"{app} {version} ({build}); {device}; {os} {os_version}; {locale}"``.
    The server treats it as opaque.
    """
    device = platform.machine() or "unknown"
    os_name = platform.system() or "unknown"
    os_version = platform.release()
    current_locale = locale.getlocale()[0] or "en_US"
    return f"{app_name} {app_version} ({app_build}); {device}; {os_name} {os_version}; {current_locale}"


def common_headers(user_agent: str) -> dict[str, str]:
    """Headers applied to every request made by the client."""
    return {
        "User-Agent": user_agent,
        "Accept-Charset": "utf-8",
        "Accept-Encoding": "gzip, deflate",
    }


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Cookies are neither stored nor sent: the jar's policy allows no domains.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value. Defaults to ``build_user_agent()``.

    Returns:
        Configured httpx.Client instance.
    """
    jar = CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
    return httpx.Client(
        timeout=timeout,
        headers=common_headers(user_agent or build_user_agent()),
        cookies=jar,
    )
