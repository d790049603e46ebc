"""Bearer-token header construction."""

from __future__ import annotations

from ...core.exceptions import ConfigurationError


def is_header_safe(value: str) -> bool:
    """True if ``value`` can be sent verbatim as an HTTP header value."""
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def bearer_auth_header(token: str) -> dict[str, str]:
    """Build the ``Authorization`` header for a Canvas access token.

    Raises:
        ConfigurationError: If the token is empty or not header-safe
    """
    if not token or not token.strip():
        raise ConfigurationError("API token must not be empty")
    if not is_header_safe(token):
        raise ConfigurationError("API token must consist of only visible ASCII characters")
    return {"Authorization": f"Bearer {token}"}
