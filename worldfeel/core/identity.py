"""
Identity resolution for anonymous visitors.

A visitor is identified by a hash of their network address salted with a
secret that rotates every UTC day. Raw addresses are never stored.
"""
import hashlib
import uuid
from datetime import date, datetime, timezone
from typing import Optional

from starlette.requests import Request

from worldfeel.config.settings import settings

FALLBACK_ADDRESS = "0.0.0.0"


def _sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def day_salt(utc_date: date, secret: str) -> str:
    """Salt for one UTC calendar day: sha256(YYYY-MM-DD || secret)."""
    return _sha256_hex(utc_date.isoformat() + secret)


def resolve_identity(
    network_address: str,
    utc_date: Optional[date] = None,
    secret: Optional[str] = None,
) -> str:
    """
    Derive the identity hash for a network address on a given UTC day.

    Args:
        network_address: Client address, treated as an opaque string.
        utc_date: Calendar day the hash is valid for; defaults to today (UTC).
        secret: Long-lived server secret; defaults to settings.DAY_SALT_SECRET.

    Returns:
        64-character lowercase hex digest.
    """
    if utc_date is None:
        utc_date = datetime.now(timezone.utc).date()
    if secret is None:
        secret = settings.DAY_SALT_SECRET
    return _sha256_hex(network_address + day_salt(utc_date, secret))


def client_address(request: Request, trust_proxy: Optional[bool] = None) -> str:
    """Best-effort network address of the caller."""
    if trust_proxy is None:
        trust_proxy = settings.TRUST_PROXY
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop
    if request.client and request.client.host:
        return request.client.host
    return FALLBACK_ADDRESS


def new_device_token() -> str:
    return str(uuid.uuid4())


def parse_device_token(value: Optional[str]) -> Optional[str]:
    """Canonical UUID string for a device token, or None if blank or malformed."""
    if not value or not value.strip():
        return None
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError:
        return None
