"""
Small request and JSON helpers shared by the apps.
"""
import hashlib
import json
import logging

logger = logging.getLogger(__name__)


def get_client_ip(request):
    """
    Best-effort client IP: first X-Forwarded-For hop, then X-Real-IP,
    then the socket address.
    """
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    if forwarded:
        first = forwarded.split(',')[0].strip()
        if first:
            return first
    real_ip = request.META.get('HTTP_X_REAL_IP', '').strip()
    if real_ip:
        return real_ip
    return request.META.get('REMOTE_ADDR') or 'unknown'


def hash_ip(ip):
    """SHA-256 hex digest of an IP address; raw addresses are never stored."""
    return hashlib.sha256(ip.encode('utf-8')).hexdigest()


def safe_json_parse(value, fallback=None):
    """Parse a JSON string, returning `fallback` on any decoding problem."""
    if not isinstance(value, (str, bytes, bytearray)):
        return value if value is not None else fallback
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        logger.warning("Could not parse stored JSON value, using fallback")
        return fallback


def safe_json_list(value):
    """Coerce a stored value to a list; anything unusable becomes []."""
    parsed = safe_json_parse(value, fallback=[])
    if isinstance(parsed, (list, tuple)):
        return list(parsed)
    return []
