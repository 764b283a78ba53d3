from typing import Any, Dict

from .errors import MalformedPayload

REQUIRED_PUSH_FIELDS = ("pusher", "repository", "commits")


def validate_push_payload(payload: Any) -> Dict[str, Any]:
    """Checa apenas presença dos campos de topo; o formatter aplica defaults no resto."""
    if not isinstance(payload, dict):
        raise MalformedPayload()

    missing = [field for field in REQUIRED_PUSH_FIELDS if payload.get(field) is None]
    if missing:
        raise MalformedPayload(details={"missing": missing})

    if not isinstance(payload["commits"], list):
        raise MalformedPayload(details={"invalid": ["commits"]})

    return payload
