import hashlib
import hmac
import logging
from typing import Optional

from .constants import SIGNATURE_PREFIX
from .errors import InvalidSignature, MissingRawBody, SecretNotConfigured

logger = logging.getLogger(__name__)


def compute_signature(secret: str, raw_body: bytes) -> str:
    """Hex do HMAC-SHA256 de raw_body usando o segredo do projeto como chave."""
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()


def verify_signature(secret: str, raw_body: Optional[bytes], signature_header: Optional[str]) -> None:
    """
    Valida o cabeçalho X-Hub-Signature-256 (formato ``sha256=<hex>``) contra os
    bytes exatos recebidos. Levanta uma subclasse de WebhookError em caso de falha.
    """
    if not secret:
        raise SecretNotConfigured()

    if not signature_header:
        raise InvalidSignature("Missing signature header")
    if not signature_header.startswith(SIGNATURE_PREFIX):
        raise InvalidSignature("Invalid signature format")

    if not raw_body:
        raise MissingRawBody()

    # Comparação exata: sem strip nem lower
    received = signature_header[len(SIGNATURE_PREFIX):]
    expected = compute_signature(secret, raw_body)

    # compare_digest exige mesmo tamanho; tamanho diferente já é rejeição
    if len(received) != len(expected):
        logger.debug(f"Assinatura com tamanho inesperado: {len(received)} != {len(expected)}")
        raise InvalidSignature("Signature mismatch")

    if not hmac.compare_digest(received.encode("ascii", "replace"), expected.encode("ascii")):
        raise InvalidSignature("Signature mismatch")
