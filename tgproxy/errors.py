"""Hierarquia de erros do webhook.

Cada estágio do pipeline levanta uma subclasse de WebhookError; o controller
converte em resposta JSON usando status_code e message.
"""
from typing import Any, Dict, Optional


class WebhookError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigNotFound(WebhookError):
    status_code = 404
    default_message = "Project config not found"


class SecretNotConfigured(WebhookError):
    """Projeto exige assinatura mas não tem segredo: falha do servidor, não do cliente."""

    status_code = 500
    default_message = "Webhook secret not configured"


class InvalidSignature(WebhookError):
    status_code = 401
    default_message = "Missing or invalid signature"


class MissingRawBody(WebhookError):
    status_code = 400
    default_message = "Missing request body"


class MalformedPayload(WebhookError):
    status_code = 400
    default_message = "Malformed GitHub push event payload"


class DeliveryFailure(WebhookError):
    status_code = 500
    default_message = "Failed to send Telegram message"
