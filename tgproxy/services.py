import logging
from typing import Optional, Union

import requests

from .constants import TELEGRAM_API_DOMAIN, TELEGRAM_PARSE_MODE, TELEGRAM_TIMEOUT_SECONDS
from .errors import DeliveryFailure

logger = logging.getLogger(__name__)


def send_telegram_message(bot_token: str, chat_id: Union[str, int], text: str, thread_id: Optional[int] = None,
                          api_domain: str = TELEGRAM_API_DOMAIN, timeout: float = TELEGRAM_TIMEOUT_SECONDS):
    """Uma única chamada a sendMessage; sem retry. Falhas viram DeliveryFailure."""
    payload = {
        "chat_id": chat_id,
        "text": text,
        "parse_mode": TELEGRAM_PARSE_MODE,
        "disable_web_page_preview": True,
    }
    if thread_id is not None:
        payload["message_thread_id"] = thread_id

    url = f"{api_domain}/bot{bot_token}/sendMessage"
    try:
        resp = requests.post(url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        # A URL contém o token do bot; loga só o tipo da falha
        logger.error(f"Falha de transporte ao enviar para chat {chat_id}: {type(exc).__name__}")
        raise DeliveryFailure(details=type(exc).__name__) from exc

    logger.debug(f"Telegram response: {resp.status_code}")

    try:
        body = resp.json()
    except ValueError:
        body = None

    if resp.status_code >= 400 or (isinstance(body, dict) and body.get("ok") is False):
        description = body.get("description") if isinstance(body, dict) else resp.text
        logger.error(f"Telegram recusou mensagem para chat {chat_id}: {resp.status_code} {description}")
        raise DeliveryFailure(details={"status": resp.status_code, "description": description})

    return resp
