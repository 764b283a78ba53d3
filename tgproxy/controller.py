import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from flask import Flask, jsonify, request

from .config import ProjectConfig, ProjectConfigs, Verified, load_project_configs
from .constants import CONFIG_FILE, DELIVERY_HEADER, EVENT_HEADER, SIGNATURE_HEADER
from .errors import ConfigNotFound, MalformedPayload, MissingRawBody, WebhookError
from .formatters import format_push_message
from .services import send_telegram_message
from .signature import verify_signature
from .validation import validate_push_payload

logger = logging.getLogger(__name__)

LANDING_PAGE = """
<html lang="en">
  <head>
    <title>GitHub Telegram Webhook</title>
    <style>
      body { font-family: sans-serif; background: #f9f9f9; color: #222; text-align: center; margin-top: 10vh; }
      .emoji { font-size: 3rem; }
      .container { background: #fff; display: inline-block; padding: 2rem 3rem; border-radius: 1rem; box-shadow: 0 2px 12px #0001; }
      h1 { margin-bottom: 0.5em; }
    </style>
  </head>
  <body>
    <div class="container">
      <div class="emoji">🤖🚀</div>
      <h1>GitHub → Telegram Webhook</h1>
      <p>This server relays GitHub push events to Telegram chats.<br>
      <small>Use <code>/webhook/&lt;projectName&gt;</code> for your GitHub webhook endpoint.</small></p>
    </div>
  </body>
</html>
"""


@dataclass(frozen=True)
class WebhookRequest:
    """Bytes exatos do corpo + cabeçalhos relevantes, lidos antes de qualquer parse."""

    project_name: str
    event: Optional[str]
    delivery_id: Optional[str]
    signature: Optional[str]
    raw_body: bytes

    @classmethod
    def from_flask(cls, project_name):
        return cls(
            project_name=project_name,
            event=request.headers.get(EVENT_HEADER),
            delivery_id=request.headers.get(DELIVERY_HEADER),
            signature=request.headers.get(SIGNATURE_HEADER),
            raw_body=request.get_data(cache=True) or b"",
        )

    def parse_json(self):
        try:
            return json.loads(self.raw_body)
        except ValueError as exc:
            raise MalformedPayload(details="invalid JSON") from exc


def process_push(webhook: WebhookRequest, config: ProjectConfig, sender: Callable) -> None:
    if not webhook.raw_body:
        raise MissingRawBody()

    # Payload validado antes da assinatura: payload incompleto é sempre 400
    event = validate_push_payload(webhook.parse_json())

    if isinstance(config.verification, Verified):
        verify_signature(config.verification.secret, webhook.raw_body, webhook.signature)

    message = format_push_message(event)
    sender(config.bot_token, config.chat_id, message, thread_id=config.thread_id)


def create_app(project_configs: Optional[ProjectConfigs] = None, sender: Optional[Callable] = None):
    app = Flask(__name__)
    # Snapshot imutável carregado uma vez; nenhuma mutação após o startup
    configs = project_configs if project_configs is not None else load_project_configs(CONFIG_FILE)
    send = sender or send_telegram_message

    @app.errorhandler(WebhookError)
    def handle_webhook_error(exc):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(level, f"Webhook rejeitado ({exc.status_code}): {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    @app.route('/', methods=['GET'])
    def index():
        return LANDING_PAGE

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'github-telegram-proxy', 'projects': len(configs)}, 200

    @app.route('/webhook/<project_name>', methods=['POST'])
    def webhook(project_name):
        config = configs.get(project_name)
        if config is None:
            raise ConfigNotFound()

        webhook_request = WebhookRequest.from_flask(project_name)
        logger.info(f"Webhook recebido: projeto={project_name} evento={webhook_request.event} delivery={webhook_request.delivery_id}")

        if webhook_request.event == 'ping':
            return 'pong', 200

        process_push(webhook_request, config, send)
        return 'OK', 200

    return app
