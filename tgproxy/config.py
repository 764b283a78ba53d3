import json
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .constants import REQUIRE_SIGNATURE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unverified:
    """Projeto aceita pushes sem assinatura."""


@dataclass(frozen=True)
class Verified:
    """Projeto exige X-Hub-Signature-256. secret vazio = segredo não configurado."""

    secret: str = ""


Verification = Union[Unverified, Verified]


@dataclass(frozen=True)
class ProjectConfig:
    bot_token: str
    chat_id: Union[str, int]
    thread_id: Optional[int] = None
    verification: Verification = Unverified()

    @property
    def requires_signature(self) -> bool:
        return isinstance(self.verification, Verified)


ProjectConfigs = Mapping[str, ProjectConfig]


def _resolve_verification(entry: Dict[str, Any], require_signature: bool) -> Verification:
    secret = entry.get("webhookSecret")
    # Segredo usado como está (é a chave do HMAC); só a checagem de vazio ignora espaços
    secret = str(secret) if secret is not None else ""
    flag = entry.get("verifySignature")

    if flag is False:
        return Unverified()
    if secret.strip():
        return Verified(secret)
    if flag is True or require_signature:
        return Verified("")
    return Unverified()


def parse_project_config(name: str, entry: Any, require_signature: bool = REQUIRE_SIGNATURE) -> Optional[ProjectConfig]:
    """Converte uma entrada do JSON em ProjectConfig; None se a entrada for inválida."""
    if not isinstance(entry, dict):
        logger.warning(f"Config do projeto '{name}' ignorada: esperado objeto, recebido {type(entry).__name__}")
        return None

    bot_token = entry.get("botToken")
    chat_id = entry.get("chatId")
    if not bot_token or chat_id in (None, ""):
        logger.warning(f"Config do projeto '{name}' ignorada: botToken/chatId ausentes")
        return None

    thread_id = entry.get("threadId")
    if thread_id is not None:
        try:
            thread_id = int(thread_id)
        except (TypeError, ValueError):
            logger.warning(f"Config do projeto '{name}' ignorada: threadId inválido ({thread_id!r})")
            return None

    return ProjectConfig(
        bot_token=str(bot_token),
        chat_id=chat_id,
        thread_id=thread_id,
        verification=_resolve_verification(entry, require_signature),
    )


def load_project_configs(file_path: Optional[str], require_signature: bool = REQUIRE_SIGNATURE) -> ProjectConfigs:
    """
    Lê o arquivo de configuração uma única vez. Qualquer falha resulta em mapa
    vazio (o servidor sobe e todos os webhooks respondem 404).
    """
    configs: Dict[str, ProjectConfig] = {}
    if not file_path or not os.path.exists(file_path):
        logger.warning(f"{file_path or 'config.json'} não encontrado, usando configuração de projetos vazia.")
        return MappingProxyType(configs)

    try:
        with open(file_path, "r", encoding="utf-8") as fp:
            data = json.load(fp)
    except (OSError, ValueError) as exc:
        logger.error(f"Falha ao ler {file_path}: {exc}")
        return MappingProxyType(configs)

    if not isinstance(data, dict):
        logger.error(f"{file_path} deve conter um objeto JSON indexado pelo nome do projeto")
        return MappingProxyType(configs)

    for name, entry in data.items():
        project = parse_project_config(name, entry, require_signature)
        if project is not None:
            configs[name] = project

    signed = sum(1 for p in configs.values() if p.requires_signature)
    logger.info(f"{len(configs)} projetos carregados de {file_path} ({signed} com assinatura)")
    return MappingProxyType(configs)
