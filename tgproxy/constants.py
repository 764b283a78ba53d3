import os

from dotenv import load_dotenv

# Carrega .env (se existir) antes de ler as variáveis
load_dotenv()

# Configurações globais de ambiente
TELEGRAM_API_DOMAIN = os.getenv("TELEGRAM_API_DOMAIN", "https://api.telegram.org").rstrip("/")
TELEGRAM_TIMEOUT_SECONDS = float(os.getenv("TELEGRAM_TIMEOUT_SECONDS", "10"))
APP_PORT = int(os.getenv("PORT", "3000"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Arquivo com o mapa projeto -> {botToken, chatId, threadId, webhookSecret}
CONFIG_FILE = os.getenv("CONFIG_FILE", "config.json")

# Se true, projetos sem webhookSecret são rejeitados (500) em vez de aceitos sem assinatura
REQUIRE_SIGNATURE = os.getenv("REQUIRE_SIGNATURE", "false").lower() == "true"

# Cabeçalhos enviados pelo GitHub
EVENT_HEADER = "X-GitHub-Event"
SIGNATURE_HEADER = "X-Hub-Signature-256"
DELIVERY_HEADER = "X-GitHub-Delivery"
SIGNATURE_PREFIX = "sha256="

# Telegram
TELEGRAM_PARSE_MODE = "Markdown"
PUSH_EMOJI = "🚀"
UNKNOWN_AUTHOR = "unknown"
