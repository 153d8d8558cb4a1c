# =============================================================================
# CONFIGURACAO DO QUIZ APP
# =============================================================================
# Valores lidos do ambiente (.env suportado). ANTHROPIC_API_KEY NAO fica aqui:
# e lida no momento da chamada por LLMClientFactory.is_configured().
# =============================================================================

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# -----------------------------------------------------------------------------
# Ambiente
# -----------------------------------------------------------------------------

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# -----------------------------------------------------------------------------
# Provedor de IA
# -----------------------------------------------------------------------------

# Haiku e mais rapido e barato
QUIZ_MODEL = os.getenv("QUIZ_MODEL", "claude-3-5-haiku-latest")
QUIZ_TEMPERATURE = float(os.getenv("QUIZ_TEMPERATURE", "0.3"))
QUIZ_MAX_TOKENS = int(os.getenv("QUIZ_MAX_TOKENS", "2048"))
# Espera maxima pela IA antes de cair no fallback (uma unica tentativa)
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "20"))

# -----------------------------------------------------------------------------
# Persistencia (AgentFS KV)
# -----------------------------------------------------------------------------

AGENTFS_ID = os.getenv("AGENTFS_ID", "quiz-app")
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "50"))

# -----------------------------------------------------------------------------
# Sessao / seguranca
# -----------------------------------------------------------------------------

SESSION_SECRET = os.getenv("SESSION_SECRET", "dev-secret-change-in-production")
SESSION_COOKIE = os.getenv("SESSION_COOKIE", "auth-token")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(60 * 60 * 24 * 7)))  # 7 dias

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]

RATE_LIMIT_ENABLED = _env_bool("RATE_LIMIT_ENABLED", True)
GENERATE_RATE_LIMIT = os.getenv("GENERATE_RATE_LIMIT", "30/minute")
