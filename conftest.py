# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Ambiente de testes sem dependencias externas (sem chave de IA = fallback)
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env():
    """Configura variaveis de ambiente para testes.

    ANTHROPIC_API_KEY e removida: testes que precisam da IA a definem
    explicitamente e mockam o cliente.
    """
    env_vars = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "ERROR",
        "RATE_LIMIT_ENABLED": "false",
    }
    with patch.dict(os.environ, env_vars):
        os.environ.pop("ANTHROPIC_API_KEY", None)
        yield
