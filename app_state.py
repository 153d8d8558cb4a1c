"""Core module - shared state (AgentFS handle and rate limiter)."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from slowapi import Limiter
from slowapi.util import get_remote_address

import config
from quiz.errors import PersistenceError

if TYPE_CHECKING:
    from agentfs_sdk import AgentFS

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL INSTANCES
# =============================================================================

# Banco AgentFS com as colecoes quizzes / quiz_results / users
agentfs: Optional[AgentFS] = None
_agentfs_lock = asyncio.Lock()

limiter = Limiter(key_func=get_remote_address, enabled=config.RATE_LIMIT_ENABLED)


# =============================================================================
# AGENTFS
# =============================================================================


async def get_agentfs() -> AgentFS:
    """Get AgentFS instance (aberto sob demanda na primeira chamada).

    Raises:
        PersistenceError: Se o banco nao puder ser aberto
    """
    global agentfs
    if agentfs is not None:
        return agentfs

    async with _agentfs_lock:
        if agentfs is None:
            from agentfs_sdk import AgentFS, AgentFSOptions

            try:
                agentfs = await AgentFS.open(AgentFSOptions(id=config.AGENTFS_ID))
            except Exception as e:
                logger.exception("Falha ao abrir AgentFS '%s'", config.AGENTFS_ID)
                raise PersistenceError("Storage is unavailable") from e
            logger.info("AgentFS aberto: %s", config.AGENTFS_ID)
    return agentfs


async def cleanup() -> None:
    """Cleanup resources on shutdown."""
    global agentfs
    if agentfs is not None:
        try:
            await agentfs.close()
            logger.info("AgentFS closed")
        except Exception as e:
            logger.warning("Error closing agentfs: %s", e)
        agentfs = None
