"""
Quiz App Server - Topic quizzes with AI generation and deterministic fallback

FastAPI server with:
- Quiz generation (Anthropic, with offline fallback) and grading
- Per-user history and dashboard stats (AgentFS KV store)
- Signed-cookie sessions, CORS, rate limiting
- Flat {"message", "kind"} error bodies
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

import app_state
import config
from quiz.errors import QuizError
from quiz.llm import LLMClientFactory
from quiz.router import router as quiz_router
from routers import auth_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("server")


# =============================================================================
# FASTAPI APP
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifecycle."""
    logger.info("Starting Quiz App (%s)...", config.ENVIRONMENT)
    yield
    await app_state.cleanup()


app = FastAPI(
    title="Quiz App",
    description="Multiple-choice quizzes on any topic, graded with per-user history",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Sessao assinada (cookie httpOnly)
app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_MAX_AGE,
    same_site="lax",
    https_only=config.ENVIRONMENT == "production",
)

# Rate limiter (RateLimitExceeded e um HTTPException: vira {"message"} 429)
app.state.limiter = app_state.limiter


# =============================================================================
# ERROR HANDLERS
# =============================================================================


@app.exception_handler(QuizError)
async def quiz_error_handler(request: Request, exc: QuizError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"message": message, "kind": "invalid_input"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) or "Internal server error"
    return JSONResponse(status_code=500, content={"message": message})


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================


@app.get("/")
async def root():
    """Health check."""
    return {
        "status": "ok",
        "message": "Quiz App - AI quizzes with offline fallback",
        "ai_configured": LLMClientFactory().is_configured(),
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "environment": config.ENVIRONMENT,
        "storage_open": app_state.agentfs is not None,
        "ai": {
            "configured": LLMClientFactory().is_configured(),
            "model": config.QUIZ_MODEL,
            "timeout_seconds": config.AI_TIMEOUT_SECONDS,
        },
        "security": {
            "rate_limiter": "slowapi" if app_state.limiter.enabled else "disabled",
            "session_cookie": config.SESSION_COOKIE,
        },
    }


# =============================================================================
# ROUTERS
# =============================================================================

app.include_router(quiz_router)
app.include_router(auth_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
