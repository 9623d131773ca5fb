"""Notification service FastAPI application.

Serves the notifications inbox API. Commands are processed synchronously
inside the notifications domain context pushed for every request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the domain.toml overlay (e.g. "production").
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from notifications.config import load_settings
from notifications.domain import notifications
from notifications.utils.logging import add_context, configure_logging

configure_logging()
notifications.init()

settings = load_settings()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Notification Service API",
    description="ClipDeck notifications inbox",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the notifications domain context for each request."""
    add_context(method=request.method, path=request.url.path)
    with notifications.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers and error translation
# ---------------------------------------------------------------------------
from notifications.api import router as notifications_router  # noqa: E402
from notifications.api.errors import register_exception_handlers  # noqa: E402

app.include_router(notifications_router)
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / readiness
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "service": "notification-service"})


@app.get("/ready")
async def ready():
    return JSONResponse(content={"status": "ready", "service": "notification-service"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
