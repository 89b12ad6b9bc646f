"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from call_agent.api import calls, script, session, voices
from call_agent.core.dependencies import close_session_manager
from call_agent.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    yield
    # Shutdown: stop polling the active call
    await close_session_manager()


app = FastAPI(
    title="Outbound Call Agent",
    description="Generate call scripts, place outbound calls and track their status",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(voices.router, tags=["voices"])
app.include_router(script.router, tags=["script"])
app.include_router(calls.router, tags=["calls"])
app.include_router(session.router, tags=["session"])


@app.get("/")
async def root():
    """Service information."""
    return {
        "message": "Outbound Call Agent API",
        "version": "0.1.0",
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
