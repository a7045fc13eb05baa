"""
FastAPI backend for GLYERAL.

Evaluates patient profiles, records physician decisions and serves the
audit trail and chat assistant.
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import audit, chat, decisions, health, recommendations
from api.state import get_recorder, get_settings
from glyeral import __version__
from glyeral.errors import AuditTrailError, GlyeralError
from glyeral.utils.logging import get_logger, setup_logging

load_dotenv()

settings = get_settings()
setup_logging(level=settings.log_level, log_file=settings.log_file)

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    recorder = get_recorder()
    logger.info(f"GLYERAL API starting ({len(recorder.audit_store)} audit entries loaded)")
    yield
    logger.info("GLYERAL API shutting down")


app = FastAPI(
    title="GLYERAL Recommendation API",
    description="Rule-based diabetes medication recommendations with physician review",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuditTrailError)
async def audit_trail_error_handler(request: Request, exc: AuditTrailError):
    """The audit file is unusable; nothing can be recorded until it is repaired."""
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(GlyeralError)
async def glyeral_error_handler(request: Request, exc: GlyeralError):
    """Domain errors the routes did not map themselves."""
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app.include_router(health.router, tags=["Health"])
app.include_router(recommendations.router, prefix="/api", tags=["Recommendations"])
app.include_router(decisions.router, prefix="/api", tags=["Decisions"])
app.include_router(audit.router, prefix="/api", tags=["Audit"])
app.include_router(chat.router, prefix="/api", tags=["Chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
