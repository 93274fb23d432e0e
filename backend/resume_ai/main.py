import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_ai.config import settings
from resume_ai.api import analyze_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Turns a free-form personal description into structured resume JSON",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["POST", "GET", "OPTIONS", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(analyze_routes.router, tags=["Analyze"])

# ── Error Handlers ──────────────────────────────────────────────────────────


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are a client error (400), not 422."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": {
                "error": "InvalidRequestBody",
                "category": "client",
                "message": "Request body must be JSON like {\"userDescription\": \"...\"}",
            }
        },
    )


# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "resume_ai.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
