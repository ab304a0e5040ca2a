import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import config
from app.database import SessionLocal, init_db
from app.routers import auth, dashboard, projects, tasks
from app.seed import seed_demo_data

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"


def check_security_config():
    """Warn about settings that are only acceptable in development."""
    if config.JWT_SECRET_KEY == config.DEFAULT_SECRET_KEY:
        logger.warning("Using the default JWT_SECRET_KEY; set JWT_SECRET_KEY outside development")
    elif len(config.JWT_SECRET_KEY) < 32:
        logger.warning("JWT_SECRET_KEY is shorter than 32 characters")
    if "*" in config.CORS_ALLOWED_ORIGINS:
        logger.warning("CORS_ALLOWED_ORIGINS contains '*'; list explicit origins instead")


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_security_config()
    init_db()
    if config.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()
    logger.info("Service started")
    yield


app = FastAPI(title="Project Tracker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer with a per-field map of messages, e.g. {"name": ["String should have at least 3 characters"]}."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        names = [part for part in error.get("loc", ()) if isinstance(part, str) and part not in ("body", "query", "path")]
        # malformed JSON is located by character offset; report it against the body
        field = names[-1] if names and error.get("type") != "json_invalid" else "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=422,
        content={"detail": "One or more validation errors occurred.", "errors": errors},
    )


# Generic error handler to return JSON errors for unexpected exceptions.
# Starlette re-raises the exception afterwards, so the server logs the traceback.
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok", "service": config.SERVICE_NAME}


# API routers
app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(tasks.router)
app.include_router(dashboard.router)

# Serve the single-page client from / (index.html in app/frontend); mounted last so API routes win
app.mount("/", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)
