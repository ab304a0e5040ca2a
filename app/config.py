import os

# Default to local SQLite for dev/tests; override via env in Docker/Prod
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./tracker.db")

DEFAULT_SECRET_KEY = "ChangeThisDevelopmentOnlyKey_AtLeast32Chars"
JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", DEFAULT_SECRET_KEY)
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
JWT_ISSUER = os.environ.get("JWT_ISSUER", "project-tracker-api")
JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE", "project-tracker-web")
ACCESS_TOKEN_EXPIRE_MINUTES = float(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60))


def _parse_origins(raw: str) -> list[str]:
    origins: list[str] = []
    seen = set()
    for origin in raw.split(","):
        origin = origin.strip()
        if origin and origin.lower() not in seen:
            seen.add(origin.lower())
            origins.append(origin)
    return origins


# Comma separated, e.g. "https://tracker.example.com,http://localhost:5173"
CORS_ALLOWED_ORIGINS = _parse_origins(
    os.environ.get("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000")
)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
SEED_DEMO_DATA = os.environ.get("SEED_DEMO_DATA", "true").lower() == "true"

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

SERVICE_NAME = "project-tracker-api"
