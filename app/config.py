# app/config.py
from pydantic_settings import BaseSettings
from envparse import env

env.read_envfile()


class Settings(BaseSettings):
    DEBUG: bool = env.bool("DEBUG", default=False)
    LOG_LEVEL: str = env("LOG_LEVEL", "INFO")

    # HOST
    HOST: str = env("HOST", "localhost")
    PORT: int = env.int("PORT", default=8000)
    RELOAD: bool = env.bool("RELOAD", default=False)

    # CORS Settings
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    # Storage: "firestore", or "memory" for local development without an emulator
    STORE_BACKEND: str = env("STORE_BACKEND", "firestore")
    FIRESTORE_PROJECT_ID: str = env("FIRESTORE_PROJECT_ID", "demo-project")
    FIRESTORE_EMULATOR_HOST: str = env("FIRESTORE_EMULATOR_HOST", "")
    GAMES_COLLECTION: str = env("GAMES_COLLECTION", "games")

    # Seeding
    SEED_FILE: str = env("SEED_FILE", "games.json")

    # Admin client
    API_BASE_URL: str = env("API_BASE_URL", "http://localhost:8000")
    API_TIMEOUT: float = env.float("API_TIMEOUT", default=10.0)


settings = Settings()
