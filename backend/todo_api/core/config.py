from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./todo.db")
    sql_echo: bool = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

    jwt_secret: str = os.getenv("JWT_SECRET", "change-me")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "60"))

    cors_origins: list[str] = _csv(
        os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
