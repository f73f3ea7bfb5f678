from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    base_url: str = "http://localhost:3000/"
    login_path: str = "user/login"
    auth_email: str = "john.doe@example.com"
    auth_password: str = "password123"
    request_timeout: float = 10.0
    log_level: str = "INFO"
    live: bool = False

    # reference catalog service
    jwt_secret: str = "bookcheck-reference-service-secret"
    jwt_algorithm: str = "HS256"
    jwt_expiration: int = 3600
    stub_database_url: str = "sqlite+aiosqlite:///:memory:"

    class Config:
        env_prefix = "BOOKCHECK_"
        env_file = Path(__file__).resolve().parent.parent/".env"
        extra = "ignore"

settings = Settings()
