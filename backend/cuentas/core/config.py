from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Cuentas - Sistema Medico"
    VERSION: str = "1.0.0"
    SECRET_KEY: str = "change-me-in-production-use-strong-random-key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    DATABASE_URL: str = "sqlite:///./cuentas.db"

    # First scheme is used for new hashes; the rest are still accepted on verify
    PASSWORD_SCHEMES: List[str] = ["pbkdf2_sha256"]

    # Role code that grants administrator privileges
    ADMIN_ROLE_ID: int = 1

    LOG_LEVEL: str = "INFO"
    SEED_DEMO_DATA: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
