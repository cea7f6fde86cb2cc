from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "QUANTUM-ADMIN"
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    DATABASE_URL: str = "sqlite+pysqlite:///./quantum.db"
    SUPERADMIN_EMAIL: str = "admin@quantum-radio.local"
    SUPERADMIN_PASSWORD: str = "change-me-please"
    CORS_ALLOWED_ORIGINS: str = "http://localhost:5173"
    CHATBOT_URL: str = "http://localhost:5000/chat"
    CHATBOT_TIMEOUT_SECONDS: float = 30.0
    LIST_MAX_PAGE_SIZE: int = 200

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
