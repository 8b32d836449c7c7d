from typing import Optional, Dict, Any, Union
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import PostgresDsn, field_validator, Field
from pathlib import Path

# Define the root directory of the worldfeel service package
SERVICE_ROOT_DIR = Path(__file__).parent.parent.resolve()
# Path to the repository root (one level above the package)
PROJECT_ROOT_DIR = SERVICE_ROOT_DIR.parent

class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "WorldFeelService"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080

    # Security settings
    ALLOWED_HOSTS: Union[str, list[str]] = "localhost,127.0.0.1,0.0.0.0"
    CORS_ORIGINS: Union[str, list[str]] = "http://localhost:5173,http://localhost:3000"
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: Union[str, list[str]] = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: Union[str, list[str]] = "Content-Type,Authorization,X-Requested-With"
    # Honour X-Forwarded-For when running behind a reverse proxy
    TRUST_PROXY: bool = True

    # Database settings
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "user"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "worldfeeling"
    DATABASE_URL: Optional[str] = None

    # Identity hashing; rotates daily together with the UTC date
    DAY_SALT_SECRET: str = Field(
        default="development-only-day-salt-secret-change-me",
        min_length=32,
    )

    # Submission policy
    RETENTION_HOURS: int = Field(default=24, ge=1)
    EDIT_WINDOW_MINUTES: int = Field(default=5, ge=0)

    # Stats settings
    STATS_CACHE_TTL_SECONDS: float = Field(default=5.0, gt=0)
    RANKING_WINDOW_SIZE: int = Field(default=100, ge=1)

    # Device identity cookie
    DEVICE_COOKIE_NAME: str = "worldfeel_device"
    DEVICE_COOKIE_MAX_AGE_DAYS: int = 365

    # Background deletion of expired submissions
    EXPIRY_SWEEP_INTERVAL_SECONDS: int = Field(default=60, ge=1)

    # Logging configuration path (can be overridden by env var)
    LOGGING_CONFIG_PATH: str = str(SERVICE_ROOT_DIR / "config" / "logging_config.yaml")

    @field_validator("DATABASE_URL", mode='before')
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], values: Dict[str, Any]) -> Any:
        if isinstance(v, str):
            return v
        db_user = values.data.get("DB_USER")
        db_password = values.data.get("DB_PASSWORD")
        db_host = values.data.get("DB_HOST")
        db_port = values.data.get("DB_PORT")
        db_name = values.data.get("DB_NAME")

        return str(PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=db_user,
            password=db_password,
            host=db_host,
            port=db_port,
            path=db_name or "",
        ))

    def model_post_init(self, __context) -> None:
        """Parse comma-separated strings into lists after model initialization."""
        if isinstance(self.ALLOWED_HOSTS, str):
            self.ALLOWED_HOSTS = [host.strip() for host in self.ALLOWED_HOSTS.split(',') if host.strip()]

        if isinstance(self.CORS_ORIGINS, str):
            self.CORS_ORIGINS = [origin.strip() for origin in self.CORS_ORIGINS.split(',') if origin.strip()]

        if isinstance(self.CORS_ALLOW_METHODS, str):
            self.CORS_ALLOW_METHODS = [method.strip() for method in self.CORS_ALLOW_METHODS.split(',') if method.strip()]

        if isinstance(self.CORS_ALLOW_HEADERS, str):
            if self.CORS_ALLOW_HEADERS == "*":
                self.CORS_ALLOW_HEADERS = ["*"]
            else:
                self.CORS_ALLOW_HEADERS = [header.strip() for header in self.CORS_ALLOW_HEADERS.split(',') if header.strip()]

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT_DIR / ".env"),  # Load variables from project root .env
        env_file_encoding='utf-8',
        # DATABASE_URL must be validated even when left at its default so the DSN gets assembled
        validate_default=True,
        extra='ignore'
    )


# Instantiate settings
settings = Settings()
