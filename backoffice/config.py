from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # JWT Authentication (tokens issued by the auth service)
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    # Application
    APP_NAME: str = "Travel Back-Office API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    # Tenant resolution: paths that may run without a tenant
    TENANT_EXEMPT_PREFIXES: str = "/admin/,/auth/,/api"

    # Image storage
    STORAGE_BACKEND: str = "s3"  # "s3" or "local"
    STORAGE_LOCAL_PATH: str = "storage"
    STORAGE_PUBLIC_URL: str = "http://localhost:8000/static"
    AWS_S3_BUCKET: str = "travel-backoffice-images"
    AWS_REGION: str = "us-east-1"
    AWS_S3_ENDPOINT: str | None = None  # Set for LocalStack / MinIO
    AWS_ACCESS_KEY_ID: str = "test"
    AWS_SECRET_ACCESS_KEY: str = "test"
    IMAGE_MAX_SIZE: int = 1200
    THUMBNAIL_MAX_SIZE: int = 400

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def tenant_exempt_prefixes(self) -> tuple[str, ...]:
        """Parse TENANT_EXEMPT_PREFIXES from comma-separated string"""
        return tuple(
            prefix.strip() for prefix in self.TENANT_EXEMPT_PREFIXES.split(",") if prefix.strip()
        )


# Global settings instance
settings = Settings()
