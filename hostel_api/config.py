"""
Centralized application configuration
"""
import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_SECRET_KEY = "hostel-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # ============================================
    # Application Settings
    # ============================================
    APP_NAME: str = "Hostel Food Ordering API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"

    # ============================================
    # Database Settings
    # ============================================
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL", "sqlite:///./hostel_food.db")
    # Create tables on startup instead of running alembic
    CREATE_TABLES: bool = os.getenv("CREATE_TABLES", "true").lower() == "true"
    SEED_MENU: bool = os.getenv("SEED_MENU", "false").lower() == "true"

    # ============================================
    # Security Settings
    # ============================================
    SECRET_KEY: str = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))
    PASSWORD_MIN_LENGTH: int = 6

    # Admin account ensured on startup (skipped when unset)
    DEFAULT_ADMIN_USERNAME: Optional[str] = os.getenv("DEFAULT_ADMIN_USERNAME")
    DEFAULT_ADMIN_PASSWORD: Optional[str] = os.getenv("DEFAULT_ADMIN_PASSWORD")

    # ============================================
    # CORS Settings
    # ============================================
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # ============================================
    # Server Settings
    # ============================================
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8000))

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        """Comma separated CORS_ORIGINS as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.ENVIRONMENT == "production"

    def validate_settings(self) -> List[str]:
        """Validate critical settings and return warnings"""
        warnings = []

        if self.is_production:
            if self.SECRET_KEY == DEFAULT_SECRET_KEY:
                warnings.append(
                    "CRITICAL: Using default SECRET_KEY in production!")

            if self.DATABASE_URL.startswith("sqlite"):
                warnings.append("WARNING: Using SQLite in production!")

            if self.CREATE_TABLES:
                warnings.append(
                    "WARNING: CREATE_TABLES is on, run alembic migrations instead")

        return warnings


# Create global settings instance
settings = Settings()
