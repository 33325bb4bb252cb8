"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        LOGO_MAX_SIZE_KB: int = 300

    settings = Settings()
    print(settings.MONGODB_URI)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Database Settings
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "workspace"

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    LOG_LEVEL: str = "INFO"

    # ==========================================================================
    # Internationalization
    # ==========================================================================
    LOCALES_DIR: str = "locales"
    DEFAULT_LANGUAGE: str = "en"
    SUPPORTED_LANGUAGES: str = "en,zh"  # Comma-separated

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_supported_languages(self) -> list:
        """Parse SUPPORTED_LANGUAGES into a list."""
        return [lang.strip() for lang in self.SUPPORTED_LANGUAGES.split(",") if lang.strip()]

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if not self.MONGODB_URI:
            errors.append("MONGODB_URI is required")

        if not self.MONGODB_DATABASE:
            errors.append("MONGODB_DATABASE is required")

        if self.DEFAULT_LANGUAGE not in self.get_supported_languages():
            errors.append(
                f"DEFAULT_LANGUAGE '{self.DEFAULT_LANGUAGE}' must be listed in SUPPORTED_LANGUAGES"
            )

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
