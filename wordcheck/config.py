"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS Configuration
    CORS_ORIGINS: str = "*"

    # Development/Debug
    DEBUG: bool = False
    RELOAD: bool = False

    # Spell-check Configuration
    SPELLCHECK_DICTIONARY_PATH: str = "data/dictionary.txt"  # Word list, one word per line
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # Max edit distance for suggestions
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max suggestions per misspelled word
    SPELLCHECK_CACHE_ENABLED: bool = True  # Memoize per-token correctness results
    SPELLCHECK_CACHE_MAX_ENTRIES: int = 10000  # Least recently used tokens are evicted past this

    # Host-persisted word lists, replayed at startup (comma-separated)
    SPELLCHECK_ADDED_WORDS: str = ""
    SPELLCHECK_IGNORED_WORDS: str = ""

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None
    UVICORN_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def added_words_list(self) -> List[str]:
        """Parse user-added dictionary words from comma-separated string."""
        return _split_words(self.SPELLCHECK_ADDED_WORDS)

    @property
    def ignored_words_list(self) -> List[str]:
        """Parse ignored words from comma-separated string."""
        return _split_words(self.SPELLCHECK_IGNORED_WORDS)


def _split_words(value: str) -> List[str]:
    return [word.strip() for word in value.split(",") if word.strip()]


# Global settings instance
settings = Settings()
