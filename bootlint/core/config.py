"""
Configuration module - centralized settings for the linter.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Linter settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Every variable is prefixed with BOOTLINT_, for example:
        export BOOTLINT_DISABLED_IDS='["W003", "E001"]'
        export BOOTLINT_WIKI_URL=https://example.org/bootlint/wiki/
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="BOOTLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # DOCUMENTATION
    # ---------------------------------------------------------------------------
    # WIKI_URL: Base of the per-rule documentation links (<WIKI_URL><id>)
    WIKI_URL: str = "https://github.com/twbs/bootlint/wiki/"

    # ---------------------------------------------------------------------------
    # PARSING
    # ---------------------------------------------------------------------------
    # HTML_PARSER: BeautifulSoup tree builder. Locations are only
    # reported by builders that track sourceline/sourcepos.
    HTML_PARSER: str = "html.parser"

    # ---------------------------------------------------------------------------
    # RULE SELECTION
    # ---------------------------------------------------------------------------
    # DISABLED_IDS: Rule ids skipped when the caller passes no explicit list
    DISABLED_IDS: List[str] = []

    # ---------------------------------------------------------------------------
    # VERSION THRESHOLDS
    # ---------------------------------------------------------------------------
    # MIN_JQUERY_VERSION: Oldest jQuery supported by Bootstrap's plugins (W005)
    MIN_JQUERY_VERSION: str = "3.0.0"

    # CURRENT_BOOTSTRAP_VERSION: Bootstrap release these rules target (W013)
    CURRENT_BOOTSTRAP_VERSION: str = "4.0.0-beta"

    def documentation_url(self, rule_id: str) -> str:
        """Build the documentation link for a rule id."""
        return f"{self.WIKI_URL}{rule_id}"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from bootlint.core.config import settings
settings = Settings()
