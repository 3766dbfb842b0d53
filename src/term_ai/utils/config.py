import os
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "llama3.2"
DEFAULT_ENDPOINT = "http://localhost:11434"
DEFAULT_MAX_RESULTS = 5
DEFAULT_MAX_ITERATIONS = 10


def get_default_dotenv_path() -> Path:
    env_path = os.environ.get("TERM_AI_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config_home) / "term-ai" / ".env"


DOTENV_PATH = get_default_dotenv_path()


class Config(BaseSettings):
    MODEL: str = Field(default=DEFAULT_MODEL, description="Ollama model name (Set via TERM_AI_MODEL)")
    ENDPOINT: str = Field(default=DEFAULT_ENDPOINT, description="Ollama server URL (Set via TERM_AI_ENDPOINT)")

    # --- Web Search Settings --- #
    SEARCH_PROVIDER: Optional[str] = Field(default=None, description="Search provider to use: duckduckgo or brave. Auto-detected when unset.")
    BRAVE_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("BRAVE_API_KEY", "TERM_AI_BRAVE_API_KEY"),
        description="Brave Search API key (Set via BRAVE_API_KEY)",
    )
    MAX_RESULTS: int = Field(default=DEFAULT_MAX_RESULTS, ge=0, description="Maximum number of search results returned to the model")
    MAX_ITERATIONS: int = Field(default=DEFAULT_MAX_ITERATIONS, ge=1, description="Maximum model turns in tool-calling mode")

    # --- Network Settings --- #
    SEARCH_TIMEOUT: float = Field(default=10.0, description="Timeout in seconds for search requests")
    CHAT_TIMEOUT: float = Field(default=30.0, description="Timeout in seconds for /api/chat requests")
    GENERATE_TIMEOUT: Optional[float] = Field(default=None, description="Timeout in seconds for /api/generate requests (None waits indefinitely)")

    # --- UI/Interaction Settings --- #
    VERBOSE: bool = Field(default=False, description="Verbose mode for debugging")

    model_config = SettingsConfigDict(
        env_prefix="TERM_AI_",
        env_file=DOTENV_PATH,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def brave_api_key(self) -> Optional[str]:
        """The Brave key, with blank values treated as unset."""
        if self.BRAVE_API_KEY and self.BRAVE_API_KEY.strip():
            return self.BRAVE_API_KEY.strip()
        return None
