from pydantic import BaseModel, Field
import math
import os

from .errors import ConfigError


class Settings(BaseModel):
    gh_token: str = Field(repr=False)
    penumbra_version: str = "main"
    api_base: str = "https://api.github.com"
    timeout: float = 30.0

    def require_token(self) -> str:
        if not self.gh_token:
            raise ConfigError("GITHUB_PAT is not set")
        return self.gh_token


def _timeout_from_env() -> float:
    raw = os.environ.get("DISPATCH_TIMEOUT", "").strip()
    if not raw:
        return 30.0
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"DISPATCH_TIMEOUT must be a number, got {raw!r}") from None
    if not (math.isfinite(value) and value > 0):
        raise ConfigError(f"DISPATCH_TIMEOUT must be a positive number of seconds, got {raw!r}")
    return value


def load_settings() -> Settings:
    # Empty PENUMBRA_VERSION counts as unset
    return Settings(
        gh_token=os.environ.get("GITHUB_PAT", ""),
        penumbra_version=os.environ.get("PENUMBRA_VERSION") or "main",
        api_base=(os.environ.get("GITHUB_API_URL") or "https://api.github.com").rstrip("/"),
        timeout=_timeout_from_env(),
    )
