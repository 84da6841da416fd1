"""Runtime configuration for the operator console."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_TIMEOUT,
    ENV_API_TIMEOUT,
    ENV_API_TOKEN,
    ENV_API_URL,
    OPERATORS_PATH,
)


@dataclass(frozen=True)
class ConsoleConfig:
    """Connection settings injected into the operator client.

    api_token is the opaque bearer credential owned by the login flow;
    the console only forwards it.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: str | None = None
    timeout: float | None = DEFAULT_API_TIMEOUT

    def __post_init__(self) -> None:
        # Paths are joined onto the base URL, so keep it free of a trailing slash
        object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))

    @property
    def operators_url(self) -> str:
        return f"{self.api_base_url}{OPERATORS_PATH}"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ConsoleConfig:
        """Build a config from SMSC_API_* environment variables."""
        env = os.environ if environ is None else environ
        timeout = DEFAULT_API_TIMEOUT
        raw_timeout = env.get(ENV_API_TIMEOUT, "").strip()
        if raw_timeout:
            timeout = parse_timeout(raw_timeout)
        return cls(
            api_base_url=env.get(ENV_API_URL) or DEFAULT_API_BASE_URL,
            api_token=env.get(ENV_API_TOKEN) or None,
            timeout=timeout,
        )

    def with_overrides(
        self,
        api_base_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
    ) -> ConsoleConfig:
        """Return a copy with any non-None argument applied (CLI flags)."""
        changes = {}
        if api_base_url is not None:
            changes["api_base_url"] = api_base_url
        if api_token is not None:
            changes["api_token"] = api_token
        if timeout is not None:
            changes["timeout"] = timeout if timeout > 0 else None
        return replace(self, **changes)


def parse_timeout(value: str) -> float | None:
    """Parse a timeout in seconds. Zero or less disables the timeout.

    Raises:
        ValueError: If the value is not a number
    """
    seconds = float(value)
    return seconds if seconds > 0 else None


def get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "smsc-console"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "console.log"
