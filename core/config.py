# =============================================================================
# core/config.py  -  Runtime Settings
# =============================================================================
#
# Settings come from environment variables.  main.py calls load_dotenv()
# first, so a .env file in the working directory works too:
#
#   HOST=0.0.0.0
#   PORT=8080
#   DESIGN_STANDARDS_PATH=/srv/tokens/Designstandards.json
#   LOG_LEVEL=DEBUG
#
# Everything has a default; an empty environment gives a working server.
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from core.design_tokens import DEFAULT_DOCUMENT_PATH


class ConfigError(ValueError):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    design_standards_path: Path = DEFAULT_DOCUMENT_PATH
    log_level: str = "INFO"


def _port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"PORT out of range: {port}")
    return port


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    defaults = Settings()

    path = env.get("DESIGN_STANDARDS_PATH")
    return Settings(
        host=env.get("HOST") or defaults.host,
        port=_port(env["PORT"]) if env.get("PORT") else defaults.port,
        design_standards_path=Path(path) if path else defaults.design_standards_path,
        log_level=(env.get("LOG_LEVEL") or defaults.log_level).upper(),
    )
