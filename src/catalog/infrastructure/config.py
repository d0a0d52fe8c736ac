"""Runtime settings, read from the environment (and an optional ``.env``).

CATALOG_DATA_DIR       directory holding the JSON collections
                       (default: ``data/`` at the project root)
CATALOG_ATOMIC_COMMIT  ``false`` to run as if the backend had no
                       multi-document transactions (default ``true``)
LOG_LEVEL              standard logging level name (default ``WARNING``)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    catalog_data_dir: Path = _PROJECT_ROOT / "data"
    catalog_atomic_commit: bool = True
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()
