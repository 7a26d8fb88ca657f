import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "linkshelf"
FRONTEND_DIR = Path(__file__).resolve().parent.parent / "frontend"

STORAGE_KEY = "links.v1"
DEFAULT_CATEGORY = "Uncategorized"


class Settings(BaseModel):
    data_dir: Path = DEFAULT_DATA_DIR
    storage_key: str = STORAGE_KEY
    host: str = "127.0.0.1"
    port: int = Field(default=8765, ge=1, le=65535)
    log_level: str = "info"
    open_browser: bool = True
    frontend_dir: Path = FRONTEND_DIR

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from LINKSHELF_* environment variables."""
        values = {}
        if os.environ.get("LINKSHELF_DATA_DIR"):
            values["data_dir"] = Path(os.environ["LINKSHELF_DATA_DIR"]).expanduser()
        if os.environ.get("LINKSHELF_HOST"):
            values["host"] = os.environ["LINKSHELF_HOST"]
        if os.environ.get("LINKSHELF_PORT"):
            values["port"] = os.environ["LINKSHELF_PORT"]
        if os.environ.get("LINKSHELF_LOG_LEVEL"):
            values["log_level"] = os.environ["LINKSHELF_LOG_LEVEL"].lower()
        if os.environ.get("LINKSHELF_NO_BROWSER", "").lower() in {"1", "true", "yes"}:
            values["open_browser"] = False
        return cls.model_validate(values)
