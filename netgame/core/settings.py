import os
import yaml
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from netgame.core.constants import DEFAULT_SEARCH_DEPTH

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "player.yaml"

class PlayerConfig(BaseModel):
    search_depth: int = Field(default=DEFAULT_SEARCH_DEPTH, ge=1)
    log_level: str = "INFO"

class ConfigRegistry:
    def __init__(self, config_path: Optional[str] = None):
        path = config_path or os.getenv("NETGAME_CONFIG") or DEFAULT_CONFIG_PATH
        self.config_path = Path(path)
        self.player = self._load(self.config_path)

    def _load(self, path: Path) -> PlayerConfig:
        data: Dict[str, Any] = {}
        if path.exists():
            with open(path, "r") as f:
                document = yaml.safe_load(f) or {}
            if not isinstance(document, dict):
                raise ValueError(f"{path}: expected a mapping at the top level")
            data = document.get("player") or {}
            if not isinstance(data, dict):
                raise ValueError(f"{path}: 'player' must be a mapping")

        # Environment wins over the file
        if os.getenv("NETGAME_SEARCH_DEPTH"):
            data["search_depth"] = os.getenv("NETGAME_SEARCH_DEPTH")
        if os.getenv("NETGAME_LOG_LEVEL"):
            data["log_level"] = os.getenv("NETGAME_LOG_LEVEL")

        return PlayerConfig(**data)

    def get(self) -> PlayerConfig:
        return self.player

# Singleton instance
settings = ConfigRegistry()
