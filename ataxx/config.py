# ataxx/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 4  # plies searched before falling back to static evaluation


@dataclass
class WebConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    default_depth: int = 2
    max_depth: int = 6  # deepest search a client may request
    debug: bool = False


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "web"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Ignoring unknown config key %s.%s in %s", section, k, path)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg


def load_config() -> Config:
    cfg = Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "config.toml"))
    # allow env override of depth for quick debugging
    override_depth = os.environ.get("ATAXX_SEARCH_DEPTH")
    if override_depth:
        try:
            cfg.search.depth = int(override_depth)
        except ValueError:
            logger.warning("Ignoring non-integer ATAXX_SEARCH_DEPTH=%r", override_depth)
    return cfg


# single globally importable config instance
CONFIG = load_config()
