# solaredge_api/config.py
from dataclasses import dataclass, field
from pathlib import Path
import configparser


DEFAULT_BASE_URL = "https://monitoringapi.solaredge.com"


@dataclass(frozen=True)
class SolarEdgeAPIConfig:
    api_key: str | None = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 20.0
    # "query" sends ?api_key=..., "header" sends X-API-Key
    api_key_location: str = "query"
    site_id: int | None = None

    def __post_init__(self):
        if self.api_key_location not in ("query", "header"):
            raise ValueError(
                f"api_key_location must be 'query' or 'header', got '{self.api_key_location}'"
            )


@dataclass
class LoggingConfig:
    console_level: str = "INFO"
    console_quiet: bool = False
    debug_modules: list[str] = field(default_factory=list)


@dataclass
class AppConfig:
    solaredge_api: SolarEdgeAPIConfig
    logging: LoggingConfig


class Config:
    def __init__(self, path: str):
        self.path = Path(path)
        self.parser = configparser.ConfigParser(inline_comment_prefixes=("#",))
        read = self.parser.read(self.path)
        if not read:
            raise FileNotFoundError(f"Config file not found: {self.path}")

    @classmethod
    def load(cls, path: str) -> AppConfig:
        cfg = cls(path)

        p = cfg.parser

        def _as_bool(value: str) -> bool:
            return value.strip().lower() == "true"

        # --- SolarEdge API ---
        if "solaredge_api" not in p:
            raise ValueError("[solaredge_api] section missing from config")

        se_api_sec = p["solaredge_api"]
        api_key = se_api_sec.get("api_key") or se_api_sec.get("solaredge_api_key")
        if not api_key or not api_key.strip():
            raise ValueError("[solaredge_api] api_key is required")

        solaredge_api_kwargs = {"api_key": api_key.strip()}
        if "base_url" in se_api_sec:
            solaredge_api_kwargs["base_url"] = se_api_sec["base_url"].strip()
        if "timeout" in se_api_sec:
            solaredge_api_kwargs["timeout"] = float(se_api_sec["timeout"])
        if "api_key_location" in se_api_sec:
            solaredge_api_kwargs["api_key_location"] = se_api_sec["api_key_location"].strip().lower()
        site_id = se_api_sec.get("site_id") or se_api_sec.get("solaredge_site_id")
        if site_id is not None and site_id.strip():
            solaredge_api_kwargs["site_id"] = int(site_id)
        solaredge_api_cfg = SolarEdgeAPIConfig(**solaredge_api_kwargs)

        # --- Logging ---
        logging_kwargs = {}
        if "logging" in p:
            logging_sec = p["logging"]
            if "console_level" in logging_sec:
                logging_kwargs["console_level"] = logging_sec["console_level"]
            if "console_quiet" in logging_sec:
                logging_kwargs["console_quiet"] = _as_bool(logging_sec["console_quiet"])
            if "debug_modules" in logging_sec:
                raw = logging_sec["debug_modules"]
                logging_kwargs["debug_modules"] = [x.strip() for x in raw.split(",") if x.strip()]
        logging_cfg = LoggingConfig(**logging_kwargs)

        return AppConfig(
            solaredge_api=solaredge_api_cfg,
            logging=logging_cfg,
        )
