from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

DEFAULT_API_URL = "https://youtubeviralprediction-ml-xgboost.onrender.com/predict"
NUMERIC_POLICIES = ("lenient", "strict")

ENV_KEYS = {
    "api_url": "API_URL",
    "timeout": "API_TIMEOUT",
    "numeric_policy": "NUMERIC_POLICY",
    "log_level": "LOG_LEVEL",
}

@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = 20.0
    numeric_policy: str = "lenient"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.numeric_policy not in NUMERIC_POLICIES:
            raise ValueError(f"numeric_policy must be one of {NUMERIC_POLICIES}, got {self.numeric_policy!r}")
        # 0 / negative means "wait forever", which requests spells as None
        if self.timeout is not None:
            t = float(self.timeout)
            object.__setattr__(self, "timeout", t if t > 0 else None)
        object.__setattr__(self, "log_level", str(self.log_level).upper())

def _read_yaml(path: str) -> dict:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        y = yaml.safe_load(f) or {}
    if not isinstance(y, dict):
        raise ValueError(f"{path} must contain a mapping")
    known = {f.name for f in fields(Settings)}
    unknown = set(y) - known
    if unknown:
        raise ValueError(f"{path}: unknown settings {sorted(unknown)}")
    return y

def _from_env(environ) -> dict:
    out = {}
    for key, var in ENV_KEYS.items():
        val = environ.get(var)
        if val is None or val == "":
            continue
        out[key] = float(val) if key == "timeout" else val
    return out

def load_settings(path: Optional[str] = None, environ=None, **overrides) -> Settings:
    """Defaults, then the YAML file (if any), then environment, then explicit overrides."""
    environ = os.environ if environ is None else environ
    cfg = {}
    if path:
        cfg.update(_read_yaml(path))
    cfg.update(_from_env(environ))
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return replace(Settings(), **cfg)
