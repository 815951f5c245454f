"""Analysis configuration.

Settings are read from a YAML file, either with the values nested under a
``designguard:`` key or as a flat mapping:

```yaml
designguard:
  fetch_timeout: 15
  use_proxy: false
  fallback_to_sample: true
```

Missing keys fall back to the defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_NAME = "designguard.yaml"
DEFAULT_PROXY_URL = "https://api.allorigins.win/raw?url={url}"
DEFAULT_USER_AGENT = "designguard/0.1"


@dataclass
class AnalysisConfig:
    """Settings for one analysis run."""
    fetch_timeout: float = 30.0  # seconds
    proxy_url: str = DEFAULT_PROXY_URL  # must contain {url}
    use_proxy: bool = True
    fallback_to_sample: bool = True
    rule_delay: float = 0.0  # pause after each rule, seconds
    phase_delay: float = 0.0  # pause between phases, seconds
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.fetch_timeout <= 0:
            raise ConfigError(f"fetch_timeout must be positive, got {self.fetch_timeout}")
        if self.rule_delay < 0 or self.phase_delay < 0:
            raise ConfigError("rule_delay and phase_delay must not be negative")
        if self.use_proxy and "{url}" not in self.proxy_url:
            raise ConfigError(f"proxy_url must contain '{{url}}': {self.proxy_url}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, value in data.items():
            default = getattr(cls, key)
            try:
                if isinstance(default, bool):
                    if not isinstance(value, bool):
                        raise TypeError("expected true or false")
                elif isinstance(default, float):
                    if isinstance(value, bool):
                        raise TypeError("expected a number")
                    value = float(value)
                else:
                    value = str(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for {key}: {value!r} ({e})") from e
            values[key] = value

        return cls(**values)


def parse_config(content: str) -> AnalysisConfig:
    """Parse YAML text into an AnalysisConfig."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e

    if data is None:
        return AnalysisConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping")
    if "designguard" in data:
        data = data["designguard"] or {}
        if not isinstance(data, dict):
            raise ConfigError("'designguard' section must be a mapping")

    return AnalysisConfig.from_dict(data)


def load_config(path: Optional[Path] = None) -> AnalysisConfig:
    """Load configuration.

    Uses the given path, else ./designguard.yaml when it exists, else the
    defaults.

    Raises:
        ConfigError: If an explicit path is missing or any file is invalid.
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            return AnalysisConfig()
        path = candidate

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    return parse_config(content)
