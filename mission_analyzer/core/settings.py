"""
Analyzer configuration.

Settings come from built-in defaults, an optional YAML file, and command-line
overrides, in increasing order of precedence. They are validated once and
passed around as an immutable AnalyzerConfig.

Example YAML file:
```yaml
destination: mars
status: completed
output_mode: json
top: 3
skip_prefixes:
  - "SYSTEM:"
  - "CONFIG:"
  - "CHECKSUM:"
```
"""

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_SKIP_PREFIXES = ("SYSTEM:", "CONFIG:", "CHECKSUM:")


class OutputMode(str, Enum):
    """Report formats understood by the reporting package."""

    DEFAULT = "default"
    JSON = "json"
    CSV = "csv"


class AnalyzerConfig(BaseModel):
    """
    Immutable run configuration.

    Attributes:
        destination: Category predicate, compared case-insensitively
        status: Status predicate, compared case-insensitively
        output_mode: Report format
        top: Requested number of results (0 means the default of 1)
        verbose: Emit per-line diagnostics and expanded text output
        skip_prefixes: Metadata line prefixes ignored by the parser
    """

    destination: str = Field("mars", min_length=1)
    status: str = Field("completed", min_length=1)
    output_mode: OutputMode = OutputMode.DEFAULT
    top: int = Field(1, ge=0)
    verbose: bool = False
    skip_prefixes: tuple[str, ...] = DEFAULT_SKIP_PREFIXES

    @field_validator("destination", "status")
    @classmethod
    def strip_predicate(cls, v: str) -> str:
        """Predicates are compared against trimmed fields, so trim them too."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("skip_prefixes")
    @classmethod
    def check_prefixes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not prefix for prefix in v):
            raise ValueError("skip prefixes must be non-empty strings")
        return v

    @property
    def result_count(self) -> int:
        """Number of results to show when enough valid records exist."""
        return self.top or 1

    class Config:
        frozen = True
        extra = "forbid"


def load_config(config_path: str | Path | None = None, **overrides: Any) -> AnalyzerConfig:
    """
    Build the run configuration.

    Args:
        config_path: Optional YAML file with a top-level mapping of settings
        **overrides: Values that replace file settings; None means "not given"

    Returns:
        Validated AnalyzerConfig

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the YAML is not a mapping
        pydantic.ValidationError: If a setting is invalid
    """
    settings: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)

        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ValueError("Configuration file must contain a mapping of settings")
            settings.update(loaded)

    settings.update({key: value for key, value in overrides.items() if value is not None})

    return AnalyzerConfig(**settings)
