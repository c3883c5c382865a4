"""Analysis settings for Complexity Insight.

Settings are handed unchanged to the walker and its syntax classifiers,
which decide how individual constructs count. The core itself reads only
``newmi`` (normalized maintainability index).

Sources are merged in priority order:
    1. Defaults (defined in AnalysisSettings)
    2. Explicit TOML file (``[complexity]`` table or top-level keys)
    3. Environment variables (COMPLEXITY_* prefix)
    4. Keyword overrides

Example:
    >>> settings = load_settings(newmi=True)
    >>> settings.newmi
    True
    >>> settings.to_dict()["logicalor"]
    True
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .exceptions import InvalidConfigError

ENV_PREFIX = "COMPLEXITY_"
TOML_TABLE = "complexity"


@dataclass(frozen=True)
class AnalysisSettings:
    """Switches consumed by walkers, classifiers and the maintainability step.

    Attributes:
        logicalor: Count ``||`` as a cyclomatic branch
        switchcase: Count each ``case`` clause as a cyclomatic branch
        forin: Count ``for ... in`` loops as a cyclomatic branch
        trycatch: Count ``catch`` clauses as a cyclomatic branch
        newmi: Rescale the maintainability index to the 0-100 range
    """

    logicalor: bool = True
    switchcase: bool = True
    forin: bool = False
    trycatch: bool = False
    newmi: bool = False

    def __post_init__(self) -> None:
        """Validate that every switch is a real boolean."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise InvalidConfigError(f.name, value, "expected a boolean")

    def to_dict(self) -> dict[str, bool]:
        """Mapping form handed to walkers."""
        return asdict(self)


def default_settings() -> dict[str, bool]:
    """Fresh mapping of default settings, used when no options are given."""
    return AnalysisSettings().to_dict()


def load_settings(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisSettings:
    """Load settings by merging file, environment and keyword sources.

    Args:
        config_file: Optional TOML file
        **overrides: Direct overrides, highest priority

    Returns:
        Validated AnalysisSettings instance

    Raises:
        InvalidConfigError: If a source holds an unknown key or a bad value
    """
    merged: dict[str, Any] = {}

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config_file", config_file, "file not found")
        try:
            data = _load_toml_file(config_file)
        except InvalidConfigError:
            raise
        except Exception as e:
            raise InvalidConfigError("config_file", config_file, str(e)) from e
        table = data.get(TOML_TABLE, data)
        if not isinstance(table, dict):
            raise InvalidConfigError(TOML_TABLE, table, "expected a table")
        merged.update(table)

    merged.update(_load_env_vars())
    merged.update(overrides)

    known = {f.name for f in fields(AnalysisSettings)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown setting")

    return AnalysisSettings(**merged)


def _load_env_vars() -> dict[str, bool]:
    """Load settings from COMPLEXITY_* environment variables.

    Supported environment variables:
        COMPLEXITY_LOGICALOR, COMPLEXITY_SWITCHCASE, COMPLEXITY_FORIN,
        COMPLEXITY_TRYCATCH, COMPLEXITY_NEWMI: bool (true/false/1/0/yes/no/on/off)
    """
    result: dict[str, bool] = {}

    for f in fields(AnalysisSettings):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        result[f.name] = _parse_bool(env_key, env_value)

    return result


def _parse_bool(key: str, value: str) -> bool:
    lower = value.strip().lower()
    if lower in ("true", "1", "yes", "on"):
        return True
    if lower in ("false", "0", "no", "off"):
        return False
    raise InvalidConfigError(key, value, "expected true/false")


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        InvalidConfigError: If tomllib/tomli is not available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise InvalidConfigError(
                "config_file",
                path,
                "TOML support requires Python 3.11+ or the 'tomli' package",
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
