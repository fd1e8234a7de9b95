"""YAML config loader — reads .stackrules.yml into RulesConfig."""

from pathlib import Path

import yaml

from stackrules.schemas.config import RulesConfig

CONFIG_FILENAME = ".stackrules.yml"


class ConfigError(ValueError):
    """Raised when the config file is not valid YAML or not a mapping of option names."""


def load_config(path: str | Path) -> RulesConfig:
    """Load and validate a config file.

    Raises ``FileNotFoundError`` if the path doesn't exist, ``ConfigError``
    if the YAML doesn't parse or is not a mapping keyed by option names, and
    ``pydantic.ValidationError`` if a key is unknown or a value is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
    # An empty file (or one with only comments) loads as None.
    if raw is None:
        return RulesConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(raw).__name__}")
    bad_keys = [key for key in raw if not isinstance(key, str)]
    if bad_keys:
        raise ConfigError(f"Config keys must be option names, got {bad_keys!r}")

    return RulesConfig(**raw)


def resolve_config(root: str | Path, explicit: str | Path | None = None) -> RulesConfig:
    """Return the config for a project root.

    An explicit path must exist.  Otherwise ``<root>/.stackrules.yml`` is used
    when present, and the defaults when it is not.
    """
    if explicit is not None:
        return load_config(explicit)
    implicit = Path(root) / CONFIG_FILENAME
    if implicit.is_file():
        return load_config(implicit)
    return RulesConfig()
