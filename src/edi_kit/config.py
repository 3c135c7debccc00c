# src/edi_kit/config.py

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from edi_kit.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionOptions:
    """Per-request conversion options.

    Unset fields (None) fall back to the converter's configured defaults.
    """

    line_delimiter: str | None = None
    element_delimiter: str | None = None
    minify: bool | None = None
    preserve_whitespace: bool | None = None

    def __post_init__(self) -> None:
        for name in ("line_delimiter", "element_delimiter"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or not value):
                raise ConfigurationError(f"{name} must be a non-empty string")

    @property
    def has_delimiters(self) -> bool:
        return self.line_delimiter is not None and self.element_delimiter is not None


@dataclass(frozen=True)
class ConverterConfig:
    """Defaults for conversions.

    Immutable. Explicit. No magic defaults from environment.
    """

    default_line_delimiter: str = "~"
    default_element_delimiter: str = "*"
    default_minify: bool = False
    default_preserve_whitespace: bool = False
    xml_root_tag: str = "root"
    xml_declaration: str = '<?xml version="1.0" encoding="UTF-8" ?>'

    def __post_init__(self) -> None:
        if not self.default_line_delimiter or not self.default_element_delimiter:
            raise ConfigurationError("default delimiters must be non-empty strings")
        if not self.xml_root_tag:
            raise ConfigurationError("xml_root_tag must be a non-empty string")

    def resolve(self, options: ConversionOptions | None = None) -> ConversionOptions:
        """Fill every unset option with this config's default."""
        options = options or ConversionOptions()
        return replace(
            options,
            line_delimiter=options.line_delimiter or self.default_line_delimiter,
            element_delimiter=(
                options.element_delimiter or self.default_element_delimiter
            ),
            minify=self.default_minify if options.minify is None else options.minify,
            preserve_whitespace=(
                self.default_preserve_whitespace
                if options.preserve_whitespace is None
                else options.preserve_whitespace
            ),
        )


DEFAULT_CONFIG = ConverterConfig()


def load_config(path: str | Path) -> ConverterConfig:
    """Load converter defaults from a YAML file.

    Keys are the ConverterConfig field names; missing keys keep their
    defaults, unknown keys are rejected.

    Raises:
        ConfigurationError: If the file is not a mapping or has unknown keys.
    """
    path = Path(path)
    logger.info("Loading converter config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ConverterConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    config = ConverterConfig(**data)
    logger.debug("Loaded converter config: %s", config)
    return config
