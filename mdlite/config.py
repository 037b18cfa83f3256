"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

CONFIG_TABLE = "mdlite"
DOTFILE_NAME = ".mdlite.toml"


@dataclass
class ParserConfig:
    """Configuration for converting Markdown into HTML.

    Attributes:
        code_class_prefix: Prefix of the class attribute added to ``<pre>``
            when a fence carries a language label.
        line_break: Markup emitted for blank lines.
        glue: Separator placed between fragments when joining them.
        max_file_size: Maximum file size in bytes that will be converted.
        max_line_length: Maximum line length allowed when converting files.

    Examples:
        ParserConfig(code_class_prefix="language-", line_break="<br>")
    """

    # Rendering
    code_class_prefix: str = "lang-"
    line_break: str = "<br />"
    glue: str = ""

    # Limits
    max_file_size: int = 10 * 1024 * 1024
    max_line_length: int = 10_000


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`line_break` must not be empty")
    """


def load_config(search_path: Path) -> ParserConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.mdlite]`` table from `pyproject.toml` and the ``[mdlite]`` or
    ``[tool.mdlite]`` table from `.mdlite.toml` when present. Returns default
    values when no configuration is found. TOML files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ParserConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / DOTFILE_NAME,
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ParserConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> ParserConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> ParserConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return ParserConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: ParserConfig) -> None:
    """Validate a `ParserConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a text field is not a string, the line break markup is
            empty, or a numeric limit is not a positive integer.

    Examples:
        validate_config(ParserConfig(line_break="<br>"))
    """
    _ensure_strings(
        {
            "code_class_prefix": config.code_class_prefix,
            "line_break": config.line_break,
            "glue": config.glue,
        }
    )
    if not config.line_break:
        raise ConfigError("`line_break` must not be empty")
    if '"' in config.code_class_prefix:
        raise ConfigError("`code_class_prefix` must not contain double quotes")

    limits = {
        "max_file_size": config.max_file_size,
        "max_line_length": config.max_line_length,
    }
    _ensure_integers(limits)
    _ensure_positive(limits)


def apply_overrides(config: ParserConfig, **overrides: object) -> ParserConfig:
    """Apply override values to a `ParserConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        ParserConfig: New configuration with the overrides applied, or the
        original configuration when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `ParserConfig`.

    Examples:
        updated = apply_overrides(config, line_break="<br>", glue=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> ParserConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        ParserConfig: Validated configuration ready for conversion.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), code_class_prefix="language-")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")


def _ensure_strings(values: dict[str, object]) -> None:
    for key, value in values.items():
        if not isinstance(value, str):
            raise ConfigError(f"`{key}` must be a string")
