"""Configuration management for lfmkit.

Nothing is read from disk at import time. Applications that keep a config file
call ``Config.load(path)`` and hand the values to
``LastfmHTTPClient.from_config`` and ``setup_logger(config.log_file)``.
"""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lfmkit.config.paths import default_config_path, resolve_overridable_path
from lfmkit.platform.logging import logger

HTTP_TIMEOUT_DEFAULT = 30.0


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Seconds handed to the HTTP client; the core never retries
    http_timeout: float = HTTP_TIMEOUT_DEFAULT

    # Client identity sent as User-Agent
    app_name: str | None = None
    app_version: str | None = None
    contact: str | None = None

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, path: Path | str | None = None) -> Path:
        """Save configuration to a TOML file and return its location.

        Raises:
            ValueError: No explicit path and no repository root to default to.
        """

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = resolve_overridable_path(
            explicit_path=path,
            default_factory=default_config_path,
        )
        if target is None:
            raise ValueError("No config path given and no repository root to default to")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# lfmkit Configuration File")
        lines.append("")

        lines.append("# HTTP timeout in seconds")
        lines.append(f"http_timeout = {self._format_toml_value(config['http_timeout'])}")
        lines.append("")

        lines.append("# Client identity used for the User-Agent header (optional)")
        for key in ("app_name", "app_version", "contact"):
            if config.get(key):
                lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/lfmkit.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from file.

        A missing file, or no path at all outside a source checkout, yields
        the defaults without writing anything. Unknown keys are ignored so
        older libraries can read newer files.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = resolve_overridable_path(
            explicit_path=path,
            default_factory=default_config_path,
        )
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if config_file is not None and config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads disk."""

        cls._instance = None
        cls._loaded_from = None


# Defaults only; never touches the filesystem.
config = Config()
