"""Configuration management for songinfo."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from songinfo.config.paths import default_config_path
from songinfo.platform.logging import logger

DESCRIPTOR_NAME_DEFAULT: str = "song.ini"
AUDIO_NAME_DEFAULT: str = "song.ogg"
CONTAINER_DTA_NAME_DEFAULT: str = "songs.dta"
EIGHTH_NOTE_HOPO_FREQUENCY_DEFAULT: int = 240


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

    # Log file path
    log_file: Path | None = _path_field()

    # Where re-encoded container textures are written (system temp when unset)
    texture_output_dir: Path | None = _path_field()

    # Package file names
    descriptor_name: str = DESCRIPTOR_NAME_DEFAULT
    audio_name: str = AUDIO_NAME_DEFAULT
    container_dta_name: str = CONTAINER_DTA_NAME_DEFAULT

    # HOPO threshold applied when a descriptor only sets eighthnote_hopo
    eighth_note_hopo_frequency: int = EIGHTH_NOTE_HOPO_FREQUENCY_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content, encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# songinfo Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/songinfo.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Directory for re-encoded container album art (optional)")
        lines.append("# Defaults to the system temporary directory")
        if config["texture_output_dir"] is not None:
            lines.append(
                f"texture_output_dir = {self._format_toml_value(config['texture_output_dir'])}"
            )
        lines.append("")

        lines.append("# File names looked up inside song packages")
        lines.append(f"descriptor_name = {self._format_toml_value(config['descriptor_name'])}")
        lines.append(f"audio_name = {self._format_toml_value(config['audio_name'])}")
        lines.append(
            f"container_dta_name = {self._format_toml_value(config['container_dta_name'])}"
        )
        lines.append("")

        lines.append("# HOPO threshold used when only eighthnote_hopo is set")
        lines.append(
            "eighth_note_hopo_frequency = "
            + self._format_toml_value(config["eighth_note_hopo_frequency"])
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating the default one when absent.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("descriptor_name", DESCRIPTOR_NAME_DEFAULT)
                _ = config_dict.setdefault("audio_name", AUDIO_NAME_DEFAULT)
                _ = config_dict.setdefault("container_dta_name", CONTAINER_DTA_NAME_DEFAULT)
                _ = config_dict.setdefault(
                    "eighth_note_hopo_frequency", EIGHTH_NOTE_HOPO_FREQUENCY_DEFAULT
                )

                # Empty path strings mean "unset"
                for key, value in config_dict.items():
                    if key.endswith("_file") or key.endswith("_dir"):
                        if value and str(value).strip() != "":
                            config_dict[key] = str(value)
                        else:
                            config_dict[key] = None

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                    for key in unknown:
                        del config_dict[key]

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
