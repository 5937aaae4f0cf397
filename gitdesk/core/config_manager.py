"""
Configuration Manager - Core Module

Per-repository settings for the "no local changes" blankslate:
feature toggles, transition timing and which remote hosts count
as GitHub. Stored as JSON in .gitdesk/config.json.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

from .result import Result
from . import log

CONFIG_DIR = ".gitdesk"
CONFIG_FILE = "config.json"


@dataclass
class BlankslateConfig:
    """
    Configuration for the blankslate panel.

    Missing keys in the JSON file fall back to these defaults.
    """

    # Feature toggles
    stashing_enabled: bool = True
    create_pr_blankslate_enabled: bool = False

    # Delay before slide transitions are enabled after the panel appears
    transition_delay_ms: int = 500

    # Hosts treated as GitHub when deciding on GitHub-specific wording
    github_hosts: list[str] = None

    def __post_init__(self):
        """Set default hosts if not provided."""
        if self.github_hosts is None:
            self.github_hosts = ["github.com"]

    @classmethod
    def from_dict(cls, data: dict) -> BlankslateConfig:
        """
        Create BlankslateConfig from dictionary.

        Unknown keys are ignored so older builds can read newer files.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.debug(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


def _config_path(repo_root: Path | str) -> Path:
    return Path(repo_root) / CONFIG_DIR / CONFIG_FILE


def has_config(repo_root: Path | str) -> bool:
    """
    Check if a blankslate config file exists for the repository.

    Args:
        repo_root: Path to git repository root

    Returns:
        bool: True if .gitdesk/config.json exists
    """
    return _config_path(repo_root).exists()


def read_config(repo_root: Path | str) -> Result:
    """
    Read .gitdesk/config.json.

    A missing file is not an error: defaults are returned.

    Args:
        repo_root: Path to git repository root

    Returns:
        Result wrapping a BlankslateConfig, or a failure with code
        "INVALID_CONFIG" / "READ_ERROR"
    """
    if not has_config(repo_root):
        log.debug(f"No config file found in {repo_root}, using defaults")
        return Result.success(BlankslateConfig())

    config_file = _config_path(repo_root)
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        config = BlankslateConfig.from_dict(data)
        log.debug(f"Loaded config from {config_file}")
        return Result.success(config)

    except json.JSONDecodeError as e:
        log.error_safe("Invalid JSON in config file", e)
        return Result.failure(
            "INVALID_CONFIG",
            f"{config_file} is not valid JSON",
            details=str(e),
            meta={"path": str(config_file)},
        )
    except (OSError, TypeError, AttributeError) as e:
        log.error_safe("Failed to load config", e)
        return Result.failure(
            "READ_ERROR",
            f"Could not read {config_file}",
            details=str(e),
            meta={"path": str(config_file)},
        )


def load_config(repo_root: Path | str) -> BlankslateConfig:
    """
    Load configuration from .gitdesk/config.json, or use defaults.

    Args:
        repo_root: Path to git repository root

    Returns:
        BlankslateConfig with loaded or default values

    Example:
        >>> config = load_config(Path("/path/to/repo"))
        >>> config.transition_delay_ms
        500
    """
    result = read_config(repo_root)
    if not result.ok:
        log.info("Using default configuration")
    return result.unwrap_or(BlankslateConfig())
