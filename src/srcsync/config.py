"""Configuration management for srcsync."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from srcsync.exceptions import ConfigError


def load_databrickscfg(profile: str = "DEFAULT") -> dict[str, str]:
    """Load credentials from ~/.databrickscfg.

    Args:
        profile: Profile name to load (default: "DEFAULT")

    Returns:
        Dict with host and token when present; empty if the file is missing

    Raises:
        ConfigError: If the profile doesn't exist
    """
    cfg_path = Path.home() / ".databrickscfg"
    if not cfg_path.exists():
        return {}

    config = configparser.ConfigParser()
    config.read(cfg_path)

    if profile not in config:
        available = [s for s in config.sections() if s != "DEFAULT"] or ["DEFAULT"]
        raise ConfigError(
            f"Profile '{profile}' not found in ~/.databrickscfg. "
            f"Available profiles: {', '.join(available)}"
        )

    section = config[profile]
    result = {}

    if "host" in section:
        host = section["host"].strip()
        if host.startswith("https://"):
            host = host[8:]
        result["host"] = host.rstrip("/")

    if "token" in section:
        result["token"] = section["token"].strip()

    return result


@dataclass
class Config:
    """Configuration for srcsync."""

    model_path: str = "model.yaml"
    profile: Optional[str] = None
    databricks_host: Optional[str] = None
    databricks_token: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        *,
        model_path: Optional[str] = None,
        databricks_host: Optional[str] = None,
        databricks_token: Optional[str] = None,
        profile: Optional[str] = None,
    ) -> "Config":
        """Load configuration from ~/.databrickscfg, env vars, with CLI overrides.

        Priority (highest to lowest):
        1. Explicit parameters (CLI args)
        2. Environment variables
        3. ~/.databrickscfg profile
        """
        profile_name = profile or os.environ.get("DATABRICKS_CONFIG_PROFILE")
        try:
            databricks_cfg = load_databrickscfg(profile_name or "DEFAULT")
        except ConfigError:
            databricks_cfg = {}

        def resolve(explicit, env_key, cfg_key=None):
            if explicit is not None:
                return explicit
            env_val = os.environ.get(env_key)
            if env_val is not None:
                return env_val
            if cfg_key and cfg_key in databricks_cfg:
                return databricks_cfg[cfg_key]
            return None

        return cls(
            model_path=model_path
            if model_path is not None
            else os.environ.get("SRCSYNC_MODEL_PATH", "model.yaml"),
            profile=profile_name,
            databricks_host=resolve(databricks_host, "DATABRICKS_HOST", "host"),
            databricks_token=resolve(databricks_token, "DATABRICKS_TOKEN", "token"),
        )

    def validate_for_db_ops(self) -> None:
        """Validate that connection settings for describing queries are present.

        Raises:
            ConfigError: If host or token is missing.
        """
        missing = []
        if not self.databricks_host:
            missing.append("databricks_host (use --profile or DATABRICKS_HOST)")
        if not self.databricks_token:
            missing.append("databricks_token (use --profile or DATABRICKS_TOKEN)")

        if missing:
            raise ConfigError(
                "Missing required configuration:\n  - " + "\n  - ".join(missing)
            )
