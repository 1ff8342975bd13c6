"""
Environment loading for Lokalise MCP.

Two file-backed sources feed ``os.environ`` before the configuration merge:

1. A project ``.env`` file, found by searching upward from the working
   directory.
2. The global MCP configuration file (``~/.mcp/configs.json``), whose
   ``environments`` map for this package fills in variables that are still
   unset.

Neither source ever overrides a variable that is already present, so the
effective priority is: process environment > ``.env`` > global file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import commentjson
from dotenv import dotenv_values, load_dotenv

from lokalise_mcp import PACKAGE_NAME

logger = logging.getLogger(__name__)


class EnvFileLoader:
    """
    .env file loader with upward search.

    Search order (stops at first file found):
    1. Current directory: .env
    2. Parent directories up to the home directory or filesystem root
    """

    ENV_FILE_NAME = ".env"

    def __init__(self, working_directory: Optional[Path] = None):
        """Initialize env file loader.

        Args:
            working_directory: Starting directory for search
        """
        self.working_directory = Path(working_directory or Path.cwd()).resolve()
        self._loaded_file: Optional[Path] = None
        self._loaded_vars: Dict[str, str] = {}

    def load_env_file(self) -> Optional[Path]:
        """Load environment variables from the nearest .env file.

        Returns:
            Path to loaded .env file or None if none found
        """
        env_file_path = self._find_env_file()

        if env_file_path is None:
            logger.debug("No .env file found in search path")
            return None

        try:
            load_dotenv(env_file_path, override=False)
            self._loaded_file = env_file_path
            self._loaded_vars = {
                key: value
                for key, value in dotenv_values(env_file_path).items()
                if value is not None
            }
            logger.debug(f"Loaded environment variables from: {env_file_path}")
            return env_file_path
        except (OSError, ValueError) as e:
            logger.error(f"Error loading .env file {env_file_path}: {e}")
            return None

    def get_loaded_file(self) -> Optional[Path]:
        """Path to the loaded .env file, if any."""
        return self._loaded_file

    def get_loaded_vars(self) -> Dict[str, str]:
        """Variables declared in the loaded .env file."""
        return self._loaded_vars.copy()

    def _find_env_file(self) -> Optional[Path]:
        home = Path.home().resolve()
        current = self.working_directory

        while True:
            candidate = current / self.ENV_FILE_NAME
            if candidate.is_file():
                return candidate
            if current == home or current.parent == current:
                return None
            current = current.parent


class GlobalConfigLoader:
    """
    Reader for the global MCP configuration file.

    The file is a JSON object (comments allowed) keyed by package name::

        {
          "lokalise-mcp": {
            "environments": {"LOKALISE_API_KEY": "..."}
          }
        }
    """

    CONFIG_DIR_NAME = ".mcp"
    CONFIG_FILE_NAME = "configs.json"

    def __init__(self, config_path: Optional[Path] = None, package_name: str = PACKAGE_NAME):
        self.config_path = Path(config_path) if config_path else (
            Path.home() / self.CONFIG_DIR_NAME / self.CONFIG_FILE_NAME
        )
        self.package_name = package_name
        self._applied: Dict[str, str] = {}

    def read_section(self) -> Dict[str, Any]:
        """Read this package's section of the global config file.

        Returns:
            The section dictionary, empty when the file or section is missing
            or the file cannot be parsed
        """
        if not self.config_path.is_file():
            logger.debug(f"Global config file not found: {self.config_path}")
            return {}

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = commentjson.load(f)
        except (OSError, ValueError, commentjson.JSONLibraryException) as e:
            logger.warning(f"Failed to read global config {self.config_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Global config {self.config_path} is not a JSON object")
            return {}

        # Scoped names ("@scope/name") may be stored under the bare name
        unscoped = self.package_name.split("/")[-1]
        section = data.get(self.package_name) or data.get(unscoped) or {}
        return section if isinstance(section, dict) else {}

    def apply_environments(self) -> Dict[str, str]:
        """Copy the section's ``environments`` map into ``os.environ``.

        Only variables that are not already set are written.

        Returns:
            The variables that were applied
        """
        environments = self.read_section().get("environments") or {}
        if not isinstance(environments, dict):
            logger.warning("Global config 'environments' entry is not an object")
            return {}

        applied = {}
        for key, value in environments.items():
            if value is None or key in os.environ:
                continue
            os.environ[key] = str(value)
            applied[key] = str(value)

        if applied:
            logger.debug(f"Applied {len(applied)} variables from global config {self.config_path}")
        self._applied = applied
        return applied

    def get_applied_vars(self) -> Dict[str, str]:
        return self._applied.copy()
