# store.py

import json
import os

from .config import DeploymentConfig
from .constants import CONFIG_FILE, REQUIRED_CONFIG_KEYS


class ConfigStore:
    """
    Reads and writes the persisted config.json.
    The collector writes it once per deploy run; the provisioning stacks only read it.
    """

    def __init__(self, path: str = CONFIG_FILE):
        self.path = path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load(self) -> dict:
        """Return the raw JSON object. Raises OSError / ValueError on unreadable files."""
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def load_previous_config(self):
        """
        Read the file once and return its JSON object if it can be reused: non-empty and
        carrying every required top-level key. Returns None otherwise; a missing or
        unparsable file simply means there is nothing to reuse.
        """
        if not self.exists():
            return None
        try:
            data = self.load()
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict) or not data:
            return None
        if not all(key in data for key in REQUIRED_CONFIG_KEYS):
            return None
        return data

    def has_previous_config(self) -> bool:
        return self.load_previous_config() is not None

    def read_config(self) -> DeploymentConfig:
        return DeploymentConfig.from_dict(self.load())

    def save(self, config: DeploymentConfig):
        """Serialize the config with 4-space indentation, replacing any previous file."""
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(json.dumps(config.to_dict(), indent=4))
