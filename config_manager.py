"""Configuration management for the N-Queens trace tooling.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize experiment and playback settings.

File format (high-level)
------------------------
- experiment_settings: board sizes, strategies to run, and output directory.
- playback_settings: replay delay in milliseconds, default board size and
  default strategy.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return experiment settings (sizes, strategies, output dir)."""
        return self.config.get("experiment_settings", {})

    def get_playback_settings(self):
        """Return replay settings (speed, default size and strategy)."""
        return self.config.get("playback_settings", {})

    def get_strategies(self):
        """Return the list of strategy labels to run (e.g., ["DFS", "BFS", "BNB"])."""
        return self.get_experiment_settings().get("strategies", ["DFS", "BFS", "BNB"])

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
        print(f"Setting {section}.{key} saved to {self.config_path}")
