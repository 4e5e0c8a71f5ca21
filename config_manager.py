"""Configuration management for the N-Queens solver and benchmark suite.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize search limits and benchmark settings.

File format (high-level)
------------------------
- solver_settings: enumeration_limit, solution_cap, buffer_size, output_suffix.
- benchmark_settings: N_values, runs_per_n, output_dir.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist solver and benchmark configuration.

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

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        ValueError
            If the file is not valid JSON or its root is not an object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or copy the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {self.config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root in {self.config_path} must be an object")
        return data

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_solver_settings(self):
        """Return search limits (enumeration limit, solution cap, buffer, suffix)."""
        return self.config.get("solver_settings", {})

    def get_benchmark_settings(self):
        """Return benchmark settings (sizes, runs per size, output dir)."""
        return self.config.get("benchmark_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
