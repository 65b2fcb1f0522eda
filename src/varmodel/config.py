"""Configuration and settings management for VarModel"""

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .utils.logging import VarModelLogger

SETTINGS_FILE = "settings.yaml"

FALLBACK_SETTINGS: Dict[str, Any] = {
    "axis_order": ["wght", "wdth", "opsz", "ital", "slnt"],
    "logging": {"level": "INFO", "keep_logs": 5},
    "report": {"precision": 6},
}


class DataManager:
    """Manages VarModel data files with user override support"""

    def __init__(self, user_data_dir: Optional[Path] = None):
        # Package data directory (built-in defaults)
        self.package_data_dir = Path(__file__).parent / "data"

        # User data directory (overrides); not created until something is saved
        self.user_data_dir = Path(user_data_dir) if user_data_dir else self._get_user_data_dir()

    def _get_user_data_dir(self) -> Path:
        """Get user data directory based on OS or environment variable"""
        if custom_dir := os.environ.get("VARMODEL_DATA_DIR"):
            return Path(custom_dir).expanduser()

        system = platform.system()

        if system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "varmodel"
        elif system == "Windows":
            app_data = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
            return Path(app_data) / "varmodel"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            return Path(xdg_config) / "varmodel"

    def load_data_file(self, filename: str) -> Dict[str, Any]:
        """Load data file with user override priority"""
        user_file = self.user_data_dir / filename
        if user_file.exists():
            return self._load_file(user_file)

        package_file = self.package_data_dir / filename
        if package_file.exists():
            return self._load_file(package_file)

        return {}

    def _load_file(self, filepath: Path) -> Dict[str, Any]:
        """Load JSON or YAML file based on extension"""
        try:
            with open(filepath, encoding="utf-8") as f:
                if filepath.suffix in [".yaml", ".yml"]:
                    return yaml.safe_load(f) or {}
                elif filepath.suffix == ".json":
                    return json.load(f)
                else:
                    content = f.read()
                    try:
                        return yaml.safe_load(content) or {}
                    except yaml.YAMLError:
                        return json.loads(content)
        except (OSError, ValueError, yaml.YAMLError) as e:
            VarModelLogger.warning(f"Error loading {filepath}: {e}")
            return {}

    def save_user_data(self, filename: str, data: Dict[str, Any]) -> None:
        """Save data to user directory"""
        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.user_data_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            if filepath.suffix in [".yaml", ".yml"]:
                yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
            else:
                json.dump(data, f, indent=2, ensure_ascii=False)
        VarModelLogger.info(f"Saved to {filepath}")

    def reset_to_defaults(self, filename: str = SETTINGS_FILE) -> bool:
        """Remove a user override; returns whether there was one"""
        user_file = self.user_data_dir / filename
        if user_file.exists():
            user_file.unlink()
            VarModelLogger.info(f"Reset {filename} to defaults")
            return True
        VarModelLogger.info(f"{filename} was already using defaults")
        return False

    def load_user_data(self, filename: str) -> Dict[str, Any]:
        """Only the user override of a data file, {} when there is none"""
        user_file = self.user_data_dir / filename
        if not user_file.exists():
            return {}
        data = self._load_file(user_file)
        return data if isinstance(data, dict) else {}

    def get_data_info(self) -> Dict[str, Any]:
        """Get information about data files"""
        package_files = []
        if self.package_data_dir.exists():
            package_files = [f.name for f in self.package_data_dir.glob("*") if f.is_file()]

        user_files = []
        if self.user_data_dir.exists():
            user_files = [f.name for f in self.user_data_dir.glob("*") if f.is_file()]

        return {
            "package_data_dir": str(self.package_data_dir),
            "user_data_dir": str(self.user_data_dir),
            "package_files": sorted(package_files),
            "user_files": sorted(user_files),
        }


class Settings:
    """Typed view over settings.yaml merged onto the fallback values"""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        merged = {key: (dict(value) if isinstance(value, dict) else list(value))
                  for key, value in FALLBACK_SETTINGS.items()}
        if not isinstance(data, dict):
            data = {}
        for key, value in data.items():
            if not isinstance(merged.get(key), dict):
                merged[key] = value
            elif isinstance(value, dict):
                merged[key].update(value)
            else:
                # e.g. "logging:" left empty in settings.yaml
                VarModelLogger.warning(f"Ignoring setting {key!r}: expected a mapping, got {value!r}")
        self._data = merged

    @property
    def axis_order(self) -> List[str]:
        return [str(name) for name in self._data["axis_order"] or []]

    @property
    def log_level(self) -> int:
        level = self._data["logging"].get("level", "INFO")
        if isinstance(level, int):
            return level
        # getLevelName maps known names to ints, anything else to a string
        level = logging.getLevelName(str(level).upper())
        return level if isinstance(level, int) else logging.INFO

    @property
    def keep_logs(self) -> int:
        return int(self._data["logging"].get("keep_logs", 5))

    @property
    def report_precision(self) -> int:
        return int(self._data["report"].get("precision", 6))

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._data)


# Singleton instance
_data_manager = None


def get_data_manager() -> DataManager:
    """Get or create the data manager singleton"""
    global _data_manager
    if _data_manager is None:
        _data_manager = DataManager()
    return _data_manager


def load_settings() -> Settings:
    """Load settings.yaml with user overrides"""
    return Settings(get_data_manager().load_data_file(SETTINGS_FILE))


def order_axes(axis_names, priority: Optional[List[str]] = None) -> List[str]:
    """Order axis names by priority, unknown axes after in name order"""
    priority = load_settings().axis_order if priority is None else priority
    names = set(axis_names)
    ordered = [name for name in priority if name in names]
    ordered.extend(sorted(names - set(ordered)))
    return ordered
