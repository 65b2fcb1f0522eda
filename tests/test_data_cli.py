"""Tests for the varmodel-data settings command line"""

import pytest
import yaml
from varmodel import config
from varmodel.config import DataManager, load_settings
from varmodel.data_cli import main


@pytest.fixture
def data_manager(tmp_path, monkeypatch):
    manager = DataManager(user_data_dir=tmp_path / "user")
    monkeypatch.setattr(config, "_data_manager", manager)
    return manager


class TestDataCommands:
    """varmodel-data subcommands"""

    def test_no_command(self, data_manager):
        """Without a command the help is shown and the exit code is 1"""
        assert main([]) == 1

    def test_path(self, data_manager, capsys):
        """path prints the user data directory"""
        assert main(["path"]) == 0
        assert capsys.readouterr().out.strip() == str(data_manager.user_data_dir)

    def test_info_shows_effective_settings(self, data_manager, capsys):
        """info lists directories and the merged settings"""
        assert main(["info"]) == 0
        out = capsys.readouterr().out
        assert str(data_manager.package_data_dir) in out
        assert "User files: None" in out
        assert "keep_logs: 5" in out

    def test_axis_order_saved(self, data_manager, capsys):
        """axis-order writes the user settings file"""
        assert main(["axis-order", "opsz", "wght"]) == 0
        assert "Axis order: opsz, wght" in capsys.readouterr().out
        assert load_settings().axis_order == ["opsz", "wght"]

    def test_axis_order_keeps_other_user_settings(self, data_manager):
        """Existing user settings survive an axis order change"""
        data_manager.save_user_data("settings.yaml", {"report": {"precision": 2}})
        assert main(["axis-order", "wdth"]) == 0
        saved = yaml.safe_load((data_manager.user_data_dir / "settings.yaml").read_text(encoding="utf-8"))
        assert saved == {"report": {"precision": 2}, "axis_order": ["wdth"]}

    def test_reset(self, data_manager, capsys):
        """reset removes the override and reports when there was none"""
        main(["axis-order", "wdth"])
        capsys.readouterr()

        assert main(["reset"]) == 0
        assert "Reset settings.yaml to defaults" in capsys.readouterr().out
        assert main(["reset"]) == 0
        assert "already using defaults" in capsys.readouterr().out
        assert load_settings().axis_order[0] == "wght"
