"""Tests for the varmodel command line"""

import json

import pytest
import yaml
from defcon import Font
from fontTools.designspaceLib import DesignSpaceDocument
from varmodel import config
from varmodel.cli import main

MASTERS_YAML = """
axes: [wght, wdth]
masters:
  - name: Regular
    location: {wght: 0, wdth: 0}
    values: [[10, 10]]
  - name: Bold
    location: {wght: 1, wdth: 0}
    values: [[12, 11]]
  - name: Wide
    location: {wght: 0, wdth: 1}
    values: [[11, 12]]
  - name: Bold Wide
    location: {wght: 1, wdth: 1}
    values: [[14, 11]]
"""


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("VARMODEL_DATA_DIR", str(tmp_path / "config"))
    monkeypatch.setattr(config, "_data_manager", None)


@pytest.fixture
def masters_file(tmp_path):
    path = tmp_path / "masters.yaml"
    path.write_text(MASTERS_YAML, encoding="utf-8")
    return path


def write_ufo(path, stem_width, width):
    font = Font()
    font.newGlyph("l")
    glyph = font["l"]
    glyph.width = width
    pen = glyph.getPointPen()
    pen.beginPath()
    pen.addPoint((50, 0), "line")
    pen.addPoint((50 + stem_width, 0), "line")
    pen.addPoint((50 + stem_width, 700), "line")
    pen.addPoint((50, 700), "line")
    pen.endPath()
    font.save(str(path))


class TestDeltasCommand:
    """varmodel deltas"""

    def test_masters_to_yaml(self, masters_file, tmp_path):
        """Deltas of a masters document written as YAML"""
        output = tmp_path / "deltas.yaml"
        assert main(["deltas", str(masters_file), "-o", str(output)]) == 0

        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["axes"] == ["wght", "wdth"]
        assert [master["name"] for master in data["masters"]] == ["Regular", "Bold", "Wide", "Bold Wide"]
        assert [master["deltas"] for master in data["masters"]] == [
            [[10.0, 10.0]],
            [[2.0, 1.0]],
            [[1.0, 2.0]],
            [[1.0, -2.0]],
        ]

    def test_masters_to_json(self, masters_file, tmp_path):
        """Deltas of a masters document written as JSON"""
        output = tmp_path / "deltas.json"
        assert main(["deltas", str(masters_file), "-o", str(output)]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["masters"][3]["location"] == {"wdth": 1.0, "wght": 1.0}

    def test_report_to_stdout(self, masters_file, capsys):
        """Without -o the report goes to stdout"""
        assert main(["deltas", str(masters_file)]) == 0
        out = capsys.readouterr().out
        assert "Bold Wide {wdth=1, wght=1}" in out
        assert "    (1, -2)" in out

    def test_log_file_next_to_input(self, masters_file, tmp_path):
        """Each run logs to logs/ beside the input"""
        assert main(["deltas", str(masters_file)]) == 0
        logs = list((tmp_path / "logs").glob("varmodel_masters_*.log"))
        assert len(logs) == 1
        assert "Computed deltas for 4 of 4 masters" in logs[0].read_text(encoding="utf-8")

    def test_designspace_glyph(self, tmp_path):
        """Glyph deltas across the UFO masters of a designspace"""
        write_ufo(tmp_path / "Regular.ufo", 80, 300)
        write_ufo(tmp_path / "Bold.ufo", 160, 380)
        doc = DesignSpaceDocument()
        doc.addAxisDescriptor(name="Weight", tag="wght", minimum=400, default=400, maximum=700)
        doc.addSourceDescriptor(name="Regular", filename="Regular.ufo", designLocation={"Weight": 400})
        doc.addSourceDescriptor(name="Bold", filename="Bold.ufo", designLocation={"Weight": 700})
        designspace = tmp_path / "Family.designspace"
        doc.write(str(designspace))

        output = tmp_path / "l.json"
        assert main(["deltas", str(designspace), "-g", "l", "-o", str(output)]) == 0

        bold = json.loads(output.read_text(encoding="utf-8"))["masters"][1]
        assert bold["name"] == "Bold"
        assert bold["deltas"] == [[0.0, 0.0], [80.0, 0.0], [80.0, 0.0], [0.0, 0.0], [80.0, 0.0]]

    def test_designspace_needs_glyph(self, tmp_path):
        """Designspace input requires --glyph"""
        doc = DesignSpaceDocument()
        doc.addAxisDescriptor(name="Weight", tag="wght", minimum=400, default=400, maximum=700)
        doc.addSourceDescriptor(name="Regular", filename="Regular.ufo", designLocation={"Weight": 400})
        designspace = tmp_path / "Family.designspace"
        doc.write(str(designspace))
        assert main(["deltas", str(designspace)]) == 1


class TestModelCommand:
    """varmodel model"""

    def test_report(self, masters_file, capsys):
        """The model report on stdout"""
        assert main(["model", str(masters_file)]) == 0
        out = capsys.readouterr().out
        assert "axes [wght, wdth]" in out
        assert "    3 Bold Wide {wdth=1, wght=1}" in out
        assert "    3 {0: 1, 1: 1, 2: 1}" in out

    def test_model_data_round_trips(self, masters_file, tmp_path):
        """-o model.yaml writes model data"""
        output = tmp_path / "model.yaml"
        assert main(["model", str(masters_file), "-o", str(output)]) == 0
        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["axis_order"] == ["wght", "wdth"]
        assert len(data["locations"]) == 4


class TestErrors:
    """Exit codes for bad input"""

    def test_no_command(self):
        """Without a command the exit code is 1"""
        assert main([]) == 1

    def test_missing_input(self, tmp_path):
        """A missing input file gives exit code 1"""
        assert main(["deltas", str(tmp_path / "missing.yaml")]) == 1

    def test_unsupported_suffix(self, tmp_path):
        """Unknown input suffixes give exit code 1"""
        path = tmp_path / "masters.txt"
        path.write_text(MASTERS_YAML, encoding="utf-8")
        assert main(["deltas", str(path)]) == 1

    def test_empty_logging_section(self, masters_file, tmp_path):
        """An empty logging: section in user settings falls back to defaults"""
        user_dir = tmp_path / "config"
        user_dir.mkdir()
        (user_dir / "settings.yaml").write_text("logging:\nreport:\n", encoding="utf-8")
        assert main(["model", str(masters_file)]) == 0

    def test_malformed_document(self, tmp_path):
        """Errors while processing give exit code 1"""
        path = tmp_path / "broken.yaml"
        path.write_text("axes: [wght]\nmasters: []\n", encoding="utf-8")
        assert main(["model", str(path)]) == 1
