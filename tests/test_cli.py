"""Tests for the swipe-gestures CLI."""

import pytest
import yaml
from typer.testing import CliRunner

from swipe_gestures.cli import app

runner = CliRunner()


class TestClassifyCommand:
    def test_left_swipe(self):
        result = runner.invoke(app, ["classify", "--dx=-20", "--dy=2", "--vx=-0.8", "--vy=0.05"])
        assert result.exit_code == 0
        assert "claim: yes" in result.output
        assert "direction: SWIPE_LEFT" in result.output

    def test_down_swipe(self):
        result = runner.invoke(app, ["classify", "--dx=2", "--dy=50", "--vx=0.05", "--vy=0.6"])
        assert result.exit_code == 0
        assert "direction: SWIPE_DOWN" in result.output

    def test_two_touches_not_claimed(self):
        result = runner.invoke(app, [
            "classify", "--dx=-20", "--dy=2", "--vx=-0.8", "--vy=0.05", "--touches=2",
        ])
        assert result.exit_code == 0
        assert "claim: no" in result.output
        assert "direction: none" in result.output

    def test_set_disables_direction(self):
        result = runner.invoke(app, [
            "classify", "--dx=10", "--dy=10", "--vx=1", "--vy=1",
            "--set", "detectSwipeRight=false",
        ])
        assert result.exit_code == 0
        assert "direction: none" in result.output

    def test_config_file(self, tmp_path):
        path = tmp_path / "swipe.yml"
        path.write_text("swipe:\n  velocityThreshold: 1.0\n")
        result = runner.invoke(app, [
            "classify", "--dx=-20", "--dy=2", "--vx=-0.8", "--vy=0.05", "--config", str(path),
        ])
        assert result.exit_code == 0
        assert "claim: no" in result.output

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, [
            "classify", "--dx=1", "--dy=1", "--vx=1", "--vy=1",
            "--config", str(tmp_path / "missing.yml"),
        ])
        assert result.exit_code == 1

    def test_bad_set_value(self):
        result = runner.invoke(app, [
            "classify", "--dx=1", "--dy=1", "--vx=1", "--vy=1", "--set", "novalue",
        ])
        assert result.exit_code == 2


class TestConfigCommand:
    def test_prints_defaults(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["swipe"]["velocityThreshold"] == 0.3
        assert data["swipe"]["detectSwipeUp"] is True

    def test_set_overrides_file(self, tmp_path):
        path = tmp_path / "swipe.yml"
        path.write_text("swipe:\n  velocityThreshold: 0.6\n  detectSwipeUp: false\n")
        result = runner.invoke(app, [
            "config", "--config", str(path), "--set", "velocity_threshold=0.9",
        ])
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["swipe"]["velocityThreshold"] == 0.9
        assert data["swipe"]["detectSwipeUp"] is False

    def test_output_file(self, tmp_path):
        out = tmp_path / "effective.yml"
        result = runner.invoke(app, ["config", "--set", "directionalOffsetThreshold=40", "-o", str(out)])
        assert result.exit_code == 0
        with open(out) as f:
            saved = yaml.safe_load(f)
        assert saved["swipe"]["directionalOffsetThreshold"] == 40

    def test_non_numeric_threshold_rejected(self):
        result = runner.invoke(app, [
            "classify", "--dx=-20", "--dy=2", "--vx=-0.8", "--vy=0.05",
            "--set", "velocityThreshold=fast",
        ])
        assert result.exit_code == 2
        assert "velocityThreshold" in result.output

    def test_non_boolean_flag_rejected(self):
        result = runner.invoke(app, ["classify", "--dx=1", "--dy=1", "--vx=1", "--vy=1",
                                     "--set", "detectSwipeUp=sometimes"])
        assert result.exit_code == 2

    def test_boolean_threshold_rejected(self):
        result = runner.invoke(app, ["config", "--set", "directionalOffsetThreshold=true"])
        assert result.exit_code == 2

    def test_config_directory_is_not_a_file(self, tmp_path):
        result = runner.invoke(app, ["config", "--config", str(tmp_path)])
        assert result.exit_code == 1
        assert "not found" in result.output
