"""Unit tests for CLI interface."""

import json
import click
import pytest
from click.testing import CliRunner

from monitoring_plugin.cli import cli, parse_metric


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


class TestParseMetric:
    """Test parsing of --metric values."""

    def test_name_and_value(self):
        """Test the minimal form."""
        point = parse_metric("load=1.5")

        assert point.name == "load"
        assert point.value == 1.5
        assert point.unit == ""
        assert point.output() == "'load'=1.5;;;;"

    def test_all_fields(self):
        """Test sub-label, unit, thresholds and bounds."""
        point = parse_metric("rx@eth0=12.5B;100;200;0;1000")

        assert point.key == ("rx", "eth0")
        assert point.unit == "B"
        assert (point.warn, point.crit, point.min, point.max) == (100, 200, 0, 1000)

    def test_empty_slots(self):
        """Test that empty slots stay unset."""
        point = parse_metric("temperature=52°C;;85;;")

        assert point.warn is None
        assert point.crit == 85
        assert point.min is None
        assert point.max is None

    def test_exponent_value(self):
        """Test scientific notation values."""
        assert parse_metric("rate=1e5s").value == 100000
        assert parse_metric("rate=1e5s").unit == "s"

    def test_invalid_points_are_not_validated(self):
        """Test that grammar violations inside the point surface on validation only."""
        point = parse_metric("'quoted'=1unit")

        assert point.name == "'quoted'"
        assert point.unit == "unit"

    @pytest.mark.parametrize("definition", ["load", "load=", "load=abc", "load=1;2;3;4;5;6"])
    def test_malformed_definition(self, definition):
        """Test that malformed definitions are reported as bad parameters."""
        with pytest.raises(click.BadParameter):
            parse_metric(definition)

    def test_non_numeric_threshold(self):
        """Test that thresholds must be numbers."""
        with pytest.raises(click.BadParameter):
            parse_metric("load=1;high")


class TestRenderCommand:
    """Test the 'render' command."""

    def test_render_ok(self, runner):
        """Test rendering with flat labels."""
        result = runner.invoke(cli, [
            'render', '-m', 'metric=10s;40;50;0;60', '-m', 'load=1.5', '--message', 'all good',
        ])

        assert result.exit_code == 0
        assert result.output == "OK: all good | 'metric'=10s;40;50;0;60 'load'=1.5;;;;\n"

    def test_render_status_exit_code(self, runner):
        """Test that the status becomes the exit code."""
        result = runner.invoke(cli, ['render', '--status', 'critical', '--message', 'disk full'])

        assert result.exit_code == 2
        assert result.output == "CRITICAL: disk full\n"

    def test_render_default_message(self, runner):
        """Test the configured default message."""
        result = runner.invoke(cli, ['render'])

        assert result.exit_code == 0
        assert result.output == "OK: check finished\n"

    def test_render_json_label(self, runner):
        """Test structured labels."""
        result = runner.invoke(cli, ['render', '--json-label', '-m', 'metric@tag=10'])

        assert result.exit_code == 0
        assert """'{"metric":"metric","label":"tag"}'=10;;;;""" in result.output

    def test_render_json_label_from_config(self, runner, tmp_path):
        """Test that the config file enables JSON labels unless overridden."""
        config_file = tmp_path / "plugin.json"
        config_file.write_text(json.dumps({"json_label": True}))

        result = runner.invoke(cli, ['--config', str(config_file), 'render', '-m', 'metric=1'])
        assert """'{"metric":"metric"}'=1;;;;""" in result.output

        result = runner.invoke(cli, ['--config', str(config_file), 'render', '--flat-label', '-m', 'metric=1'])
        assert "'metric'=1;;;;" in result.output

    def test_render_invalid_point(self, runner):
        """Test that an invalid point turns the result UNKNOWN."""
        result = runner.invoke(cli, ['render', '-m', 'metric=10;;;50'])

        assert result.exit_code == 3
        assert result.output.startswith("UNKNOWN: given performance data point is not valid")
        assert "value cannot be smaller than min" in result.output

    def test_render_duplicate_point(self, runner):
        """Test that duplicates turn the result UNKNOWN."""
        result = runner.invoke(cli, ['render', '-m', 'metric=1', '-m', 'metric=2'])

        assert result.exit_code == 3
        assert "already exist" in result.output

    def test_render_malformed_definition(self, runner):
        """Test that malformed definitions turn the result UNKNOWN."""
        result = runner.invoke(cli, ['render', '-m', 'nonsense'])

        assert result.exit_code == 3
        assert "UNKNOWN: Invalid value for --metric" in result.output

    def test_config_error(self, runner, tmp_path):
        """Test that configuration errors exit UNKNOWN."""
        result = runner.invoke(cli, ['--config', str(tmp_path / 'missing.json'), 'render'])

        assert result.exit_code == 3
        assert "UNKNOWN: configuration error" in result.output


class TestValidateCommand:
    """Test the 'validate' command."""

    def test_all_valid(self, runner):
        """Test that valid definitions pass."""
        result = runner.invoke(cli, ['validate', '-m', 'metric=1', '-m', 'metric@tag=1'])

        assert result.exit_code == 0
        assert "✅ metric=1" in result.output
        assert "✅ metric@tag=1" in result.output

    def test_some_invalid(self, runner):
        """Test that each failure is reported and the exit code is 1."""
        result = runner.invoke(cli, [
            'validate', '-m', 'metric=1', '-m', 'metric=2', '-m', 'other=1unit1', '-m', 'garbage',
        ])

        assert result.exit_code == 1
        assert "✅ metric=1" in result.output
        assert "❌ metric=2" in result.output
        assert "❌ other=1unit1" in result.output
        assert "unit can not contain numbers" in result.output
        assert "❌ garbage" in result.output

    def test_metric_required(self, runner):
        """Test that at least one metric must be given."""
        result = runner.invoke(cli, ['validate'])

        assert result.exit_code == 2
