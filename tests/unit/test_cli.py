"""Tests for the command-line interface.

Covers the `syntaxe validate`, `syntaxe inspect` and `syntaxe kinds` commands,
their output formats and exit codes.
"""

import json

from click.testing import CliRunner
import pytest
import yaml

from syntaxe.cli import main
from syntaxe.cli.common import ObjectLoadError, load_object
from syntaxe.cli.describe import inspect_command, kinds_command
from syntaxe.cli.validate import validate_command
from tests.fixtures.models import Signup

MODELS = "tests.fixtures.models"


@pytest.fixture
def runner():
    """Create CLI runner for tests."""
    return CliRunner()


class TestLoadObject:
    def test_loads_attribute(self):
        assert load_object(f"{MODELS}:Signup") is Signup

    @pytest.mark.parametrize(
        "reference",
        ["no-colon", f"{MODELS}:", "tests.fixtures.nowhere:Thing", f"{MODELS}:Nope"],
    )
    def test_bad_references(self, reference):
        with pytest.raises(ObjectLoadError):
            load_object(reference)


class TestValidateCommand:
    """Test `syntaxe validate`."""

    def test_valid_object(self, runner):
        result = runner.invoke(validate_command, [f"{MODELS}:valid_signup"])

        assert result.exit_code == 0
        assert "Validation successful" in result.output

    def test_invalid_object_table(self, runner):
        result = runner.invoke(validate_command, [f"{MODELS}:invalid_signup"])

        assert result.exit_code == 1
        assert "Validation failed" in result.output
        assert "handle must be at least 3 characters" in result.output

    def test_invalid_object_json(self, runner):
        result = runner.invoke(
            validate_command, [f"{MODELS}:invalid_signup", "--format", "json"]
        )

        assert result.exit_code == 1
        report = json.loads(result.output)
        assert report["valid"] is False
        assert report["target_type"] == "Signup"
        assert report["errors"] == [
            "handle must be at least 3 characters",
            "email is not a valid email address",
            "plan must be one of: free, pro",
        ]

    def test_yaml_output(self, runner):
        result = runner.invoke(
            validate_command, [f"{MODELS}:valid_signup", "--format", "yaml"]
        )

        assert result.exit_code == 0
        report = yaml.safe_load(result.output)
        assert report["valid"] is True
        assert report["errors"] == []

    def test_unknown_reference_exits_2(self, runner):
        result = runner.invoke(validate_command, [f"{MODELS}:missing_factory"])

        assert result.exit_code == 2
        assert "missing_factory" in result.output

    def test_failing_factory_is_internal_error(self, runner):
        result = runner.invoke(validate_command, [f"{MODELS}:broken_factory"])

        assert result.exit_code == 4
        assert "factory exploded" in result.output

    def test_invalid_format_option_fails(self, runner):
        result = runner.invoke(
            validate_command, [f"{MODELS}:valid_signup", "--format", "invalid"]
        )

        assert result.exit_code == 2


class TestInspectCommand:
    """Test `syntaxe inspect`."""

    def test_json_report(self, runner):
        result = runner.invoke(inspect_command, [f"{MODELS}:Signup", "--format", "json"])

        assert result.exit_code == 0
        report = json.loads(result.output)
        fields = {field["name"]: field for field in report["fields"]}
        assert list(fields) == ["handle", "email", "plan"]
        assert fields["handle"]["validators"] == ["StringValidator"]
        assert fields["handle"]["encoders"] == ["TrimEncoder"]
        assert fields["plan"]["validators"] == ["ChoiceValidator"]
        assert report["object_validator"] is None

    def test_table_report(self, runner):
        result = runner.invoke(inspect_command, [f"{MODELS}:Comment"])

        assert result.exit_code == 0
        assert "body" in result.output

    def test_not_a_class(self, runner):
        result = runner.invoke(inspect_command, [f"{MODELS}:valid_signup"])

        assert result.exit_code == 2
        assert "is not a class" in result.output


class TestKindsCommand:
    def test_lists_builtin_kinds(self, runner):
        result = runner.invoke(kinds_command, ["--format", "json"])

        assert result.exit_code == 0
        report = json.loads(result.output)
        assert "string" in report["validators"]
        assert "child" in report["validators"]
        assert report["encoders"] == ["strip_tags", "trim", "xss"]


class TestMainGroup:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "validate" in result.output
        assert "inspect" in result.output

    def test_group_dispatches_with_log_level(self, runner):
        result = runner.invoke(
            main, ["--log-level", "ERROR", "validate", f"{MODELS}:valid_signup"]
        )

        assert result.exit_code == 0
