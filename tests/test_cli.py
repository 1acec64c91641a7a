"""CLI smoke tests using typer's CliRunner."""

import json

from typer.testing import CliRunner

from schemagen import config as config_module
from schemagen.cli.app import app

runner = CliRunner()


def _write_schema(tmp_path, text: str):
    path = tmp_path / "schema.yaml"
    path.write_text(text)
    return path


NUMERIC_SCHEMA = (
    "properties:\n"
    "  age:\n"
    "    type: integer\n"
    "    minimum: 60\n"
    "    maximum: 70\n"
    "    multipleOf: 13\n"
    "  score:\n"
    "    type: number\n"
    "    minimum: 99.49\n"
    "    maximum: 99.50\n"
    "    exclusiveMinimum: true\n"
    "  color:\n"
    "    enum: [red]\n"
)


class TestVersionFlag:
    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "schemagen" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_json_output(self, tmp_path):
        path = _write_schema(tmp_path, NUMERIC_SCHEMA)
        result = runner.invoke(app, ["--json", "generate", str(path), "--count", "2"])
        assert result.exit_code == 0, result.output

        records = json.loads(result.output)
        assert records == [
            {"age": 65, "score": 99.5, "color": "red"},
            {"age": 65, "score": 99.5, "color": "red"},
        ]

    def test_same_seed_same_output(self, tmp_path):
        path = _write_schema(
            tmp_path,
            "properties:\n  n:\n    type: integer\n    minimum: 0\n    maximum: 1000000\n",
        )
        args = ["--json", "generate", str(path), "--count", "3", "--seed", "8"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)
        assert first.exit_code == 0
        assert first.output == second.output

    def test_table_output(self, tmp_path):
        path = _write_schema(tmp_path, NUMERIC_SCHEMA)
        result = runner.invoke(app, ["generate", str(path)])
        assert result.exit_code == 0
        assert "age" in result.output
        assert "65" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["generate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_nested_schema_rejected(self, tmp_path):
        path = _write_schema(tmp_path, "properties:\n  address:\n    type: object\n")
        result = runner.invoke(app, ["generate", str(path)])
        assert result.exit_code == 1
        assert "Invalid schema file" in result.output

    def test_unsatisfiable_constraints(self, tmp_path):
        path = _write_schema(
            tmp_path,
            "properties:\n  n:\n    type: integer\n    minimum: 5\n    maximum: 1\n",
        )
        result = runner.invoke(app, ["generate", str(path)])
        assert result.exit_code == 1
        assert "Generation failed" in result.output

    def test_unmatched_type_is_null_in_json(self, tmp_path):
        path = _write_schema(
            tmp_path,
            "properties:\n  isbn:\n    type: isbn\n  n:\n    type: integer\n",
        )
        result = runner.invoke(app, ["--json", "generate", str(path)])
        assert result.exit_code == 0

        records = json.loads(result.stdout)
        assert records[0]["isbn"] is None
        assert isinstance(records[0]["n"], int)

    def test_infinite_bound_rejected(self, tmp_path):
        path = _write_schema(
            tmp_path,
            "properties:\n  x:\n    type: number\n    maximum: .inf\n",
        )
        result = runner.invoke(app, ["generate", str(path)])
        assert result.exit_code == 1
        assert "Invalid schema file" in result.output


class TestGeneratorsCommand:
    def test_lists_defaults(self):
        result = runner.invoke(app, ["generators"])
        assert result.exit_code == 0
        assert "integer" in result.output
        assert "float" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["--json", "generators"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert rows[0]["priority"] == 1
        assert {row["type"] for row in rows} >= {"string", "integer", "float", "enum"}


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Defaults" in result.output
        assert "string_max_length" in result.output

    def test_config_set_and_reset(self):
        result = runner.invoke(app, ["config", "set", "seed", "42"])
        assert result.exit_code == 0
        assert json.loads(config_module.CONFIG_FILE.read_text()) == {"seed": 42}

        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert not config_module.CONFIG_FILE.exists()

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_int_value(self):
        result = runner.invoke(app, ["config", "set", "string_max_length", "abc"])
        assert result.exit_code == 1
        assert "Invalid value" in result.output

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output
