"""End-to-end tests for the compare command."""

import json

from typer.testing import CliRunner

from metrics_diff import __version__
from metrics_diff.cli import app

runner = CliRunner()


class TestCompareCommand:
    def test_markdown_report(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog)])

        assert result.exit_code == 0, result.output
        assert result.output.startswith("# Kubernetes Metrics Changes: v1.29 → v1.30\n")
        assert "| [bar](#bar) | counter | Added | `` |  |" in result.output
        assert "| [foo](#foo) | gauge | Updated | `` | Type changed from `counter` to `gauge`. |" in result.output
        assert "## Detailed Changes" in result.output

    def test_identical_catalogs(self, old_catalog):
        result = runner.invoke(app, [str(old_catalog), str(old_catalog)])

        assert result.exit_code == 0
        assert "No differences found between v1.29 and v1.29." in result.output

    def test_no_details(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "--no-details"])

        assert result.exit_code == 0
        assert "## Detailed Changes" not in result.output

    def test_custom_title(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "--title", "Kubelet"])

        assert result.exit_code == 0
        assert result.output.startswith("# Kubelet: v1.29 → v1.30\n")

    def test_json_format(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["summary"]["total"] == 2
        assert [d["key"] for d in data["diffs"]] == ["bar", "foo"]

    def test_rich_format(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "-f", "rich"])

        assert result.exit_code == 0, result.output
        assert "Changed Metrics" in result.output

    def test_unknown_format_rejected(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "--format", "html"])

        assert result.exit_code != 0

    def test_output_file(self, old_catalog, new_catalog, tmp_path):
        report = tmp_path / "CHANGES.md"
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "-o", str(report)])

        assert result.exit_code == 0, result.output
        assert "Report written to" in result.output
        text = report.read_text(encoding="utf-8")
        assert text.startswith("# Kubernetes Metrics Changes: v1.29 → v1.30\n")
        assert "### foo" in text

    def test_output_directory_missing(self, old_catalog, new_catalog, tmp_path):
        report = tmp_path / "missing" / "CHANGES.md"
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "-o", str(report)])

        assert result.exit_code == 1
        assert "cannot write report" in result.output

    def test_config_file(self, old_catalog, new_catalog, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text('output_format = "json"\ninclude_details = false\n')
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["new_version"] == "v1.30"

    def test_invalid_config_value(self, old_catalog, new_catalog, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text('output_format = "pdf"\n')
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), "-c", str(config)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"metrics-diff version {__version__}" in result.output


class TestCompareErrors:
    def test_no_arguments(self):
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Usage: metrics-diff <old.yaml> <new.yaml>" in result.output

    def test_one_argument(self, old_catalog):
        result = runner.invoke(app, [str(old_catalog)])

        assert result.exit_code == 1
        assert "Usage: metrics-diff <old.yaml> <new.yaml>" in result.output

    def test_three_arguments(self, old_catalog, new_catalog):
        result = runner.invoke(app, [str(old_catalog), str(new_catalog), str(new_catalog)])

        assert result.exit_code == 1
        assert "Usage:" in result.output

    def test_missing_old_catalog(self, new_catalog, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "absent.yaml"), str(new_catalog)])

        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output
        assert "# Kubernetes" not in result.output

    def test_missing_new_catalog(self, old_catalog, tmp_path):
        result = runner.invoke(app, [str(old_catalog), str(tmp_path / "absent.yaml")])

        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output

    def test_malformed_catalog(self, old_catalog, write_catalog):
        broken = write_catalog("broken.yaml", "- name: [\n")
        result = runner.invoke(app, [str(old_catalog), str(broken)])

        assert result.exit_code == 1
        assert "Failed to parse catalog" in result.output

    def test_strict_duplicates(self, old_catalog, write_catalog):
        duplicated = write_catalog(
            "v1.31.yaml",
            """\
            - name: foo
              type: counter
            - name: foo
              type: gauge
            """,
        )
        lenient = runner.invoke(app, [str(old_catalog), str(duplicated)])
        strict = runner.invoke(app, [str(old_catalog), str(duplicated), "--strict"])

        assert lenient.exit_code == 0
        assert "Type changed from `counter` to `gauge`." in lenient.output
        assert strict.exit_code == 1
        assert "Duplicate metric identity" in strict.output
