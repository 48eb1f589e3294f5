"""Tests for the main CLI group."""

from procchart import __version__, cli


class TestMainCLI:
    """Test main CLI group."""

    def test_help(self, cli_runner):
        result = cli_runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert "build" in result.output
        assert "validate" in result.output

    def test_verbose_build(self, cli_runner, temp_project):
        (temp_project / "procchart.yaml").write_text("processes:\n  worker: {}\n")

        result = cli_runner.invoke(cli, ['-v', 'build', 'worker', '--json'])

        assert result.exit_code == 0
        assert '"name": "worker"' in result.output

    def test_version(self):
        assert __version__ == "0.1.0"
