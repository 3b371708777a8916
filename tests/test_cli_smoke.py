from typer.testing import CliRunner
from mmformat.cli.cli import app

def test_cli_smoke():
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("parse", "summary", "text", "fmt", "diff"):
        assert command in result.output
