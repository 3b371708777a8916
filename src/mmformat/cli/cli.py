"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mmformat.cli.commands import diff_cmd, fmt_cmd, parse_cmd, summary_cmd, text_cmd


app = typer.Typer(name="mmformat", no_args_is_help=True, help="MM markup parser and document tools")

app.command(name="parse")(parse_cmd)
app.command(name="summary")(summary_cmd)
app.command(name="text")(text_cmd)
app.command(name="fmt")(fmt_cmd)
app.command(name="diff")(diff_cmd)
