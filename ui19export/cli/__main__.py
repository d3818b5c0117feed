"""UI-19 Export CLI - Command-line interface for statutory report exports."""

from pathlib import Path

import click
from rich.console import Console

from ui19export import __version__
from ui19export.sdk import (
    ExportError,
    SUPPORTED_SYSTEMS,
    SYSTEM_LABELS,
    export_declaration,
    export_report,
    get_default_system,
    get_format_spec,
    get_output_dir,
    load_report,
)

from .renderers.report_renderer import render_report
from .settings_commands import settings as settings_group


def _load(report_file):
    try:
        return load_report(report_file)
    except ExportError as e:
        raise click.ClickException(str(e))


def _write(result, output_dir) -> Path:
    directory = get_output_dir(output_dir)
    path = directory / result.filename
    path.write_bytes(result.content)
    return path


@click.group()
@click.version_option(version=__version__, prog_name="ui19-export")
def cli():
    """UI-19 Export - UIF declaration exports for payroll and tax systems.

    Converts a canonical UI-19 report (JSON or YAML) into the file layout
    each downstream system imports.

    Configuration is loaded from (in order):

    \b
    1. UI19_EXPORT_CONFIG_PATH environment variable
    2. ~/.config/ui19-export/settings.json (XDG default)

    Run 'ui19-export systems' to list supported target systems.
    """
    pass


cli.add_command(settings_group)


@cli.command("systems")
def systems():
    """List supported target systems."""
    for system in SUPPORTED_SYSTEMS:
        spec = get_format_spec(system)
        if spec.layout == "fixed_width":
            layout = f"fixed width ({spec.record_width} chars)"
        elif spec.layout == "envelope":
            layout = "H/D/T envelope"
        else:
            layout = {",": "comma", "|": "pipe", "\t": "tab"}[spec.delimiter]
        click.echo(f"{system:<12} {SYSTEM_LABELS[system]:<22} {layout}")


@cli.command("export")
@click.argument("report_file", type=click.Path(dir_okay=False))
@click.option("--system", "-s", type=click.Choice(SUPPORTED_SYSTEMS),
              help="Target system (default: settings 'default_system').")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False),
              help="Directory to write the export to (default: settings 'output_dir').")
@click.option("--stdout", "to_stdout", is_flag=True,
              help="Print the payload instead of writing a file.")
def export_cmd(report_file, system, output_dir, to_stdout):
    """Export a UI-19 report for a target payroll or tax system.

    \b
    Examples:
      ui19-export export report.json --system sage
      ui19-export export report.yaml -s kerridge -o ./out
      ui19-export export report.json -s sars --stdout
    """
    try:
        system = system or get_default_system()
    except ExportError as e:
        raise click.ClickException(str(e))
    if not system:
        raise click.ClickException(
            "No target system given. Use --system or "
            "'ui19-export settings set default_system <system>'."
        )

    report = _load(report_file)

    try:
        result = export_report(report, system)
    except ExportError as e:
        raise click.ClickException(str(e))

    if to_stdout:
        click.echo(result.text)
        return

    path = _write(result, output_dir)
    click.echo(f"Exported {result.record_count} employee(s) for {SYSTEM_LABELS[system]}")
    click.echo(f"Saved to: {path}")


@cli.command("declaration")
@click.argument("report_file", type=click.Path(dir_okay=False))
@click.option("--output-dir", "-o", type=click.Path(file_okay=False),
              help="Directory to write the CSV to (default: settings 'output_dir').")
def declaration_cmd(report_file, output_dir):
    """Write the UI-19 declaration in the official form layout (CSV)."""
    report = _load(report_file)

    try:
        result = export_declaration(report)
    except ExportError as e:
        raise click.ClickException(str(e))

    path = _write(result, output_dir)
    click.echo(f"Saved to: {path}")


@cli.command("preview")
@click.argument("report_file", type=click.Path(dir_okay=False))
def preview(report_file):
    """Show a UI-19 report as tables without exporting it."""
    report = _load(report_file)
    render_report(Console(), report)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
