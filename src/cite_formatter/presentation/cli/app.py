"""Thin CLI wrapper: Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
No direct imports from infrastructure here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError

from cite_formatter.presentation.cli.formatters import (
    citation_output,
    console,
    error_message,
    settings_table,
    styles_table,
    success_panel,
)

app = typer.Typer(
    name="cite",
    help="📚 Citation formatter: BibTeX, APA, MLA, Chicago, Harvard and IEEE",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for settings commands
settings_app = typer.Typer(
    name="settings",
    help="⚙️  Manage saved defaults",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(settings_app, name="settings")

ConfigDirOption = Annotated[
    Optional[str],
    typer.Option(
        "--config-dir",
        envvar="CITE_FORMATTER_CONFIG_DIR",
        help="Directory holding user_settings.json",
    ),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Generate citations and citation keys from bibliographic metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _container(config_dir: Optional[str]):
    from cite_formatter.bootstrap import Container

    return Container(config_dir=config_dir)


def _collect_fields(**fields: Any) -> dict[str, Any]:
    """Keep only the options the user actually passed."""
    return {name: value for name, value in fields.items() if value is not None}


def _report_error(exc: Exception) -> None:
    from cite_formatter.application.error_messages import (
        describe_field_errors,
        format_validation_errors,
    )
    from cite_formatter.domain.errors import MetadataValidationError

    if isinstance(exc, MetadataValidationError):
        error_message("Invalid metadata record", describe_field_errors(exc.errors))
    elif isinstance(exc, ValidationError):
        error_message("Invalid value", format_validation_errors(exc.errors()))
    else:
        error_message(str(exc))


# ---------------------------------------------------------------------------
# cite format
# ---------------------------------------------------------------------------


@app.command("format")
def format_command(
    input_file: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="JSON file with one record or a list of records"),
    ] = None,
    style: Annotated[
        Optional[str],
        typer.Option("--style", "-s", help="bibtex, apa, mla, chicago, harvard or ieee"),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option("--output-format", "-o", help="plain, markdown or html"),
    ] = None,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    author: Annotated[
        Optional[str], typer.Option("--author", "-a", help="Authors separated by ';'")
    ] = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Publication date")] = None,
    year: Annotated[Optional[str], typer.Option("--year")] = None,
    url: Annotated[Optional[str], typer.Option("--url")] = None,
    publisher: Annotated[Optional[str], typer.Option("--publisher")] = None,
    journal: Annotated[Optional[str], typer.Option("--journal")] = None,
    volume: Annotated[Optional[str], typer.Option("--volume")] = None,
    issue: Annotated[Optional[str], typer.Option("--issue")] = None,
    pages: Annotated[Optional[str], typer.Option("--pages")] = None,
    doi: Annotated[Optional[str], typer.Option("--doi")] = None,
    isbn: Annotated[Optional[str], typer.Option("--isbn")] = None,
    source_type: Annotated[
        Optional[str],
        typer.Option("--source-type", help="webpage, article, journal, book or news"),
    ] = None,
    access_date: Annotated[
        Optional[bool],
        typer.Option("--access-date/--no-access-date", help="Append an access-date clause"),
    ] = None,
    key_format: Annotated[
        Optional[str], typer.Option("--key-format", help="BibTeX key template")
    ] = None,
    copy: Annotated[bool, typer.Option("--copy", help="Copy the result to the clipboard")] = False,
    config_dir: ConfigDirOption = None,
) -> None:
    """Render a citation from a JSON file and/or field options."""
    from cite_formatter.domain.errors import CiteFormatterError
    from cite_formatter.domain.models.enums import CitationStyle
    from cite_formatter.domain.models.metadata import MetadataRecord

    container = _container(config_dir)
    overrides = _collect_fields(
        title=title,
        author=author,
        date=date,
        year=year,
        url=url,
        publisher=publisher,
        journal=journal,
        volume=volume,
        issue=issue,
        pages=pages,
        doi=doi,
        isbn=isbn,
        source_type=source_type,
        include_access_date=access_date,
        key_format=key_format,
    )

    try:
        if input_file is not None:
            base = container.repository.load(input_file)
        else:
            base = [MetadataRecord()]
        records = [
            MetadataRecord.from_data({**record.model_dump(exclude_unset=True), **overrides})
            for record in base
        ]
        if input_file is None and not records[0].model_fields_set:
            error_message("Nothing to cite: pass --input or at least one field option")
            raise typer.Exit(code=1)

        settings = container.user_settings
        resolved_style = CitationStyle.parse(style or settings.citation_style).value
        resolved_format = output_format or settings.output_format.value
        use_case = container.copy_citation() if copy else container.generate_citation()
        citations = [use_case.execute(record, resolved_style, resolved_format) for record in records]
    except CiteFormatterError as exc:
        _report_error(exc)
        raise typer.Exit(code=1)

    for index, citation in enumerate(citations):
        if index:
            console.print()
        citation_output(citation, resolved_style, highlight=resolved_format == "plain")

    if copy:
        success_panel("✅ Copied to clipboard")


# ---------------------------------------------------------------------------
# cite key
# ---------------------------------------------------------------------------


@app.command("key")
def key_command(
    key_format: Annotated[
        Optional[str], typer.Option("--format", "-f", help="Key template")
    ] = None,
    author: Annotated[Optional[str], typer.Option("--author", "-a")] = None,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    year: Annotated[Optional[str], typer.Option("--year")] = None,
    date: Annotated[Optional[str], typer.Option("--date")] = None,
    config_dir: ConfigDirOption = None,
) -> None:
    """Preview the citation key a template produces."""
    from cite_formatter.domain.errors import CiteFormatterError

    container = _container(config_dir)
    template = key_format or container.user_settings.key_format
    fields = _collect_fields(author=author, title=title, year=year, date=date)
    try:
        key = container.preview_key().execute(fields, template)
    except CiteFormatterError as exc:
        _report_error(exc)
        raise typer.Exit(code=1)
    console.print(key, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# cite styles
# ---------------------------------------------------------------------------


@app.command("styles")
def styles_command() -> None:
    """List the supported citation styles and source types."""
    from cite_formatter.domain.models.enums import CitationStyle, SourceType

    styles_table(
        [style.value for style in CitationStyle],
        [source.value for source in SourceType if source != SourceType.OTHER],
    )


# ---------------------------------------------------------------------------
# cite settings show / set / reset
# ---------------------------------------------------------------------------


@settings_app.command("show")
def settings_show(config_dir: ConfigDirOption = None) -> None:
    """Show the saved defaults."""
    container = _container(config_dir)
    settings_table(container.manage_settings().load(), str(container.settings_manager.settings_path))


@settings_app.command("set")
def settings_set(
    style: Annotated[Optional[str], typer.Option("--style", "-s")] = None,
    source_type: Annotated[Optional[str], typer.Option("--source-type")] = None,
    output_format: Annotated[Optional[str], typer.Option("--output-format", "-o")] = None,
    access_date: Annotated[
        Optional[bool], typer.Option("--access-date/--no-access-date")
    ] = None,
    key_format: Annotated[Optional[str], typer.Option("--key-format")] = None,
    config_dir: ConfigDirOption = None,
) -> None:
    """Change one or more saved defaults."""
    changes = _collect_fields(
        citation_style=style,
        source_type=source_type,
        output_format=output_format,
        include_access_date=access_date,
        key_format=key_format,
    )
    if not changes:
        error_message("Nothing to change")
        raise typer.Exit(code=1)

    container = _container(config_dir)
    try:
        updated = container.manage_settings().update(**changes)
    except ValidationError as exc:
        _report_error(exc)
        raise typer.Exit(code=1)

    saved = updated.model_dump(mode="json")
    success_panel(
        "✅ Settings saved\n\n"
        + "\n".join(f"  {name}: [cyan]{saved[name]}[/]" for name in sorted(changes)),
        title="⚙️  Settings",
    )


@settings_app.command("reset")
def settings_reset(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
    config_dir: ConfigDirOption = None,
) -> None:
    """Restore factory defaults."""
    if not yes:
        typer.confirm("Reset all settings to defaults?", abort=True)
    _container(config_dir).manage_settings().reset()
    success_panel("✅ Settings restored to defaults", title="⚙️  Settings")


if __name__ == "__main__":
    app()
