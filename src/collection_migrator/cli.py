"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path

import click
from click.core import ParameterSource

from collection_migrator.collection_descriptors import DescriptorError, load_collection_descriptor
from collection_migrator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from collection_migrator.field_editing import (
    DEFAULT_FIELD_TYPE,
    EditSession,
    EditSessionError,
    load_edit_session,
    save_edit_session,
)
from collection_migrator.migration_planning import describe_step
from collection_migrator.submission import (
    PullRequest,
    SubmissionError,
    SubmitRequest,
    assemble_submission,
    pull_collection,
    submit_edit_session,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_session_option = click.option(
    "--session",
    "session_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the edit session YAML file",
)
_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="collection-migrator")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity written to stderr",
)
def cli(log_level: str) -> None:
    """Edit collection schemas and submit them as migration steps."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="pull")
@_config_option
@click.option("--name", "collection_name", required=True, help="Name of the collection to fetch")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path of the descriptor file to write (.json or .yaml)",
)
def pull(config_path: str, collection_name: str, output_path: str) -> None:
    """Fetch a persisted collection descriptor from the collection API."""
    try:
        written = pull_collection(
            PullRequest(
                config_path=config_path,
                collection_name=collection_name,
                output_path=output_path,
            )
        )
    except SubmissionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.group(name="session")
def session_group() -> None:
    """Open and inspect edit sessions."""


@session_group.command(name="open")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path of the edit session file to write",
)
@click.option(
    "--descriptor",
    "descriptor_path",
    required=False,
    type=click.Path(path_type=str),
    help="Persisted collection descriptor to edit",
)
@click.option("--new", "new_name", required=False, help="Name of a new collection to create")
@click.option(
    "--empty",
    is_flag=True,
    default=False,
    help="Do not add a default field to a new collection",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing session file")
def open_session(
    output_path: str,
    descriptor_path: str | None,
    new_name: str | None,
    empty: bool,
    force: bool,
) -> None:
    """Open an edit session for an existing or a new collection."""
    if (descriptor_path is None) == (new_name is None):
        raise CliError("Provide exactly one of --descriptor or --new.")
    if Path(output_path).exists() and not force:
        raise CliError(f"Edit session file already exists: {Path(output_path).resolve()}")

    if descriptor_path is not None:
        try:
            session = EditSession.from_descriptor(load_collection_descriptor(descriptor_path))
        except DescriptorError as exc:
            raise CliError(str(exc)) from exc
    else:
        session = EditSession.for_new_collection(new_name or "", blank_field=not empty)

    try:
        written = save_edit_session(session, output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@session_group.command(name="set")
@_session_option
@click.option("--name", "new_name", required=False, help="New collection name")
@click.option(
    "--exposed/--not-exposed",
    default=None,
    help="Whether the collection has a public endpoint",
)
@click.option(
    "--template/--no-template",
    default=None,
    help="Whether the collection can validate fields of other collections",
)
@click.pass_context
def set_session_options(
    ctx: click.Context,
    session_path: str,
    new_name: str | None,
    exposed: bool | None,
    template: bool | None,
) -> None:
    """Change the collection name or flags of an edit session."""
    exposed = _given_flag(ctx, "exposed", exposed)
    template = _given_flag(ctx, "template", template)

    def apply(session: EditSession) -> None:
        if new_name is not None:
            session.rename_collection(new_name)
        if exposed is not None:
            session.exposed = exposed
        if template is not None:
            session.template = template

    _edit_session(session_path, apply)


@session_group.command(name="show")
@_session_option
def show_session(session_path: str) -> None:
    """List the field entries of an edit session."""
    session = _load_session(session_path)
    mode = f"update of {session.previous.name!r}" if session.previous else "new collection"
    click.echo(f"collection: {session.name} ({mode})")
    click.echo(f"exposed: {session.exposed}  template: {session.template}")
    for index, entry in enumerate(session.entries):
        flags = [flag for flag in ("required", "unique") if getattr(entry, flag)]
        line = f"{index:>3}  {entry.status.value:<7}  {entry.name}  {entry.type or '-'}"
        if entry.relation:
            line += f" -> {entry.relation}"
        if flags:
            line += f"  [{', '.join(flags)}]"
        click.echo(line)


@cli.group(name="field")
def field_group() -> None:
    """Edit the field entries of an edit session."""


@field_group.command(name="add")
@_session_option
@click.option("--name", "field_name", required=False, help="Field name (default: next fieldN)")
@click.option(
    "--type",
    "field_type",
    default=DEFAULT_FIELD_TYPE,
    show_default=True,
    help="Field type",
)
def add_field(session_path: str, field_name: str | None, field_type: str) -> None:
    """Append a new field entry."""
    _edit_session(session_path, lambda session: session.add_field(field_name, field_type))


@field_group.command(name="remove")
@_session_option
@click.argument("index", type=int)
def remove_field(session_path: str, index: int) -> None:
    """Mark a persisted field as removed, or drop a field added in this session."""
    _edit_session(session_path, lambda session: session.remove_field(index))


@field_group.command(name="restore")
@_session_option
@click.argument("index", type=int)
def restore_field(session_path: str, index: int) -> None:
    """Undo the removal of a persisted field."""
    _edit_session(session_path, lambda session: session.restore_field(index))


@field_group.command(name="rename")
@_session_option
@click.argument("index", type=int)
@click.argument("new_name")
def rename_field(session_path: str, index: int, new_name: str) -> None:
    """Rename a field entry."""
    _edit_session(session_path, lambda session: session.rename_field(index, new_name))


@field_group.command(name="retype")
@_session_option
@click.argument("index", type=int)
@click.argument("field_type")
def retype_field(session_path: str, index: int, field_type: str) -> None:
    """Change the type of a field entry."""
    _edit_session(session_path, lambda session: session.retype_field(index, field_type))


@field_group.command(name="set")
@_session_option
@click.argument("index", type=int)
@click.option("--required/--optional", default=None, help="Whether a value is required")
@click.option("--unique/--not-unique", default=None, help="Whether values must be unique")
@click.option("--relation", required=False, help="Related collection of an 'id' field")
@click.pass_context
def set_field_options(
    ctx: click.Context,
    session_path: str,
    index: int,
    required: bool | None,
    unique: bool | None,
    relation: str | None,
) -> None:
    """Change the options of a field entry."""
    required = _given_flag(ctx, "required", required)
    unique = _given_flag(ctx, "unique", unique)
    _edit_session(
        session_path,
        lambda session: session.set_field_options(
            index, required=required, unique=unique, relation=relation
        ),
    )


@cli.command(name="plan")
@_session_option
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the submission payload to this file instead of stdout",
)
def plan(session_path: str, output_path: str | None) -> None:
    """Show the submission payload and migration steps without sending them."""
    submission = assemble_submission(_load_session(session_path))
    payload_text = json.dumps(submission.to_payload(), indent=2)
    for step in submission.migration_steps:
        click.echo(describe_step(step), err=True)
    if output_path is None:
        click.echo(payload_text)
        return
    try:
        Path(output_path).write_text(payload_text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


@cli.command(name="submit")
@_config_option
@_session_option
@click.option(
    "--keep-session",
    is_flag=True,
    default=False,
    help="Keep the edit session file after a successful submission.",
)
def submit(config_path: str, session_path: str, keep_session: bool) -> None:
    """Create or update the collection and apply its migration steps."""
    try:
        outcome = submit_edit_session(
            SubmitRequest(
                config_path=config_path,
                session_path=session_path,
                keep_session=keep_session,
            )
        )
    except SubmissionError as exc:
        raise CliError(str(exc)) from exc
    action = "created" if outcome.created else "updated"
    click.echo(
        f"{action} collection {outcome.collection.name} "
        f"({len(outcome.migration_steps)} migration step(s))"
    )


def _given_flag(ctx: click.Context, name: str, value: bool | None) -> bool | None:
    """Return None for an on/off flag the operator did not pass."""
    if ctx.get_parameter_source(name) in (None, ParameterSource.DEFAULT):
        return None
    return value


def _load_session(session_path: str) -> EditSession:
    try:
        return load_edit_session(session_path)
    except EditSessionError as exc:
        raise CliError(str(exc)) from exc


def _edit_session(session_path: str, action: Callable[[EditSession], object]) -> None:
    session = _load_session(session_path)
    try:
        action(session)
        save_edit_session(session, session_path)
    except (EditSessionError, OSError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
