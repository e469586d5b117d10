from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from vttmerge.core.errors import MergeError
from vttmerge.core.pipeline import MergeProgress, MergeRequest, merge_folder
from vttmerge.infra.config import APP_NAME, APP_VERSION, build_app_config
from vttmerge.infra.logging_utils import setup_logging

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    help="Merge a folder of WebVTT files into one sorted, deduplicated SRT file.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def merge_command(
    folder_path: Path = typer.Argument(
        ..., help="Folder containing the .vtt files; output.srt is written here."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert every .vtt file in FOLDER_PATH into a single output.srt."""
    try:
        config = build_app_config()
    except ValueError as exc:
        _fail(str(exc))
    setup_logging(config.log_level)

    request = MergeRequest(folder=folder_path, config=config)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("[cyan]cues: {task.fields[cues]} unique of {task.fields[extracted]}"),
        TimeElapsedColumn(),
        console=Console(stderr=True),
        transient=True,
    ) as progress:
        task_id = progress.add_task(
            description="Extracting cues...",
            total=None,
            cues=0,
            extracted=0,
        )
        unique_cues = 0
        extracted_cues = 0
        merge_error: MergeError | None = None

        def _progress_log(event: MergeProgress) -> None:
            nonlocal unique_cues, extracted_cues
            unique_cues += event.added
            extracted_cues += event.extracted
            progress.update(
                task_id,
                description=f"Extracted {event.input_path.name}",
                total=event.total,
                completed=event.completed,
                cues=unique_cues,
                extracted=extracted_cues,
            )

        try:
            result = merge_folder(request, on_progress=_progress_log)
        except MergeError as exc:
            merge_error = exc
    if merge_error is not None:
        _fail(str(merge_error))

    typer.echo(
        f"[done] Merged {result.files} file(s) into {result.output_path}\n"
        f"- cues extracted: {result.extracted}\n"
        f"- unique cues written: {result.unique}\n"
        f"- duplicates dropped: {result.duplicates}"
    )


def run() -> None:
    """Console-script entrypoint."""
    app()
