from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer()


@app.command()
def main(
    directory: Optional[str] = typer.Option(
        None,
        help="the directory which contains versioned resume directories",
    ),
    prefix: Optional[str] = typer.Option(
        None,
        help="the name prefix of a versioned directory",
    ),
    version: Optional[int] = typer.Option(
        None,
        help="the version of a resume",
    ),
    filename: Optional[str] = typer.Option(
        None,
        help="the filename of a resume",
    ),
    config: Optional[Path] = typer.Option(
        None,
        help="the path of a YAML config file",
    ),
    verbose: bool = typer.Option(
        False,
        help="log the constructed path to stderr",
    ),
) -> None:
    import dataclasses
    import logging

    from where_is_my_resume.config import load_config
    from where_is_my_resume.resume import find_resume

    logging.basicConfig(level=logging.WARNING)
    if verbose:
        logging.getLogger("where_is_my_resume").setLevel(logging.DEBUG)

    c = load_config(config)

    overrides = {
        "directory": directory,
        "prefix": prefix,
        "version": version,
        "filename": filename,
    }
    location = dataclasses.replace(
        c.resume,
        **{k: v for k, v in overrides.items() if v is not None},
    )

    typer.echo(find_resume(location))


if __name__ == "__main__":
    app()
