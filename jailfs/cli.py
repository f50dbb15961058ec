from pathlib import Path

import typer

from jailfs.config import InvalidConfigError, load_settings
from jailfs.env import SimulatedEnv
from jailfs.fs import InvalidPathError, TempFs
from jailfs.logging import setup_logging

app = typer.Typer(no_args_is_help = True)


def _settings(config: Path | None):
    try:
        return load_settings(config)
    except InvalidConfigError as exc:
        raise typer.BadParameter(str(exc))


@app.command('confine')
def confine_cmd(
    path: str = typer.Argument(..., help="Path as seen from inside the sandbox"),
    cwd: str = typer.Option("/", "--cwd", help="Virtual working directory"),
    config: Path | None = typer.Option(None, "--config", help="Settings YAML file"),
):
    """
    Resolve a path inside a fresh, throwaway sandbox.
    """
    settings = _settings(config)
    setup_logging(settings.log_level)

    with TempFs(env = SimulatedEnv(current_dir = cwd), settings = settings) as fs:
        try:
            confined = fs.confine(path)
        except InvalidPathError as exc:
            typer.echo(f'Rejected: {exc}', err = True)
            raise typer.Exit(code = 1)

        typer.echo(f'Root: {fs.root_path()}')
        typer.echo(f'Path: {confined}')


@app.command('info')
def info_cmd(
    config: Path | None = typer.Option(None, "--config", help="Settings YAML file"),
):
    """
    Show the effective settings.
    """
    settings = _settings(config)
    typer.echo(settings.model_dump_json(indent = 2))


@app.callback()
def main():
    """
    jailfs CLI
    """
    pass
