import shlex
import subprocess
from typing import List

import click

from .debug import get_logger
from .errors import OpenerError


log = get_logger("openers")


class Opener:
    """Strategy run when a row is activated. Subclasses implement ``activate``."""

    def activate(self, path: str) -> None:
        raise NotImplementedError

    def __call__(self, path: str) -> None:
        self.activate(path)


class LaunchOpener(Opener):
    """Open the file with the desktop's default application."""

    def activate(self, path: str) -> None:
        log.debug("launch: %s", path)
        code = click.launch(path)
        if code:
            raise OpenerError(f"default application exited with status {code} for {path!r}")


class CommandOpener(Opener):
    """Run a command for the file.

    ``{path}`` in the template is replaced by the path; without it the path
    is appended as the last argument.
    """

    def __init__(self, template: str) -> None:
        if not template or not template.strip():
            raise ValueError("open command must not be empty")
        self.template = template

    def command_for(self, path: str) -> List[str]:
        args = shlex.split(self.template)
        if any("{path}" in a for a in args):
            return [a.replace("{path}", path) for a in args]
        return args + [path]

    def activate(self, path: str) -> None:
        cmd = self.command_for(path)
        log.debug("run: %s", cmd)
        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise OpenerError(f"command not found: {cmd[0]}") from e
        except subprocess.CalledProcessError as e:
            raise OpenerError(
                f"command failed with status {e.returncode}: {' '.join(e.cmd)}"
            ) from e
