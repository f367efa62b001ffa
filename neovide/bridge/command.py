"""Locating the Neovim binary and building the command that embeds it."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
from collections.abc import Sequence

from neovide.cmd_line import CmdLineSettings

logger = logging.getLogger(__name__)


class NeovimNotFoundError(RuntimeError):
    """Raised when no usable Neovim binary can be found."""


def _settings(settings: CmdLineSettings | None) -> CmdLineSettings:
    return CmdLineSettings() if settings is None else settings


def _uses_wsl(settings: CmdLineSettings) -> bool:
    return sys.platform == "win32" and settings.wsl


def _run(argv: list[str], settings: CmdLineSettings) -> subprocess.CompletedProcess:
    extra = {}
    if _uses_wsl(settings):
        extra["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    return subprocess.run(argv, capture_output=True, check=False, **extra)


def create_platform_shell_command(
    command: str, args: Sequence[str], settings: CmdLineSettings | None = None
) -> list[str]:
    """The argv that runs ``command`` through a shell where one is needed."""
    settings = _settings(settings)
    joined = f"{command} {' '.join(args)}"
    if _uses_wsl(settings):
        return ["wsl", "$SHELL", "-lc", joined]
    if sys.platform == "darwin":
        argv = [os.environ.get("SHELL", "/bin/sh")]
        if "TERM" not in os.environ:
            argv.append("-l")
        return [*argv, "-c", joined]
    return [command, *args]


def neovim_ok(
    bin: str, args: Sequence[str], settings: CmdLineSettings | None = None
) -> bool:
    """Check that ``bin -v`` runs and reports a Neovim version.

    Returns False when it cannot be run or fails. Raises NeovimNotFoundError
    when it runs but prints something unexpected.
    """
    settings = _settings(settings)
    argv = create_platform_shell_command(bin, [*args, "-v"], settings)
    try:
        result = _run(argv, settings)
    except OSError:
        return False
    if result.returncode != 0:
        return False

    stdout = result.stdout.decode("utf-8", errors="replace")
    if stdout.startswith("NVIM v") and not result.stderr:
        return True

    stderr = result.stderr.decode("utf-8", errors="replace")
    prefix = (
        "ERROR: Unexpected output from neovim binary:\n"
        f"\t{bin} -v\n"
        f"stdout: {stdout}\n"
        f"stderr: {stderr}\n"
        "Check that your shell doesn't output anything extra when running:\n\t"
    )
    if settings.wsl:
        hint = f"wsl '$SHELL' -lc '{bin} -v'"
    else:
        hint = f"$SHELL -lc '{bin} -v'"
    raise NeovimNotFoundError(prefix + hint)


def lex_nvim_cmdline(
    cmdline: str, settings: CmdLineSettings | None = None
) -> tuple[str, list[str]] | None:
    """Split a user-given Neovim command line into a verified binary and args."""
    settings = _settings(settings)
    try:
        tokens = [token for token in shlex.split(cmdline) if token]
    except ValueError:
        return None
    if not tokens:
        return None
    bin, *args = tokens

    if "/" not in bin and "\\" not in bin:
        found = platform_which(bin, settings)
        if found is None:
            return None
        bin = found

    return (bin, args) if neovim_ok(bin, args, settings) else None


def platform_which(bin: str, settings: CmdLineSettings | None = None) -> str | None:
    """The full path of ``bin``, looked up directly or through a shell."""
    settings = _settings(settings)
    if not settings.wsl:
        path = shutil.which(bin)
        if path is not None:
            return path

    argv = create_platform_shell_command("which", [bin], settings)
    logger.debug("Running which command: %r", argv)
    try:
        result = _run(argv, settings)
    except OSError:
        return None
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8", errors="replace").strip()


def build_nvim_cmd_with_args(
    bin: str, args: Sequence[str], settings: CmdLineSettings | None = None
) -> list[str]:
    """The argv that starts Neovim embedded with the user's arguments."""
    settings = _settings(settings)
    full_args = [*args, "--embed", *settings.neovim_args]

    if sys.platform == "darwin":
        argv = [os.environ.get("SHELL", "/bin/sh")]
        if "TERM" not in os.environ:
            argv.append("-l")
        return [*argv, "-c", shlex.join([bin, *full_args])]
    if _uses_wsl(settings):
        return ["wsl", "$SHELL", "-lc", " ".join([bin, *full_args])]
    return [bin, *full_args]


def create_nvim_command(settings: CmdLineSettings | None = None) -> list[str]:
    """Find Neovim and return the argv that embeds it.

    Raises NeovimNotFoundError when no working binary is found.
    """
    settings = _settings(settings)
    if settings.neovim_bin:
        lexed = lex_nvim_cmdline(settings.neovim_bin, settings)
        if lexed is None:
            raise NeovimNotFoundError(
                f"ERROR: NEOVIM_BIN='{settings.neovim_bin}' was not found."
            )
        bin, args = lexed
        argv = build_nvim_cmd_with_args(bin, args, settings)
    else:
        path = platform_which("nvim", settings)
        if path is None or not neovim_ok(path, [], settings):
            raise NeovimNotFoundError("ERROR: nvim not found!")
        argv = build_nvim_cmd_with_args(path, [], settings)

    logger.debug("Starting neovim with: %r", argv)
    return argv