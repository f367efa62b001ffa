import shlex
import sys

import pytest

from neovide.bridge.command import (
    NeovimNotFoundError,
    build_nvim_cmd_with_args,
    create_nvim_command,
    create_platform_shell_command,
    lex_nvim_cmdline,
    neovim_ok,
    platform_which,
)
from neovide.cmd_line import CmdLineSettings


@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


def _script(tmp_path, body, name="fake_nvim.py"):
    path = tmp_path / name
    path.write_text("import sys\n" + body + "\n")
    return str(path)


@pytest.fixture
def good_nvim(tmp_path):
    return _script(tmp_path, 'print("NVIM v0.9.5")')


def test_shell_command_on_linux_runs_directly(linux):
    assert create_platform_shell_command("which", ["nvim"]) == ["which", "nvim"]


def test_shell_command_on_macos_uses_login_shell(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.delenv("TERM", raising=False)
    assert create_platform_shell_command("which", ["nvim"]) == [
        "/bin/zsh",
        "-l",
        "-c",
        "which nvim",
    ]


def test_shell_command_on_macos_with_term_skips_login(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.setenv("TERM", "xterm")
    assert create_platform_shell_command("which", ["nvim"]) == [
        "/bin/zsh",
        "-c",
        "which nvim",
    ]


def test_shell_command_through_wsl(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    settings = CmdLineSettings(wsl=True)
    assert create_platform_shell_command("nvim", ["-v"], settings) == [
        "wsl",
        "$SHELL",
        "-lc",
        "nvim -v",
    ]


def test_neovim_ok_accepts_version_output(linux, good_nvim):
    assert neovim_ok(sys.executable, [good_nvim]) is True


def test_neovim_ok_rejects_failing_binary(linux, tmp_path):
    failing = _script(tmp_path, "sys.exit(1)")
    assert neovim_ok(sys.executable, [failing]) is False


def test_neovim_ok_rejects_missing_binary(linux, tmp_path):
    assert neovim_ok(str(tmp_path / "missing-binary"), []) is False


def test_neovim_ok_raises_on_unexpected_output(linux, tmp_path):
    chatty = _script(tmp_path, 'print("hello")')
    with pytest.raises(NeovimNotFoundError, match="Unexpected output from neovim"):
        neovim_ok(sys.executable, [chatty])


def test_neovim_ok_raises_on_stderr_output(linux, tmp_path):
    noisy = _script(tmp_path, 'print("NVIM v0.9.5"); sys.stderr.write("warn")')
    with pytest.raises(NeovimNotFoundError, match=r"\$SHELL -lc"):
        neovim_ok(sys.executable, [noisy])


def test_lex_with_path_returns_binary_and_args(linux, good_nvim):
    cmdline = f"{shlex.quote(sys.executable)} {shlex.quote(good_nvim)}"
    assert lex_nvim_cmdline(cmdline) == (sys.executable, [good_nvim])


@pytest.mark.parametrize("cmdline", ["", "   ", "'unbalanced"])
def test_lex_rejects_empty_or_malformed(linux, cmdline):
    assert lex_nvim_cmdline(cmdline) is None


def test_platform_which_finds_absolute_path(linux):
    assert platform_which(sys.executable) == sys.executable


def test_platform_which_missing_binary(linux):
    assert platform_which("surely-missing-nvim-binary") is None


def test_build_command_on_linux(linux):
    settings = CmdLineSettings(neovim_args=["-p", "a.txt"])
    assert build_nvim_cmd_with_args("nvim", ["--clean"], settings) == [
        "nvim",
        "--clean",
        "--embed",
        "-p",
        "a.txt",
    ]


def test_build_command_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setenv("SHELL", "/bin/zsh")
    monkeypatch.setenv("TERM", "xterm")
    settings = CmdLineSettings(neovim_args=["my file.txt"])
    argv = build_nvim_cmd_with_args("nvim", [], settings)
    assert argv[:2] == ["/bin/zsh", "-c"]
    assert shlex.split(argv[2]) == ["nvim", "--embed", "my file.txt"]


def test_build_command_through_wsl(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    settings = CmdLineSettings(wsl=True, neovim_args=["-p"])
    assert build_nvim_cmd_with_args("nvim", [], settings) == [
        "wsl",
        "$SHELL",
        "-lc",
        "nvim --embed -p",
    ]


def test_create_nvim_command_from_neovim_bin(linux, good_nvim):
    settings = CmdLineSettings(
        neovim_bin=f"{shlex.quote(sys.executable)} {shlex.quote(good_nvim)}",
        neovim_args=["-p", "a.txt"],
    )
    assert create_nvim_command(settings) == [
        sys.executable,
        good_nvim,
        "--embed",
        "-p",
        "a.txt",
    ]


def test_create_nvim_command_missing_neovim_bin(linux):
    settings = CmdLineSettings(neovim_bin="surely-missing-nvim-binary")
    with pytest.raises(
        NeovimNotFoundError,
        match="NEOVIM_BIN='surely-missing-nvim-binary' was not found",
    ):
        create_nvim_command(settings)


def test_create_nvim_command_without_nvim_on_path(linux, monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(NeovimNotFoundError, match="nvim not found"):
        create_nvim_command(CmdLineSettings())