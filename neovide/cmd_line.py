"""Command line and environment handling for the GUI settings."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from neovide.dimensions import Dimensions
from neovide.frame import Frame

_SRGB_DEFAULT = sys.platform == "win32"

_FALSE_LITERALS = frozenset({"n", "no", "f", "false", "off", "0"})


def _falsey_bool(value: str) -> bool:
    """Anything but an empty string or a recognised false word is true."""
    return value != "" and value.lower() not in _FALSE_LITERALS


def _strict_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(
        f"invalid value '{value}' [possible values: true, false]"
    )


def _dimensions_arg(value: str) -> Dimensions:
    try:
        return Dimensions.from_str(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _frame_arg(value: str) -> Frame:
    try:
        return Frame.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


@dataclass
class CmdLineSettings:
    """Settings taken from the command line and the environment."""

    files_to_open: list[str] = field(default_factory=list)
    neovim_args: list[str] = field(default_factory=list)
    geometry: Dimensions | None = None
    size: Dimensions | None = None
    log_to_file: bool = False
    server: str | None = None
    wsl: bool = False
    frame: Frame = Frame.FULL
    maximized: bool = False
    multi_grid: bool = False
    no_fork: bool = False
    idle: bool = True
    no_tabs: bool = False
    srgb: bool = _SRGB_DEFAULT
    nosrgb: bool = False
    vsync: bool = True
    novsync: bool = False
    neovim_bin: str | None = None
    wayland_app_id: str = "neovide"
    x11_wm_class: str = "neovide"
    x11_wm_class_instance: str = "neovide"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the options before ``--``."""
    parser = argparse.ArgumentParser(
        prog="neovide",
        description="A graphical user interface for Neovim.",
        epilog="Arguments after -- are passed to Neovim without being interpreted.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "files_to_open",
        nargs="*",
        metavar="FILES_TO_OPEN",
        help="Files to open (plainly appended to NeoVim args)",
    )
    parser.add_argument(
        "--geometry", type=_dimensions_arg, help="The geometry of the window"
    )
    parser.add_argument(
        "--size", type=_dimensions_arg, help="The size of the window in pixel"
    )
    parser.add_argument(
        "--log",
        dest="log_to_file",
        action="store_true",
        help="If to enable logging to a file in the current directory",
    )
    parser.add_argument(
        "--server",
        "--remote-tcp",
        dest="server",
        metavar="ADDRESS",
        help="Connect to the named pipe or socket at ADDRESS",
    )
    parser.add_argument(
        "--wsl", action="store_true", help="Run NeoVim in WSL rather than on the host"
    )
    parser.add_argument(
        "--frame", type=_frame_arg, help="Which window decorations to use"
    )
    parser.add_argument(
        "--maximized",
        action="store_true",
        help="Maximize the window on startup (not equivalent to fullscreen)",
    )
    parser.add_argument(
        "--multigrid",
        dest="multi_grid",
        action="store_true",
        help="Enable the Multigrid extension",
    )
    parser.add_argument(
        "--nofork",
        dest="no_fork",
        action="store_true",
        help="Be blocking and let the shell persist as parent process",
    )
    parser.add_argument(
        "--noidle",
        dest="idle",
        action="store_false",
        help="Render every frame",
    )
    parser.add_argument(
        "--notabs",
        dest="no_tabs",
        action="store_true",
        help="Disable opening multiple files supplied in tabs",
    )
    parser.add_argument(
        "--srgb", action="store_true", help="Request sRGB when initializing the window"
    )
    parser.add_argument(
        "--nosrgb",
        action="store_true",
        help="Do not request sRGB when initializing the window",
    )
    parser.add_argument(
        "--vsync", action="store_true", help="Request VSync on the window"
    )
    parser.add_argument(
        "--novsync",
        action="store_true",
        help="Do not try to request VSync on the window",
    )
    parser.add_argument(
        "--neovim-bin",
        dest="neovim_bin",
        help="Which NeoVim binary to invoke headlessly instead of nvim on $PATH",
    )
    parser.add_argument(
        "--wayland_app_id",
        dest="wayland_app_id",
        help="The app ID to show to the compositor",
    )
    parser.add_argument(
        "--x11-wm-class",
        dest="x11_wm_class",
        help="The class part of the X11 WM_CLASS property",
    )
    parser.add_argument(
        "--x11-wm-class-instance",
        dest="x11_wm_class_instance",
        help="The instance part of the X11 WM_CLASS property",
    )
    return parser


def _environment_defaults(
    parser: argparse.ArgumentParser, env: Mapping[str, str]
) -> dict[str, object]:
    """Defaults for the options, with environment variables taking effect."""
    specs: list[tuple[str, str, Callable[[str], object], object]] = [
        ("wsl", "NEOVIDE_WSL", _strict_bool, False),
        ("frame", "NEOVIDE_FRAME", Frame.parse, Frame.FULL),
        ("maximized", "NEOVIDE_MAXIMIZED", _falsey_bool, False),
        ("multi_grid", "NEOVIDE_MULTIGRID", _falsey_bool, False),
        ("idle", "NEOVIDE_IDLE", _falsey_bool, True),
        ("srgb", "NEOVIDE_SRGB", _falsey_bool, _SRGB_DEFAULT),
        ("vsync", "NEOVIDE_VSYNC", _falsey_bool, True),
        ("neovim_bin", "NEOVIM_BIN", str, None),
        ("wayland_app_id", "NEOVIDE_APP_ID", str, "neovide"),
        ("x11_wm_class", "NEOVIDE_WM_CLASS", str, "neovide"),
        ("x11_wm_class_instance", "NEOVIDE_WM_CLASS_INSTANCE", str, "neovide"),
    ]
    defaults: dict[str, object] = {}
    for dest, variable, convert, fallback in specs:
        raw = env.get(variable)
        if raw is None:
            defaults[dest] = fallback
            continue
        try:
            defaults[dest] = convert(raw)
        except ValueError as exc:
            parser.error(f"{variable}: {exc}")
    return defaults


def parse_args(
    argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None
) -> CmdLineSettings:
    """Parse ``argv`` (program name first) into raw settings."""
    if argv is None:
        argv = sys.argv
    if env is None:
        env = os.environ
    args = list(argv[1:])
    if "--" in args:
        split = args.index("--")
        own_args, passthrough = args[:split], args[split + 1 :]
    else:
        own_args, passthrough = args, []

    parser = build_parser()
    parser.set_defaults(**_environment_defaults(parser, env))
    namespace = parser.parse_intermixed_args(own_args)
    return CmdLineSettings(neovim_args=passthrough, **vars(namespace))


def handle_command_line_arguments(
    args: Sequence[str] | None = None, env: Mapping[str, str] | None = None
) -> CmdLineSettings:
    """Parse the arguments and fold files and overrides into the final settings."""
    cmdline = parse_args(args, env)
    tab_flag = [] if cmdline.no_tabs else ["-p"]
    neovim_args = [*tab_flag, *cmdline.files_to_open, *cmdline.neovim_args]
    vsync = False if cmdline.novsync else cmdline.vsync
    srgb = False if cmdline.nosrgb else cmdline.srgb
    return dataclasses.replace(
        cmdline,
        files_to_open=[],
        neovim_args=neovim_args,
        vsync=vsync,
        srgb=srgb,
    )