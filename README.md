# neovide

Building blocks for a graphical front end to Neovim: command-line settings,
parsing of the Neovim UI protocol's `redraw` notifications, character grids,
windows that turn grid changes into draw commands, and the plumbing that
carries those commands onward.

## What is in the package

- `neovide.dimensions` — `Dimensions`, a width and height parsed from
  `<width>x<height>` with `Dimensions.from_str` (raises `ValueError` on bad
  input or a zero dimension). Supports `str()`, `*` and `//` with another
  `Dimensions`, and `(x, y) * dims`.
- `neovide.frame` — `Frame`, the window decoration choice. `Frame.parse`
  accepts `full` and `none` everywhere, plus `transparent` and `buttonless`
  on macOS; `Frame.variants()` lists what the platform allows.
- `neovide.cmd_line` — `CmdLineSettings` and `handle_command_line_arguments(args, env)`,
  which parses `--geometry`, `--size`, `--log`, `--server`, `--wsl`,
  `--frame`, `--maximized`, `--multigrid`, `--nofork`, `--noidle`,
  `--notabs`, `--srgb`/`--nosrgb`, `--vsync`/`--novsync`, `--neovim-bin`,
  `--wayland_app_id`, `--x11-wm-class`, `--x11-wm-class-instance`, files to
  open and arguments after `--`. The environment variables `NEOVIDE_WSL`,
  `NEOVIDE_FRAME`, `NEOVIDE_MAXIMIZED`, `NEOVIDE_MULTIGRID`, `NEOVIDE_IDLE`,
  `NEOVIDE_SRGB`, `NEOVIDE_VSYNC`, `NEOVIM_BIN`, `NEOVIDE_APP_ID`,
  `NEOVIDE_WM_CLASS` and `NEOVIDE_WM_CLASS_INSTANCE` supply defaults. Unless
  `--notabs` is given, `-p` is put in front of the files in `neovim_args`.
  `parse_args` and `build_parser` give the raw parse.
- `neovide.event_aggregator` — `EventAggregator` hands each event to a
  `queue.SimpleQueue` per event type. `register_event(event_type)` claims that
  queue (events sent before registering wait there); registering a type twice
  raises `EventTypeAlreadyRegistered`. Messages go through a `LoggingSender`,
  which logs each one. A shared instance is `EVENT_AGGREGATOR`.
- `neovide.bridge.redraw_events` — the typed events (`SetTitle`, `GridLine`,
  `Resize`, `CursorGoto`, `Scroll`, `WindowFloatPosition`, `WindowViewport`,
  `MessageShow`, `CommandLineShow`, …), plus `GridLineCell`, `GuiOption`,
  `MessageKind`, `EditorMode`, `WindowAnchor` and `ParseError`.
- `neovide.bridge.events` — `parse_redraw_event` turns one msgpack-decoded
  `[name, args...]` batch into a list of events. Unhandled names are skipped;
  a handled event with arguments of the wrong shape raises `ParseError`.
  Also `parse_style`, `parse_grid_line_cell`, `parse_styled_content`,
  `unpack_color`, `extract_values` and `extract_values_with_optional`.
- `neovide.bridge.clipboard` — `format_clipboard_contents(raw, file_format)`
  returns `[lines, "v" | "V"]` for Neovim's clipboard provider;
  `join_clipboard_lines(value, endline)` joins the lines Neovim sends.
- `neovide.bridge.command` — `create_nvim_command(settings)` finds a working
  `nvim` (or the binary from `--neovim-bin`, through a shell on macOS or WSL)
  by running it with `-v`, and returns the argv that starts it with `--embed`.
  It raises `NeovimNotFoundError` when none is found.
- `neovide.editor.style` — `Color`, `Colors`, `UnderlineStyle` and `Style`
  with `foreground`, `background` and `special` that honour `reverse` and
  fall back to default colours.
- `neovide.editor.cursor` — `CursorShape`, `CursorMode` and `Cursor`
  (`foreground`, `background`, `alpha`, `change_mode`).
- `neovide.editor.grid` — `CharacterGrid` with `get_cell`, `set_cell`,
  `row`, `resize`, `clear` and `set_all_characters`.
- `neovide.editor.draw_command_batcher` — the draw commands (`WindowDraw`,
  `CloseWindow`, `ModeChanged`, `DefaultStyleChanged`, `UpdateCursor`,
  `FontChanged`, `LineSpaceChanged`) and `DrawCommandBatcher`, which queues
  them and sends each batch as a `list` through an `EventAggregator`.
- `neovide.editor.window` — `Window`, which writes `grid_line` cells
  (split into grapheme clusters), scrolls regions and queues
  `PositionCommand`, `DrawLineCommand` (of `LineFragment`s), `ScrollCommand`,
  `ClearCommand`, `ShowCommand`, `HideCommand`, `CloseCommand` and
  `ViewportCommand`; plus `AnchorInfo` and `WindowType`.

## Examples

```python
from neovide.dimensions import Dimensions
from neovide.frame import Frame

size = Dimensions.from_str("42x24")
print(size.width, size.height)   # 42 24
print(str(size))                 # 42x24
print(Frame.parse("none"))       # none
```

```python
from neovide.cmd_line import handle_command_line_arguments

settings = handle_command_line_arguments(
    ["neovide", "./foo.txt", "--geometry=42x24", "--", "--clean"], env={}
)
print(settings.neovim_args)   # ['-p', './foo.txt', '--clean']
print(settings.geometry)      # 42x24
```

```python
from neovide.bridge.events import parse_redraw_event
from neovide.bridge.redraw_events import Resize

events = parse_redraw_event(["grid_resize", [1, 80, 24]])
assert events == [Resize(grid=1, width=80, height=24)]
```

```python
from neovide.editor.grid import CharacterGrid

grid = CharacterGrid((3, 2))
grid.set_cell(1, 0, ("a", None))
print(grid.get_cell(1, 0))   # ('a', None)
print(grid.get_cell(5, 5))   # None: outside the grid
```

```python
from neovide.event_aggregator import EventAggregator
from neovide.editor.draw_command_batcher import DrawCommandBatcher
from neovide.editor.window import Window, WindowType

aggregator = EventAggregator()
batches = aggregator.register_event(list)
batcher = DrawCommandBatcher(aggregator)
window = Window(1, WindowType.EDITOR, None, (0.0, 0.0), (10, 2), batcher)
window.show()
batcher.send_batch()
print(batches.get())   # [WindowDraw(...PositionCommand...), WindowDraw(...ShowCommand...)]
```

## What it does not do

There is no editor object that applies parsed redraw events to windows and
the cursor, and no command to run. The package does not connect to Neovim
over msgpack-RPC, does not start the Neovim process itself
(`create_nvim_command` only returns the argv), does not read or write the
system clipboard, and does not open a window or render anything: it stops at
producing draw commands.

## Tests

The tests use pytest, installed with the `test` extra:

```
pip install -e .[test]
pytest
```