# pipinghot

Piping Hot is a pipe-routing puzzle game. Levels are maps made in Tiled and
saved as `.tmx` files. Each level is a grid of pipe tiles. Fluid enters at
source pipes and is meant to reach the sink pipes.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
pipinghot [ASSET_ROOT] [--step SECONDS]
```

`ASSET_ROOT` defaults to `assets`. Start-up checks that `models/pipe.glb` and
`fonts/Nunito-Black.ttf` exist under it. If either is missing, the command
prints which ones and exits with status 1.

The game is played as a text menu on standard input:

- The main menu shows the title and the buttons `Play | Options | Credits | Quit`.
  Type a label to press that button. `Play`, `Options` and `Credits` all open
  the level select. `Quit` exits.
- The level select lists levels `1-1` through `3-6`. Typing a name loads
  `levels/<name>.tmx` from the asset root and starts the game. If the level
  cannot be read or parsed, the error is printed and you stay in the menu.
- In game, each line you enter advances the game by `--step` seconds
  (default 1.0). Entering `q` quits. The status line shows the level name, the
  number of pipes placed and the game state.

An unknown label prints an error and the menu is shown again. End of input
also ends the game.

## Library use

- `pipinghot.pipes`: `pipe_archetypes()` maps Tiled tile ids to `Pipe`
  definitions:
  - 16: water input
  - 32: water output
  - 0: straight
  - 1: curved
  - 2: cork
  - 3: T piece

  A `Pipe` holds four `Slot`s (sides 0 to 3, clockwise from the top), its
  `InternalRouting` list and a model scene path from `scene_path(index)`.
  `Pipe.clone()` returns an independent copy.
- `pipinghot.level`: `load_level(path)` reads a `.tmx` file from disk.
  `parse_level(data, path, read_resource)` parses map bytes; `read_resource`
  is called with the path of each external tileset.
  - Tile data may be CSV, base64 (uncompressed, zlib or gzip) or XML `<tile>`
    elements. Infinite maps with chunks are also read.
  - Tile ids are local to their tileset. Empty cells become `15`.
  - The level name comes from the map's `level_name` string property and
    defaults to `Unnamed`.
  - The level's size is taken as square, sized by the map's width.
  - A malformed map, an unreadable file, or a map whose first layer is not a
    tile layer raises `LevelError`.

  `layout_tiles(level, archetypes)` returns a `TilePlacement` with a copy of
  the matching pipe for each tile. Tiles are placed 2 units apart and centred
  on the origin. Unknown tile ids are skipped with a logged warning.
- `pipinghot.game`: the `AppState` and `PipeGameState` enums, the one-shot
  `WarmupTimer`, and `GameSession`. A session starts in `WARMUP` and moves to
  `PREPARE` once one second has passed. `close()`, or leaving a `with` block,
  tears the session down.
- `pipinghot.menu`: the menu model. It has `Color`, `Interaction`,
  `MenuAction`, `Button` (`set_interaction` recolours the button and returns
  its action when pressed), `button`, `button_small`, `main_menu`,
  `level_select_menu` and `level_path`.
- `pipinghot.app`: `App(asset_root)` drives the state machine:
  - `press(label)` presses a button in the current menu. It raises
    `ValueError` if no button has that label.
  - `update(delta)` advances one frame and returns the current `AppState`.
  - `main(argv)` is the command above.

## What it does not do

There is no graphical display: no 3D scene, models, fonts or mouse input are
rendered or used. The asset files are only checked to exist. Gameplay stops at
the `PREPARE` state. Fluid does not flow, pipes cannot be moved, and levels are
never won or failed. The level select has no way back to the main menu.