# cubraycast

A small first-person maze explorer. It reads a `.cub` scene file that names
the wall textures, sets the floor and ceiling colours and draws a map. It then
renders the maze with textured raycasting in an 800×600 pygame window.

## Installing

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Running

```
cubraycast path/to/scene.cub
cubraycast path/to/scene.cub --debug
```

The command takes one scene file. It also takes an optional second argument
that starts with `--debug`. With debug on, the program prints
`Debug mode enabled`, then a dump of the parsed game state. While playing it
also prints player moves, turns and rendering details to standard output.

Exit status:

| Status | Meaning                                         |
|--------|-------------------------------------------------|
| 0      | the player quit                                 |
| 2      | wrong number of arguments (usage on stderr)     |
| 3      | the scene file could not be read or is invalid  |
| 4      | the window could not be opened                  |
| 5      | the scene could not be drawn                    |

When a scene file is rejected, the reason goes to standard error after a line
reading `Error`, and `Parser error` goes to standard output.

### Controls

| Key         | Action              |
|-------------|---------------------|
| W / S       | move forward / back |
| A / D       | strafe left / right |
| Left arrow  | turn left           |
| Right arrow | turn right          |
| Esc         | quit                |

Closing the window also quits. The player can step only onto `0` cells.

## Scene file format

The file name must end in `.cub`. Settings come first, in any order, and the
map comes last:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220 100 0
C 225 30 0

111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE`, `EA` name the image for each wall face. Each must appear
  exactly once. Pillow loads the images, so any format it can open will work,
  XPM included.
- `F` and `C` set the floor and ceiling colours. Each needs exactly three
  space-separated integers from 0 to 255, and both must be given.
- The map uses `1` for walls, `0` for floor and spaces. It must hold exactly
  one `N`, `S`, `E` or `W`, which marks where the player starts and which way
  it faces. Shorter rows are padded with spaces. Every cell reachable from the
  start without crossing a wall must lie inside the map, or the map is
  rejected.
- Empty or blank lines are ignored before the map. Once the map has started,
  every line must be a map line, so empty lines and settings are not allowed
  there.

## Using it as a library

```python
from cubraycast.config import new_game
from cubraycast.parser import parse_file
from cubraycast.raycast import Frame, render_view
from cubraycast.movement import Key, apply_key

game = new_game(0)
parse_file("scene.cub", game)      # raises cubraycast.config.ParseError
apply_key(game, Key.W)             # True: the view changed
frame = render_view(game, Frame()) # 800x600 pixels as 0xRRGGBB ints
print(hex(frame.get(400, 10)))
```

Other useful pieces:

- `cubraycast.lines.identify_line_type` classifies a single line of a scene
  file.
- `cubraycast.colors.parse_color_line` parses a colour line.
- `cubraycast.textures.parse_texture` parses a texture line.
- `cubraycast.mapgrid` validates the map and places the player.
- `cubraycast.debug.format_game` returns the same text dump that `--debug`
  prints.

## What it does not do

The game renders walls, floor and ceiling only. It has no minimap, sprites,
doors or mouse look. Everything it can do is listed in the controls table.