# cubraycast

A compact raycasting engine for grid maps described in `.cub` files. It
reads wall texture paths, floor and ceiling colours and a map made of `1`
(wall), `0` (floor), spaces and a player start (`N`, `S`, `E` or `W`).
It then opens a pygame window that shows a first-person view with a
minimap drawn over it.

## Installation

```
pip install .
```

To work on it with the test suite:

```
pip install .[test]
pytest
```

## Running

```
cubraycast maps/test.cub
```

The program prints the texture paths and colours it stored, a short help
line and the starting position, and then opens an 800×600 window. It
exits with status 1 and an error message when:

- the name does not end in `.cub`;
- the file cannot be opened;
- no map section is found;
- the map has no player start;
- the first or last row is not all walls, or a row does not begin and
  end with a wall;
- the map holds a character other than `0`, `1`, space, `N`, `S`, `E`
  or `W`;
- a colour line has fewer than three components;
- no window can be opened.

Running it with no map argument, or with more than one, prints a usage
line and exits with status 1.

Controls:

| Key          | Action             |
|--------------|--------------------|
| `W` / `S`    | move forward/back  |
| `A` / `D`    | strafe left/right  |
| `←` / `→`    | turn               |
| `Esc`        | quit               |

Movement is blocked by any cell that is not `0` or a direction letter,
and by the edges of the map.

## The `.cub` format

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
111111
100001
10N001
111111
```

Only the first 999 bytes of a file are read. Lines that start with
`NO`, `SO`, `WE` or `EA` give texture paths (the text from the fourth
character on). Lines that start with `F ` or `C ` give floor and ceiling
colours as `R,G,B`. The first other non-empty line that starts with
neither a space nor one of `N S W E F C` begins the map, and the map runs
to the end of the file. The player starts in the centre of the first
direction letter found, facing east (`E`, 0°), south (`S`, 90°), west
(`W`, 180°) or north (`N`, 270°); that cell then becomes floor.

## Using it as a library

```python
from cubraycast.game import Game
from cubraycast.parsing import parse_and_validate_cub_file, MapError
from cubraycast.render import Image, render_frame

game = Game()
try:
    parse_and_validate_cub_file("maps/test.cub", game)
except MapError as err:
    print(err)
else:
    image = Image(800, 600)
    render_frame(game, image)
    print(hex(image.get_pixel(400, 300)))
```

- `cubraycast.game`: the `Game`, `Player`, `Textures` and `Colors`
  dataclasses and the engine constants.
- `cubraycast.parsing`: `parse_cub_text`, `parse_cub_file`,
  `find_player_position`, the `validate_*` checks,
  `parse_and_validate_cub_file` and the `MapError` exception.
- `cubraycast.movements`: `is_walkable`, `rotate_player`,
  `move_forward_backward`, `move_left_right`.
- `cubraycast.colors`: `parse_rgb_color`, `floor_color`,
  `ceiling_color` (32-bit RGBA with full opacity).
- `cubraycast.render`: the `Image` pixel buffer, `clear_image`,
  `draw_vertical_line`, `cast_ray`, `raycast_and_render`,
  `draw_minimap` and `render_frame`.
- `cubraycast.app`: `key_action`, `apply_action`, `format_parsed_data`,
  `run` and the `main` command.

The package also includes small text and data helpers with C-library
semantics: `cubraycast.strings`, `cubraycast.conversions`,
`cubraycast.chars`, `cubraycast.memory`, `cubraycast.fdio`,
`cubraycast.linkedlist` (`LinkedList`, `Node`) and
`cubraycast.linereader` (`LineReader`, `read_map_lines`).

## What it does not do

Texture paths are read and stored but no texture images are loaded:
every wall is drawn in one flat grey, and the floor and ceiling in their
plain colours. There is no sound, no sprites or doors, and no mouse
control.