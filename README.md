# raycube

raycube is a small first-person maze explorer. It reads a `.cub` scene file
that names four wall textures, gives the floor and ceiling colours and draws
a grid map, then renders the maze in a 1280×720 window with grid raycasting.
Walls are textured and the faces hit along the y axis are drawn darker. A
compass in the top-right corner shows where north lies, with the north arrow
in red.

## Installing

```
pip install .
```

This installs the `raycube` command. The window is drawn with pygame and
textures are read with Pillow.

## Running

```
raycube path/to/scene.cub
raycube path/to/scene.cub -d
```

The scene path must end in `.cub`. A second argument must start with `-d`.
It turns on debug mode. In debug mode the parsed configuration, the map and the
player state are printed at start-up, and the frame rate is printed about
once a second.

When the arguments or the scene are wrong, the command prints a message
beginning with `Error` to standard error and exits with status 1.

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe              |
| Left / Right | turn                |
| Esc          | quit                |

Closing the window also quits. When a move would run into a wall, the player
slides along it.

## Scene files

A scene file starts with six configuration lines. They may come in any
order, may be indented with spaces and may be separated by blank lines:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name texture files. Each must be readable and
  have an `.xpm` extension. Pillow must also be able to open it.
  Textures whose height is a power of two map exactly onto the walls.
- `F` and `C` give the floor and ceiling colours as exactly three
  comma-separated decimal values from 0 to 255. Spaces around a value are
  allowed.
- Each key must appear exactly once. An unknown line or a repeated key is an
  error.

The map follows the configuration. Blank lines between the configuration and
the map are skipped. Inside the map, and after it, blank lines are rejected.
The map uses these characters:

- `1` for a wall
- `0` for floor
- a space for empty area
- exactly one of `N`, `S`, `E` or `W` for the player's start and facing

Every floor or start cell must have a non-space cell above, below, left and
right of it. Such a cell may not lie on the border of the map. A map may be
at most 100 rows high and 100 columns wide. Shorter rows are padded with
spaces.

```
111111
100001
10N001
111111
```

## Using it as a library

Load and validate a scene:

```python
from raycube.scene import load_scene, parse_scene

scene = load_scene("maps/simple.cub")        # from a file
scene = parse_scene(lines)                   # from a list of lines
print(scene.config.floor, scene.width, scene.height)
```

Problems are raised as `raycube.textutil.CubError`. Configuration problems
raise its subclass `raycube.config.ConfigError`, and map problems raise
`raycube.mapgrid.MapError`.

Render frames without opening a window:

```python
from raycube.app import Game
from raycube.render import WallTextures

game = Game(scene, WallTextures.load(scene.config))
game.handle_key("w", pressed=True)
frame = game.frame()          # a raycube.framebuffer.FrameBuffer
colour = frame.get_pixel(640, 360)
```

`Game.run()` opens the pygame window and runs the frame loop. The building
blocks can also be used on their own:

- `raycube.raycast.cast_ray`
- `raycube.render.render_walls`
- `raycube.compass.draw_compass`
- `raycube.player.Player`

`raycube.framebuffer.FrameBuffer` stores pixels as `0xRRGGBB` integers.

## Limitations

raycube is only for exploring a maze. There is no mouse look, minimap,
doors, sprites, enemies or sound, and it cannot save games or progress.