"""The game: argument handling, the frame loop and the window."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from .compass import draw_compass
from .debug import FpsCounter, format_config, format_map, format_player
from .framebuffer import SCREEN_HEIGHT, SCREEN_WIDTH, FrameBuffer
from .player import Action, compute_tile_size, spawn_player
from .render import WallTextures, render_walls
from .scene import Scene, load_scene
from .textutil import CubError, check_extension

WINDOW_TITLE = "Cub3D"
QUIT_KEY = "escape"

KEY_ACTIONS = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "left": Action.ROTATE_LEFT,
    "right": Action.ROTATE_RIGHT,
}


def parse_args(argv: Sequence[str]) -> tuple[str, bool]:
    """Check the command-line arguments (program name excluded).

    Returns the scene path and whether debug mode is on.
    """
    args = list(argv)
    debug = False
    if len(args) == 2:
        if not args[1].startswith("-d"):
            raise CubError("Error: Invalid option. Use -d")
        debug = True
    elif len(args) != 1:
        raise CubError("Error: ./cub3d <map.cub> [-d]")
    if not check_extension(args[0], ".cub"):
        raise CubError("Error: Expected .cub extension")
    return args[0], debug


class Game:
    """A running scene: the player, the frame buffer and the textures."""

    def __init__(
        self,
        scene: Scene,
        textures: WallTextures,
        *,
        debug: bool = False,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.scene = scene
        self.textures = textures
        self.debug = debug
        self.tile_size = compute_tile_size(scene.grid)
        self.player = spawn_player(scene.grid, self.tile_size)
        self.frame_buffer = FrameBuffer(width, height)
        self.fps = FpsCounter()

    @classmethod
    def from_path(cls, path: str, debug: bool = False) -> Game:
        """Load a scene file and its textures."""
        scene = load_scene(path)
        return cls(scene, WallTextures.load(scene.config), debug=debug)

    def report(self) -> str:
        """The debug report on configuration, map and player."""
        return (
            format_config(
                self.scene.config,
                self.scene.width,
                self.scene.height,
                self.tile_size,
                self.debug,
            )
            + format_map(self.scene.grid)
            + format_player(self.player)
        )

    def handle_key(self, key: str, pressed: bool) -> bool:
        """React to a key given by name; returns False when the game should stop."""
        if key == QUIT_KEY:
            return not pressed
        action = KEY_ACTIONS.get(key)
        if action is not None:
            if pressed:
                self.player.press(action)
            else:
                self.player.release(action)
        return True

    def frame(self) -> FrameBuffer:
        """Advance the player one step and draw the view into the frame buffer."""
        if self.debug:
            rate = self.fps.tick(time.monotonic())
            if rate is not None:
                print(f"FPS: {rate:.2f}")
        self.player.update(self.scene.grid, self.tile_size)
        config = self.scene.config
        render_walls(
            self.frame_buffer,
            self.scene.grid,
            self.player,
            self.tile_size,
            self.textures,
            config.ceiling or (0, 0, 0),
            config.floor or (0, 0, 0),
        )
        draw_compass(self.frame_buffer, self.player.angle)
        return self.frame_buffer

    def run(self) -> None:
        """Open the window and run the frame loop until it is closed."""
        import pygame

        pygame.init()
        try:
            size = (self.frame_buffer.width, self.frame_buffer.height)
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(WINDOW_TITLE)
            surface = pygame.Surface(size, 0, 32, (0xFF0000, 0x00FF00, 0x0000FF, 0))
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                        name = pygame.key.name(event.key)
                        if not self.handle_key(name, event.type == pygame.KEYDOWN):
                            running = False
                if not running:
                    break
                self._present(self.frame(), surface)
                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()

    @staticmethod
    def _present(frame: FrameBuffer, surface) -> None:
        data = frame.pixels.tobytes()
        row_bytes = frame.width * frame.pixels.itemsize
        pitch = surface.get_pitch()
        proxy = surface.get_buffer()
        try:
            if pitch == row_bytes:
                proxy.write(data, 0)
            else:
                for y in range(frame.height):
                    start = y * row_bytes
                    proxy.write(data[start : start + row_bytes], y * pitch)
        finally:
            del proxy


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: load the scene given on the command line and play it."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path, debug = parse_args(argv)
        game = Game.from_path(path, debug=debug)
    except CubError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    if debug:
        print(game.report(), end="")
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())