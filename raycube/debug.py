"""Debug reports on the loaded scene, the player and the frame rate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .config import SceneConfig
from .player import Action, Player

_NO_COLOR = (0, 0, 0)


def _flag(player: Player, action: Action) -> int:
    return int(action in player.actions)


def format_config(
    config: SceneConfig, map_width: int, map_height: int, tile_size: int, debug: bool
) -> str:
    """The configuration report, ready to be written as is."""
    top = config.ceiling or _NO_COLOR
    bottom = config.floor or _NO_COLOR
    lines = [
        "",
        "===== CONFIGURATION =====",
        f"Ceiling color: R:{top[0]}, G:{top[1]}, B:{top[2]}",
        f"Floor color:   R:{bottom[0]}, G:{bottom[1]}, B:{bottom[2]}",
        f"Map dimensions: Width: {map_width}, Height: {map_height}",
        f"Tile size: {tile_size}",
        f"Debug mode: {'ON' if debug else 'OFF'}",
        "==========================",
    ]
    return "\n".join(lines) + "\n"


def format_map(grid: Iterable[str]) -> str:
    """The map report: every row of the grid between two rulers."""
    lines = ["", "===== MAP =====", *grid, "================"]
    return "\n".join(lines) + "\n"


def format_player(player: Player) -> str:
    """The player report: position, angle, helpers and held inputs."""
    lines = [
        "",
        "===== PLAYER =====",
        f"Position: X:{player.x:.2f}, Y:{player.y:.2f}",
        f"Angle: {player.angle:.2f}",
        f"Ray X: {player.ray_x:.2f}, Ray Y: {player.ray_y:.2f}",
        f"Temporary Position: X:{player.tmp_x:.2f}, Y:{player.tmp_y:.2f}",
        f"Ray Offset: {player.ray_offset:.2f}",
        "Movement: Up: {}, Down: {}, Left: {}, Right: {}".format(
            _flag(player, Action.UP),
            _flag(player, Action.DOWN),
            _flag(player, Action.LEFT),
            _flag(player, Action.RIGHT),
        ),
        "Rotation: Left: {}, Right: {}".format(
            _flag(player, Action.ROTATE_LEFT), _flag(player, Action.ROTATE_RIGHT)
        ),
        f"Player size: {player.size}",
        "===================",
    ]
    return "\n".join(lines) + "\n"


@dataclass
class FpsCounter:
    """Counts frames and reports the rate roughly once per second."""

    last_time: float | None = None
    frame_count: int = 0
    fps: float = 0.0

    def tick(self, now: float) -> float | None:
        """Record one frame at time now (seconds).

        Returns the new frame rate when at least a second has passed since
        the last report, otherwise None.
        """
        self.frame_count += 1
        if self.last_time is None:
            self.last_time = now
            return None
        elapsed = now - self.last_time
        if elapsed < 1.0:
            return None
        self.fps = self.frame_count / elapsed
        self.frame_count = 0
        self.last_time = now
        return self.fps