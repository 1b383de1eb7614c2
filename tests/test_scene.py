import pytest

from raycube.config import ConfigError
from raycube.mapgrid import MapError
from raycube.scene import load_scene, parse_scene
from raycube.textutil import CubError


@pytest.fixture
def header(tmp_path):
    paths = {}
    for name in ("no", "so", "we", "ea"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("xpm")
        paths[name] = str(path)
    return [
        f"NO {paths['no']}",
        f"SO {paths['so']}",
        f"WE {paths['we']}",
        f"EA {paths['ea']}",
        "F 220,100,0",
        "C 225,30,0",
    ]


MAP = ["1111111", "10N01", "1111111"]


def test_parse_scene(header):
    scene = parse_scene(header + [""] + MAP)
    assert scene.grid == normalize_expected(MAP)
    assert scene.config.floor == (220, 100, 0)
    assert scene.config.ceiling == (225, 30, 0)
    assert scene.width == len(MAP[0])
    assert scene.height == len(MAP)


def normalize_expected(rows):
    width = max(len(row) for row in rows)
    return [row + " " * (width - len(row)) for row in rows]


def test_parse_scene_empty():
    with pytest.raises(CubError, match="Failed to get map"):
        parse_scene([])


def test_parse_scene_map_not_found(header):
    with pytest.raises(MapError, match="Map not found"):
        parse_scene(header + ["", ""])


def test_parse_scene_invalid_map(header):
    with pytest.raises(MapError, match="not closed"):
        parse_scene(header + ["", "1111", "10N0", "1111"])


def test_parse_scene_trailing_blank_line_in_map(header):
    with pytest.raises(MapError, match="Invalid character"):
        parse_scene(header + [""] + MAP + [""])


def test_parse_scene_invalid_config(header):
    with pytest.raises(ConfigError):
        parse_scene(header[1:] + ["", *MAP])


def test_load_scene_from_file(tmp_path, header):
    path = tmp_path / "level.cub"
    path.write_text("\n".join(header + ["", *MAP]) + "\n")
    scene = load_scene(path)
    assert scene.grid == normalize_expected(MAP)
    assert scene.config.north == header[0][3:]


def test_load_scene_wrong_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("111\n")
    with pytest.raises(CubError, match="extension"):
        load_scene(path)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(CubError, match="Failed to get map"):
        load_scene(tmp_path / "absent.cub")