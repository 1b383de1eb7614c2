import pytest

from raycube.config import (
    ConfigError,
    ConfigKind,
    SceneConfig,
    config_kind,
    extract_value,
    is_valid_texture_path,
    parse_color,
    parse_config,
)
from raycube.textutil import CubError


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "west", "east"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("xpm")
        paths[name] = str(path)
    return paths


def header(paths):
    return [
        f"NO {paths['north']}",
        f"SO {paths['south']}",
        f"WE {paths['west']}",
        f"EA {paths['east']}",
        "F 220,100,0",
        "C 225,30,0",
    ]


@pytest.mark.parametrize(
    "line, kind",
    [
        ("NO ./a.xpm", ConfigKind.NO),
        ("SO ./a.xpm", ConfigKind.SO),
        ("WE ./a.xpm", ConfigKind.WE),
        ("EA ./a.xpm", ConfigKind.EA),
        ("F 1,2,3", ConfigKind.F),
        ("   C 1,2,3", ConfigKind.C),
    ],
)
def test_config_kind_recognises_identifiers(line, kind):
    assert config_kind(line) is kind


@pytest.mark.parametrize("line", ["NOx", "N O a", "NO", "X 1", "\tNO a", "111"])
def test_config_kind_rejects_others(line):
    assert config_kind(line) is None


def test_extract_value():
    assert extract_value("NO  ./path.xpm") == "./path.xpm"
    assert extract_value("  F   1,2,3 ") == "1,2,3 "
    assert extract_value("NO") is None
    assert extract_value("NO   ") is None


def test_parse_color_valid():
    assert parse_color("220,100,0") == (220, 100, 0)
    assert parse_color(" 1 , 2 ,3 ") == (1, 2, 3)
    assert parse_color("255,255,255") == (255, 255, 255)


@pytest.mark.parametrize(
    "text",
    ["256,0,0", "1,2", "1,2,3,4", "a,b,c", "-1,2,3", "+1,2,3", "1,,2,", "1, ,3", ",1,2,3", "1 2,3,4"],
)
def test_parse_color_invalid(text):
    with pytest.raises(ConfigError):
        parse_color(text)


def test_config_error_is_cub_error():
    with pytest.raises(CubError):
        parse_color("nope")


def test_is_valid_texture_path(tmp_path, textures):
    assert is_valid_texture_path(textures["north"])
    other = tmp_path / "north.png"
    other.write_text("png")
    assert not is_valid_texture_path(str(other))
    assert not is_valid_texture_path(str(tmp_path / "missing.xpm"))


def test_scene_config_is_complete():
    config = SceneConfig()
    assert not config.is_complete()
    config = SceneConfig("n", "s", "w", "e", (0, 0, 0), (1, 1, 1))
    assert config.is_complete()
    config.ceiling = None
    assert not config.is_complete()


def test_parse_config_reads_everything(textures):
    lines = header(textures) + ["", "  ", "1111", "1N01", "1111"]
    config = parse_config(lines)
    assert config.north == textures["north"]
    assert config.east == textures["east"]
    assert config.floor == (220, 100, 0)
    assert config.ceiling == (225, 30, 0)
    assert lines[config.map_start] == "1111"


def test_parse_config_allows_blank_lines_and_any_order(textures):
    lines = header(textures)[::-1]
    lines.insert(2, "")
    lines += ["111"]
    config = parse_config(lines)
    assert config.is_complete()
    assert config.map_start == len(lines) - 1


def test_parse_config_duplicate(textures):
    lines = header(textures)
    lines.insert(1, f"NO {textures['north']}")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        parse_config(lines + ["111"])


def test_parse_config_unknown_line(textures):
    lines = ["R 1920 1080"] + header(textures) + ["111"]
    with pytest.raises(ConfigError, match="Invalid configuration"):
        parse_config(lines)


def test_parse_config_missing_entry(textures):
    with pytest.raises(ConfigError, match="Missing or duplicate"):
        parse_config(header(textures)[:5])


def test_parse_config_bad_texture(tmp_path, textures):
    lines = header(textures)
    lines[0] = f"NO {tmp_path / 'absent.xpm'}"
    with pytest.raises(ConfigError, match="Invalid configuration"):
        parse_config(lines + ["111"])


def test_parse_config_bad_color(textures):
    lines = header(textures)
    lines[4] = "F 300,0,0"
    with pytest.raises(ConfigError, match="Invalid configuration"):
        parse_config(lines + ["111"])


def test_parse_config_header_ending_at_last_line(textures):
    with pytest.raises(ConfigError, match="No valid lines"):
        parse_config(header(textures))


def test_parse_config_only_blank_after_header(textures):
    lines = header(textures) + ["", ""]
    config = parse_config(lines)
    assert config.map_start == len(lines)