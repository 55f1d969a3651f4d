import json

import pytest
from PIL import Image

from mengine_core.identifiers import UUID
from mengine_core.texture import Texture2D
from mengine_core.texture_repository import Texture2DRepository, checker_board


def _pixel(data, width, x, y):
    start = (y * width + x) * 4
    return tuple(data[start:start + 4])


@pytest.fixture
def repo():
    return Texture2DRepository()


@pytest.fixture
def png(tmp_path):
    path = tmp_path / "image.png"
    image = Image.new("RGBA", (2, 3))
    image.putpixel((0, 0), (10, 20, 30, 255))
    image.putpixel((0, 2), (200, 100, 50, 255))
    image.save(path)
    return path


def test_checker_board_layout():
    width, height, grid = 16, 16, 4
    data = checker_board(width, height, grid)
    assert len(data) == width * height * 4
    assert _pixel(data, width, 0, 0) == (255, 255, 255, 255)
    assert _pixel(data, width, 4, 0) == (0, 0, 0, 255)
    assert _pixel(data, width, 0, 4) == (0, 0, 0, 255)
    assert _pixel(data, width, 4, 4) == (255, 255, 255, 255)
    assert all(value == 255 for value in data[3::4])


def test_checker_board_tiles_are_uniform():
    data = checker_board(8, 8, 2)
    tile = {_pixel(data, 8, x, y) for x in range(4) for y in range(4)}
    assert tile == {(255, 255, 255, 255)}


def test_checker_board_rejects_too_fine_grid():
    with pytest.raises(ValueError):
        checker_board(2, 2, 8)


def test_default_texture_under_empty_id(repo):
    assert len(repo) == 1
    default = repo.get(UUID())
    assert default.width == 4096
    assert default.height == 4096
    assert default.channels == 4
    assert default.pixels == checker_board()
    assert default.name == "DefaultTexture2D"


def test_create_uses_checker_board(repo):
    texture = repo.create()
    assert repo.get(texture.id) is texture
    assert len(texture.pixels) == texture.width * texture.height * texture.channels
    assert _pixel(texture.pixels, texture.width, 0, 0) == (255, 255, 255, 255)
    assert len(repo) == 2


def test_check_path(repo, tmp_path, png):
    other = tmp_path / "image.jpg"
    other.write_bytes(b"x")
    assert repo.check_path(png) is True
    assert repo.check_path("") is False
    assert repo.check_path(None) is False
    assert repo.check_path(tmp_path / "missing.png") is False
    assert repo.check_path(tmp_path) is False
    assert repo.check_path(other) is False


def test_update_loads_flipped_image(repo, png):
    texture = repo.create()
    delta = Texture2D()
    delta.image_path = png
    repo.update(texture.id, delta)
    assert (texture.width, texture.height, texture.channels) == (2, 3, 4)
    assert texture.image_path == png
    assert len(texture.pixels) == 2 * 3 * 4
    assert _pixel(texture.pixels, 2, 0, 0) == (200, 100, 50, 255)
    assert _pixel(texture.pixels, 2, 0, 2) == (10, 20, 30, 255)


def test_update_rejects_invalid_path(repo):
    texture = repo.create()
    with pytest.raises(ValueError):
        repo.update(texture.id, Texture2D())
    assert texture.width == 4096


def test_update_missing_id(repo, png):
    delta = Texture2D()
    delta.image_path = png
    with pytest.raises(KeyError):
        repo.update(UUID(1, 2), delta)


def test_update_unreadable_image(repo, tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    texture = repo.create()
    delta = Texture2D()
    delta.image_path = bad
    with pytest.raises(ValueError):
        repo.update(texture.id, delta)


def test_load_from_file(repo, tmp_path, png):
    description = Texture2D()
    description.image_path = png
    description.name = "bricks"
    target = tmp_path / "bricks.png"
    target.write_text(json.dumps(description.to_json()))

    loaded = repo.load_from_file(target)
    assert loaded.id == description.id
    assert loaded.name == "bricks"
    assert (loaded.width, loaded.height) == (2, 3)
    assert repo.get(description.id) is loaded


def test_save_to_file_round_trip(repo, tmp_path, png):
    texture = repo.create()
    delta = Texture2D()
    delta.image_path = png
    repo.update(texture.id, delta)
    target = tmp_path / "saved.png"
    target.write_bytes(b"")
    repo.save_to_file(target, texture)
    assert json.loads(target.read_text()) == texture.to_json()