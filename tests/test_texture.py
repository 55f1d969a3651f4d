from pathlib import Path

import pytest

from mengine_core.identifiers import UUID
from mengine_core.texture import Texture2D


def test_texture_defaults():
    texture = Texture2D()
    assert texture.name == "DefaultTexture2D"
    assert texture.image_path is None
    assert (texture.width, texture.height, texture.channels) == (0, 0, 0)
    assert texture.pixels is None
    assert not texture.id.is_empty()


def test_to_json_with_no_path():
    texture = Texture2D()
    data = texture.to_json()
    assert data["imagePath"] == ""
    assert data["id"] == str(texture.id)
    assert data["name"] == "DefaultTexture2D"
    assert (data["width"], data["height"], data["channels"]) == (0, 0, 0)


def test_round_trip():
    texture = Texture2D()
    texture.name = "bricks"
    texture.image_path = Path("textures") / "bricks.png"
    texture.width = 256
    texture.height = 128
    texture.channels = 4
    copy = Texture2D.from_json(texture.to_json())
    assert copy.id == texture.id
    assert copy.name == "bricks"
    assert copy.image_path == texture.image_path
    assert (copy.width, copy.height, copy.channels) == (256, 128, 4)


def test_empty_path_reads_back_as_none():
    texture = Texture2D()
    texture.image_path = Path("a.png")
    texture.load_json(
        {"id": str(UUID(1, 2)), "name": "t", "imagePath": "", "width": 1, "height": 1, "channels": 4}
    )
    assert texture.image_path is None
    assert texture.id == UUID(1, 2)


def test_negative_size_raises():
    data = Texture2D().to_json()
    data["width"] = -1
    with pytest.raises(ValueError):
        Texture2D.from_json(data)


def test_non_integer_size_raises():
    data = Texture2D().to_json()
    data["height"] = "tall"
    with pytest.raises(TypeError):
        Texture2D.from_json(data)


def test_missing_image_path_raises():
    data = Texture2D().to_json()
    del data["imagePath"]
    with pytest.raises(KeyError):
        Texture2D.from_json(data)


def test_failed_load_keeps_previous_values():
    texture = Texture2D()
    texture.width = 32
    data = texture.to_json()
    data["channels"] = 1.5
    with pytest.raises(TypeError):
        texture.load_json(data)
    assert texture.width == 32
    assert texture.channels == 0