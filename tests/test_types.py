"""Tests for coordinate types."""

import pytest
from pydantic import ValidationError

from timbermap.types import Vector2, Vector3


class TestVector2:
    """Tests for Vector2."""

    def test_creation(self):
        """Vector2 can be created with x and y."""
        v = Vector2(x=5, y=10)
        assert v.x == 5
        assert v.y == 10

    def test_immutable(self):
        """Vector2 is frozen."""
        v = Vector2(x=5, y=5)
        with pytest.raises(ValidationError):
            v.x = 6  # type: ignore

    def test_equality_and_hash(self):
        """Equal coordinates compare and hash equal."""
        assert Vector2(x=1, y=2) == Vector2(x=1, y=2)
        assert Vector2(x=1, y=2) != Vector2(x=2, y=1)
        assert len({Vector2(x=1, y=2), Vector2(x=1, y=2), Vector2(x=0, y=0)}) == 2

    def test_serializes_with_game_keys(self):
        """Keys are PascalCase when dumped by alias."""
        assert Vector2(x=3, y=4).model_dump(by_alias=True) == {"X": 3, "Y": 4}

    def test_accepts_game_keys(self):
        """Vector2 can be parsed from the game's keys."""
        assert Vector2.model_validate({"X": 3, "Y": 4}) == Vector2(x=3, y=4)

    def test_str(self):
        assert str(Vector2(x=3, y=7)) == "(3, 7)"


class TestVector3:
    """Tests for Vector3."""

    def test_serializes_flat(self):
        """Layer is serialized next to the planar components."""
        v = Vector3(x=1, y=2, z=3)
        assert v.model_dump_json(by_alias=True) == '{"X":1,"Y":2,"Z":3}'

    def test_from_vector2(self):
        """A planar coordinate can be lifted to a layer."""
        v = Vector3.from_vector2(Vector2(x=4, y=5), 2)
        assert v == Vector3(x=4, y=5, z=2)

    def test_is_vector2(self):
        """Vector3 composes Vector2."""
        assert isinstance(Vector3(x=0, y=0, z=0), Vector2)

    def test_hash_includes_layer(self):
        """Coordinates differing only in layer are distinct."""
        assert len({Vector3(x=1, y=1, z=1), Vector3(x=1, y=1, z=2)}) == 2

    def test_repr(self):
        assert repr(Vector3(x=1, y=2, z=3)) == "Vector3(x=1, y=2, z=3)"
