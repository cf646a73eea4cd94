"""Tests for type definitions and configuration."""

from __future__ import annotations

import logging

import pytest

from sprite_animations import Animation, AnimationDefaults, Size, configure_logging
from sprite_animations.types.values import to_bool, to_float, to_int


class TestSize:
    """Tests for Size."""

    def test_from_tuple(self):
        """Test creating a size from a tuple."""
        size = Size.from_tuple((32, 24))
        assert size.width == 32
        assert size.height == 24
        assert size.to_tuple() == (32, 24)

    def test_copy(self):
        """Test copying a size."""
        size = Size(10, 20)
        size_copy = size.copy()
        size_copy.width = 30
        assert size.width == 10


class TestAnimation:
    """Tests for Animation."""

    def test_defaults(self):
        """Test animation default values."""
        anim = Animation(name="idle")
        assert anim.fps == 4
        assert anim.frame_count == 1
        assert anim.frame_rect() == (0, 0, 0, 0)
        assert anim.reverse is False

    def test_equality_is_by_name(self):
        """Test two animations with the same name compare equal."""
        a = Animation(name="walk", fps=4)
        b = Animation(name="walk", fps=12)
        c = Animation(name="run")
        assert a == b
        assert a is not b
        assert a != c

    def test_setters(self):
        """Test the geometry setters."""
        anim = Animation()
        anim.set_name("attack")
        anim.set_fps(10)
        anim.set_frame_count(6)
        anim.set_frame_x(32)
        anim.set_frame_y(64)
        anim.set_frame_width(16)
        anim.set_frame_height(24)
        anim.set_reverse(True)
        assert anim.get_name() == "attack"
        assert anim.fps == 10
        assert anim.frame_count == 6
        assert anim.frame_rect() == (32, 64, 16, 24)
        assert anim.reverse is True

    def test_write_uses_document_keys(self):
        """Test write produces the sub-document keys."""
        anim = Animation(name="walk", fps=8, frame_count=3, frame_x=1, frame_y=2, frame_width=5, frame_height=6)
        data = {}
        anim.write(data)
        assert data == {
            "name": "walk",
            "fps": 8,
            "frameCount": 3,
            "frameX": 1,
            "frameY": 2,
            "frameWidth": 5,
            "frameHeight": 6,
            "reverse": False,
        }

    def test_from_dict_fills_missing_keys(self):
        """Test reading a partial sub-document."""
        anim = Animation.from_dict({"name": "blink", "frameCount": 3})
        assert anim.name == "blink"
        assert anim.frame_count == 3
        assert anim.fps == 4
        assert anim.frame_width == 0

    def test_from_dict_with_null_values(self):
        """Test null and non-numeric fields fall back to defaults."""
        anim = Animation.from_dict(
            {"name": None, "fps": None, "frameCount": "3", "frameX": 2.0, "reverse": None}
        )
        assert anim.name == ""
        assert anim.fps == 4
        assert anim.frame_count == 1
        assert anim.frame_x == 2
        assert anim.reverse is False

    def test_equal_animations_are_not_hashable(self):
        """Test name equality is not paired with an identity hash."""
        a = Animation(name="walk")
        b = Animation(name="walk")
        assert a == b
        with pytest.raises(TypeError):
            hash(a)
        with pytest.raises(TypeError):
            {a}
        assert a in [b]


class TestJsonValues:
    """Tests for lenient document value conversion."""

    def test_to_int(self):
        """Test numbers convert and everything else gives the default."""
        assert to_int(5) == 5
        assert to_int(5.9) == 5
        assert to_int(True) == 1
        assert to_int(None) == 0
        assert to_int("5", 7) == 7

    def test_to_float(self):
        """Test numbers convert and everything else gives the default."""
        assert to_float(2) == 2.0
        assert to_float(None) == 0.0
        assert to_float([], 1.5) == 1.5

    def test_to_bool(self):
        """Test only real booleans are accepted."""
        assert to_bool(True) is True
        assert to_bool(None, True) is True
        assert to_bool(1) is False


class TestAnimationDefaults:
    """Tests for AnimationDefaults."""

    def test_frame_count_for_width(self):
        """Test wide canvases get several frames."""
        defaults = AnimationDefaults()
        assert defaults.frame_count_for_width(8) == 4
        assert defaults.frame_count_for_width(100) == 4
        assert defaults.frame_count_for_width(7) == 1
        assert defaults.frame_count_for_width(0) == 1

    def test_name_for(self):
        """Test generated names."""
        assert AnimationDefaults().name_for(3) == "Animation 3"
        assert AnimationDefaults(name_template="Clip {}").name_for(1) == "Clip 1"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_from_name(self):
        """Test level names are accepted."""
        configure_logging("debug")
        package_logger = logging.getLogger("sprite_animations")
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

        configure_logging(logging.WARNING)
        assert package_logger.level == logging.WARNING
        assert len(package_logger.handlers) == 1

        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
