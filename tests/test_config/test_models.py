"""Tests for plugdesc configuration models."""

import pytest
from pydantic import ValidationError

from plugdesc.config import SerializerOptions


class TestSerializerOptions:
    def test_defaults(self):
        options = SerializerOptions()
        assert options.symmetric is False
        assert options.indent == 2

    def test_indent_bounds(self):
        with pytest.raises(ValidationError):
            SerializerOptions(indent=1)
        with pytest.raises(ValidationError):
            SerializerOptions(indent=10)
