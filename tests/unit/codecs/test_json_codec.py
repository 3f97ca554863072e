"""Unit tests for the JSON codec."""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, Field

from restub.codecs import JSONCodec
from restub.exceptions import DecodingError, EncodingError


class User(BaseModel):
    id: int = 0
    name: str = ""


class Aliased(BaseModel):
    user_name: str = Field(default="", alias="userName")


@dataclass
class Point:
    x: int
    y: int


@pytest.fixture
def codec():
    return JSONCodec()


class TestEncode:
    def test_model(self, codec):
        """Pydantic models are encoded by field."""
        assert json.loads(codec.encode(User(id=7, name="Ada"))) == {"id": 7, "name": "Ada"}

    def test_dataclass(self, codec):
        """Dataclasses are encoded by field."""
        assert json.loads(codec.encode(Point(1, 2))) == {"x": 1, "y": 2}

    def test_mapping(self, codec):
        """Plain mappings are encoded as objects."""
        assert json.loads(codec.encode({"name": "Bob"})) == {"name": "Bob"}

    def test_aliases_are_used(self, codec):
        """Field aliases are used as JSON keys."""
        assert json.loads(codec.encode(Aliased(userName="ada"))) == {"userName": "ada"}

    def test_unserializable_value(self, codec):
        """Values pydantic cannot serialize raise EncodingError."""
        with pytest.raises(EncodingError):
            codec.encode({"handle": object()})


class TestDecode:
    def test_model(self, codec):
        """Bodies are validated into the target model."""
        assert codec.decode(b'{"id":7,"name":"Ada"}', User) == User(id=7, name="Ada")

    def test_generic_container(self, codec):
        """Container annotations are supported as targets."""
        assert codec.decode(b'[{"id":1},{"id":2}]', list[User]) == [User(id=1), User(id=2)]

    def test_dataclass(self, codec):
        """Dataclass targets are supported."""
        assert codec.decode(b'{"x":1,"y":2}', Point) == Point(1, 2)

    def test_malformed_json(self, codec):
        """Malformed JSON raises DecodingError."""
        with pytest.raises(DecodingError) as exc_info:
            codec.decode(b"{not json", User)
        assert exc_info.value.content_type == "application/json"

    def test_wrong_shape(self, codec):
        """JSON that does not match the target raises DecodingError."""
        with pytest.raises(DecodingError):
            codec.decode(b'{"id":"seven"}', User)
