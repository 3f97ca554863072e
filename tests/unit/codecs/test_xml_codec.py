"""Unit tests for the XML codec."""

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel

from restub.codecs import XMLCodec
from restub.exceptions import DecodingError, EncodingError


class Address(BaseModel):
    city: str = ""


class User(BaseModel):
    id: int = 0
    name: str = ""
    active: bool = False
    tags: list[str] = []
    address: Address | None = None


class Team(BaseModel):
    name: str = ""
    members: list[User] = []


@dataclass
class Point:
    x: int = 0
    y: int = 0
    labels: list[str] = field(default_factory=list)


@pytest.fixture
def codec():
    return XMLCodec()


class TestEncode:
    def test_root_element_named_after_class(self, codec):
        """The root element is the value's class name."""
        body = codec.encode(User(id=7, name="Ada")).decode()
        assert body.startswith("<User>")
        assert "<id>7</id>" in body
        assert "<name>Ada</name>" in body

    def test_booleans_are_lower_case(self, codec):
        """Booleans are written as true/false."""
        assert "<active>true</active>" in codec.encode(User(active=True)).decode()

    def test_sequences_repeat_elements(self, codec):
        """List fields become repeated elements."""
        body = codec.encode(User(tags=["a", "b"])).decode()
        assert "<tags>a</tags><tags>b</tags>" in body

    def test_none_fields_are_omitted(self, codec):
        """Fields set to None produce no element."""
        assert "<address>" not in codec.encode(User()).decode()

    def test_dataclass(self, codec):
        """Dataclasses are encoded like models."""
        body = codec.encode(Point(1, 2)).decode()
        assert body.startswith("<Point>")
        assert "<x>1</x>" in body

    def test_mapping_rejected(self, codec):
        """Mappings have no root element name."""
        with pytest.raises(EncodingError, match="root element"):
            codec.encode({"name": "Bob"})


class TestDecode:
    def test_scalar_fields_are_coerced(self, codec):
        """Element text is coerced into the declared field types."""
        user = codec.decode(b"<User><id>7</id><name>Ada</name><active>true</active></User>", User)
        assert user == User(id=7, name="Ada", active=True)

    def test_single_item_list(self, codec):
        """A single repeated element still decodes into a list field."""
        user = codec.decode(b"<User><tags>solo</tags></User>", User)
        assert user.tags == ["solo"]

    def test_nested_model(self, codec):
        """Nested elements decode into nested models."""
        user = codec.decode(b"<User><address><city>Paris</city></address></User>", User)
        assert user.address == Address(city="Paris")

    def test_nested_lists(self, codec):
        """List fields inside list items are forced to lists too."""
        team = codec.decode(
            b"<Team><name>core</name><members><id>1</id><tags>x</tags></members></Team>", Team
        )
        assert team.members == [User(id=1, tags=["x"])]

    def test_root_list_target(self, codec):
        """list[T] targets read the root's children as items."""
        users = codec.decode(b"<Users><User><id>1</id></User></Users>", list[User])
        assert users == [User(id=1)]

    def test_empty_root(self, codec):
        """An empty root element decodes to a default model."""
        assert codec.decode(b"<User/>", User) == User()

    def test_dataclass_target(self, codec):
        """Dataclass targets are supported, including list fields."""
        point = codec.decode(b"<Point><x>3</x><labels>a</labels></Point>", Point)
        assert point == Point(x=3, y=0, labels=["a"])

    def test_malformed_xml(self, codec):
        """Malformed XML raises DecodingError."""
        with pytest.raises(DecodingError) as exc_info:
            codec.decode(b"<User><id>7</User>", User)
        assert exc_info.value.content_type == "application/xml"

    def test_wrong_shape(self, codec):
        """XML that does not validate raises DecodingError."""
        with pytest.raises(DecodingError):
            codec.decode(b"<User><id>seven</id></User>", User)


class TestRoundTrip:
    def test_model_round_trip(self, codec):
        """Encoding then decoding yields an equal value."""
        user = User(id=3, name="Bob", active=True, tags=["a"], address=Address(city="Oslo"))
        assert codec.decode(codec.encode(user), User) == user
