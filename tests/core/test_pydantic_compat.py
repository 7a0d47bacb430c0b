import pytest
from pydantic import BaseModel, ValidationError
from stringdict import Dict


class Registry(BaseModel):
    name: str
    entries: Dict


def test_accepts_plain_dict():
    registry = Registry(name="r", entries={"a": 1, "items": 2})
    assert isinstance(registry.entries, Dict)
    assert registry.entries.get("items") == 2


def test_keeps_dict_instance():
    entries = Dict({"a": 1})
    registry = Registry(name="r", entries=entries)
    assert registry.entries is entries


def test_rejects_non_mapping():
    with pytest.raises(ValidationError):
        Registry(name="r", entries=[1, 2, 3])


def test_rejects_falsy_keys():
    with pytest.raises(ValidationError):
        Registry(name="r", entries={"": 1})


def test_serializes_to_plain_dict():
    registry = Registry(name="r", entries={"a": 1, "b": 2})
    assert registry.model_dump() == {"name": "r", "entries": {"a": 1, "b": 2}}
    assert registry.model_dump_json() == '{"name":"r","entries":{"a":1,"b":2}}'


def test_json_schema_describes_plain_object():
    schema = Registry.model_json_schema()
    entries = schema["properties"]["entries"]
    assert entries["type"] == "object"
    assert schema["required"] == ["name", "entries"]
