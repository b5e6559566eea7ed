"""
Integration tests: Time inside structured-document frameworks.

Exercises the Time type through pydantic models (JSON in and out), the
standard json module, and XML attributes and elements.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET

import pytest
from pydantic import BaseModel, Field, ValidationError

from iso8601ts.marshal import decode_json_value
from iso8601ts.time_value import Time
from tests.conftest import OFFSET_VARIANTS, ZULU_VARIANTS

ALL_TIMESTAMPS = ZULU_VARIANTS + OFFSET_VARIANTS


class Event(BaseModel):
    name: str = "event"
    time: Time = Field(default_factory=Time)


@pytest.mark.integration
class TestPydanticModel:
    """Tests for Time as a pydantic field type."""

    @pytest.mark.parametrize("text", ALL_TIMESTAMPS)
    def test_validate_json(self, text):
        event = Event.model_validate_json(json.dumps({"time": text}))
        assert event.time == Time.from_text(text)

    def test_validate_python(self):
        event = Event(time="2020-02-17T11:39:27.6Z")
        assert event.time.nanosecond == 600_000_000

    def test_existing_instances_accepted(self):
        t = Time.from_text("19001231")
        assert Event(time=t).time is t
        assert Event(time=t.timestamp).time == t

    def test_null_leaves_zero_value(self):
        event = Event.model_validate_json('{"time": null}')
        assert event.time.is_zero()

    def test_missing_field_uses_default(self):
        assert Event.model_validate_json("{}").time.is_zero()

    def test_number_is_format_error(self):
        with pytest.raises(ValidationError, match="quoted string literal"):
            Event.model_validate_json('{"time": 1}')

    def test_bad_timestamp_is_validation_error(self):
        with pytest.raises(ValidationError, match="Invalid ISO 8601 timestamp"):
            Event.model_validate_json('{"time": "1900-1231T00:10:20Z"}')

    def test_dump_json(self):
        event = Event(time=Time.from_text("20200217T113927.658731-0230"))
        assert event.model_dump_json() == (
            '{"name":"event","time":"2020-02-17T11:39:27.658731-02:30"}'
        )

    def test_dump_json_zero(self):
        assert json.loads(Event().model_dump_json())["time"] is None

    def test_dump_python_keeps_instance(self):
        t = Time.from_text("19001231")
        assert Event(time=t).model_dump()["time"] is t

    def test_json_round_trip(self):
        event = Event(time=Time.from_text("2020-02-17T11:39:27.658731-02:30"))
        again = Event.model_validate_json(event.model_dump_json())
        assert again.time == event.time
        assert again.time.utcoffset() == event.time.utcoffset()

    def test_json_schema(self):
        schema = Event.model_json_schema()
        assert schema["properties"]["time"]["format"] == "date-time"


@pytest.mark.integration
class TestJsonModule:
    """Tests for values loaded with the standard json module."""

    @pytest.mark.parametrize("text", ALL_TIMESTAMPS)
    def test_decoded_string(self, text):
        doc = json.loads(json.dumps({"time": text}))
        assert decode_json_value(doc["time"]) == Time.from_text(text).timestamp

    @pytest.mark.parametrize("text", ALL_TIMESTAMPS)
    def test_raw_token(self, text):
        token = json.dumps(text)
        assert Time.unmarshal_json(token) == Time.from_text(text)


@pytest.mark.integration
class TestXml:
    """Tests for timestamps carried in XML attributes and elements."""

    @pytest.mark.parametrize("text", ALL_TIMESTAMPS)
    def test_attribute(self, text):
        root = ET.fromstring(f'<value time="{text}" />')
        assert Time.unmarshal_text(root.get("time")) == Time.from_text(text)

    @pytest.mark.parametrize("text", ALL_TIMESTAMPS)
    def test_element(self, text):
        root = ET.fromstring(f"<value><time>{text}</time></value>")
        assert Time.unmarshal_text(root.findtext("time")) == Time.from_text(text)
