"""Unit tests for collection helpers and typed deserialization."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import pydantic
import pytest
from structlog.testing import capture_logs

from certificate_core.kernel.collections import add_range, is_in, is_not_in
from certificate_core.kernel.errors import SerializationError, ValidationError
from certificate_core.kernel.serialization import deserialize


# ---------------------------------------------------------------------------
# add_range / is_in / is_not_in
# ---------------------------------------------------------------------------


class TestAddRange:
    def test_extends_list(self) -> None:
        target = [1]
        add_range(target, (2, 3))
        assert target == [1, 2, 3]

    def test_adds_to_set(self) -> None:
        target = {1}
        add_range(target, [1, 2])
        assert target == {1, 2}

    def test_appends_to_deque(self) -> None:
        target: deque[int] = deque([1])
        add_range(target, iter([2, 3]))
        assert list(target) == [1, 2, 3]

    def test_none_arguments(self) -> None:
        with pytest.raises(ValidationError):
            add_range(None, [1])
        with pytest.raises(ValidationError):
            add_range([], None)  # type: ignore[arg-type]

    def test_immutable_target(self) -> None:
        with pytest.raises(ValidationError, match="tuple"):
            add_range((1, 2), [3])


class TestMembership:
    def test_is_in(self) -> None:
        assert is_in(2, [1, 2, 3])
        assert not is_in(4, [1, 2, 3])

    def test_is_in_consumes_iterators(self) -> None:
        assert is_in("b", iter("abc"))

    def test_is_not_in(self) -> None:
        assert is_not_in(4, {1, 2})
        assert not is_not_in(1, {1, 2})


# ---------------------------------------------------------------------------
# deserialize
# ---------------------------------------------------------------------------


@dataclass
class Holder:
    name: str
    age: int


class Course(pydantic.BaseModel):
    title: str
    hours: int = 0


class TestDeserialize:
    def test_builtin_generic(self) -> None:
        assert deserialize('{"a": 1}', dict[str, int]) == {"a": 1}

    def test_dataclass(self) -> None:
        assert deserialize(b'{"name": "Ana", "age": 30}', Holder) == Holder("Ana", 30)

    def test_model(self) -> None:
        course = deserialize('{"title": "Python"}', Course)
        assert course == Course(title="Python", hours=0)

    def test_null_payload(self) -> None:
        assert deserialize("null", Holder) is None

    def test_malformed_json(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            deserialize("{not json", Holder)
        assert exc_info.value.payload_type == "Holder"
        assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)

    def test_type_mismatch(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            deserialize('{"name": "Ana", "age": "old"}', Holder)
        assert exc_info.value.detail["errors"]
        assert exc_info.value.code == "serialization_error"

    def test_failure_is_logged(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(SerializationError):
                deserialize("42", Holder)
        assert logs[-1]["event"] == "deserialize.failed"
        assert logs[-1]["payload_type"] == "Holder"
        assert logs[-1]["log_level"] == "warning"
