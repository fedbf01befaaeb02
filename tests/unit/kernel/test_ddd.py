"""Unit tests for the value-object and entity equality contracts."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from certificate_core.kernel.ddd import Entity, ValueObject, values_equal
from certificate_core.kernel.time import FrozenClock
from certificate_core.kernel.types import EMPTY_ID


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class Serial(ValueObject["Serial"]):
    def __init__(self, prefix: str, number: int) -> None:
        self.prefix = prefix
        self.number = number

    def _equals_core(self, other: Serial) -> bool:
        return (self.prefix, self.number) == (other.prefix, other.number)

    def _hash_core(self) -> int:
        return hash((self.prefix, self.number))


class OtherSerial(ValueObject["OtherSerial"]):
    def __init__(self, prefix: str, number: int) -> None:
        self.prefix = prefix
        self.number = number

    def _equals_core(self, other: OtherSerial) -> bool:
        return (self.prefix, self.number) == (other.prefix, other.number)

    def _hash_core(self) -> int:
        return hash((self.prefix, self.number))


class Certificate(Entity):
    def __init__(self, holder: str = "", *, clock: FrozenClock | None = None) -> None:
        super().__init__(clock=clock)
        self.holder = holder


class Template(Entity):
    pass


ONE = uuid.UUID("00000000-0000-0000-0000-000000000001")


def _certificate(id: uuid.UUID, holder: str = "", **kwargs: object) -> Certificate:  # noqa: A002
    cert = Certificate(holder, **kwargs)  # type: ignore[arg-type]
    cert.id = id
    return cert


# ---------------------------------------------------------------------------
# ValueObject
# ---------------------------------------------------------------------------


class TestValueObject:
    def test_equal_by_structure(self) -> None:
        assert Serial("CERT", 1) == Serial("CERT", 1)
        assert Serial("CERT", 1) != Serial("CERT", 2)

    def test_reflexive(self) -> None:
        s = Serial("CERT", 1)
        assert s == s

    def test_other_type_is_not_equal(self) -> None:
        assert Serial("CERT", 1) != OtherSerial("CERT", 1)
        assert Serial("CERT", 1) != ("CERT", 1)
        assert Serial("CERT", 1) != "Serial"

    def test_none_handling(self) -> None:
        s = Serial("CERT", 1)
        assert (s == None) is False  # noqa: E711
        assert (None == s) is False  # noqa: E711
        assert s != None  # noqa: E711

    def test_hash_delegates_to_core(self) -> None:
        assert hash(Serial("CERT", 1)) == hash(("CERT", 1))

    def test_usable_in_sets(self) -> None:
        assert len({Serial("A", 1), Serial("A", 1), Serial("B", 1)}) == 2

    def test_str_is_type_name(self) -> None:
        assert str(Serial("A", 1)) == "Serial"

    def test_hooks_are_required(self) -> None:
        class Incomplete(ValueObject["Incomplete"]):
            def _hash_core(self) -> int:
                return 0

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]

    @given(st.text(max_size=5), st.integers(), st.text(max_size=5), st.integers())
    def test_equal_implies_same_hash(self, p1: str, n1: int, p2: str, n2: int) -> None:
        a, b = Serial(p1, n1), Serial(p2, n2)
        if a == b:
            assert hash(a) == hash(b)
        assert (a != b) is not (a == b)


class TestValuesEqual:
    def test_both_none(self) -> None:
        assert values_equal(None, None) is True

    def test_one_none(self) -> None:
        assert values_equal(None, Serial("A", 1)) is False
        assert values_equal(Serial("A", 1), None) is False

    def test_delegates(self) -> None:
        assert values_equal(Serial("A", 1), Serial("A", 1)) is True
        assert values_equal(Serial("A", 1), Serial("A", 2)) is False


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


class TestEntityConstruction:
    def test_defaults(self) -> None:
        cert = Certificate("Alice")
        assert cert.is_deleted is False
        assert cert.modified_date is None
        assert cert.id == EMPTY_ID
        assert cert.is_transient

    def test_created_date_from_clock(self) -> None:
        fixed = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)
        cert = Certificate("Alice", clock=FrozenClock(fixed))
        assert cert.created_date == fixed

    def test_created_date_defaults_to_now(self) -> None:
        before = datetime.now(UTC)
        cert = Certificate("Alice")
        assert before <= cert.created_date <= datetime.now(UTC)

    def test_base_class_cannot_be_constructed(self) -> None:
        with pytest.raises(TypeError, match="abstract"):
            Entity()

    def test_subclass_without_extra_state(self) -> None:
        assert Template().is_deleted is False

    def test_assigned_id_is_not_transient(self) -> None:
        assert not _certificate(ONE).is_transient

    def test_collaborators_can_update_lifecycle_fields(self) -> None:
        cert = _certificate(ONE)
        stamp = datetime(2025, 1, 1, tzinfo=UTC)
        cert.modified_date = stamp
        cert.is_deleted = True
        assert cert.modified_date == stamp
        assert cert.is_deleted is True


class TestEntityEquality:
    def test_same_id_different_attributes(self) -> None:
        a = _certificate(ONE, "Alice", clock=FrozenClock(datetime(2024, 1, 1, tzinfo=UTC)))
        b = _certificate(ONE, "Bob", clock=FrozenClock(datetime(2025, 1, 1, tzinfo=UTC)))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_id_not_equal(self) -> None:
        assert _certificate(ONE) != _certificate(uuid.uuid4())

    def test_different_types_same_id(self) -> None:
        cert = _certificate(ONE)
        template = Template()
        template.id = ONE
        assert cert != template
        assert template != cert
        assert hash(cert) != hash(template)

    def test_reflexive_even_when_transient(self) -> None:
        cert = Certificate()
        assert cert == cert

    def test_none(self) -> None:
        assert _certificate(ONE) != None  # noqa: E711
        assert values_equal(None, _certificate(ONE)) is False

    def test_hash_combines_type_and_id(self) -> None:
        cert = _certificate(ONE)
        assert hash(cert) == hash(hash(Certificate) * 503 + hash(ONE))

    def test_hashable_by_identity(self) -> None:
        assert len({_certificate(ONE, "A"), _certificate(ONE, "B")}) == 1

    def test_equality_follows_id_reassignment(self) -> None:
        a, b = _certificate(ONE), _certificate(uuid.uuid4())
        assert a != b
        b.id = ONE
        assert a == b

    @given(st.uuids(), st.uuids(), st.text(max_size=5), st.text(max_size=5))
    def test_equal_iff_same_id(
        self, id_a: uuid.UUID, id_b: uuid.UUID, holder_a: str, holder_b: str
    ) -> None:
        a, b = _certificate(id_a, holder_a), _certificate(id_b, holder_b)
        assert (a == b) is (id_a == id_b)
        if a == b:
            assert hash(a) == hash(b)
