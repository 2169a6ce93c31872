"""
Tests for attribute canonicalization and drift comparison.
"""

from hypothesis import given
from hypothesis import strategies as st

from elbsync.attributes import Attributes, attributes_drifted, canonicalize, changed_attributes
from elbsync.models import Attribute


HELLO = Attribute("hello", "world")
OTHER = Attribute("other", "value")
SOMETHING = Attribute("something", "else")


class TestCanonicalize:
    """Ordering attributes by key."""

    def test_order_does_not_matter(self):
        first = Attributes([OTHER, HELLO])
        second = Attributes([HELLO, OTHER])

        assert first.sort().items == second.sort().items

    def test_extra_attribute_is_detected(self):
        first = Attributes([OTHER, HELLO])
        second = Attributes([HELLO, OTHER, SOMETHING])

        assert first.sort().items != second.sort().items

    def test_sorted_by_key(self):
        assert canonicalize([SOMETHING, OTHER, HELLO]) == [HELLO, OTHER, SOMETHING]

    def test_empty(self):
        assert canonicalize([]) == []
        assert Attributes().sort().items == []

    def test_returns_new_list(self):
        items = [OTHER, HELLO]
        result = canonicalize(items)

        assert result is not items
        assert items == [OTHER, HELLO]

    def test_idempotent(self):
        once = canonicalize([SOMETHING, HELLO, OTHER])
        assert canonicalize(once) == once

    def test_codepoint_order(self):
        upper = Attribute("Zeta", "1")
        lower = Attribute("alpha", "1")
        dotted = Attribute("access_logs.s3.bucket", "b")
        underscored = Attribute("access_logs_s3", "b")

        assert canonicalize([lower, upper]) == [upper, lower]
        assert canonicalize([underscored, dotted]) == [dotted, underscored]

    def test_duplicate_keys_do_not_fail(self):
        items = [Attribute("a", "2"), Attribute("a", "1")]
        assert canonicalize(items) == canonicalize(list(reversed(items)))


class TestAttributes:
    """The Attributes collection."""

    def test_from_api(self):
        attributes = Attributes.from_api([
            {"Key": "idle_timeout.timeout_seconds", "Value": "60"},
            {"Key": "deletion_protection.enabled", "Value": "false"},
        ])

        assert len(attributes) == 2
        assert attributes.to_dict() == {
            "idle_timeout.timeout_seconds": "60",
            "deletion_protection.enabled": "false",
        }

    def test_to_api_round_trip_order(self):
        raw = [{"Key": "b", "Value": "2"}, {"Key": "a", "Value": "1"}]
        assert Attributes.from_api(raw).to_api() == raw
        assert Attributes.from_api(raw).sort().to_api() == list(reversed(raw))

    def test_from_dict_uses_api_strings(self):
        attributes = Attributes.from_dict({"deletion_protection.enabled": True, "idle_timeout.timeout_seconds": 60})
        assert attributes.to_dict() == {
            "deletion_protection.enabled": "true",
            "idle_timeout.timeout_seconds": "60",
        }

    def test_canonical_leaves_original(self):
        attributes = Attributes([OTHER, HELLO])
        canonical = attributes.canonical()

        assert canonical.items == [HELLO, OTHER]
        assert attributes.items == [OTHER, HELLO]

    def test_equality_ignores_order(self):
        assert Attributes([OTHER, HELLO]) == Attributes([HELLO, OTHER])
        assert Attributes([OTHER, HELLO]) != Attributes([HELLO, OTHER, SOMETHING])
        assert Attributes([HELLO]) != [HELLO]

    def test_repr(self):
        assert repr(Attributes([HELLO])) == "Attributes(hello=world)"


class TestDrift:
    """Comparing desired and observed attributes."""

    def test_no_drift_when_reordered(self):
        assert not attributes_drifted([OTHER, HELLO], [HELLO, OTHER])

    def test_drift_on_value_change(self):
        assert attributes_drifted([HELLO], [Attribute("hello", "there")])

    def test_drift_on_extra_attribute(self):
        assert attributes_drifted([HELLO, OTHER], [HELLO, OTHER, SOMETHING])

    def test_changed_attributes(self):
        desired = [Attribute("idle_timeout.timeout_seconds", "120"), Attribute("deletion_protection.enabled", "true")]
        observed = [
            Attribute("deletion_protection.enabled", "true"),
            Attribute("idle_timeout.timeout_seconds", "60"),
            Attribute("routing.http2.enabled", "true"),
        ]

        assert changed_attributes(desired, observed) == [Attribute("idle_timeout.timeout_seconds", "120")]

    def test_changed_attributes_includes_missing_keys(self):
        assert changed_attributes([SOMETHING, HELLO], [HELLO]) == [SOMETHING]

    def test_changed_attributes_empty_when_in_sync(self):
        assert changed_attributes([HELLO], [OTHER, HELLO]) == []


attribute_sets = st.dictionaries(st.text(max_size=8), st.text(max_size=8), max_size=10)


def to_attributes(values):
    return [Attribute(key, value) for key, value in values.items()]


@given(attribute_sets, st.data())
def test_canonical_form_ignores_permutation(values, data):
    items = to_attributes(values)
    shuffled = data.draw(st.permutations(items))

    assert canonicalize(shuffled) == canonicalize(items)


@given(attribute_sets, attribute_sets)
def test_canonical_form_detects_membership_change(first, second):
    if first == second:
        assert canonicalize(to_attributes(first)) == canonicalize(to_attributes(second))
    else:
        assert canonicalize(to_attributes(first)) != canonicalize(to_attributes(second))
