"""
Canonical ordering and comparison of load balancer attributes.

The API returns attributes in no particular order. Both the desired and the
observed sets are sorted by key before they are compared, so a reordering
never shows up as drift.
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping

from .models import Attribute


def _sort_key(attribute: Attribute):
    # value breaks ties so duplicate keys still order deterministically
    return (attribute.key, attribute.value)


def canonicalize(attributes: Iterable[Attribute]) -> List[Attribute]:
    """
    Return the attributes in canonical (key-sorted) order.

    Args:
        attributes: Attributes in any order

    Returns:
        New list sorted by key
    """
    return sorted(attributes, key=_sort_key)


class Attributes:
    """An unordered set of load balancer attributes."""

    def __init__(self, items: Iterable[Attribute] = ()):
        self.items: List[Attribute] = list(items)

    @classmethod
    def from_api(cls, items: Iterable[Dict[str, Any]]) -> "Attributes":
        """Build from the ``Attributes`` list of describe_load_balancer_attributes."""
        return cls(Attribute.from_api(item) for item in items)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "Attributes":
        """
        Build from a plain mapping.

        Values are converted to strings the way the API represents them, so
        ``True`` becomes "true" and ``60`` becomes "60".
        """
        return cls(Attribute(key=str(key), value=_api_value(value)) for key, value in values.items())

    def sort(self) -> "Attributes":
        """Sort this collection in place and return it."""
        self.items.sort(key=_sort_key)
        return self

    def canonical(self) -> "Attributes":
        """Return a sorted copy, leaving this collection untouched."""
        return Attributes(canonicalize(self.items))

    def to_api(self) -> List[Dict[str, str]]:
        return [attribute.to_api() for attribute in self.items]

    def to_dict(self) -> Dict[str, str]:
        return {attribute.key: attribute.value for attribute in self.items}

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other):
        if not isinstance(other, Attributes):
            return NotImplemented
        return canonicalize(self.items) == canonicalize(other.items)

    def __repr__(self):
        pairs = ", ".join(f"{a.key}={a.value}" for a in self.items)
        return f"Attributes({pairs})"


def _api_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def attributes_drifted(desired: Iterable[Attribute], observed: Iterable[Attribute]) -> bool:
    """
    Compare desired and observed attributes after canonicalizing each.

    Args:
        desired: Attributes the controller wants
        observed: Attributes reported by the API

    Returns:
        True if the canonical sequences differ
    """
    return canonicalize(desired) != canonicalize(observed)


def changed_attributes(desired: Iterable[Attribute], observed: Iterable[Attribute]) -> List[Attribute]:
    """
    Return the desired attributes that are missing or different in observed.

    Observed attributes that are not mentioned in desired are left alone;
    the API reports every attribute, while callers usually only manage a few.

    Args:
        desired: Attributes the controller wants
        observed: Attributes reported by the API

    Returns:
        Desired attributes that need changing, in canonical order
    """
    current = {attribute.key: attribute.value for attribute in observed}
    return [
        attribute for attribute in canonicalize(desired)
        if current.get(attribute.key) != attribute.value
    ]
