"""
Data models for load balancers and their attributes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Attribute:
    """A single load balancer attribute, e.g. idle_timeout.timeout_seconds=60."""
    key: str
    value: str

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Attribute":
        """Build from a ``{"Key": ..., "Value": ...}`` API entry."""
        return cls(key=item.get("Key", ""), value=item.get("Value", ""))

    def to_api(self) -> Dict[str, str]:
        return {"Key": self.key, "Value": self.value}


@dataclass(frozen=True)
class LoadBalancer:
    """
    An ELBv2 load balancer as returned by describe_load_balancers.

    Only ``name`` is interpreted by elbsync. The remaining fields are
    provider metadata carried through unchanged; ``raw`` keeps the full
    API entry.
    """
    name: Optional[str]
    arn: Optional[str] = None
    dns_name: Optional[str] = None
    scheme: Optional[str] = None
    type: Optional[str] = None      # "application" | "network" | "gateway"
    state: Optional[str] = None     # "active" | "provisioning" | "failed" ...
    vpc_id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "LoadBalancer":
        """
        Build a LoadBalancer from a describe_load_balancers entry.

        Args:
            item: One element of the ``LoadBalancers`` list

        Returns:
            LoadBalancer with the raw entry attached
        """
        return cls(
            name=item.get("LoadBalancerName"),
            arn=item.get("LoadBalancerArn"),
            dns_name=item.get("DNSName"),
            scheme=item.get("Scheme"),
            type=item.get("Type"),
            state=(item.get("State") or {}).get("Code"),
            vpc_id=item.get("VpcId"),
            raw=item,
        )

    def summary(self) -> Dict[str, Optional[str]]:
        """Short JSON-friendly view used by the CLI."""
        return {
            "name": self.name,
            "arn": self.arn,
            "state": self.state,
            "type": self.type,
            "scheme": self.scheme,
        }
