"""
Reconciliation helpers that combine listing, cluster filtering and
attribute comparison.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .attributes import Attributes, attributes_drifted, changed_attributes
from .elbv2 import ELBV2, LoadBalancerLister
from .membership import cluster_load_balancers
from .models import Attribute, LoadBalancer

logger = logging.getLogger(__name__)


@dataclass
class AttributeDrift:
    """Comparison result for one load balancer."""
    load_balancer: LoadBalancer
    changes: List[Attribute] = field(default_factory=list)

    @property
    def drifted(self) -> bool:
        return bool(self.changes)

    def to_dict(self):
        return {
            "name": self.load_balancer.name,
            "arn": self.load_balancer.arn,
            "drifted": self.drifted,
            "changes": {attribute.key: attribute.value for attribute in self.changes},
        }


def resolve_cluster(lister: LoadBalancerLister, cluster_name: str) -> List[LoadBalancer]:
    """
    Fetch the complete listing, then select the cluster's load balancers.

    A TransportError from the lister propagates; the filter is never run on
    a partial listing.

    Args:
        lister: Source of the full load balancer listing
        cluster_name: Cluster name

    Returns:
        The cluster's load balancers
    """
    return cluster_load_balancers(lister.list_all_load_balancers(), cluster_name)


def compare_attributes(load_balancer: LoadBalancer, desired: Attributes, observed: Attributes) -> AttributeDrift:
    """
    Compare the managed attributes of one load balancer.

    Only keys present in ``desired`` are compared; the API reports every
    attribute but the controller manages a subset.
    """
    managed = {attribute.key for attribute in desired}
    observed_managed = [attribute for attribute in observed if attribute.key in managed]

    if not attributes_drifted(desired, observed_managed):
        return AttributeDrift(load_balancer=load_balancer)

    changes = changed_attributes(desired, observed)
    logger.info(f"Attribute drift on {load_balancer.name}: {', '.join(a.key for a in changes)}")
    return AttributeDrift(load_balancer=load_balancer, changes=changes)


def check_attribute_drift(elbv2: ELBV2, load_balancers: Iterable[LoadBalancer], desired: Attributes) -> List[AttributeDrift]:
    """
    Read each load balancer's attributes and compare them to the desired set.

    Args:
        elbv2: API wrapper used to read attributes
        load_balancers: Load balancers to check
        desired: Desired attributes, applied to every load balancer

    Returns:
        One AttributeDrift per load balancer, in input order

    Raises:
        TransportError: If reading any load balancer's attributes fails
    """
    results = []
    for load_balancer in load_balancers:
        observed = elbv2.describe_attributes(load_balancer.arn)
        results.append(compare_attributes(load_balancer, desired, observed))
    return results
