"""
elbsync - Cluster-scoped load balancer resolver and attribute reconciler.

This package finds the ELBv2 load balancers that belong to a logical cluster
and canonicalizes their attributes so desired and observed state can be
compared during reconciliation.
"""

from .attributes import Attributes, attributes_drifted, canonicalize, changed_attributes
from .errors import ElbsyncError, TransportError
from .membership import belongs_to_cluster, cluster_load_balancers, cluster_prefix
from .models import Attribute, LoadBalancer

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "Attributes",
    "ElbsyncError",
    "LoadBalancer",
    "TransportError",
    "attributes_drifted",
    "belongs_to_cluster",
    "canonicalize",
    "changed_attributes",
    "cluster_load_balancers",
    "cluster_prefix",
]
