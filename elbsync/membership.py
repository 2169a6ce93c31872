"""
Cluster membership filtering for load balancers.

A load balancer belongs to a cluster when its name starts with the cluster
name followed by a literal "-". The separator is required so that cluster
"prod" never claims "production-..." load balancers.
"""

import logging
from typing import Iterable, List, Optional

from .models import LoadBalancer

logger = logging.getLogger(__name__)

CLUSTER_SEPARATOR = "-"


def cluster_prefix(cluster_name: str) -> Optional[str]:
    """
    Return the name prefix owned by a cluster.

    Args:
        cluster_name: Cluster name

    Returns:
        "<cluster_name>-", or None for an empty cluster name
    """
    if not cluster_name:
        return None
    return cluster_name + CLUSTER_SEPARATOR


def belongs_to_cluster(load_balancer: LoadBalancer, cluster_name: str) -> bool:
    """Check whether a single load balancer belongs to a cluster."""
    prefix = cluster_prefix(cluster_name)
    if prefix is None or not load_balancer.name:
        return False
    return load_balancer.name.startswith(prefix)


def cluster_load_balancers(load_balancers: Iterable[LoadBalancer], cluster_name: str) -> List[LoadBalancer]:
    """
    Select the load balancers that belong to a cluster.

    The input must be the complete listing for the account; input order is
    preserved and the input is never modified.

    Args:
        load_balancers: Every load balancer visible to the account
        cluster_name: Cluster name; an empty name matches nothing

    Returns:
        New list of matching load balancers (possibly empty)
    """
    if not cluster_name:
        return []

    total = 0
    matched = []
    for load_balancer in load_balancers:
        total += 1
        if belongs_to_cluster(load_balancer, cluster_name):
            matched.append(load_balancer)

    logger.debug(f"Cluster {cluster_name}: {len(matched)} of {total} load balancers matched")
    return matched
