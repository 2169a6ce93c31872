"""
ELBv2 API access: listing load balancers and reading their attributes.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .attributes import Attributes
from .config import MAX_PAGE_SIZE
from .errors import TransportError
from .membership import cluster_load_balancers
from .models import LoadBalancer

logger = logging.getLogger(__name__)


class LoadBalancerLister(ABC):
    """Anything that can list every load balancer in the account."""

    @abstractmethod
    def list_all_load_balancers(self) -> List[LoadBalancer]:
        """
        Return every load balancer, with all pages drained.

        Raises:
            TransportError: If the listing could not be completed
        """
        pass


def _transport_error(operation: str, error: Exception) -> TransportError:
    """Wrap a botocore exception, keeping the AWS error code if present."""
    code = None
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code")
    logger.error(f"{operation} failed: {error}")
    return TransportError(operation, str(error), code=code)


class ELBV2(LoadBalancerLister):
    """Read-only wrapper around a boto3 ``elbv2`` client."""

    def __init__(self, client, page_size: int = MAX_PAGE_SIZE):
        self.client = client
        self.page_size = page_size

    @classmethod
    def from_region(cls, region: str, page_size: int = MAX_PAGE_SIZE, session: Optional[boto3.session.Session] = None) -> "ELBV2":
        """
        Create a wrapper with a fresh client for a region.

        Args:
            region: AWS region
            page_size: Results per describe_load_balancers page
            session: Optional boto3 session to create the client from

        Returns:
            ELBV2 instance
        """
        if session is not None:
            client = session.client("elbv2", region_name=region)
        else:
            client = boto3.client("elbv2", region_name=region)
        return cls(client, page_size=page_size)

    def list_all_load_balancers(self) -> List[LoadBalancer]:
        """
        List every load balancer in the account and region.

        All pages are read before anything is returned; if any page fails
        the whole listing fails.

        Returns:
            Load balancers in API order

        Raises:
            TransportError: If any page could not be fetched
        """
        load_balancers = []
        pages = 0
        try:
            paginator = self.client.get_paginator("describe_load_balancers")
            for page in paginator.paginate(PaginationConfig={"PageSize": self.page_size}):
                pages += 1
                for item in page.get("LoadBalancers", []):
                    load_balancers.append(LoadBalancer.from_api(item))
        except (ClientError, BotoCoreError) as e:
            raise _transport_error("DescribeLoadBalancers", e) from e

        logger.debug(f"Listed {len(load_balancers)} load balancers in {pages} pages")
        return load_balancers

    def cluster_load_balancers(self, cluster_name: str) -> List[LoadBalancer]:
        """
        List the load balancers that belong to a cluster.

        Args:
            cluster_name: Cluster name

        Returns:
            Matching load balancers, in API order
        """
        return cluster_load_balancers(self.list_all_load_balancers(), cluster_name)

    def describe_attributes(self, arn: str) -> Attributes:
        """
        Read the attributes of one load balancer.

        Args:
            arn: Load balancer ARN

        Returns:
            Attributes as reported by the API (not sorted)

        Raises:
            TransportError: If the call fails
        """
        try:
            response = self.client.describe_load_balancer_attributes(LoadBalancerArn=arn)
        except (ClientError, BotoCoreError) as e:
            raise _transport_error("DescribeLoadBalancerAttributes", e) from e

        return Attributes.from_api(response.get("Attributes", []))
