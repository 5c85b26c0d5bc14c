"""
EC2 Instance Query Adapter

Architectural Intent:
- Implements InstanceQueryPort on top of boto3's describe_instances paginator
- The only module that issues EC2 API calls

Design Decisions:
- iter_instances is a generator over a lazy PageIterator: a page is only
  requested when the previous one has been fully consumed, so a caller that
  stops after the first instance never triggers the next DescribeInstances call
- Each page is logged at DEBUG level with its reservation count
- ClientError / BotoCoreError propagate unchanged
"""

import logging
from typing import Any, Iterator, Optional, Sequence

import boto3

from ec2target.domain.value_objects.instance_filter import InstanceFilter

logger = logging.getLogger(__name__)

# DescribeInstances MaxResults bounds
MIN_PAGE_SIZE = 5
MAX_PAGE_SIZE = 1000


class EC2InstanceQuery:
    """
    Lists EC2 instances matching server-side filters.

    Parameters
    ----------
    session : boto3.session.Session
        Session used to create the EC2 client. Ignored when ``client`` is given.
    client : botocore client | None
        Pre-built EC2 client, mainly for stubbing in tests.
    page_size : int | None
        MaxResults per DescribeInstances call. ``None`` keeps the API default.
    """

    def __init__(
        self,
        session: Optional[boto3.session.Session] = None,
        client: Any = None,
        page_size: Optional[int] = None,
    ) -> None:
        if page_size is not None and not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(
                f"page_size must be from {MIN_PAGE_SIZE} to {MAX_PAGE_SIZE}, got {page_size}"
            )
        if client is None:
            if session is None:
                raise ValueError("EC2InstanceQuery needs a session or a client")
            client = session.client("ec2")
        self.client = client
        self.page_size = page_size

    def iter_instances(
        self, filters: Sequence[InstanceFilter]
    ) -> Iterator[dict[str, Any]]:
        api_filters = [f.to_api() for f in filters]
        logger.info("EC2 describe_instances (filters=%s)", api_filters)

        pagination_config = {}
        if self.page_size:
            pagination_config["PageSize"] = self.page_size

        paginator = self.client.get_paginator("describe_instances")
        pages = paginator.paginate(
            Filters=api_filters,
            PaginationConfig=pagination_config,
        )
        for page_number, page in enumerate(pages, start=1):
            reservations = page.get("Reservations", [])
            logger.debug(
                "describe_instances page %d returned %d reservation(s)",
                page_number,
                len(reservations),
            )
            for reservation in reservations:
                yield from reservation.get("Instances", [])
