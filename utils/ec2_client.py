"""
EC2 client for the instance type catalog

Fetches instance type descriptions through the DescribeInstanceTypes API
with consistent error handling, retries, timeouts and logging.

Dependencies:
- boto3 / botocore
- backoff (for retry mechanisms)
"""

import logging
import time
from typing import Any, List, Optional

import backoff
import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from enilimits.core.exceptions import APIError, NetworkError, RateLimitError
from enilimits.core.models import InstanceTypeInfo
from enilimits.services import InstanceTypeSource

logger = logging.getLogger(__name__)

SERVICE_NAME = "EC2"

THROTTLING_ERROR_CODES = (
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
)

# Retried with backoff; botocore's own retries are disabled
RETRYABLE_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    ClientError,
)

class EC2ClientConfig:
    """Configuration for the EC2 client"""

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        timeout: float = 30,
        max_retries: int = 3,
        page_size: Optional[int] = None,
    ):
        """
        Initialize EC2 client configuration

        Args:
            region: AWS region (default: resolved by boto3 from the environment)
            endpoint_url: Custom EC2 endpoint URL
            timeout: Connect and read timeout per request in seconds
            max_retries: Retries after a failed attempt (connection errors and throttling)
            page_size: Items per DescribeInstanceTypes page (default: API default)
        """
        self.region = region
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.page_size = page_size

    @classmethod
    def from_config(cls, config: Any) -> "EC2ClientConfig":
        """Build from the application configuration"""
        return cls(
            region=config.aws_region,
            endpoint_url=config.ec2_api_endpoint,
            timeout=config.ec2_timeout,
            max_retries=config.ec2_max_retries,
        )

class EC2Client(InstanceTypeSource):
    """Instance type catalog backed by the EC2 API"""

    def __init__(self, config: Optional[EC2ClientConfig] = None, client: Any = None):
        """
        Initialize EC2 client

        Args:
            config: EC2 client configuration
            client: Pre-built boto3 EC2 client (default: built from config)
        """
        self.config = config or EC2ClientConfig()
        self.client = client or self._create_client()

    def _create_client(self) -> Any:
        boto_config = BotoConfig(
            connect_timeout=self.config.timeout,
            read_timeout=self.config.timeout,
            retries={"max_attempts": 0, "mode": "standard"},
        )
        return boto3.session.Session().client(
            "ec2",
            region_name=self.config.region,
            endpoint_url=self.config.endpoint_url,
            config=boto_config,
        )

    def __enter__(self):
        """Support context manager protocol"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close client when exiting context"""
        self.close()

    def close(self):
        """Close the underlying connection pool"""
        close = getattr(self.client, "close", None)
        if close is not None:
            close()

    def get_instance_types(self, timeout: Optional[float] = None) -> List[InstanceTypeInfo]:
        """
        Fetch all instance types visible to the account in the configured region

        Connection failures and throttling are retried up to ``max_retries``
        times with exponential backoff. No retry starts once the timeout has
        passed.

        Args:
            timeout: Upper bound in seconds for the whole paginated fetch, retries included

        Returns:
            List of InstanceTypeInfo objects

        Raises:
            NetworkError: For connection failures, timeouts and exceeded deadlines
            RateLimitError: If the API keeps throttling the request
            APIError: For other API errors
        """
        deadline = time.monotonic() + timeout if timeout is not None else None

        describe = backoff.on_exception(
            backoff.expo,
            RETRYABLE_ERRORS,
            max_tries=self.config.max_retries + 1,
            max_time=timeout,
            giveup=lambda e: self._giveup(e, deadline),
        )(self._describe_instance_types)

        try:
            return describe(deadline)

        except (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError) as e:
            logger.warning(f"Connection error describing instance types: {e}")
            raise NetworkError(f"Connection error: {e}", SERVICE_NAME)

        except ClientError as e:
            error = e.response.get("Error", {})
            error_code = error.get("Code")
            status_code = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            logger.warning(f"EC2 API error describing instance types: {e} (code: {error_code})")
            if error_code in THROTTLING_ERROR_CODES:
                raise RateLimitError(SERVICE_NAME, error_code, status_code)
            raise APIError(SERVICE_NAME, error.get("Message", str(e)), status_code, error_code)

        except BotoCoreError as e:
            logger.warning(f"Request error describing instance types: {e}")
            raise NetworkError(f"Request failed: {e}", SERVICE_NAME)

    @staticmethod
    def _giveup(error: Exception, deadline: Optional[float]) -> bool:
        """Whether a failed attempt must not be retried"""
        if deadline is not None and time.monotonic() >= deadline:
            return True
        if isinstance(error, ClientError):
            return error.response.get("Error", {}).get("Code") not in THROTTLING_ERROR_CODES
        return False

    def _describe_instance_types(self, deadline: Optional[float]) -> List[InstanceTypeInfo]:
        start_time = time.time()
        paginator = self.client.get_paginator("describe_instance_types")
        pagination_config = {}
        if self.config.page_size:
            pagination_config["PageSize"] = self.config.page_size

        instance_types = []
        for page_number, page in enumerate(paginator.paginate(PaginationConfig=pagination_config), 1):
            for item in page.get("InstanceTypes", []):
                instance_types.append(InstanceTypeInfo.from_api(item))
            logger.debug(f"DescribeInstanceTypes page {page_number}: {len(instance_types)} instance types so far")

            if deadline is not None and time.monotonic() > deadline:
                raise NetworkError("Timed out describing instance types", SERVICE_NAME)

        elapsed = time.time() - start_time
        logger.debug(f"DescribeInstanceTypes completed in {elapsed:.3f}s with {len(instance_types)} instance types")
        return instance_types
