"""
boto3 client construction.

Dependencies: boto3
System role: Shared factory for AWS service clients
"""

from typing import Any

import boto3


def create_client(
    service_name: str,
    region: str,
    access_key_id: str | None = None,
    secret_access_key: str | None = None,
) -> Any:
    """
    Create a boto3 client, passing explicit credentials only when both are set.

    Without explicit credentials boto3 resolves them from its default chain
    (environment, shared config, instance profile).
    """
    kwargs: dict[str, Any] = {"region_name": region}
    if access_key_id and secret_access_key:
        kwargs["aws_access_key_id"] = access_key_id
        kwargs["aws_secret_access_key"] = secret_access_key
    return boto3.client(service_name, **kwargs)
