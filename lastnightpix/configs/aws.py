"""
AWS configuration settings.

Bucket, face collection and credentials shared by the S3 and Rekognition
clients. Variable names match the deployment environment (AWS_REGION,
BUCKET_NAME, COLLECTION_ID).

Dependencies: pydantic_settings
System role: AWS boundary configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    """Settings for S3 photo storage and the Rekognition face collection."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    aws_region: str = Field(default="us-east-2", description="AWS region for S3 and Rekognition")
    bucket_name: str = Field(default="", description="S3 bucket holding event photos")
    collection_id: str = Field(default="", description="Rekognition face collection id")
    aws_access_key_id: str | None = Field(
        default=None,
        description="Explicit access key (falls back to the boto3 credential chain)",
    )
    aws_secret_access_key: str | None = Field(
        default=None,
        description="Explicit secret key (falls back to the boto3 credential chain)",
    )
