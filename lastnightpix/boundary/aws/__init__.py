"""
AWS boundary modules.

Exports: S3PhotoClient, FaceCollectionClient
"""

from .rekognition_client import FaceCollectionClient
from .s3_client import S3PhotoClient

__all__ = ["FaceCollectionClient", "S3PhotoClient"]
