"""
Object Storage Service - S3-compatible backend (MinIO, AWS S3, ...)
Bucket existence checks, bucket creation and plain-text object writes
"""
import logging

import boto3
from botocore.client import Config
from botocore.exceptions import ClientError

from gateway.config import Settings

logger = logging.getLogger(__name__)

MISSING_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}


class ObjectStorage:
    """
    boto3 S3 client pointed at a custom endpoint.
    Errors other than "bucket not found" propagate to the caller.
    """

    def __init__(self, endpoint: str, access_key: str, secret_key: str,
                 secure: bool = False, region: str = "us-east-1"):
        scheme = "https" if secure else "http"
        self.endpoint_url = f"{scheme}://{endpoint}"
        self.region = region
        self.s3_client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ObjectStorage":
        return cls(
            endpoint=settings.storage_endpoint,
            access_key=settings.storage_key,
            secret_key=settings.storage_secret,
            secure=settings.storage_secure,
            region=settings.storage_region,
        )

    def bucket_exists(self, bucket_name: str) -> bool:
        try:
            self.s3_client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code in MISSING_BUCKET_CODES:
                return False
            raise

    def make_bucket(self, bucket_name: str) -> None:
        if self.region == "us-east-1":
            self.s3_client.create_bucket(Bucket=bucket_name)
        else:
            self.s3_client.create_bucket(
                Bucket=bucket_name,
                CreateBucketConfiguration={"LocationConstraint": self.region},
            )
        logger.info(f"Created bucket '{bucket_name}'")

    def put_text(self, bucket_name: str, object_name: str, content: str) -> None:
        body = content.encode("utf-8")
        self.s3_client.put_object(
            Bucket=bucket_name,
            Key=object_name,
            Body=body,
            ContentLength=len(body),
            ContentType="text/plain",
        )
