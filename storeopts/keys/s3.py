"""Amazon S3 configuration keys."""

from __future__ import annotations

from enum import Enum

from ..capabilities import Provider
from .base import KeySchema


class AmazonS3ConfigKey(Enum):
    ACCESS_KEY_ID = "access_key_id"
    SECRET_ACCESS_KEY = "secret_access_key"
    REGION = "region"
    DEFAULT_REGION = "default_region"
    BUCKET = "bucket"
    ENDPOINT = "endpoint"
    TOKEN = "token"
    IMDSV1_FALLBACK = "imdsv1_fallback"
    VIRTUAL_HOSTED_STYLE_REQUEST = "virtual_hosted_style_request"
    UNSIGNED_PAYLOAD = "unsigned_payload"
    CHECKSUM_ALGORITHM = "checksum_algorithm"
    METADATA_ENDPOINT = "metadata_endpoint"
    CONTAINER_CREDENTIALS_RELATIVE_URI = "container_credentials_relative_uri"
    SKIP_SIGNATURE = "skip_signature"
    S3_EXPRESS = "s3_express"
    COPY_IF_NOT_EXISTS = "copy_if_not_exists"
    CONDITIONAL_PUT = "conditional_put"
    REQUEST_PAYER = "request_payer"
    DISABLE_TAGGING = "disable_tagging"


S3_SCHEMA = KeySchema(Provider.S3, AmazonS3ConfigKey)
