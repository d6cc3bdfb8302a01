"""Google Cloud Storage configuration keys."""

from __future__ import annotations

from enum import Enum

from ..capabilities import Provider
from .base import KeySchema


class GoogleConfigKey(Enum):
    SERVICE_ACCOUNT = "service_account"
    SERVICE_ACCOUNT_KEY = "service_account_key"
    BUCKET = "bucket"
    APPLICATION_CREDENTIALS = "application_credentials"
    SKIP_SIGNATURE = "skip_signature"


GCS_SCHEMA = KeySchema(Provider.GCS, GoogleConfigKey)
