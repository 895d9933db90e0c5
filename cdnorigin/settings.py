"""Controller settings shared by origins, distributions and OAC management."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Settings that drive how distributions and origins are built."""

    default_origin_domain: str = ""
    cloudfront_description_template: str = ""
    cloudfront_price_class: str = ""
    cloudfront_default_caching_policy_id: str = ""
    cloudfront_default_cache_request_policy_id: str = ""
    cloudfront_default_public_origin_access_request_policy_id: str = ""
    cloudfront_default_bucket_origin_access_request_policy_id: str = ""
    deletion_enabled: bool = False