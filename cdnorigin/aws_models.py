"""Conversion of distributions, origins and behaviors into CloudFront API structures."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .distribution import Distribution
from .functions import Function, FunctionType, RequestEdgeFunction
from .origin import ORIGIN_ACCESS_PUBLIC, Behavior, Origin
from .settings import Config

CallerRefFn = Callable[[], str]

ALLOWED_METHODS = ("GET", "HEAD", "OPTIONS", "PUT", "POST", "PATCH", "DELETE")
CACHED_METHODS = ("GET", "HEAD")
ORIGIN_SSL_PROTOCOLS = ("SSLv3", "TLSv1", "TLSv1.1", "TLSv1.2")

VIEWER_PROTOCOL_POLICY_REDIRECT_TO_HTTPS = "redirect-to-https"
ORIGIN_PROTOCOL_POLICY_MATCH_VIEWER = "match-viewer"
HTTP_VERSION_HTTP2 = "http2"
SSL_SUPPORT_METHOD_SNI_ONLY = "sni-only"

NO_POLICY = "None"


def _listing(items: Iterable[Any]) -> dict[str, Any]:
    items = list(items)
    return {"Quantity": len(items), "Items": items}


def _allowed_methods() -> dict[str, Any]:
    return {
        "Quantity": len(ALLOWED_METHODS),
        "Items": list(ALLOWED_METHODS),
        "CachedMethods": _listing(CACHED_METHODS),
    }


def distribution_config(
    distribution: Distribution, caller_reference: CallerRefFn, cfg: Config
) -> dict[str, Any]:
    """Return the DistributionConfig structure for the given distribution."""
    origins = [origin_config(distribution.default_origin)]
    origins.extend(origin_config(o) for o in distribution.custom_origins)
    behaviors = [cache_behavior(b) for b in distribution.sorted_custom_behaviors()]

    config: dict[str, Any] = {
        "Aliases": _listing(distribution.alternate_domains),
        "CacheBehaviors": _listing(behaviors),
        "CallerReference": caller_reference(),
        "Comment": distribution.description,
        "DefaultCacheBehavior": {
            "AllowedMethods": _allowed_methods(),
            "CachePolicyId": cfg.cloudfront_default_caching_policy_id,
            "Compress": True,
            "FieldLevelEncryptionId": "",
            "OriginRequestPolicyId": cfg.cloudfront_default_cache_request_policy_id,
            "LambdaFunctionAssociations": {"Quantity": 0},
            "SmoothStreaming": False,
            "TargetOriginId": distribution.default_origin.host,
            "ViewerProtocolPolicy": VIEWER_PROTOCOL_POLICY_REDIRECT_TO_HTTPS,
        },
        "Origins": _listing(origins),
        "Enabled": True,
        "HttpVersion": HTTP_VERSION_HTTP2,
        "IsIPV6Enabled": distribution.ipv6_enabled,
        "Logging": {
            "Enabled": False,
            "Bucket": "",
            "Prefix": "",
            "IncludeCookies": False,
        },
        "PriceClass": distribution.price_class,
        "WebACLId": distribution.web_acl_id,
    }

    if distribution.tls.enabled:
        config["ViewerCertificate"] = {
            "ACMCertificateArn": distribution.tls.cert_arn,
            "MinimumProtocolVersion": distribution.tls.security_policy_id,
            "SSLSupportMethod": SSL_SUPPORT_METHOD_SNI_ONLY,
        }
    if distribution.logging.enabled:
        config["Logging"] = {
            "Enabled": True,
            "Bucket": distribution.logging.bucket_address,
            "Prefix": distribution.logging.prefix,
            "IncludeCookies": False,
        }
    return config


def origin_config(origin: Origin) -> dict[str, Any]:
    """Return the Origin structure for the given origin."""
    result: dict[str, Any] = {
        "CustomHeaders": custom_headers(origin),
        "DomainName": origin.host,
        "Id": origin.host,
        "OriginPath": "",
    }
    if origin.access == ORIGIN_ACCESS_PUBLIC:
        result["CustomOriginConfig"] = {
            "HTTPPort": 80,
            "HTTPSPort": 443,
            "OriginKeepaliveTimeout": 5,
            "OriginProtocolPolicy": ORIGIN_PROTOCOL_POLICY_MATCH_VIEWER,
            "OriginReadTimeout": origin.response_timeout,
            "OriginSslProtocols": _listing(ORIGIN_SSL_PROTOCOLS),
        }
    else:
        result["OriginAccessControlId"] = origin.oac.id
        result["S3OriginConfig"] = {"OriginAccessIdentity": ""}
    return result


def custom_headers(origin: Origin) -> dict[str, Any]:
    """Return the CustomHeaders structure holding the origin's headers."""
    headers = origin.headers() or {}
    return _listing(
        {"HeaderName": name, "HeaderValue": value} for name, value in headers.items()
    )


def _function_association(fn: Function) -> dict[str, Any]:
    return {"EventType": fn.event_type, "FunctionARN": fn.arn}


def _lambda_association(fn: Function) -> dict[str, Any]:
    result: dict[str, Any] = {"EventType": fn.event_type, "LambdaFunctionARN": fn.arn}
    if isinstance(fn, RequestEdgeFunction):
        result["IncludeBody"] = fn.include_body
    return result


def cache_behavior(behavior: Behavior) -> dict[str, Any]:
    """Return the CacheBehavior structure for the given behavior."""
    result: dict[str, Any] = {
        "AllowedMethods": _allowed_methods(),
        "CachePolicyId": behavior.cache_policy,
        "Compress": True,
        "FieldLevelEncryptionId": "",
        "PathPattern": behavior.path_pattern,
        "SmoothStreaming": False,
        "TargetOriginId": behavior.origin_host,
        "ViewerProtocolPolicy": VIEWER_PROTOCOL_POLICY_REDIRECT_TO_HTTPS,
    }
    if behavior.request_policy != NO_POLICY:
        result["OriginRequestPolicyId"] = behavior.request_policy
    if behavior.response_policy and behavior.response_policy != NO_POLICY:
        result["ResponseHeadersPolicyId"] = behavior.response_policy

    cloudfront_fns = [f for f in behavior.function_associations if f.type == FunctionType.CLOUDFRONT]
    edge_fns = [f for f in behavior.function_associations if f.type == FunctionType.EDGE]
    result["FunctionAssociations"] = _listing(_function_association(f) for f in cloudfront_fns)
    result["LambdaFunctionAssociations"] = _listing(_lambda_association(f) for f in edge_fns)
    return result