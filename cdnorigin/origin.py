"""CloudFront origins, their cache behaviors, and a builder for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .functions import Function
from .oac import OAC, new_oac
from .settings import Config

ORIGIN_ACCESS_PUBLIC = "Public"
ORIGIN_ACCESS_BUCKET = "Bucket"

DEFAULT_RESPONSE_TIMEOUT = 30
TEMPLATE_ORIGIN_HEADERS_HOST = "{{origin.host}}"


@dataclass
class Behavior:
    """A CloudFront cache behavior."""

    path_pattern: str = ""
    request_policy: str = ""
    cache_policy: str = ""
    response_policy: str = ""
    origin_host: str = ""
    function_associations: list[Function] = field(default_factory=list)


@dataclass
class Origin:
    """A CloudFront origin together with the behaviors routed to it."""

    host: str = ""
    behaviors: list[Behavior] = field(default_factory=list)
    response_timeout: int = 0
    access: str = ""
    oac: OAC = field(default_factory=OAC)
    header_templates: Optional[dict[str, str]] = None

    def has_equal_parameters(self, other: "Origin") -> bool:
        """Return whether both origins share parameters, ignoring behaviors."""
        return (
            self.host == other.host
            and self.response_timeout == other.response_timeout
            and self.access == other.access
            and self.oac == other.oac
        )

    def headers(self) -> Optional[dict[str, str]]:
        """Return the headers sent to the origin, with the host template filled in."""
        if self.header_templates is None:
            return None
        return {
            key: value.replace(TEMPLATE_ORIGIN_HEADERS_HOST, self.host)
            for key, value in self.header_templates.items()
        }

    def is_bucket_based(self) -> bool:
        """Return whether the origin is an access-controlled bucket."""
        return self.access == ORIGIN_ACCESS_BUCKET


def _default_request_policy(access_type: str, cfg: Config) -> str:
    if access_type == ORIGIN_ACCESS_BUCKET:
        return cfg.cloudfront_default_bucket_origin_access_request_policy_id
    return cfg.cloudfront_default_public_origin_access_request_policy_id


class OriginBuilder:
    """Builds an Origin; each "with_" call returns a new builder."""

    def __init__(self, distribution_name: str, host: str, access_type: str, cfg: Config) -> None:
        self._distribution_name = distribution_name
        self._host = host
        self._access_type = access_type
        self._response_timeout = DEFAULT_RESPONSE_TIMEOUT
        self._request_policy = _default_request_policy(access_type, cfg)
        self._cache_policy = cfg.cloudfront_default_caching_policy_id
        self._response_policy = ""
        self._headers: Optional[dict[str, str]] = None
        self._behaviors: dict[str, list[Function]] = {}

    def _copy(self) -> "OriginBuilder":
        clone = object.__new__(OriginBuilder)
        clone.__dict__.update(self.__dict__)
        clone._behaviors = {path: list(fns) for path, fns in self._behaviors.items()}
        return clone

    def with_behavior(self, path_pattern: str, *args: Function) -> "OriginBuilder":
        """Add a behavior for the path pattern, with optional functions bound to it."""
        clone = self._copy()
        clone._behaviors.setdefault(path_pattern, []).extend(args)
        return clone

    def with_request_policy(self, policy: str) -> "OriginBuilder":
        """Use the origin request policy for every behavior, if one is given."""
        clone = self._copy()
        if policy:
            clone._request_policy = policy
        return clone

    def with_cache_policy(self, policy: str) -> "OriginBuilder":
        """Use the cache policy for every behavior, if one is given."""
        clone = self._copy()
        if policy:
            clone._cache_policy = policy
        return clone

    def with_response_policy(self, policy: str) -> "OriginBuilder":
        """Use the response headers policy for every behavior, if one is given."""
        clone = self._copy()
        if policy:
            clone._response_policy = policy
        return clone

    def with_response_timeout(self, timeout: int) -> "OriginBuilder":
        """Set the origin response timeout in seconds, if positive."""
        clone = self._copy()
        if timeout > 0:
            clone._response_timeout = timeout
        return clone

    def with_origin_headers(self, headers: Optional[dict[str, str]]) -> "OriginBuilder":
        """Set headers to add on every request sent to the origin."""
        clone = self._copy()
        clone._headers = headers
        return clone

    def build(self) -> Origin:
        """Create the Origin from the configuration so far."""
        behaviors = [
            Behavior(
                path_pattern=path,
                request_policy=self._request_policy,
                cache_policy=self._cache_policy,
                response_policy=self._response_policy,
                origin_host=self._host,
                function_associations=list(functions),
            )
            for path, functions in self._behaviors.items()
        ]
        origin = Origin(
            host=self._host,
            behaviors=behaviors,
            response_timeout=self._response_timeout,
            access=self._access_type,
            header_templates=dict(self._headers) if self._headers is not None else None,
        )
        if origin.is_bucket_based():
            origin.oac = new_oac(self._distribution_name, self._host)
        return origin