"""CloudFront distributions and a builder that assembles them from origins."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from .oac import OAC
from .origin import ORIGIN_ACCESS_PUBLIC, Behavior, Origin, OriginBuilder
from .settings import Config

OWNERSHIP_TAG_KEY = "cdn-origin-controller.gympass.com/owned"
OWNERSHIP_TAG_VALUE = "true"
GROUP_TAG_KEY = "cdn-origin-controller.gympass.com/cdn.group"

TEMPLATE_GROUP = "{{group}}"
DEFAULT_ORIGIN_DISTRIBUTION_NAME = "dist"


class DistributionError(ValueError):
    """Raised when a distribution cannot be built from its configuration."""


def render_description(template: str, group: str) -> str:
    """Fill the group placeholder of a description template."""
    return template.replace(TEMPLATE_GROUP, group)


@dataclass(frozen=True)
class TLSConfig:
    """TLS termination settings of a distribution."""

    enabled: bool = False
    cert_arn: str = ""
    security_policy_id: str = ""


@dataclass(frozen=True)
class LoggingConfig:
    """Access log settings of a distribution."""

    enabled: bool = False
    bucket_address: str = ""
    prefix: str = ""


@dataclass
class Distribution:
    """A CloudFront distribution."""

    id: str = ""
    arn: str = ""
    address: str = ""
    alternate_domains: list[str] = field(default_factory=list)
    custom_origins: list[Origin] = field(default_factory=list)
    default_origin: Origin = field(default_factory=Origin)
    description: str = ""
    group: str = ""
    ipv6_enabled: bool = False
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    price_class: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    tls: TLSConfig = field(default_factory=TLSConfig)
    web_acl_id: str = ""

    def sorted_custom_behaviors(self) -> list[Behavior]:
        """Return all custom behaviors, most specific (longest) path first."""
        behaviors = [b for o in self.custom_origins for b in o.behaviors]
        return sorted(behaviors, key=lambda b: len(b.path_pattern), reverse=True)

    def exists(self) -> bool:
        """Return whether the distribution exists on AWS."""
        return bool(self.id)

    def is_empty(self) -> bool:
        """Return whether the distribution has no custom origins."""
        return not self.custom_origins

    def oacs(self) -> list[OAC]:
        """Return the OACs of every bucket-based custom origin."""
        return [o.oac for o in self.custom_origins if o.is_bucket_based()]

    def has_origin(self, origin_host: str) -> bool:
        """Return whether a custom origin with the given host is present."""
        return any(o.host == origin_host for o in self.custom_origins)


class DistributionBuilder:
    """Builds a Distribution; each "with_" call returns a new builder."""

    def __init__(self, group: str, cfg: Config) -> None:
        self._cfg = cfg
        self._group = group
        self._description = render_description(cfg.cloudfront_description_template, group)
        self._default_origin_domain = cfg.default_origin_domain
        self._price_class = cfg.cloudfront_price_class
        self._id = ""
        self._arn = ""
        self._address = ""
        self._alternate_domains: list[str] = []
        self._custom_origins: dict[str, Origin] = {}
        self._ipv6_enabled = False
        self._logging = LoggingConfig()
        self._tags: dict[str, str] = {}
        self._tls = TLSConfig()
        self._web_acl_id = ""

    def _copy(self) -> "DistributionBuilder":
        clone = object.__new__(DistributionBuilder)
        clone.__dict__.update(self.__dict__)
        clone._alternate_domains = list(self._alternate_domains)
        clone._custom_origins = dict(self._custom_origins)
        clone._tags = dict(self._tags)
        return clone

    def with_origin(self, origin: Origin) -> "DistributionBuilder":
        """Add an origin; a later origin with the same host replaces an earlier one."""
        clone = self._copy()
        clone._custom_origins[origin.host] = origin
        return clone

    def with_logging(self, bucket_address: str, prefix: str) -> "DistributionBuilder":
        """Send access logs to the given bucket with the given file prefix."""
        clone = self._copy()
        clone._logging = LoggingConfig(enabled=True, bucket_address=bucket_address, prefix=prefix)
        return clone

    def append_tags(self, tags: Mapping[str, str]) -> "DistributionBuilder":
        """Add custom tags to the distribution."""
        clone = self._copy()
        clone._tags.update(tags)
        return clone

    def with_tls(self, cert_arn: str, security_policy_id: str) -> "DistributionBuilder":
        """Enable TLS termination with the given certificate and security policy."""
        clone = self._copy()
        clone._tls = TLSConfig(enabled=True, cert_arn=cert_arn, security_policy_id=security_policy_id)
        return clone

    def with_ipv6(self) -> "DistributionBuilder":
        """Enable IPv6."""
        clone = self._copy()
        clone._ipv6_enabled = True
        return clone

    def with_alternate_domains(self, domains: Iterable[str]) -> "DistributionBuilder":
        """Add alternate domains, skipping those already present."""
        clone = self._copy()
        for domain in domains:
            if domain not in clone._alternate_domains:
                clone._alternate_domains.append(domain)
        return clone

    def with_web_acl(self, acl_id: str) -> "DistributionBuilder":
        """Associate the Web ACL with the given ID."""
        clone = self._copy()
        clone._web_acl_id = acl_id
        return clone

    def with_arn(self, arn: str) -> "DistributionBuilder":
        """Identify an existing distribution by its ARN."""
        clone = self._copy()
        clone._id = _extract_id(arn)
        clone._arn = arn
        return clone

    def build(self) -> Distribution:
        """Create the Distribution, raising DistributionError if origins conflict."""
        default_origin = OriginBuilder(
            DEFAULT_ORIGIN_DISTRIBUTION_NAME,
            self._default_origin_domain,
            ORIGIN_ACCESS_PUBLIC,
            self._cfg,
        ).build()
        custom_origins = list(self._custom_origins.values())
        _validate(default_origin, custom_origins)
        return Distribution(
            id=self._id,
            arn=self._arn,
            address=self._address,
            alternate_domains=list(self._alternate_domains),
            custom_origins=_merge_origins(custom_origins),
            default_origin=default_origin,
            description=self._description,
            group=self._group,
            ipv6_enabled=self._ipv6_enabled,
            logging=self._logging,
            price_class=self._price_class,
            tags=self._generate_tags(),
            tls=self._tls,
            web_acl_id=self._web_acl_id,
        )

    def _generate_tags(self) -> dict[str, str]:
        tags = {OWNERSHIP_TAG_KEY: OWNERSHIP_TAG_VALUE, GROUP_TAG_KEY: self._group}
        tags.update(self._tags)
        return tags


def _extract_id(arn: str) -> str:
    # arn:aws:cloudfront::<account>:distribution/<ID>
    parts = arn.split("/")
    if len(parts) < 2:
        raise DistributionError(f"invalid distribution ARN: {arn!r}")
    return parts[1]


def _validate(default_origin: Origin, custom_origins: list[Origin]) -> None:
    seen: dict[str, Origin] = {}
    for origin in (default_origin, *custom_origins):
        existing: Optional[Origin] = seen.get(origin.host)
        if existing is not None and not existing.has_equal_parameters(origin):
            raise DistributionError(
                f"same host ({origin.host}) specified twice with different "
                "parameters for origin configuration"
            )
        seen[origin.host] = origin


def _merge_origins(origins: list[Origin]) -> list[Origin]:
    merged: dict[str, Origin] = {}
    for candidate in origins:
        existing = merged.get(candidate.host)
        if existing is None:
            merged[candidate.host] = candidate
        else:
            merged[candidate.host] = dataclasses.replace(
                existing, behaviors=[*existing.behaviors, *candidate.behaviors]
            )
    return list(merged.values())