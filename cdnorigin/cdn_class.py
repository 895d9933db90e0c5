"""CDN class resources: cluster-wide settings shared by distributions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

GROUP = "cdn.gympass.com"
VERSION = "v1alpha1"
API_VERSION = f"{GROUP}/{VERSION}"
KIND = "CDNClass"

_REQUIRED_SPEC_FIELDS = ("hostedZoneID", "createAlias", "txtOwnerValue")


@dataclass
class CDNClassSpec:
    """Desired state of a CDN class."""

    hosted_zone_id: str
    create_alias: bool
    txt_owner_value: str
    # Deprecated: certificates are discovered automatically and this is ignored.
    certificate_arn: str = ""


@dataclass
class CDNClass:
    """A cluster-scoped CDN class."""

    name: str
    spec: CDNClassSpec
    conditions: list[dict[str, Any]] = field(default_factory=list)

    def to_manifest(self) -> dict[str, Any]:
        """Return the resource as a manifest mapping."""
        return {
            "apiVersion": API_VERSION,
            "kind": KIND,
            "metadata": {"name": self.name},
            "spec": {
                "certificateArn": self.spec.certificate_arn,
                "hostedZoneID": self.spec.hosted_zone_id,
                "createAlias": self.spec.create_alias,
                "txtOwnerValue": self.spec.txt_owner_value,
            },
            "status": {"conditions": [dict(c) for c in self.conditions]},
        }


def cdn_class_from_manifest(manifest: Mapping[str, Any]) -> CDNClass:
    """Build a CDNClass from a manifest mapping, validating required fields."""
    api_version = manifest.get("apiVersion", API_VERSION)
    if api_version != API_VERSION:
        raise ValueError(f"unsupported apiVersion {api_version!r}, expected {API_VERSION!r}")
    kind = manifest.get("kind", KIND)
    if kind != KIND:
        raise ValueError(f"unsupported kind {kind!r}, expected {KIND!r}")

    name = (manifest.get("metadata") or {}).get("name", "")
    spec = manifest.get("spec") or {}
    missing = [key for key in _REQUIRED_SPEC_FIELDS if key not in spec]
    if missing:
        raise ValueError(f"missing required spec fields: {', '.join(missing)}")
    if not isinstance(spec["createAlias"], bool):
        raise ValueError("spec.createAlias must be a boolean")

    conditions = (manifest.get("status") or {}).get("conditions") or []
    return CDNClass(
        name=name,
        spec=CDNClassSpec(
            hosted_zone_id=str(spec["hostedZoneID"]),
            create_alias=spec["createAlias"],
            txt_owner_value=str(spec["txtOwnerValue"]),
            certificate_arn=str(spec.get("certificateArn", "")),
        ),
        conditions=[dict(c) for c in conditions],
    )