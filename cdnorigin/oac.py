"""Origin Access Control (OAC) definitions for bucket-based origins."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

OAC_NAME_CHAR_LIMIT = 63

OAC_ORIGIN_TYPE_S3 = "s3"
OAC_SIGNING_BEHAVIOR_ALWAYS = "always"
OAC_SIGNING_PROTOCOL_SIGV4 = "sigv4"


@dataclass(frozen=True)
class OAC:
    """An Origin Access Control that lets a distribution sign requests to a bucket."""

    id: str = ""
    name: str = ""
    description: str = ""
    origin_name: str = ""
    origin_access_control_origin_type: str = ""
    signing_behavior: str = ""
    signing_protocol: str = ""


def new_oac(distribution: str, origin_name: str) -> OAC:
    """Create the desired OAC for an origin of the given distribution."""
    return OAC(
        name=oac_name(distribution, origin_name),
        origin_name=origin_name,
        description=_oac_description(origin_name),
        origin_access_control_origin_type=OAC_ORIGIN_TYPE_S3,
        signing_behavior=OAC_SIGNING_BEHAVIOR_ALWAYS,
        signing_protocol=OAC_SIGNING_PROTOCOL_SIGV4,
    )


def oac_name(distribution_name: str, s3_host: str) -> str:
    """Return an OAC name that fits within the service's length limit."""
    s3_name = s3_host.split(".")[0]
    default_name = f"{distribution_name}-{s3_name}"
    if len(default_name) <= OAC_NAME_CHAR_LIMIT:
        return default_name

    host_name = distribution_name.split(".")[0]
    return f"{host_name}-{_short_id(distribution_name, s3_name)}"


def _oac_description(origin_name: str) -> str:
    return f"OAC for {origin_name}, managed by cdn-origin-controller"


def _short_id(distribution_name: str, domain_name: str) -> str:
    text = f"{distribution_name}-{domain_name}"
    return hashlib.md5(text.encode()).hexdigest()[:8]