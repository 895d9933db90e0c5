"""Functions (CloudFront Functions and Lambda@Edge) associated with cache behaviors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional

EVENT_TYPE_VIEWER_REQUEST = "viewer-request"
EVENT_TYPE_VIEWER_RESPONSE = "viewer-response"
EVENT_TYPE_ORIGIN_REQUEST = "origin-request"
EVENT_TYPE_ORIGIN_RESPONSE = "origin-response"


class FunctionType(str, enum.Enum):
    """Kind of function bound to a behavior."""

    CLOUDFRONT = "cloudfront"
    EDGE = "edge"


@dataclass(frozen=True)
class FunctionSpec:
    """A function as requested by the user."""

    arn: str
    function_type: FunctionType = FunctionType.EDGE
    include_body: bool = False


@dataclass(frozen=True)
class FunctionAssociations:
    """Functions requested for each event of a behavior."""

    viewer_request: Optional[FunctionSpec] = None
    viewer_response: Optional[FunctionSpec] = None
    origin_request: Optional[FunctionSpec] = None
    origin_response: Optional[FunctionSpec] = None


@dataclass(frozen=True)
class Function:
    """A function bound to an event type."""

    arn: str
    event_type: str

    type: ClassVar[FunctionType]


@dataclass(frozen=True)
class RequestCloudfrontFunction(Function):
    """A CloudFront Function handling requests."""

    type: ClassVar[FunctionType] = FunctionType.CLOUDFRONT


@dataclass(frozen=True)
class RequestEdgeFunction(Function):
    """A Lambda@Edge function handling requests, optionally given the body."""

    include_body: bool = False

    type: ClassVar[FunctionType] = FunctionType.EDGE


@dataclass(frozen=True)
class ResponseCloudfrontFunction(Function):
    """A CloudFront Function handling responses."""

    type: ClassVar[FunctionType] = FunctionType.CLOUDFRONT


@dataclass(frozen=True)
class ResponseEdgeFunction(Function):
    """A Lambda@Edge function handling responses."""

    type: ClassVar[FunctionType] = FunctionType.EDGE


def new_functions(associations: FunctionAssociations) -> list[Function]:
    """Build the functions for every event that has one requested."""
    functions: list[Function] = []

    vr = associations.viewer_request
    if vr is not None:
        if vr.function_type == FunctionType.EDGE:
            functions.append(RequestEdgeFunction(vr.arn, EVENT_TYPE_VIEWER_REQUEST, vr.include_body))
        else:
            functions.append(RequestCloudfrontFunction(vr.arn, EVENT_TYPE_VIEWER_REQUEST))

    vs = associations.viewer_response
    if vs is not None:
        if vs.function_type == FunctionType.EDGE:
            functions.append(ResponseEdgeFunction(vs.arn, EVENT_TYPE_VIEWER_RESPONSE))
        else:
            functions.append(ResponseCloudfrontFunction(vs.arn, EVENT_TYPE_VIEWER_RESPONSE))

    orq = associations.origin_request
    if orq is not None:
        functions.append(RequestEdgeFunction(orq.arn, EVENT_TYPE_ORIGIN_REQUEST, orq.include_body))

    ors = associations.origin_response
    if ors is not None:
        functions.append(ResponseEdgeFunction(ors.arn, EVENT_TYPE_ORIGIN_RESPONSE))

    return functions