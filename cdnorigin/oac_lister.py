"""Paginated listing of Origin Access Controls."""

from __future__ import annotations

from typing import Any, Iterator, Protocol


class OACListClient(Protocol):
    """The subset of a CloudFront client used to list OACs."""

    def list_origin_access_controls(self, **kwargs: Any) -> dict[str, Any]: ...


class OACLister:
    """Lists Origin Access Controls page by page."""

    def __init__(self, client: OACListClient) -> None:
        self._client = client

    def pages(self) -> Iterator[dict[str, Any]]:
        """Yield each response page; the next page is fetched only when needed."""
        marker = None
        while True:
            kwargs: dict[str, Any] = {} if marker is None else {"Marker": marker}
            page = self._client.list_origin_access_controls(**kwargs)
            yield page
            listing = page.get("OriginAccessControlList") or {}
            marker = listing.get("NextMarker")
            if not listing.get("IsTruncated") or not marker:
                return