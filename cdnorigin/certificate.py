"""Certificate discovery: match distribution hosts against issued ACM certificates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Protocol

ISSUED_STATUS = "ISSUED"

CertFilter = Callable[["Certificate"], bool]


class CertificateError(Exception):
    """Raised when certificates cannot be found or described."""


class NoMatchingCertificateError(CertificateError):
    """Raised when no issued certificate covers every requested host."""

    def __init__(self) -> None:
        super().__init__("could not find any matching certificate")


@dataclass(frozen=True)
class Certificate:
    """A certificate with its main domain name and subject alternative names."""

    arn: str
    domain_name: str
    alternative_names: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "alternative_names", tuple(self.alternative_names))


class _Paginator(Protocol):
    def paginate(self, **kwargs: Any) -> Iterable[dict[str, Any]]: ...


class ACMClient(Protocol):
    """The subset of an ACM client the repository relies on."""

    def get_paginator(self, operation_name: str) -> _Paginator: ...

    def describe_certificate(self, **kwargs: Any) -> dict[str, Any]: ...


class CertificateRepository:
    """Looks up issued certificates through an ACM client."""

    def __init__(self, client: ACMClient) -> None:
        self._client = client

    def find_by_filter(self, predicate: CertFilter) -> list[Certificate]:
        """Return every issued certificate for which predicate holds."""
        try:
            return list(self._matching(predicate))
        except CertificateError as exc:
            raise CertificateError(f"finding certificate: {exc}") from exc
        except Exception as exc:
            raise CertificateError(f"finding certificate: {exc}") from exc

    def _matching(self, predicate: CertFilter) -> Iterable[Certificate]:
        paginator = self._client.get_paginator("list_certificates")
        for page in paginator.paginate(CertificateStatuses=[ISSUED_STATUS]):
            for summary in page.get("CertificateSummaryList") or []:
                cert = self._describe(summary["CertificateArn"])
                if predicate(cert):
                    yield cert

    def _describe(self, arn: str) -> Certificate:
        try:
            details = self._client.describe_certificate(CertificateArn=arn)["Certificate"]
        except Exception as exc:
            raise CertificateError(f"describing certificate (ARN: {arn}): {exc}") from exc
        return Certificate(
            arn=details["CertificateArn"],
            domain_name=details["DomainName"],
            alternative_names=tuple(details.get("SubjectAlternativeNames") or ()),
        )


class CertificateService:
    """Discovers certificates suitable for a set of hosts."""

    def __init__(self, repository: CertificateRepository) -> None:
        self._repository = repository

    def discover_by_host(self, hosts: Iterable[str]) -> Certificate:
        """Return the first certificate covering all hosts."""
        try:
            certs = self._repository.find_by_filter(matching_domain_filter(hosts))
        except CertificateError as exc:
            raise CertificateError(f"discovery certificate: {exc}") from exc
        if not certs:
            raise NoMatchingCertificateError()
        return certs[0]


def matching_domain_filter(hosts: Iterable[str]) -> CertFilter:
    """Return a filter accepting certificates that match every given host."""
    wanted = list(hosts)

    def _filter(cert: Certificate) -> bool:
        return all(cert_matches(host, cert) for host in wanted)

    return _filter


def cert_matches(host: str, cert: Certificate) -> bool:
    """Return whether the certificate covers host exactly or by a one-level wildcard."""
    host_domain = ".".join(host.split(".")[1:])
    for cert_host in (*cert.alternative_names, cert.domain_name):
        if host == cert_host:
            return True
        if cert_host.startswith("*."):
            cert_host = cert_host.replace("*.", "")
        if cert_host == host_domain:
            return True
    return False