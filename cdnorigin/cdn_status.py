"""Observed state of a CDN distribution and the Ingresses that make it up."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from .ingress_ref import IngressRef, NamespacedName, new_ingress_ref

FAILED_INGRESS_STATUS = "Failed"
SYNCED_INGRESS_STATUS = "Synced"


class _Namespaced(Protocol):
    namespace: str
    name: str


@dataclass
class DNSStatus:
    """Status of the DNS records created for a distribution's aliases."""

    records: list[str] = field(default_factory=list)
    synced: bool = False


@dataclass
class CDNStatus:
    """Status of a CDN distribution as stored in the cluster."""

    name: str = ""
    resource_version: str = ""
    id: str = ""
    arn: str = ""
    ingresses: dict[IngressRef, str] = field(default_factory=dict)
    aliases: list[str] = field(default_factory=list)
    address: str = ""
    dns: Optional[DNSStatus] = None

    def upsert_dns_records(self, records: Iterable[str]) -> None:
        """Add the given records to the DNS status unless already present."""
        records = list(records)
        if not records:
            return
        if self.dns is None:
            self.dns = DNSStatus(records=records, synced=True)
            return
        for record in records:
            if record not in self.dns.records:
                self.dns.records.append(record)

    def remove_dns_records(self, records: Iterable[str]) -> None:
        """Remove the given records; drop the DNS status once it is empty."""
        if self.dns is None:
            return
        unwanted = set(records)
        self.dns.records = [r for r in self.dns.records if r not in unwanted]
        if not self.dns.records:
            self.dns = None

    def set_ingress_ref(self, in_sync: bool, ingress: _Namespaced) -> None:
        """Record the Ingress with a Synced or Failed status."""
        ref = new_ingress_ref(ingress.namespace, ingress.name)
        self.ingresses[ref] = SYNCED_INGRESS_STATUS if in_sync else FAILED_INGRESS_STATUS

    def remove_ingress_ref(self, ingress: _Namespaced) -> None:
        """Ensure the given Ingress is no longer referenced."""
        self.ingresses.pop(new_ingress_ref(ingress.namespace, ingress.name), None)

    def has_ingress_ref(self, ingress: _Namespaced) -> bool:
        """Return whether the given Ingress is referenced."""
        return new_ingress_ref(ingress.namespace, ingress.name) in self.ingresses

    def ingress_keys(self) -> list[NamespacedName]:
        """Return the keys of every referenced Ingress."""
        return [IngressRef(ref).to_namespaced_name() for ref in self.ingresses]

    def set_dns_sync(self, synced: bool) -> None:
        """Set the DNS sync flag, creating the DNS status if needed."""
        if self.dns is None:
            self.dns = DNSStatus()
        self.dns.synced = synced

    def set_info(self, distribution_id: str, arn: str, address: str) -> None:
        """Set the distribution's basic information."""
        self.id = distribution_id
        self.arn = arn
        self.address = address

    def exists(self) -> bool:
        """Return whether this status has been stored in the cluster."""
        return self.resource_version != ""