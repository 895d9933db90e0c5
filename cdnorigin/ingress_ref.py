"""References to Ingress resources stored as "namespace/name" strings."""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True, order=True)
class NamespacedName:
    """A namespace and a name that identify a namespaced object."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}{SEPARATOR}{self.name}"


class IngressRef(str):
    """A reference to an Ingress, stored as "namespace/name"."""

    __slots__ = ()

    def _parts(self) -> list[str]:
        return self.split(SEPARATOR)

    def namespace(self) -> str:
        """Return the namespace part of the reference."""
        return self._parts()[0]

    def name(self) -> str:
        """Return the name part of the reference."""
        return self._parts()[1]

    def to_namespaced_name(self) -> NamespacedName:
        """Return the reference as a NamespacedName."""
        parts = self._parts()
        return NamespacedName(namespace=parts[0], name=parts[1])


def new_ingress_ref(namespace: str, name: str) -> IngressRef:
    """Create an IngressRef for the given namespace and name."""
    return IngressRef(namespace + SEPARATOR + name)