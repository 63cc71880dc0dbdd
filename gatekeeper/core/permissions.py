"""Role-based permission policy for CRUD verbs on resource collections.

Decisions depend only on (role, verb); there are no per-record ACLs. Add a role
or a verb by editing ROLE_CAPABILITIES.
"""

from typing import Literal

from gatekeeper.core.errors import Forbidden

Verb = Literal["create", "read", "update", "delete"]

VERBS: tuple[str, ...] = ("create", "read", "update", "delete")

ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    "user": frozenset({"read"}),
    "writer": frozenset({"read", "create"}),
    "editor": frozenset({"read", "create", "update"}),
    "admin": frozenset({"read", "create", "update", "delete"}),
}

DEFAULT_ROLE = "user"


def known_roles() -> tuple[str, ...]:
    """Roles currently defined in ROLE_CAPABILITIES."""
    return tuple(ROLE_CAPABILITIES)


def capabilities_for(role: str) -> frozenset[str]:
    """Capabilities granted to role; unknown roles get none."""
    return ROLE_CAPABILITIES.get(role, frozenset())


def authorize(role: str, verb: str) -> bool:
    """Return True if role may perform verb."""
    return verb in capabilities_for(role)


def require(role: str, verb: str) -> None:
    """Raise Forbidden unless role may perform verb."""
    if not authorize(role, verb):
        raise Forbidden()
