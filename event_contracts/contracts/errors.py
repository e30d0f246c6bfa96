from __future__ import annotations

from typing import Iterable


class UnknownIdentifierError(KeyError, ValueError):
    """Raised by strict lookups when a key is not part of its catalog."""

    def __init__(self, kind: str, value: object):
        self.kind = kind
        self.value = value
        super().__init__(f"unknown {kind}: {value!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


class RoutingIntegrityError(ValueError):
    """The routing table references identifiers outside their catalogs.

    This is a defect in the package itself, never in caller input.
    """

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__("routing table integrity check failed: " + "; ".join(self.problems))
