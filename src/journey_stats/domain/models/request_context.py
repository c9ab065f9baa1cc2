"""Request context domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Identity of the authenticated caller.

    Passed explicitly into every statistics operation; the user id is never
    taken from caller-supplied input.
    """

    user_id: str
