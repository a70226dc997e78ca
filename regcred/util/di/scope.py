"""Custom Dishka scopes for regcred."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime (API client, settings, injector)
    - UOW: One admission request
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
