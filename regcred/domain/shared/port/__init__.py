from typing import Protocol


class Port(Protocol):
    """Marker for interfaces the domain depends on and infrastructure implements."""
