"""Registry domain extraction from image references.

Follows the Docker reference convention: the first path component is a
registry host only if it looks like one (contains "." or ":", or is
"localhost"). Everything else is resolved against Docker Hub.
"""

from __future__ import annotations

from regcred.domain.shared.model.value import ValueObject

DEFAULT_DOMAIN = "docker.io"
LEGACY_DEFAULT_DOMAIN = "index.docker.io"
OFFICIAL_REPO_NAME = "library"


def _is_domain(component: str) -> bool:
    return "." in component or ":" in component or component == "localhost"


def split_docker_domain(reference: str) -> tuple[str, str]:
    """Split an image reference into (domain, remainder).

    Purely lexical, never raises. Docker Hub images without a namespace get
    the "library/" prefix, so "nginx" and "docker.io/nginx" both resolve to
    ("docker.io", "library/nginx").
    """
    if not reference:
        return DEFAULT_DOMAIN, ""

    head, sep, tail = reference.partition("/")
    if not sep or not _is_domain(head):
        domain, remainder = DEFAULT_DOMAIN, reference
    else:
        domain, remainder = head, tail

    if domain == LEGACY_DEFAULT_DOMAIN:
        domain = DEFAULT_DOMAIN
    if domain == DEFAULT_DOMAIN and "/" not in remainder:
        remainder = f"{OFFICIAL_REPO_NAME}/{remainder}"

    return domain, remainder


class ImageReference(ValueObject):
    """An image reference reduced to its registry domain and the rest."""

    domain: str
    remainder: str

    @classmethod
    def parse(cls, reference: str) -> ImageReference:
        domain, remainder = split_docker_domain(reference)
        return cls(domain=domain, remainder=remainder)

    def __str__(self) -> str:
        return f"{self.domain}/{self.remainder}"
