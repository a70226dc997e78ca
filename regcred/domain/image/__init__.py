from regcred.domain.image.reference import (
    DEFAULT_DOMAIN,
    ImageReference,
    split_docker_domain,
)

__all__ = [
    "DEFAULT_DOMAIN",
    "ImageReference",
    "split_docker_domain",
]
