"""Inspect how image references resolve to registry domains."""

import cyclopts

from regcred.cli.console import get_console
from regcred.domain.image import ImageReference

app = cyclopts.App(name="split", help="Show the registry domain of image references")


@app.default
def split(*images: str, domain: str | None = None) -> None:
    """Print the registry domain and remainder of each image.

    Args:
        images: Image references, e.g. nginx:latest or ghcr.io/org/app:v1.
        domain: If given, also show whether each image would get the pull secret.
    """
    rows = []
    for image in images:
        ref = ImageReference.parse(image)
        row = {"image": image, "domain": ref.domain, "remainder": ref.remainder}
        if domain is not None:
            row["match"] = "yes" if ref.domain == domain else "no"
        rows.append(row)

    columns = [("image", "Image"), ("domain", "Domain"), ("remainder", "Remainder")]
    if domain is not None:
        columns.append(("match", f"Matches {domain}"))
    get_console().table(rows, columns)
