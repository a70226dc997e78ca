"""admission.k8s.io/v1 AdmissionReview payloads and JSONPatch construction."""

import base64
import json
from typing import Any

from regcred.domain.injection.model import Pod
from regcred.domain.shared.model.value import KubeObject

ADMISSION_API_VERSION = "admission.k8s.io/v1"
JSON_PATCH = "JSONPatch"


class AdmissionRequest(KubeObject):
    uid: str
    kind: dict[str, str] | None = None
    namespace: str | None = None
    name: str | None = None
    operation: str | None = None
    object: dict[str, Any] | None = None
    dry_run: bool | None = None


class AdmissionStatus(KubeObject):
    code: int
    message: str


class AdmissionResponse(KubeObject):
    uid: str
    allowed: bool
    status: AdmissionStatus | None = None
    patch: str | None = None
    patch_type: str | None = None


class AdmissionReview(KubeObject):
    api_version: str = ADMISSION_API_VERSION
    kind: str = "AdmissionReview"
    request: AdmissionRequest | None = None
    response: AdmissionResponse | None = None


def allowed(uid: str, patch: list[dict] | None = None) -> AdmissionResponse:
    if not patch:
        return AdmissionResponse(uid=uid, allowed=True)
    encoded = base64.b64encode(json.dumps(patch).encode()).decode()
    return AdmissionResponse(uid=uid, allowed=True, patch=encoded, patch_type=JSON_PATCH)


def errored(uid: str, code: int, message: str) -> AdmissionResponse:
    return AdmissionResponse(
        uid=uid,
        allowed=False,
        status=AdmissionStatus(code=code, message=message),
    )


def image_pull_secrets_patch(raw_object: dict[str, Any], pod: Pod) -> list[dict]:
    """JSONPatch turning the submitted object's imagePullSecrets into the Pod's.

    The injector only ever appends, so existing entries are left in place.
    """
    before = (raw_object.get("spec") or {}).get("imagePullSecrets") or []
    after = [ref.to_api() for ref in pod.spec.image_pull_secrets]
    added = after[len(before) :]
    if not added:
        return []
    if not before:
        return [{"op": "add", "path": "/spec/imagePullSecrets", "value": after}]
    return [{"op": "add", "path": "/spec/imagePullSecrets/-", "value": ref} for ref in added]
