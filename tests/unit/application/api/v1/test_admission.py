"""Unit tests for AdmissionResponse construction and JSONPatch generation."""

import base64
import json

from regcred.application.api.v1.admission import (
    AdmissionReview,
    allowed,
    errored,
    image_pull_secrets_patch,
)
from regcred.domain.injection.model import LocalObjectReference, Pod


def _pod(raw: dict, injected: list[str]) -> Pod:
    pod = Pod.model_validate(raw)
    pod.spec.image_pull_secrets.extend(LocalObjectReference(name=n) for n in injected)
    return pod


class TestImagePullSecretsPatch:
    def test_no_change_no_patch(self):
        raw = {"spec": {"containers": [{"name": "a", "image": "nginx"}]}}
        assert image_pull_secrets_patch(raw, _pod(raw, [])) == []

    def test_adds_list_when_absent(self):
        raw = {"spec": {"containers": [{"name": "a", "image": "nginx"}]}}
        patch = image_pull_secrets_patch(raw, _pod(raw, ["regcred"]))
        assert patch == [
            {"op": "add", "path": "/spec/imagePullSecrets", "value": [{"name": "regcred"}]}
        ]

    def test_appends_when_present(self):
        raw = {"spec": {"imagePullSecrets": [{"name": "other"}]}}
        patch = image_pull_secrets_patch(raw, _pod(raw, ["regcred"]))
        assert patch == [
            {"op": "add", "path": "/spec/imagePullSecrets/-", "value": {"name": "regcred"}}
        ]

    def test_null_list_is_treated_as_absent(self):
        raw = {"spec": {"imagePullSecrets": None}}
        patch = image_pull_secrets_patch(raw, _pod(raw, ["regcred"]))
        assert patch[0]["path"] == "/spec/imagePullSecrets"


class TestResponses:
    def test_allowed_encodes_patch(self):
        patch = [{"op": "add", "path": "/spec/imagePullSecrets", "value": [{"name": "regcred"}]}]
        response = allowed("uid-1", patch)
        assert response.allowed
        assert response.patch_type == "JSONPatch"
        assert json.loads(base64.b64decode(response.patch)) == patch

    def test_allowed_without_patch(self):
        response = allowed("uid-1", [])
        assert response.to_api() == {"uid": "uid-1", "allowed": True}

    def test_errored(self):
        response = errored("uid-1", 500, "boom")
        assert response.to_api() == {
            "uid": "uid-1",
            "allowed": False,
            "status": {"code": 500, "message": "boom"},
        }

    def test_review_uses_camel_case(self):
        review = AdmissionReview.model_validate(
            {
                "apiVersion": "admission.k8s.io/v1",
                "kind": "AdmissionReview",
                "request": {"uid": "u", "namespace": "ns", "dryRun": True, "object": {}},
            }
        )
        assert review.request.dry_run is True
        assert review.to_api()["apiVersion"] == "admission.k8s.io/v1"
