"""Pod mutating admission webhook."""

import logging

import pydantic
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from regcred.application.api.v1.admission import (
    AdmissionReview,
    allowed,
    errored,
    image_pull_secrets_patch,
)
from regcred.application.api.v1.errors import map_regcred_error
from regcred.domain.injection.model import Pod
from regcred.domain.injection.service import PullSecretInjector
from regcred.domain.shared.error import DecodeError, RegcredError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["admission"],
    route_class=DishkaRoute,
)


def _decode_pod(raw_object: dict | None, namespace: str | None) -> Pod:
    if not raw_object:
        raise DecodeError("AdmissionRequest carries no object")
    try:
        pod = Pod.model_validate(raw_object)
    except pydantic.ValidationError as e:
        raise DecodeError(f"Unable to decode Pod: {e}") from e
    # On CREATE the namespace is often only present on the request
    if not pod.metadata.namespace:
        pod.metadata.namespace = namespace
    return pod


@router.post(
    "/pod/mutate",
    response_model=AdmissionReview,
    response_model_exclude_none=True,
)
async def mutate_pod(
    review: AdmissionReview,
    injector: FromDishka[PullSecretInjector],
) -> AdmissionReview:
    """Inject the configured imagePullSecret into an incoming Pod."""
    req = review.request
    if req is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="AdmissionReview has no request",
        )

    pod_name = f"{req.namespace or ''}/{req.name or ''}"

    try:
        pod = _decode_pod(req.object, req.namespace)
        await injector.mutate(pod, dry_run=bool(req.dry_run))
    except DecodeError as e:
        logger.error("Unable to decode Pod (uid=%s, pod=%s): %s", req.uid, pod_name, e.message)
        response = errored(req.uid, map_regcred_error(e), e.message)
    except RegcredError as e:
        logger.error("Unable to inject pull secret (uid=%s, pod=%s): %s", req.uid, pod_name, e.message)
        response = errored(req.uid, map_regcred_error(e), e.message)
    else:
        patch = image_pull_secrets_patch(req.object or {}, pod)
        if patch:
            logger.info("Injected imagePullSecret into pod %s (uid=%s)", pod.display_name(), req.uid)
        response = allowed(req.uid, patch)

    return AdmissionReview(api_version=review.api_version, response=response)
