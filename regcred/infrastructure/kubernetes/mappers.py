"""Map between kubernetes client models and domain Secrets."""

from kubernetes.client import ApiClient, V1Secret

from regcred.domain.injection.model import Secret


def secret_to_domain(api_client: ApiClient, v1_secret: V1Secret) -> Secret:
    # sanitize_for_serialization produces the camelCase wire dict
    return Secret.model_validate(api_client.sanitize_for_serialization(v1_secret))


def secret_to_body(secret: Secret) -> dict:
    return secret.to_api()
