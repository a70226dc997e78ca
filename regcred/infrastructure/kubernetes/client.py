"""API client construction from KubernetesConfig."""

import logging

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from regcred.config import KubernetesConfig
from regcred.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)


def load_api_client(settings: KubernetesConfig) -> client.ApiClient:
    """Build an ApiClient from the service account or a kubeconfig.

    With `in_cluster` unset the service account is tried first, which is
    what a webhook deployed in the cluster wants; local runs fall through
    to the kubeconfig.
    """
    if settings.in_cluster is not False:
        try:
            configuration = client.Configuration()
            config.load_incluster_config(client_configuration=configuration)
            logger.info("Using in-cluster Kubernetes configuration")
            return client.ApiClient(configuration)
        except ConfigException:
            if settings.in_cluster:
                raise ConfigurationError("In-cluster Kubernetes configuration not available") from None
            logger.debug("Not running in a cluster, falling back to kubeconfig")

    try:
        api_client = config.new_client_from_config(
            config_file=settings.kubeconfig,
            context=settings.context,
        )
    except ConfigException as e:
        raise ConfigurationError(f"Unable to load kubeconfig: {e}") from e

    logger.info("Using kubeconfig context %s", settings.context or "(current)")
    return api_client
