"""PullSecretInjector - attaches registry credentials to Pods."""

import logfire

from regcred.domain.image import split_docker_domain
from regcred.domain.injection.model import (
    InjectionSettings,
    LocalObjectReference,
    Pod,
    Secret,
    SecretRef,
)
from regcred.domain.injection.port import (
    AlreadyExists,
    Created,
    Found,
    NotFound,
    SecretStore,
)
from regcred.domain.shared.error import (
    CanonicalMissingError,
    StoreWriteError,
    ValidationError,
)
from regcred.domain.shared.service import Service


class PullSecretInjector(Service):
    """Adds the configured imagePullSecret to Pods pulling from the configured registry.

    The secret is copied from its canonical namespace into the Pod's namespace
    the first time it is needed there. Repeated calls for the same Pod, and
    concurrent calls for Pods in the same namespace, are safe: the store's
    create conflict decides who provisions, and nothing is retried here.
    """

    store: SecretStore
    settings: InjectionSettings

    async def mutate(self, pod: Pod, dry_run: bool = False) -> Pod:
        """Inject the pull secret into `pod` in place if it needs one.

        The Pod is only touched after provisioning succeeded, so a raised
        error leaves it as it was. With `dry_run` the store is not written
        to and the reference is added without provisioning.

        Raises:
            ValidationError: If the Pod has no namespace.
            CanonicalMissingError: If the template secret does not exist.
            StoreReadError: If a store read fails.
            StoreWriteError: If the store rejects the copy.
        """
        secret_name = self.settings.secret_name

        if pod.has_pull_secret(secret_name):
            return pod

        if not self.matches_domain(pod):
            return pod

        if not pod.namespace:
            raise ValidationError("Pod has no namespace", field="metadata.namespace")

        with logfire.span("PullSecretInjector.mutate", pod=pod.display_name()):
            if not dry_run:
                await self.ensure_secret(pod.namespace)
            pod.spec.image_pull_secrets.append(LocalObjectReference(name=secret_name))

        return pod

    def matches_domain(self, pod: Pod) -> bool:
        """True if any container pulls from the configured registry domain."""
        for image in pod.images:
            domain, _ = split_docker_domain(image)
            if domain == self.settings.domain:
                return True
        return False

    async def ensure_secret(self, namespace: str) -> Secret:
        """Get the pull secret in `namespace`, copying it from the canonical one if absent."""
        target = self.settings.target(namespace)
        with logfire.span("PullSecretInjector.ensure_secret", secret=str(target)) as span:
            return await self._ensure_secret(target, span)

    async def _ensure_secret(self, target: SecretRef, span: logfire.LogfireSpan) -> Secret:
        namespace = target.namespace

        match await self.store.get(target):
            case Found(secret=secret):
                span.set_attribute("outcome", "existing")
                return secret
            case NotFound():
                pass

        canonical = self.settings.canonical
        match await self.store.get(canonical):
            case Found(secret=template):
                pass
            case NotFound():
                raise CanonicalMissingError(f"Pull secret {canonical} does not exist")

        match await self.store.create(template.copy_to(namespace)):
            case Created(secret=secret):
                span.set_attribute("outcome", "created")
                return secret
            case AlreadyExists():
                span.set_attribute("outcome", "lost_race")

        # Lost the create race; the winner's copy must be readable now
        match await self.store.get(target):
            case Found(secret=secret):
                return secret
            case NotFound():
                raise StoreWriteError(f"Pull secret {target} reported as existing but not found")
