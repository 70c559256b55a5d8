"""Hosting provider detection for remote URLs."""

import logging

from pr_opener.models.provider import HostingProvider, Service

logger = logging.getLogger(__name__)

# Checked in order; the first hostname found in the URL wins.
DETECTION_RULES = [
    (HostingProvider.GITHUB, ("github.com",)),
    (HostingProvider.GITLAB, ("gitlab.com",)),
    (HostingProvider.BITBUCKET, ("bitbucket.org",)),
    (HostingProvider.AZURE_DEVOPS, ("dev.azure.com", "visualstudio.com")),
]


def determine_service(url: str) -> HostingProvider:
    """Classify a remote URL by the hostnames it contains."""
    for provider, hostnames in DETECTION_RULES:
        if any(hostname in url for hostname in hostnames):
            return provider
    return HostingProvider.UNKNOWN


def resolve_service(url: str, service: Service | None = None) -> HostingProvider:
    """
    Pick the hosting provider for a remote.

    Args:
        url: Remote URL
        service: Explicit choice; skips URL inspection when given

    Returns:
        The provider, possibly HostingProvider.UNKNOWN
    """
    if service is not None:
        logger.debug("Using explicit service %s", service.value)
        return service.provider

    provider = determine_service(url)
    logger.debug("Classified %s as %s", url, provider.value)
    return provider
