"""Data models for pr-opener."""

from pr_opener.models.options import OpenerOptions
from pr_opener.models.pr import PullRequestRequest
from pr_opener.models.provider import HostingProvider, Service
from pr_opener.models.repository import AzureProject, OwnerRepo, RemoteReference

__all__ = [
    "AzureProject",
    "HostingProvider",
    "OpenerOptions",
    "OwnerRepo",
    "PullRequestRequest",
    "RemoteReference",
    "Service",
]
