"""Platform service clients and version gates."""

from jfrog_cli_artifactory.platform.client import ArtifactoryClient, EvidenceClient, MetadataClient
from jfrog_cli_artifactory.platform.transport import HttpResponse, HttpTransport, UrllibTransport
from jfrog_cli_artifactory.platform.version import compare_versions, is_at_least

__all__ = [
    "ArtifactoryClient",
    "EvidenceClient",
    "MetadataClient",
    "HttpResponse",
    "HttpTransport",
    "UrllibTransport",
    "compare_versions",
    "is_at_least",
]
