"""Repository template field names and the rclass/package-type vocabulary."""

from __future__ import annotations

# Discriminators
KEY = "key"
RCLASS = "rclass"
PACKAGE_TYPE = "packageType"

# Repository classes
LOCAL = "local"
REMOTE = "remote"
VIRTUAL = "virtual"
FEDERATED = "federated"

RCLASSES: tuple[str, ...] = (LOCAL, REMOTE, VIRTUAL, FEDERATED)

# Package types
ALPINE = "alpine"
BOWER = "bower"
CARGO = "cargo"
CHEF = "chef"
COCOAPODS = "cocoapods"
COMPOSER = "composer"
CONAN = "conan"
CONDA = "conda"
CRAN = "cran"
DEBIAN = "debian"
DOCKER = "docker"
GEMS = "gems"
GENERIC = "generic"
GITLFS = "gitlfs"
GO = "go"
GRADLE = "gradle"
HELM = "helm"
IVY = "ivy"
MAVEN = "maven"
NPM = "npm"
NUGET = "nuget"
OPKG = "opkg"
P2 = "p2"
PUPPET = "puppet"
PYPI = "pypi"
RPM = "rpm"
SBT = "sbt"
SWIFT = "swift"
TERRAFORM = "terraform"
VAGRANT = "vagrant"
VCS = "vcs"
YUM = "yum"

# Common repository fields
URL = "url"
DESCRIPTION = "description"
NOTES = "notes"
INCLUDES_PATTERN = "includesPattern"
EXCLUDES_PATTERN = "excludesPattern"
REPO_LAYOUT_REF = "repoLayoutRef"
PROJECT_KEY = "projectKey"
# The repository configuration holds a list, though only one environment is allowed in practice.
ENVIRONMENTS = "environments"
BLACKED_OUT = "blackedOut"
XRAY_INDEX = "xrayIndex"
PROPERTY_SETS = "propertySets"
DOWNLOAD_REDIRECT = "downloadRedirect"
PRIORITY_RESOLUTION = "priorityResolution"
CDN_REDIRECT = "cdnRedirect"
ARCHIVE_BROWSING_ENABLED = "archiveBrowsingEnabled"

# Maven-family fields
HANDLE_RELEASES = "handleReleases"
HANDLE_SNAPSHOTS = "handleSnapshots"
MAX_UNIQUE_SNAPSHOTS = "maxUniqueSnapshots"
SUPPRESS_POM_CONSISTENCY_CHECKS = "suppressPomConsistencyChecks"
SNAPSHOT_VERSION_BEHAVIOR = "snapshotVersionBehavior"
CHECKSUM_POLICY_TYPE = "checksumPolicyType"
FETCH_JARS_EAGERLY = "fetchJarsEagerly"
FETCH_SOURCES_EAGERLY = "fetchSourcesEagerly"
REMOTE_REPO_CHECKSUM_POLICY_TYPE = "remoteRepoChecksumPolicyType"
REJECT_INVALID_JARS = "rejectInvalidJars"
KEY_PAIR = "keyPair"
POM_REPOSITORY_REFERENCES_CLEANUP_POLICY = "pomRepositoryReferencesCleanupPolicy"
FORCE_MAVEN_AUTHENTICATION = "forceMavenAuthentication"

# Docker fields
MAX_UNIQUE_TAGS = "maxUniqueTags"
DOCKER_API_VERSION = "dockerApiVersion"
BLOCK_PUSHING_SCHEMA1 = "blockPushingSchema1"
ENABLE_TOKEN_AUTHENTICATION = "enableTokenAuthentication"

# Debian / RPM fields
DEBIAN_TRIVIAL_LAYOUT = "debianTrivialLayout"
OPTIONAL_INDEX_COMPRESSION_FORMATS = "optionalIndexCompressionFormats"
CALCULATE_YUM_METADATA = "calculateYumMetadata"
YUM_ROOT_DEPTH = "yumRootDepth"
ENABLE_FILE_LISTS_INDEXING = "enableFileListsIndexing"

# External dependency rewriting
EXTERNAL_DEPENDENCIES_ENABLED = "externalDependenciesEnabled"
EXTERNAL_DEPENDENCIES_PATTERNS = "externalDependenciesPatterns"
EXTERNAL_DEPENDENCIES_REMOTE_REPO = "externalDependenciesRemoteRepo"

# Remote repository fields
USERNAME = "username"
PASSWORD = "password"
PROXY = "proxy"
HARD_FAIL = "hardFail"
OFFLINE = "offline"
STORE_ARTIFACTS_LOCALLY = "storeArtifactsLocally"
SOCKET_TIMEOUT_MILLIS = "socketTimeoutMillis"
LOCAL_ADDRESS = "localAddress"
RETRIEVAL_CACHE_PERIOD_SECS = "retrievalCachePeriodSecs"
FAILED_RETRIEVAL_CACHE_PERIOD_SECS = "failedRetrievalCachePeriodSecs"
MISSED_RETRIEVAL_CACHE_PERIOD_SECS = "missedRetrievalCachePeriodSecs"
UNUSED_ARTIFACTS_CLEANUP_ENABLED = "unusedArtifactsCleanupEnabled"
UNUSED_ARTIFACTS_CLEANUP_PERIOD_HOURS = "unusedArtifactsCleanupPeriodHours"
ASSUMED_OFFLINE_PERIOD_SECS = "assumedOfflinePeriodSecs"
SHARE_CONFIGURATION = "shareConfiguration"
SYNCHRONIZE_PROPERTIES = "synchronizeProperties"
BLOCK_MISMATCHING_MIME_TYPES = "blockMismatchingMimeTypes"
ALLOW_ANY_HOST_AUTH = "allowAnyHostAuth"
ENABLE_COOKIE_MANAGEMENT = "enableCookieManagement"
BYPASS_HEAD_REQUESTS = "bypassHeadRequests"
CLIENT_TLS_CERTIFICATE = "clientTlsCertificate"
CONTENT_SYNCHRONISATION = "contentSynchronisation"
LIST_REMOTE_FOLDER_ITEMS = "listRemoteFolderItems"

# Registry and VCS fields
BOWER_REGISTRY_URL = "bowerRegistryUrl"
COMPOSER_REGISTRY_URL = "composerRegistryUrl"
PYPI_REGISTRY_URL = "pyPIRegistryUrl"
PODS_SPECS_REPO_URL = "podsSpecsRepoUrl"
VCS_TYPE = "vcsType"
VCS_GIT_PROVIDER = "vcsGitProvider"
VCS_GIT_DOWNLOAD_URL = "vcsGitDownloadUrl"

# NuGet fields
FEED_CONTEXT_PATH = "feedContextPath"
DOWNLOAD_CONTEXT_PATH = "downloadContextPath"
V3_FEED_URL = "v3FeedUrl"
FORCE_NUGET_AUTHENTICATION = "forceNugetAuthentication"

# Virtual repository fields
REPOSITORIES = "repositories"
ARTIFACTORY_REQUESTS_CAN_RETRIEVE_REMOTE_ARTIFACTS = "artifactoryRequestsCanRetrieveRemoteArtifacts"
DEFAULT_DEPLOYMENT_REPO = "defaultDeploymentRepo"
