"""JFrog CLI Artifactory plugin commands."""

__version__ = "0.1.0"
