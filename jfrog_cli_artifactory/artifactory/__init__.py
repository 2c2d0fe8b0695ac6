"""Artifactory commands."""
