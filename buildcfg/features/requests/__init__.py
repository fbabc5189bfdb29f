"""Repository and build request models shared by both pipeline stages."""

from buildcfg.features.requests.models import BuildRequest, Repository


__all__ = ["BuildRequest", "Repository"]
