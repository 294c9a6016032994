"""Logic for resolving the permalink base used for source file links."""

import logging
from typing import Any

from apidata.configuration_error import ConfigurationError

logger = logging.getLogger(__name__)


def make_repository_base(manifest: dict[str, Any], config: dict[str, Any]) -> str:
    """Return ``<repository>/blob/<ref>/`` for source links.

    A ``fileLink: {repository, ref}`` override in the generator config wins;
    otherwise the manifest's repository URL and ``v<version>`` tag are used.
    """
    file_link = config.get("fileLink") or {}
    if file_link:
        repository = file_link.get("repository")
        ref = file_link.get("ref")
        if not repository or not ref:
            msg = "fileLink override needs both 'repository' and 'ref'"
            raise ConfigurationError(msg)
        logger.debug("Using fileLink override %s@%s", repository, ref)
        return f"{str(repository).rstrip('/')}/blob/{ref}/"

    repository = manifest.get("repository")
    if isinstance(repository, dict):
        repository = repository.get("url")
    if not repository or not isinstance(repository, str):
        msg = "Project manifest has no repository URL"
        raise ConfigurationError(msg)
    version = manifest.get("version")
    if not version:
        msg = "Project manifest has no version"
        raise ConfigurationError(msg)

    base = repository.removeprefix("git+").removesuffix(".git")
    return f"{base}/blob/v{version}/"
