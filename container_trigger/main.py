import logging
import os
import sys
from typing import List, Optional

import httpx

from .adapters.vcs_github import EVENT_TYPE, VCS, container_build_payload
from .config import load_settings
from .errors import ConfigError, UsageError

logger = logging.getLogger(__name__)

USAGE = "Usage: container-trigger OWNER/REPO"


def _target_from_argv(argv: List[str]) -> str:
    if len(argv) < 2 or not argv[1].strip():
        raise UsageError(USAGE)
    return argv[1]


def main(argv: Optional[List[str]] = None, transport: Optional[httpx.BaseTransport] = None) -> int:
    """Trigger a container build in the given GitHub repo.

    Returns the process exit code: 0 when GitHub accepted the dispatch,
    1 for usage, configuration, HTTP or network errors.
    """
    argv = sys.argv if argv is None else argv
    try:
        github_repo = _target_from_argv(argv)
        settings = load_settings()
        token = settings.require_token()
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    vcs = VCS(github_repo, token, base=settings.api_base, timeout=settings.timeout, transport=transport)
    try:
        status = vcs.repository_dispatch(
            EVENT_TYPE, container_build_payload(settings.penumbra_version)
        )
    except httpx.HTTPStatusError as e:
        print(f"Dispatch failed: HTTP {e.response.status_code}", file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Dispatch failed: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    logger.info(
        "container build for %s at %s accepted (HTTP %s)",
        github_repo,
        settings.penumbra_version,
        status,
    )
    return 0


def run(transport: Optional[httpx.BaseTransport] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, os.environ.get("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(main(transport=transport))
