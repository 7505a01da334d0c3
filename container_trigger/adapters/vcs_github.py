import logging
from typing import Optional, Dict, Any

import httpx

logger = logging.getLogger(__name__)

EVENT_TYPE = "container-build"


class VCS:
    def __init__(
        self,
        repo: str,
        token: str,
        base: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.repo = repo
        self.base = base
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "container-trigger",
        }

    def __repr__(self) -> str:
        return f"VCS(repo={self.repo!r}, base={self.base!r})"

    def dispatches_url(self) -> str:
        return f"{self.base}/repos/{self.repo}/dispatches"

    def repository_dispatch(self, event_type: str, client_payload: Dict[str, Any]) -> int:
        """Fire a repository_dispatch event and return the HTTP status code.

        Implements: POST /repos/{owner}/{repo}/dispatches

        Raises httpx.HTTPStatusError on a non-2xx response and
        httpx.RequestError when the request never completes.
        """
        url = self.dispatches_url()
        payload = {"event_type": event_type, "client_payload": client_payload}
        logger.info("dispatching %s to %s", event_type, url)
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            resp = client.post(url, headers=self.headers, json=payload)
            resp.raise_for_status()
            return resp.status_code


def container_build_payload(version: str) -> Dict[str, Any]:
    return {"penumbra_version": version}
