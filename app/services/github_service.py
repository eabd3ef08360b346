# app/services/github_service.py
# GitHub API 代理：取得使用者最近建立的 repos (直接轉傳 GitHub 的回應)
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx

from app.core.config import settings
from app.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

REPO_LIMIT = 5

async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI Dependency: 每個請求一個 AsyncClient"""
    async with httpx.AsyncClient(timeout=settings.GITHUB_TIMEOUT_SECONDS) as client:
        yield client

class GithubService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
    ):
        self.client = client
        self.base_url = (base_url or settings.GITHUB_API_URL).rstrip("/")
        self.token = token if token is not None else settings.GITHUB_TOKEN

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "devconnector-api",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def get_user_repos(self, username: str) -> List[Dict[str, Any]]:
        """
        取得 GitHub 使用者最近建立的 repos (最多 5 個)。
        GitHub 回傳非 200 時視為查無此使用者。
        """
        response = await self.client.get(
            f"{self.base_url}/users/{username}/repos",
            params={"per_page": REPO_LIMIT, "sort": "created", "direction": "desc"},
            headers=self._headers(),
        )
        if response.status_code != 200:
            logger.info(f"GitHub returned {response.status_code} for user {username}")
            raise NotFoundError("No Github profile found")
        return response.json()
