from __future__ import annotations
import logging
import requests
from typing import Dict, Any, List, Optional
from .config import Settings

ACCEPT_V3 = "application/vnd.github.v3+json"

class GitHubClient:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.s = session or requests.Session()
        self.s.headers.update({"Accept": ACCEPT_V3})
        if settings.token:
            self.s.headers["Authorization"] = f"token {settings.token}"
        self.settings = settings

    def _repo_path(self) -> str:
        return f"/repos/{self.settings.owner}/{self.settings.repo}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """GET ``path`` on the API host; the decoded body on 200, otherwise None."""
        url = f"{self.settings.api_base}{path}"
        try:
            resp = self.s.get(url, params=params)
        except requests.RequestException as e:
            logging.error(f"Request to {url} failed: {e}")
            return None
        if resp.status_code != 200:
            logging.error(f"Error fetching {path}: {resp.status_code} - {resp.text}")
            return None
        try:
            return resp.json()
        except ValueError:
            logging.error(f"Error decoding {path}: {resp.status_code} - {resp.text}")
            return None

    def list_pulls(self, state: str = "closed", per_page: int = 100, max_pages: int = 10) -> List[Dict[str, Any]]:
        all_prs: List[Dict[str, Any]] = []
        page = 1
        while page <= max_pages:
            params = {"state": state, "per_page": per_page, "page": page}
            items = self.get(f"{self._repo_path()}/pulls", params=params)
            if items is None:
                logging.error(f"Stopping pagination at page {page}")
                break
            if not items:
                break
            all_prs.extend(items)
            logging.info(f"Fetched page {page} ({len(items)} PRs)")
            page += 1
        return all_prs

    def get_pull(self, number: int) -> Optional[Dict[str, Any]]:
        return self.get(f"{self._repo_path()}/pulls/{number}")
