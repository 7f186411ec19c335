"""
Shared fixtures for the merged PR export tests.
"""

from unittest.mock import Mock

import pytest

from ingest.pr_export.config import Settings


def make_response(status_code, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text
    return response


def make_pr(number, created_at, merged_at=None, login="octocat", title=None):
    return {
        "number": number,
        "title": title or f"PR {number}",
        "created_at": created_at,
        "merged_at": merged_at,
        "user": {"login": login},
    }


@pytest.fixture
def settings(tmp_path):
    return Settings(
        token="",
        owner="octo",
        repo="hello",
        state="closed",
        per_page=100,
        max_pages=10,
        out_csv=str(tmp_path / "github_prs.csv"),
        api_base="https://api.github.com",
    )


@pytest.fixture
def fake_session():
    """requests.Session stand-in; tests set ``get.side_effect``."""
    session = Mock()
    session.headers = {}
    return session
