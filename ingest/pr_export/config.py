import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    """Export settings read from the environment (after loading a local .env).

    GITHUB_TOKEN, OWNER, REPO, STATE, PER_PAGE, MAX_PAGES, OUT and
    GITHUB_API_BASE map onto the fields below. An empty token means requests
    go out unauthenticated. CLI flags and API request fields override them.
    """
    token: str = os.getenv("GITHUB_TOKEN", "")
    owner: str = os.getenv("OWNER", "")
    repo: str = os.getenv("REPO", "")
    state: str = os.getenv("STATE", "closed")  # open|closed|all
    per_page: int = int(os.getenv("PER_PAGE", "100"))
    max_pages: int = int(os.getenv("MAX_PAGES", "10"))
    out_csv: str = os.getenv("OUT", "github_prs.csv")
    api_base: str = os.getenv("GITHUB_API_BASE", "https://api.github.com")
