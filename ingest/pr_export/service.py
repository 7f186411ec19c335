from typing import Dict, Any, Iterator, List, Optional
from .config import Settings
from .github import GitHubClient
from .extract import FIELDS, build_row, is_merged
from .sinks import write_csv

def iter_rows(client: GitHubClient, merged_prs: List[Dict[str, Any]]) -> Iterator[Dict[str, Any]]:
    for pr in merged_prs:
        detail = client.get_pull(pr.get("number"))
        # failed detail fetch: client already reported it, drop the PR
        if detail is None:
            continue
        row = build_row(pr, detail)
        yield row
        print(f"Processed PR #{pr.get('number')}: {pr.get('title')}")

def export_csv(s: Settings, client: Optional[GitHubClient] = None) -> int:
    client = client or GitHubClient(s)
    prs = client.list_pulls(s.state, s.per_page, s.max_pages)
    merged_prs = [pr for pr in prs if is_merged(pr)]

    n = write_csv(iter_rows(client, merged_prs), s.out_csv, fieldnames=FIELDS)
    print(f"Export complete. Data saved to {s.out_csv}")
    return n
