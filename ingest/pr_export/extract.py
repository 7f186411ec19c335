from datetime import datetime, timezone
from typing import Dict, Any

FIELDS = [
    "PR Number", "Title",
    "Author Username", "Author Name", "Author Email",
    "Merger Username", "Merger Name", "Merger Email",
    "Additions", "Deletions",
    "Created At", "Merged At", "Time to Merge (hours)",
]

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"

def parse_ts(value: str) -> datetime:
    # GitHub returns e.g. 2024-01-02T12:00:00Z
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def hours_to_merge(created: datetime, merged: datetime) -> float:
    return round((merged - created).total_seconds() / 3600, 2)

def is_merged(pr: Dict[str, Any]) -> bool:
    return bool(pr.get("merged_at"))

def build_row(pr: Dict[str, Any], detail: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a merged list-view PR plus its detail record into one export row.

    The list view carries no separate merger identity, so the author's login
    fills both the author and merger columns. Names repeat the login and emails
    stay empty since neither is exposed without extra lookups.
    """
    created = parse_ts(pr["created_at"])
    merged = parse_ts(pr["merged_at"])
    login = (pr.get("user") or {}).get("login", "")
    return {
        "PR Number": pr.get("number"),
        "Title": pr.get("title") or "",
        "Author Username": login,
        "Author Name": login,
        "Author Email": "",
        "Merger Username": login,
        "Merger Name": login,
        "Merger Email": "",
        "Additions": detail.get("additions"),
        "Deletions": detail.get("deletions"),
        "Created At": created.strftime(TIMESTAMP_FMT),
        "Merged At": merged.strftime(TIMESTAMP_FMT),
        "Time to Merge (hours)": hours_to_merge(created, merged),
    }
