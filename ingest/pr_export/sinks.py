import csv
from pathlib import Path
from typing import Iterable, Dict, Any, List

def write_csv(rows: Iterable[Dict[str, Any]], path: str, fieldnames: List[str]) -> int:
    """Stream ``rows`` into ``path`` under a header of ``fieldnames``.

    Each row is written as soon as the iterable produces it, and the file stays
    open until the iterable is exhausted. None values become empty cells.
    Returns the number of data rows written, header excluded.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        w.writeheader()
        for r in rows:
            r = {k: ("" if v is None else v) for k, v in r.items()}
            w.writerow(r)
            n += 1
    return n
