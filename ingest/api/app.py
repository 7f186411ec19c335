from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from pathlib import Path
from datetime import datetime, timezone
import os

from ingest.pr_export.config import Settings
from ingest.pr_export.service import export_csv

app = FastAPI(title="Merged PR Export API")

# Where to save by default
DATA_RAW = Path(os.getenv("DATA_RAW_DIR", "data/raw")).resolve()

class ExportRequest(BaseModel):
    owner: str = Field(..., examples=["apache"])
    repo: str  = Field(..., examples=["airflow"])
    token: str | None = None
    state: str = Field("closed", pattern="^(open|closed|all)$")
    per_page: int = 100
    max_pages: int = 10
    filename: str | None = None  # optional override for output file name

class ExportResponse(BaseModel):
    saved_path: str
    rows: int
    owner: str
    repo: str

@app.post("/export_prs", response_model=ExportResponse)
def export_prs(req: ExportRequest):
    s = Settings()
    s.owner = req.owner
    s.repo = req.repo
    if req.token:
        s.token = req.token
    s.state = req.state
    s.per_page = req.per_page
    s.max_pages = req.max_pages

    # pick output file under data/raw
    if req.filename:
        # bare file names only, nothing outside DATA_RAW
        if Path(req.filename).name != req.filename or req.filename == "..":
            raise HTTPException(status_code=400, detail=f"Invalid filename: {req.filename}")
        out = DATA_RAW / req.filename
        if not out.name.endswith(".csv"):
            out = out.with_suffix(".csv")
    else:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        out = DATA_RAW / f"{s.owner}_{s.repo}_merged_{ts}.csv"
    s.out_csv = str(out)

    try:
        rows = export_csv(s)
        return ExportResponse(saved_path=s.out_csv, rows=rows, owner=s.owner, repo=s.repo)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
