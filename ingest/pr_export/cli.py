import argparse
import logging
import sys
from .config import Settings
from .service import export_csv

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pr-export", description="Export merged GitHub PRs to CSV")
    ap.add_argument("-t", "--token", default=None, help="GitHub API token")
    ap.add_argument("-o", "--owner", default=None, help="Repository owner")
    ap.add_argument("-r", "--repo", default=None, help="Repository name")
    ap.add_argument("-f", "--file", default=None, help="Output CSV file (default github_prs.csv)")
    ap.add_argument("-s", "--state", choices=["open", "closed", "all"], default=None)
    ap.add_argument("--per-page", type=int, default=None)
    ap.add_argument("--max-pages", type=int, default=None)
    return ap

def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    s = Settings()
    if args.token: s.token = args.token
    if args.owner: s.owner = args.owner
    if args.repo: s.repo = args.repo
    if args.file: s.out_csv = args.file
    if args.state: s.state = args.state
    if args.per_page is not None: s.per_page = args.per_page
    if args.max_pages is not None: s.max_pages = args.max_pages
    if s.per_page < 1 or s.max_pages < 1:
        ap.error("--per-page and --max-pages must be at least 1")

    if not s.owner or not s.repo:
        print("Repository owner and name are required!")
        ap.print_help()
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    export_csv(s)

if __name__ == "__main__":
    main()
