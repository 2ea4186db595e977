"""
Seed the jobs collection with sample postings.

Usage:
    STORE_BACKEND=mongo MONGODB_URI=mongodb://localhost:27017 python scripts/seed_jobs.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from jobboard.common.config import Config
from jobboard.common.logger import setup_logging
from jobboard.common.repositories import get_job_repository
from jobs_api.seed import seed_jobs


def main():
    setup_logging()

    problems = Config.validate()
    if problems:
        for problem in problems:
            print(f"❌ {problem}")
        sys.exit(1)

    print(Config.summary())
    inserted = seed_jobs(get_job_repository())
    print(f"\n✅ Inserted {inserted} jobs")


if __name__ == "__main__":
    main()
