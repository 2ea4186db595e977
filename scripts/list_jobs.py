"""
List and filter jobs from a job source.

Usage:
    python scripts/list_jobs.py                           # Placeholder jobs, first 10
    python scripts/list_jobs.py --source api --limit 50   # Jobs from the jobs API
    python scripts/list_jobs.py --search "elite"          # Title/company search
    python scripts/list_jobs.py --category Tech --location Remote --salary 120 160
"""

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from jobboard.common.error_handling import JobSourceError
from jobboard.common.logger import setup_logging
from jobboard.common.salary import format_salary
from jobboard.common.types import FilterCriteria
from jobboard.services.job_filter import filter_jobs
from jobboard.services.job_sources import ApiJobSource, PlaceholderJobSource


def list_jobs(source_name="placeholder", limit=10, search=None, category=None,
              location=None, salary=None, seed=None):
    """
    Fetch jobs and print those matching the criteria.

    Args:
        source_name: "placeholder" or "api"
        limit: Max number of jobs to print
        search: Title/company search text
        category: Exact category
        location: Exact location
        salary: (min, max) in thousands
        seed: Random seed for reproducible placeholder jobs
    """
    if source_name == "api":
        source = ApiJobSource()
    else:
        source = PlaceholderJobSource(rng=random.Random(seed))

    jobs = source.fetch_jobs()
    criteria = FilterCriteria.from_dict({
        "search_text": search,
        "category": category,
        "location": location,
        "salary_range": salary,
    })
    matching = filter_jobs(jobs, criteria)

    print(f"📊 Source: {source.get_source_name()} ({len(jobs)} jobs, {len(matching)} matching)")
    print()

    if not matching:
        print("❌ No jobs found matching criteria.")
        return

    print("=" * 110)
    print(f"{'ID':<26} | {'SALARY':<20} | {'CATEGORY':<10} | {'COMPANY':<14} | {'TITLE':<28}")
    print("=" * 110)

    for job in matching[:limit]:
        salary_str = format_salary(job.salary, job.salary_text)[:20]
        print(f"{job.id:<26} | {salary_str:<20} | {job.category[:10]:<10} | "
              f"{job.company[:14]:<14} | {job.title[:28]:<28}")

    print("=" * 110)
    print(f"\nShowing {min(limit, len(matching))} of {len(matching)} jobs")


def main():
    parser = argparse.ArgumentParser(description="List and filter jobs")
    parser.add_argument("--source", choices=["placeholder", "api"], default="placeholder")
    parser.add_argument("--limit", type=int, default=10, help="Max number of jobs to show")
    parser.add_argument("--search", help="Search term for title or company")
    parser.add_argument("--category", help="Exact category, e.g. Tech")
    parser.add_argument("--location", help="Exact location, e.g. Remote")
    parser.add_argument("--salary", type=int, nargs=2, metavar=("MIN", "MAX"),
                        help="Salary range in thousands")
    parser.add_argument("--seed", type=int, help="Random seed for placeholder jobs")

    args = parser.parse_args()
    setup_logging()

    try:
        list_jobs(
            source_name=args.source,
            limit=args.limit,
            search=args.search,
            category=args.category,
            location=args.location,
            salary=args.salary,
            seed=args.seed,
        )
    except (JobSourceError, ValueError) as e:
        print(f"❌ ERROR: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
