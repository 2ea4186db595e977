"""
Job board client core.

Search/filter/save pipeline, persistence adapters and screen controllers
for the job-search application. The CRUD backend lives in ``jobs_api``.
"""
