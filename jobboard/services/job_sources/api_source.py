"""
Jobs API Source

HTTP client for the CRUD jobs backend (see ``jobs_api``).

Endpoints:
    GET    /jobs          list
    GET    /jobs/{id}     single job (404 when missing)
    POST   /jobs          create
    PUT    /jobs/{id}     partial update
    DELETE /jobs/{id}     delete
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from jobboard.common.config import Config
from jobboard.common.error_handling import JobNotFoundError, JobSourceError
from jobboard.common.types import Job

from . import JobSource

logger = logging.getLogger(__name__)


class ApiJobSource(JobSource):
    """Jobs served by the CRUD backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: API root, e.g. http://localhost:4000/api
            timeout: Request timeout in seconds
            api_token: Bearer token for mutating routes (when the server requires one)
            session: Pre-built session (tests inject a mock here)
        """
        self.base_url = (base_url or Config.JOBS_API_URL).rstrip("/")
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS
        self.api_token = api_token
        self.session = session or requests.Session()

    def get_source_name(self) -> str:
        return "jobs_api"

    def _headers(self) -> Dict[str, str]:
        if self.api_token:
            return {"Authorization": f"Bearer {self.api_token}"}
        return {}

    def _request(self, method: str, path: str, job_id: Optional[str] = None, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
        except requests.exceptions.Timeout:
            logger.error(f"{method} {url} timed out")
            raise JobSourceError(f"Request timed out: {method} {path}")
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise JobSourceError(f"Request failed: {e}")

        if response.status_code == 404 and job_id is not None:
            raise JobNotFoundError(job_id)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            message = None
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("detail")
            message = message or f"HTTP {response.status_code}"
            logger.error(f"{method} {url} returned {response.status_code}: {message}")
            raise JobSourceError(str(message), status_code=response.status_code)

        return payload

    def _to_job(self, payload: Any) -> Job:
        try:
            return Job.from_dict(payload)
        except ValueError as e:
            raise JobSourceError(f"Invalid job payload: {e}")

    def fetch_jobs(self) -> List[Job]:
        payload = self._request("GET", "/jobs")
        if not isinstance(payload, list):
            raise JobSourceError("Expected a list of jobs")

        jobs = []
        for document in payload:
            try:
                jobs.append(Job.from_dict(document))
            except ValueError as e:
                logger.warning(f"Skipping invalid job document: {e}")
        logger.info(f"Fetched {len(jobs)} jobs from {self.base_url}")
        return jobs

    def get_job(self, job_id: str) -> Job:
        return self._to_job(self._request("GET", f"/jobs/{job_id}", job_id=job_id))

    def create_job(self, data: Dict[str, Any]) -> Job:
        return self._to_job(self._request("POST", "/jobs", json=data))

    def update_job(self, job_id: str, data: Dict[str, Any]) -> Job:
        return self._to_job(self._request("PUT", f"/jobs/{job_id}", job_id=job_id, json=data))

    def delete_job(self, job_id: str) -> str:
        """Delete a job. Returns the server's confirmation message."""
        payload = self._request("DELETE", f"/jobs/{job_id}", job_id=job_id)
        if isinstance(payload, dict):
            return str(payload.get("message", ""))
        return ""
