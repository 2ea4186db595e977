"""
Job Routes

CRUD over job postings.

Endpoints:
    GET    /api/jobs          - List all jobs
    GET    /api/jobs/{job_id} - Get single job
    POST   /api/jobs          - Create job (auth)
    PUT    /api/jobs/{job_id} - Partial update (auth)
    DELETE /api/jobs/{job_id} - Delete job (auth)
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from jobboard.common.repositories import JobRepositoryInterface

from ..auth import verify_token
from ..dependencies import get_jobs_repo
from ..models import JobCreate, JobOut, JobUpdate, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])

JOB_NOT_FOUND = "Job not found"


@router.get("", response_model=List[JobOut])
def list_jobs(repo: JobRepositoryInterface = Depends(get_jobs_repo)) -> List[dict]:
    return repo.find_all()


@router.get("/{job_id}", response_model=JobOut)
def get_job(job_id: str, repo: JobRepositoryInterface = Depends(get_jobs_repo)) -> dict:
    job = repo.find_by_id(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=JOB_NOT_FOUND)
    return job


@router.post("", response_model=JobOut, status_code=201, dependencies=[Depends(verify_token)])
def create_job(body: JobCreate, repo: JobRepositoryInterface = Depends(get_jobs_repo)) -> dict:
    document = body.model_dump()
    document["createdAt"] = datetime.utcnow()
    job = repo.insert(document)
    logger.info(f"Created job {job['id']}: {job['title']}")
    return job


@router.put("/{job_id}", response_model=JobOut, dependencies=[Depends(verify_token)])
def update_job(
    job_id: str,
    body: JobUpdate,
    repo: JobRepositoryInterface = Depends(get_jobs_repo),
) -> dict:
    fields = body.model_dump(exclude_unset=True)
    job = repo.update(job_id, fields)
    if job is None:
        raise HTTPException(status_code=404, detail=JOB_NOT_FOUND)
    logger.info(f"Updated job {job_id}: {sorted(fields)}")
    return job


@router.delete("/{job_id}", response_model=MessageResponse, dependencies=[Depends(verify_token)])
def delete_job(job_id: str, repo: JobRepositoryInterface = Depends(get_jobs_repo)) -> MessageResponse:
    if not repo.delete(job_id):
        raise HTTPException(status_code=404, detail=JOB_NOT_FOUND)
    logger.info(f"Deleted job {job_id}")
    return MessageResponse(message="Job deleted successfully")
