"""
Tests for the job CRUD endpoints and service endpoints.
"""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from jobs_api.seed import SEED_JOBS, seed_jobs


class TestServiceEndpoints:

    def test_root_welcome(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Welcome to the Job App Backend!"

    def test_health(self, client, job_repo, job_payload):
        job_repo.insert(job_payload)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["jobs"] == 1


class TestJobCrud:

    def test_list_empty(self, client):
        response = client.get("/api/jobs")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_get(self, client, auth_headers, job_payload):
        response = client.post("/api/jobs", json=job_payload, headers=auth_headers)

        assert response.status_code == 201
        created = response.json()
        assert created["title"] == job_payload["title"]
        assert created["createdAt"]
        assert created["image"] is None

        fetched = client.get(f"/api/jobs/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_create_accepts_numeric_salary(self, client, auth_headers, job_payload):
        response = client.post("/api/jobs", json=dict(job_payload, salary=150), headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["salary"] == "150"

    def test_create_missing_field(self, client, auth_headers, job_payload):
        payload = dict(job_payload)
        del payload["category"]

        response = client.post("/api/jobs", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"
        assert response.json()["error"][0]["loc"][-1] == "category"

    def test_create_requires_token(self, client, job_payload):
        response = client.post("/api/jobs", json=job_payload)
        assert response.status_code == 401

    def test_create_rejects_wrong_token(self, client, invalid_auth_headers, job_payload):
        response = client.post("/api/jobs", json=job_payload, headers=invalid_auth_headers)
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid authentication token"}

    def test_get_unknown_job(self, client):
        response = client.get(f"/api/jobs/{ObjectId()}")
        assert response.status_code == 404
        assert response.json() == {"message": "Job not found"}

    def test_partial_update(self, client, auth_headers, job_repo, job_payload):
        job = job_repo.insert(job_payload)

        response = client.put(f"/api/jobs/{job['id']}", json={"title": "Lead Developer"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["title"] == "Lead Developer"
        assert response.json()["company"] == "TechCorp"

    def test_update_rejects_blank_field(self, client, auth_headers, job_repo, job_payload):
        job = job_repo.insert(job_payload)
        response = client.put(f"/api/jobs/{job['id']}", json={"title": ""}, headers=auth_headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("field", ["title", "company", "salary", "category"])
    def test_update_rejects_null_required_field(self, client, auth_headers, job_repo, job_payload, field):
        job = job_repo.insert(job_payload)

        response = client.put(f"/api/jobs/{job['id']}", json={field: None}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"][0]["loc"][-1] == field
        assert job_repo.find_by_id(job["id"])[field] == job_payload[field]
        assert client.get("/api/jobs").status_code == 200

    def test_update_allows_null_image(self, client, auth_headers, job_repo, job_payload):
        job = job_repo.insert(dict(job_payload, image="file://logo.png"))
        response = client.put(f"/api/jobs/{job['id']}", json={"image": None}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["image"] is None

    def test_update_unknown_job(self, client, auth_headers):
        response = client.put("/api/jobs/missing", json={"title": "x"}, headers=auth_headers)
        assert response.status_code == 404

    def test_delete(self, client, auth_headers, job_repo, job_payload):
        job = job_repo.insert(job_payload)

        response = client.delete(f"/api/jobs/{job['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Job deleted successfully"
        assert job_repo.count() == 0

        again = client.delete(f"/api/jobs/{job['id']}", headers=auth_headers)
        assert again.status_code == 404

    def test_database_error_is_500(self, app, client):
        from jobs_api.dependencies import get_jobs_repo

        broken = MagicMock()
        broken.find_all.side_effect = PyMongoError("connection refused")
        app.dependency_overrides[get_jobs_repo] = lambda: broken

        response = client.get("/api/jobs")

        assert response.status_code == 500
        assert response.json() == {"message": "Server error", "error": "connection refused"}


class TestSeed:

    def test_seeds_empty_collection(self, job_repo):
        assert seed_jobs(job_repo) == len(SEED_JOBS)
        assert [job["company"] for job in job_repo.find_all()] == ["TechCorp", "GrowEasy"]

    def test_skips_populated_collection(self, job_repo, job_payload):
        job_repo.insert(job_payload)
        assert seed_jobs(job_repo) == 0
        assert job_repo.count() == 1


class TestUnhandledErrors:

    def test_unexpected_error_is_json_500(self, app):
        from fastapi.testclient import TestClient

        from jobs_api.dependencies import get_jobs_repo

        broken = MagicMock()
        broken.find_all.side_effect = RuntimeError("unexpected")
        app.dependency_overrides[get_jobs_repo] = lambda: broken

        response = TestClient(app, raise_server_exceptions=False).get("/api/jobs")

        assert response.status_code == 500
        assert response.json() == {"message": "Server error", "error": "unexpected"}
