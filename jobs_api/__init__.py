"""
Jobs API service.

FastAPI backend exposing job CRUD and account endpoints.
"""
