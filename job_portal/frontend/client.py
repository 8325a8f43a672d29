"""
HTTP client for the Job Portal REST API.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api"


class ApiError(Exception):
    """An API call failed; ``message`` is the server's error text."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """
    Thin wrapper over the REST API.

    ``http`` is anything with a requests-style ``request(method, url, json=, headers=)``;
    it defaults to a ``requests.Session``. No timeout is applied to calls.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, http=None):
        self.base_url = base_url.rstrip("/")
        self.http = http if http is not None else requests.Session()

    def call(
        self,
        endpoint: str,
        method: str = "GET",
        data: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Any:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        kwargs: Dict[str, Any] = {"headers": headers}
        if data is not None:
            kwargs["json"] = data

        try:
            response = self.http.request(method, f"{self.base_url}{endpoint}", **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("Request to %s failed: %s", endpoint, e)
            raise ApiError(str(e))

        try:
            result = response.json()
        except ValueError:
            result = {}

        if response.status_code >= 400:
            message = result.get("error") if isinstance(result, dict) else None
            raise ApiError(message or "Something went wrong", response.status_code)

        return result

    # Auth
    def register(self, email: str, password: str) -> Dict[str, Any]:
        return self.call("/auth/register", "POST", {"email": email, "password": password})

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self.call("/auth/login", "POST", {"email": email, "password": password})

    def admin_login(self, email: str, password: str) -> Dict[str, Any]:
        return self.call("/auth/admin-login", "POST", {"email": email, "password": password})

    # Jobs
    def get_jobs(self) -> List[Dict[str, Any]]:
        return self.call("/jobs")

    def get_job(self, job_id: str) -> Dict[str, Any]:
        return self.call(f"/jobs/{job_id}")

    def create_job(self, job_data: Dict[str, Any], token: str) -> Dict[str, Any]:
        return self.call("/jobs", "POST", job_data, token)

    def delete_job(self, job_id: str, token: str) -> Dict[str, Any]:
        return self.call(f"/jobs/{job_id}", "DELETE", token=token)

    # Applications
    def apply_to_job(self, job_id: str, token: str) -> Dict[str, Any]:
        return self.call("/applications", "POST", {"jobId": job_id}, token)

    def get_my_applications(self, token: str) -> List[Dict[str, Any]]:
        return self.call("/applications/my", token=token)

    def get_job_applicants(self, job_id: str, token: str) -> List[Dict[str, Any]]:
        return self.call(f"/applications/job/{job_id}", token=token)

    def check_if_applied(self, job_id: str, token: str) -> Dict[str, Any]:
        return self.call(f"/applications/check/{job_id}", token=token)
