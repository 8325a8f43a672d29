"""
Test the frontend page handlers against the in-process API.
"""
import json

import pytest

from job_portal.frontend.client import ApiClient, ApiError
from job_portal.frontend.pages import Page, PortalApp
from job_portal.frontend.session import FileStorage, MemoryStorage, SessionManager


class StubHttp:
    """requests-style transport that always answers with one canned response."""

    class Response:
        def __init__(self, status_code, payload):
            self.status_code = status_code
            self._payload = payload

        def json(self):
            if self._payload is None:
                raise ValueError("no body")
            return self._payload

    def __init__(self, status_code=200, payload=None):
        self.response = self.Response(status_code, payload)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.response


@pytest.fixture
def signed_in_user(portal, test_user_data):
    portal.handle_register(Page(), test_user_data["email"], test_user_data["password"], test_user_data["password"])
    assert portal.handle_login(Page(), test_user_data["email"], test_user_data["password"])
    return portal


@pytest.fixture
def signed_in_admin(portal, admin_credentials):
    assert portal.handle_admin_login(Page(), admin_credentials["email"], admin_credentials["password"])
    return portal


class TestSessionStorage:

    def test_memory_session_round_trip(self):
        sessions = SessionManager(MemoryStorage())
        assert not sessions.load().is_logged_in

        sessions.set_auth("tok", "a@x.com", is_admin=True)
        session = sessions.load()

        assert session.token == "tok"
        assert session.is_admin
        assert not session.is_user
        assert not sessions.clear().is_logged_in
        assert not sessions.load().is_logged_in

    def test_file_storage_persists_between_managers(self, tmp_path):
        path = tmp_path / "session.json"
        SessionManager(FileStorage(path)).set_auth("tok", "a@x.com")

        session = SessionManager(FileStorage(path)).load()

        assert session.email == "a@x.com"
        assert session.is_user
        assert json.loads(path.read_text())["token"] == "tok"

    def test_corrupt_session_file_is_anonymous(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        assert not SessionManager(FileStorage(path)).load().is_logged_in

    @pytest.mark.parametrize("content", ["[]", '"tok"', "null", "42"])
    def test_session_file_that_is_not_an_object_is_anonymous(self, tmp_path, content):
        path = tmp_path / "session.json"
        path.write_text(content)

        assert FileStorage(path).read() == {}
        assert not SessionManager(FileStorage(path)).load().is_logged_in


class TestApiClient:

    def test_error_message_comes_from_server(self):
        client = ApiClient("http://api", http=StubHttp(400, {"error": "Invalid email or password."}))

        with pytest.raises(ApiError) as exc:
            client.login("a@x.com", "wrong")

        assert exc.value.message == "Invalid email or password."
        assert exc.value.status_code == 400

    def test_error_without_body_gets_fallback_message(self):
        client = ApiClient("http://api", http=StubHttp(502, None))

        with pytest.raises(ApiError) as exc:
            client.get_jobs()

        assert exc.value.message == "Something went wrong"

    def test_token_is_sent_as_bearer(self):
        http = StubHttp(200, {"hasApplied": False})
        client = ApiClient("http://api/", http=http)

        client.check_if_applied("abc", "tok")

        method, url, kwargs = http.calls[0]
        assert (method, url) == ("GET", "http://api/applications/check/abc")
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert "json" not in kwargs

    def test_apply_sends_job_id(self):
        http = StubHttp(201, {"message": "ok"})

        ApiClient("http://api", http=http).apply_to_job("abc", "tok")

        assert http.calls[0][2]["json"] == {"jobId": "abc"}


class TestAuthPages:

    def test_register_then_login(self, portal, page, test_user_data):
        assert portal.handle_register(page, "a@x.com", "secret1", "secret1")
        assert page.redirect_to == "login.html"
        assert not page.messages["register-message"].is_error

        login_page = Page()
        assert portal.handle_login(login_page, "  a@x.com ", "secret1")
        assert login_page.redirect_to == "index.html"
        assert portal.session.email == "a@x.com"
        assert portal.session.is_user

    def test_register_password_mismatch_never_calls_api(self, portal, page):
        assert not portal.handle_register(page, "a@x.com", "secret1", "secret2")

        assert page.messages["register-message"].text == "Passwords do not match"
        assert page.messages["register-message"].css_class == "message message-error"
        assert page.redirect_to is None
        assert not page.busy

    def test_login_error_is_shown_verbatim(self, portal, page):
        assert not portal.handle_login(page, "a@x.com", "wrong")

        assert page.messages["login-message"].text == "Invalid email or password."
        assert not portal.session.is_logged_in

    def test_admin_login_and_guard(self, signed_in_admin, page):
        assert signed_in_admin.session.is_admin
        assert signed_in_admin.require_admin(page)
        assert page.redirect_to is None

    def test_guards_redirect_anonymous_visitors(self, portal):
        page = Page()
        assert not portal.require_auth(page)
        assert page.redirect_to == "login.html"

        page = Page()
        assert not portal.require_admin(page)
        assert page.redirect_to == "admin-login.html"

    def test_user_cannot_open_admin_pages(self, signed_in_user, page):
        assert signed_in_user.require_auth(page)
        assert not signed_in_user.require_admin(page)
        assert page.redirect_to == "admin-login.html"

    def test_logout_clears_session(self, signed_in_user, page):
        signed_in_user.logout(page)

        assert not signed_in_user.session.is_logged_in
        assert page.redirect_to == "index.html"

    def test_navbar_follows_session(self, signed_in_user, page):
        signed_in_user.render_navbar(page)

        assert "My Applications" in page.elements["nav-links"]


class TestJobPages:

    def test_load_jobs_empty(self, portal, page):
        portal.load_jobs(page)

        assert "No Jobs Available" in page.elements["jobs-container"]
        assert page.elements["jobs-count"] == "0 Jobs"

    def test_user_applies_and_sees_badge(self, signed_in_user, page, created_job):
        signed_in_user.load_jobs(page)
        assert "Apply Now" in page.elements["jobs-container"]
        assert page.elements["jobs-count"] == "1 Job"

        assert signed_in_user.handle_apply(page, created_job["id"])
        assert page.alerts == ["Application submitted successfully!"]
        assert "✓ Applied" in page.elements[f"job-{created_job['id']}-actions"]

        reloaded = Page()
        signed_in_user.load_jobs(reloaded)
        assert "✓ Applied" in reloaded.elements["jobs-container"]

    def test_applying_twice_alerts_server_message(self, signed_in_user, page, created_job):
        signed_in_user.handle_apply(page, created_job["id"])

        assert not signed_in_user.handle_apply(page, created_job["id"])
        assert page.alerts[-1] == "You have already applied to this job."

    def test_anonymous_apply_redirects_to_login(self, portal, page, created_job):
        assert not portal.handle_apply(page, created_job["id"])
        assert page.redirect_to == "login.html"

    def test_my_applications(self, signed_in_user, page, created_job):
        signed_in_user.handle_apply(Page(), created_job["id"])

        signed_in_user.load_my_applications(page)

        assert "Eng" in page.elements["applications-container"]
        assert page.elements["applications-count"] == "1 Application"

    def test_my_applications_with_stale_token_shows_error(self, portal, page):
        portal.sessions.set_auth("stale-token", "a@x.com")

        portal.load_my_applications(page)

        assert "Error Loading Applications" in page.elements["applications-container"]
        assert "Invalid token." in page.elements["applications-container"]


class TestAdminPages:

    def test_create_job_refreshes_list(self, signed_in_admin, page):
        form = {"title": " Eng ", "company": "Acme", "location": "Remote", "description": "Build", "salary": ""}

        assert signed_in_admin.handle_create_job(page, form)

        assert page.messages["create-job-message"].text == "Job created successfully!"
        assert "Eng" in page.elements["admin-jobs-list"]
        job = signed_in_admin.client.get_jobs()[0]
        assert job["title"] == "Eng"
        assert job["salary"] == "Not specified"
        assert job["type"] == "Full-time"

    def test_create_job_error_is_inline(self, signed_in_admin, page):
        assert not signed_in_admin.handle_create_job(page, {"title": "Eng"})

        assert page.messages["create-job-message"].text == (
            "Title, company, location, and description are required."
        )

    def test_delete_job_requires_confirmation(self, signed_in_admin, page, created_job):
        assert not signed_in_admin.handle_delete_job(page, created_job["id"], confirm=lambda prompt: False)
        assert len(signed_in_admin.client.get_jobs()) == 1

    def test_delete_job(self, signed_in_admin, page, created_job):
        assert signed_in_admin.handle_delete_job(page, created_job["id"])

        assert page.removed == [f"admin-job-{created_job['id']}"]
        assert signed_in_admin.client.get_jobs() == []

    def test_delete_missing_job_alerts(self, signed_in_admin, page):
        assert not signed_in_admin.handle_delete_job(page, "000000000000000000000000")
        assert page.alerts == ["Job not found."]

    def test_view_applicants_modal(self, portal, page, created_job, test_user_data, admin_credentials):
        portal.handle_register(Page(), test_user_data["email"], test_user_data["password"], test_user_data["password"])
        portal.handle_login(Page(), test_user_data["email"], test_user_data["password"])
        portal.handle_apply(Page(), created_job["id"])
        portal.handle_admin_login(Page(), admin_credentials["email"], admin_credentials["password"])

        portal.view_applicants(page, created_job["id"], "Eng")

        assert page.modal.active
        assert page.modal.title == "Applicants for: Eng"
        assert "a@x.com" in page.modal.body

        portal.close_modal(page)
        assert not page.modal.active

    def test_view_applicants_as_user_shows_error(self, signed_in_user, page, created_job):
        signed_in_user.view_applicants(page, created_job["id"], "Eng")

        assert "Error: Access denied. Admin only." in page.modal.body


def test_portal_uses_memory_storage_by_default(api_client):
    assert isinstance(PortalApp(api_client).sessions.storage, MemoryStorage)
