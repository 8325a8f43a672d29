"""
Page controllers for the job portal frontend.

A ``Page`` stands in for the browser document: it holds the HTML of each
widget, the inline messages, blocking alerts, the applicant modal and a
pending redirect. ``PortalApp`` wires page handlers to the API client and the
stored session. Every asynchronous action follows one pattern: put the widget
in a loading state, make one call, then show either the data or the error
message returned by the server.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from . import render
from .client import ApiClient, ApiError
from .session import Session, SessionManager

logger = logging.getLogger(__name__)


@dataclass
class Message:
    text: str
    is_error: bool = True

    @property
    def css_class(self) -> str:
        return f"message {'message-error' if self.is_error else 'message-success'}"


@dataclass
class Modal:
    title: str = ""
    body: str = ""
    active: bool = False


@dataclass
class Page:
    elements: Dict[str, str] = field(default_factory=dict)
    messages: Dict[str, Message] = field(default_factory=dict)
    alerts: List[str] = field(default_factory=list)
    modal: Modal = field(default_factory=Modal)
    redirect_to: Optional[str] = None
    busy: Dict[str, str] = field(default_factory=dict)
    removed: List[str] = field(default_factory=list)

    def set_html(self, element_id: str, html: str) -> None:
        self.elements[element_id] = html

    def remove(self, element_id: str) -> None:
        self.elements.pop(element_id, None)
        self.removed.append(element_id)

    def show_message(self, element_id: str, text: str, is_error: bool = True) -> None:
        self.messages[element_id] = Message(text, is_error)

    def hide_message(self, element_id: str) -> None:
        self.messages.pop(element_id, None)

    def alert(self, text: str) -> None:
        self.alerts.append(text)

    def redirect(self, url: str) -> None:
        self.redirect_to = url


def always_confirm(prompt: str) -> bool:
    return True


class PortalApp:
    """Frontend logic bound to one API client and one session store."""

    def __init__(self, client: ApiClient, sessions: Optional[SessionManager] = None):
        self.client = client
        self.sessions = sessions or SessionManager()

    @property
    def session(self) -> Session:
        return self.sessions.load()

    # =========================================================================
    # Page protection
    # =========================================================================

    def require_auth(self, page: Page) -> bool:
        if not self.session.is_logged_in:
            page.redirect("login.html")
            return False
        return True

    def require_admin(self, page: Page) -> bool:
        session = self.session
        if not session.is_logged_in or not session.is_admin:
            page.redirect("admin-login.html")
            return False
        return True

    def render_navbar(self, page: Page) -> None:
        page.set_html("nav-links", render.render_navbar(self.session))

    # =========================================================================
    # Auth
    # =========================================================================

    def _submit(self, page: Page, message_id: str, busy_text: str, action: Callable[[], None]) -> bool:
        """Run a form action with its submit button disabled; report errors inline."""
        page.busy[message_id] = busy_text
        page.hide_message(message_id)
        try:
            action()
            return True
        except (ApiError, ValueError) as e:
            page.show_message(message_id, str(e), is_error=True)
            return False
        finally:
            page.busy.pop(message_id, None)

    def handle_register(self, page: Page, email: str, password: str, confirm_password: str) -> bool:
        def action():
            if password != confirm_password:
                raise ValueError("Passwords do not match")
            self.client.register(email.strip(), password)
            page.show_message("register-message", "Registration successful! Redirecting to login...", is_error=False)
            page.redirect("login.html")

        return self._submit(page, "register-message", "Registering...", action)

    def handle_login(self, page: Page, email: str, password: str) -> bool:
        def action():
            result = self.client.login(email.strip(), password)
            self.sessions.set_auth(result["token"], result["email"], is_admin=False)
            page.show_message("login-message", "Login successful! Redirecting...", is_error=False)
            page.redirect("index.html")

        return self._submit(page, "login-message", "Logging in...", action)

    def handle_admin_login(self, page: Page, email: str, password: str) -> bool:
        def action():
            result = self.client.admin_login(email.strip(), password)
            self.sessions.set_auth(result["token"], result["email"], is_admin=True)
            page.show_message("admin-login-message", "Admin login successful! Redirecting...", is_error=False)
            page.redirect("admin-dashboard.html")

        return self._submit(page, "admin-login-message", "Logging in...", action)

    def logout(self, page: Page) -> None:
        self.sessions.clear()
        page.redirect("index.html")

    # =========================================================================
    # Jobs
    # =========================================================================

    def load_jobs(self, page: Page) -> None:
        page.set_html("jobs-container", render.render_loading("Loading jobs..."))
        session = self.session
        try:
            jobs = self.client.get_jobs()
        except ApiError as e:
            page.set_html("jobs-container", render.render_error("Error Loading Jobs", e.message))
            return

        applied = []
        if session.is_user:
            try:
                applied = render.applied_job_ids(self.client.get_my_applications(session.token))
            except ApiError as e:
                logger.info("Could not fetch applications: %s", e.message)

        page.set_html("jobs-container", render.render_job_list(jobs, session, applied))
        page.set_html("jobs-count", render.count_label(len(jobs), "Job"))

    def handle_apply(self, page: Page, job_id: str) -> bool:
        session = self.session
        if not session.is_logged_in:
            page.redirect("login.html")
            return False
        try:
            self.client.apply_to_job(job_id, session.token)
        except ApiError as e:
            page.alert(e.message)
            return False
        page.set_html(f"job-{job_id}-actions", render.render_applied_badge())
        page.alert("Application submitted successfully!")
        return True

    def load_my_applications(self, page: Page) -> None:
        page.set_html("applications-container", render.render_loading("Loading applications..."))
        try:
            applications = self.client.get_my_applications(self.session.token)
        except ApiError as e:
            page.set_html("applications-container", render.render_error("Error Loading Applications", e.message))
            return
        page.set_html("applications-container", render.render_applications(applications))
        page.set_html("applications-count", render.count_label(len(applications), "Application"))

    # =========================================================================
    # Admin
    # =========================================================================

    def load_admin_jobs(self, page: Page) -> None:
        page.set_html("admin-jobs-list", render.render_loading())
        try:
            jobs = self.client.get_jobs()
        except ApiError as e:
            page.set_html("admin-jobs-list", render.render_notice(f"Error: {e.message}"))
            return
        page.set_html("admin-jobs-list", render.render_admin_jobs(jobs))

    def handle_create_job(self, page: Page, form: Dict[str, str]) -> bool:
        def action():
            job_data = {
                "title": form.get("title", "").strip(),
                "company": form.get("company", "").strip(),
                "location": form.get("location", "").strip(),
                "description": form.get("description", "").strip(),
                "salary": form.get("salary", "").strip() or "Not specified",
                "type": form.get("type") or "Full-time",
            }
            self.client.create_job(job_data, self.session.token)
            page.show_message("create-job-message", "Job created successfully!", is_error=False)

        created = self._submit(page, "create-job-message", "Creating...", action)
        if created:
            self.load_admin_jobs(page)
        return created

    def handle_delete_job(self, page: Page, job_id: str, confirm: Callable[[str], bool] = always_confirm) -> bool:
        if not confirm("Are you sure you want to delete this job? This will also remove all applications."):
            return False
        try:
            self.client.delete_job(job_id, self.session.token)
        except ApiError as e:
            page.alert(e.message)
            return False
        page.remove(f"admin-job-{job_id}")
        return True

    def view_applicants(self, page: Page, job_id: str, job_title: str) -> None:
        page.modal = Modal(title=f"Applicants for: {job_title}", body=render.render_loading(), active=True)
        try:
            applicants = self.client.get_job_applicants(job_id, self.session.token)
        except ApiError as e:
            page.modal.body = render.render_notice(f"Error: {e.message}")
            return
        page.modal.body = render.render_applicants(applicants)

    def close_modal(self, page: Page) -> None:
        page.modal.active = False
