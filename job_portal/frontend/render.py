"""
Pure rendering functions: fetched API data in, HTML fragments out.

Every template is rendered with autoescaping, so user-supplied text (titles,
descriptions, emails) can never inject markup.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .session import Session

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_date(value: Optional[str]) -> str:
    """ISO-8601 timestamp -> ``Jan 5, 2024``; unparseable input is returned as is."""
    if not value:
        return ""
    try:
        date = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    return f"{date:%b} {date.day}, {date.year}"


def count_label(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["format_date"] = format_date


def _render(template: str, **context: Any) -> str:
    return env.get_template(template).render(**context).strip()


def render_navbar(session: Session) -> str:
    return _render("navbar.html", session=session)


def render_loading(text: Optional[str] = None) -> str:
    return _render("loading.html", text=text)


def render_notice(text: str) -> str:
    return _render("notice.html", text=text)


def render_empty_state(title: str, text: str, link: Optional[Dict[str, str]] = None) -> str:
    return _render("empty_state.html", title=title, text=text, link=link)


def render_error(title: str, message: str) -> str:
    return render_empty_state(title, message)


def render_applied_badge() -> str:
    return _render("applied_badge.html")


def render_job_action(job: Dict[str, Any], session: Session, applied_job_ids: Iterable[str] = ()) -> str:
    """Apply button, applied badge, login link, or nothing for admins."""
    if session.is_user:
        if job["id"] in set(applied_job_ids):
            return render_applied_badge()
        return _render("apply_button.html", job_id=job["id"])
    if not session.is_logged_in:
        return _render("login_to_apply.html")
    return ""


def render_job_card(job: Dict[str, Any], session: Session, applied_job_ids: Iterable[str] = ()) -> str:
    action = Markup(render_job_action(job, session, applied_job_ids))
    return _render("job_card.html", job=job, action=action)


def render_job_list(jobs: List[Dict[str, Any]], session: Session, applied_job_ids: Iterable[str] = ()) -> str:
    if not jobs:
        return render_empty_state("No Jobs Available", "Check back later for new opportunities!")
    applied = set(applied_job_ids)
    return "\n".join(render_job_card(job, session, applied) for job in jobs)


def render_applications(applications: List[Dict[str, Any]]) -> str:
    if not applications:
        return render_empty_state(
            "No Applications Yet",
            "You haven't applied to any jobs yet.",
            link={"href": "index.html", "label": "Browse Jobs"},
        )
    return _render("applications.html", applications=applications)


def render_admin_jobs(jobs: List[Dict[str, Any]]) -> str:
    if not jobs:
        return render_notice("No jobs created yet.")
    return _render("admin_jobs.html", jobs=jobs)


def render_applicants(applicants: List[Dict[str, Any]]) -> str:
    if not applicants:
        return render_notice("No applicants yet.")
    return _render("applicants.html", applicants=applicants)


def applied_job_ids(applications: List[Dict[str, Any]]) -> List[str]:
    """Job ids from ``/applications/my`` rows; ``jobId`` may be expanded or null."""
    ids = []
    for app in applications:
        job = app.get("jobId")
        if isinstance(job, dict):
            ids.append(job.get("id"))
        elif job:
            ids.append(job)
    return ids
