"""Placeholder pages for the login, register and dashboard paths the interception layer guards."""

from html import escape
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from wisata.api.deps import require_admin, require_consumer
from wisata.schemas.auth import PublicUser

router = APIRouter(include_in_schema=False)


def _page(title: str, body: str = "") -> HTMLResponse:
    return HTMLResponse(f"<!doctype html><title>{title}</title><h1>{title}</h1>{body}")


@router.get("/consumer/login")
def consumer_login_page() -> HTMLResponse:
    return _page("Consumer login")


@router.get("/consumer/register")
def consumer_register_page() -> HTMLResponse:
    return _page("Consumer registration")


@router.get("/consumer/dashboard")
def consumer_dashboard_page(
    user: Annotated[PublicUser, Depends(require_consumer)],
) -> HTMLResponse:
    return _page("Dashboard", f"<p>{escape(user.email)}</p>")


@router.get("/admin/login")
def admin_login_page() -> HTMLResponse:
    return _page("Admin login")


@router.get("/admin/dashboard")
def admin_dashboard_page(
    admin: Annotated[PublicUser, Depends(require_admin)],
) -> HTMLResponse:
    return _page("Admin dashboard", f"<p>{escape(admin.email)} ({escape(admin.role)})</p>")
