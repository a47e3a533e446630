from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, redirect, render_template, session, url_for

from ..sessions.model import AdministratorView, AuthSession, StaffView
from ..sessions.store import SessionStore


def session_store() -> SessionStore:
    return SessionStore(session)


def current_session() -> Optional[AuthSession]:
    return session_store().restore()


def render_forbidden(auth: Optional[AuthSession] = None):
    return render_template("403.html", auth=auth), 403


def login_required(view):
    """Restore the session and hand it to the view as ``auth``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        auth = current_session()
        if auth is None:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, auth=auth, **kwargs)

    return wrapper


def _view_required(view_type):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            auth = current_session()
            if auth is None:
                return redirect(url_for("login"))
            if not isinstance(auth.view, view_type):
                return render_forbidden(auth)
            return view(*args, auth=auth, **kwargs)

        return wrapper

    return decorator


admin_required = _view_required(AdministratorView)
staff_required = _view_required(StaffView)
