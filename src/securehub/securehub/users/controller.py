from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import admin_required, current_session, login_required, session_store
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, LookupFailed, StoreFailed, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_session() is not None:
            return redirect(url_for("console"))

        store = session_store()
        network = container.network_service.check(store.network_status())
        store.save_network_status(network)
        if network.error:
            flash(network.error, "danger")

        if request.method == "POST":
            identifier = request.form.get("userId", "")
            credential = request.form.get("password", "")
            try:
                auth = container.auth_service.authenticate(identifier, credential, network)
                session.permanent = True
                store.save(auth)
                return redirect(url_for("console"))
            except (AuthenticationError, AuthorizationError) as e:
                flash(str(e), "danger")
            except StoreFailed as e:
                logger.error("login lookup failed: %s", e)
                flash("Connection error. Please try again.", "danger")

        return render_template("login.html", network=network)

    @app.route("/logout", endpoint="logout")
    def logout():
        session_store().clear()
        flash("Signed out.", "info")
        return redirect(url_for("login"))

    @app.route("/console", endpoint="console")
    @login_required
    def console(auth):
        return redirect(url_for(auth.view.endpoint))

    def _admin_address():
        try:
            return container.network_service.current_address()
        except LookupFailed:
            return None

    @app.route("/admin/users", endpoint="admin_users")
    @admin_required
    def admin_users(auth):
        snapshot = container.admin_service.reload()
        return render_template(
            "admin/users.html",
            auth=auth,
            snapshot=snapshot,
            roles=list(Role),
            current_ip=_admin_address(),
            active_tab="users",
        )

    @app.route("/admin/users/add", methods=["POST"], endpoint="add_user")
    @admin_required
    def add_user(auth):
        try:
            container.admin_service.add_account(
                account_id=request.form.get("id", ""),
                name=request.form.get("name", ""),
                password=request.form.get("password", ""),
                position=request.form.get("position", ""),
                department=request.form.get("department", ""),
                role=request.form.get("role", Role.STAFF.value),
            )
            flash("User created.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except StoreFailed as e:
            logger.error("create user failed: %s", e)
            flash("Failed to create user.", "danger")
        return redirect(url_for("admin_users"))

    @app.route("/admin/users/delete/<account_id>", methods=["POST"], endpoint="delete_user")
    @admin_required
    def delete_user(auth, account_id: str):
        try:
            container.admin_service.delete_account(account_id)
            flash(f"User {account_id} deleted.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except StoreFailed as e:
            logger.error("delete user %r failed: %s", account_id, e)
            flash("Failed to delete user. Please check database permissions.", "danger")
        return redirect(url_for("admin_users"))
