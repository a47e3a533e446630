from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.web import admin_required, login_required, session_store
from ..container import Container
from ..core.exceptions import LookupFailed, StoreFailed, ValidationError

logger = logging.getLogger(__name__)

_REFRESH_TARGETS = {"login", "staff_console"}


def register(app: Flask, container: Container) -> None:
    def _refresh():
        store = session_store()
        status = container.network_service.check(store.network_status())
        store.save_network_status(status)
        return status

    @app.route("/api/network/status", endpoint="api_network_status")
    @login_required
    def api_network_status(auth):
        status = _refresh()
        return jsonify({"success": status.error is None, "label": status.label, **status.to_dict()})

    @app.route("/network/refresh", methods=["POST"], endpoint="refresh_network")
    def refresh_network():
        status = _refresh()
        if status.error:
            flash(status.error, "danger")
        target = request.form.get("next", "login")
        return redirect(url_for(target if target in _REFRESH_TARGETS else "login"))

    @app.route("/admin/network", endpoint="admin_network")
    @admin_required
    def admin_network(auth):
        try:
            current_ip = container.network_service.current_address()
        except LookupFailed as e:
            logger.warning("could not resolve admin address: %s", e)
            current_ip = None
        snapshot = container.admin_service.reload()
        return render_template(
            "admin/network.html",
            auth=auth,
            snapshot=snapshot,
            current_ip=current_ip,
            active_tab="network",
        )

    @app.route("/admin/network/add", methods=["POST"], endpoint="add_ip")
    @admin_required
    def add_ip(auth):
        address = request.form.get("ip", "")
        if not address.strip():
            return redirect(url_for("admin_network"))
        try:
            container.admin_service.add_address(address)
            flash(f"{address.strip()} added to the whitelist.", "success")
        except ValidationError as e:
            flash(str(e), "danger")
        except StoreFailed as e:
            logger.error("whitelist add failed: %s", e)
            flash("Failed to update whitelist.", "danger")
        return redirect(url_for("admin_network"))

    @app.route("/admin/network/remove", methods=["POST"], endpoint="remove_ip")
    @admin_required
    def remove_ip(auth):
        address = request.form.get("ip", "")
        try:
            container.admin_service.remove_address(address)
            flash(f"{address} removed from the whitelist.", "success")
        except StoreFailed as e:
            logger.error("IP remove error: %s", e)
            flash("Failed to remove IP from database.", "danger")
        return redirect(url_for("admin_network"))
