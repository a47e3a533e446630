from __future__ import annotations

import logging
from datetime import date

from flask import Flask, current_app, flash, redirect, render_template, url_for

from ..common.web import admin_required, session_store, staff_required
from ..container import Container
from ..core.enums import AttendanceType
from ..core.exceptions import NetworkRestricted, StoreFailed
from .export import render_csv, report_filename

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/staff", endpoint="staff_console")
    @staff_required
    def staff_console(auth):
        store = session_store()
        network = container.network_service.check(store.network_status())
        store.save_network_status(network)
        if network.error:
            flash("Network verification failed. Check your connection.", "danger")

        events = container.attendance_service.history_for(auth.account_id)
        return render_template(
            "staff/console.html",
            auth=auth,
            network=network,
            events=events,
            recheck_seconds=int(current_app.config["NETWORK_RECHECK_SECONDS"]),
        )

    def _clock(auth, kind: AttendanceType):
        store = session_store()
        network = container.network_service.check(store.network_status())
        store.save_network_status(network)
        try:
            event = container.attendance_service.record(auth, kind, network)
            flash(f"Operation successful: {kind.label} recorded at {event.time_text}", "success")
        except NetworkRestricted as e:
            flash(str(e), "warning")
        except StoreFailed as e:
            logger.error("attendance write failed: %s", e)
            flash("Database error. Your attendance could not be saved.", "danger")
        return redirect(url_for("staff_console"))

    @app.route("/staff/check-in", methods=["POST"], endpoint="checkin")
    @staff_required
    def checkin(auth):
        return _clock(auth, AttendanceType.CHECK_IN)

    @app.route("/staff/check-out", methods=["POST"], endpoint="checkout")
    @staff_required
    def checkout(auth):
        return _clock(auth, AttendanceType.CHECK_OUT)

    @app.route("/admin/logs", endpoint="admin_logs")
    @admin_required
    def admin_logs(auth):
        snapshot = container.admin_service.reload()
        return render_template("admin/logs.html", auth=auth, snapshot=snapshot, active_tab="logs")

    @app.route("/admin/logs.csv", endpoint="admin_logs_csv")
    @admin_required
    def admin_logs_csv(auth):
        events = container.attendance_service.all_events()
        csv_bytes = render_csv(events).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report_filename(date.today())}"},
        )
