from __future__ import annotations

from config import testing as testing_settings
from src.securehub.securehub.container import build_container
from src.securehub.securehub.core.constants import ATTENDANCE_TABLE, NETWORK_CONFIG_TABLE, USERS_TABLE
from src.securehub.securehub.main import create_app
from src.securehub.securehub.network.lookup import RequestAddressLookup


def login(client, user_id: str, password: str):
    return client.post("/", data={"userId": user_id, "password": password}, follow_redirects=True)


def test_login_page_shows_network_status(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Authorized Network" in resp.data
    assert b"10.0.0.5" in resp.data


def test_staff_login_on_allowed_network(client):
    resp = login(client, "s001", "pw-s001")

    assert resp.request.path == "/staff"
    assert b"Dara Sok" in resp.data


def test_staff_login_off_network_is_refused(client, lookup):
    lookup.address = "10.0.0.9"

    resp = login(client, "s001", "pw-s001")

    assert resp.request.path == "/"
    assert b"restricted to authorized networks" in resp.data


def test_admin_login_from_anywhere(client, lookup):
    lookup.address = "198.51.100.77"

    resp = login(client, "admin", "admin123")

    assert resp.request.path == "/admin/users"


def test_invalid_credentials(client):
    resp = login(client, "s001", "nope")

    assert b"Invalid credentials" in resp.data


def test_session_survives_until_logout(client):
    login(client, "s001", "pw-s001")

    again = client.get("/")
    assert again.status_code == 302
    assert again.headers["Location"].endswith("/console")

    client.get("/logout")
    after = client.get("/staff")
    assert after.status_code == 302
    assert after.headers["Location"].endswith("/")


def test_staff_check_in(client, store):
    login(client, "s001", "pw-s001")

    resp = client.post("/staff/check-in", follow_redirects=True)

    assert b"Operation successful: Check-in recorded" in resp.data
    rows = store.tables[ATTENDANCE_TABLE]
    assert len(rows) == 1
    assert rows[0]["userId"] == "s001"
    assert rows[0]["type"] == "CHECK_IN"
    assert rows[0]["ip"] == "10.0.0.5"


def test_check_out_refused_after_leaving_network(client, store, lookup):
    login(client, "s001", "pw-s001")
    lookup.address = "10.0.0.9"
    client.post("/network/refresh", data={"next": "staff_console"})

    resp = client.post("/staff/check-out", follow_redirects=True)

    assert b"not in the whitelist" in resp.data
    assert store.tables[ATTENDANCE_TABLE] == []


def test_clock_action_rechecks_network_without_page_reload(client, store, lookup):
    login(client, "s001", "pw-s001")
    lookup.address = "10.0.0.9"

    resp = client.post("/staff/check-in", follow_redirects=True)

    assert b"not in the whitelist" in resp.data
    assert store.tables[ATTENDANCE_TABLE] == []


def test_clock_action_keeps_last_known_membership_when_lookup_fails(client, store, lookup):
    login(client, "s001", "pw-s001")
    lookup.address = None

    client.post("/staff/check-in")

    rows = store.tables[ATTENDANCE_TABLE]
    assert [(r["type"], r["ip"]) for r in rows] == [("CHECK_IN", "10.0.0.5")]


def test_staff_admitted_after_admin_adds_ipv6_address(client, store, lookup):
    login(client, "admin", "admin123")
    client.post("/admin/network/add", data={"ip": "2001:DB8::1"})
    client.get("/logout")

    lookup.address = "2001:DB8::1"
    resp = login(client, "s001", "pw-s001")

    assert resp.request.path == "/staff"


def test_polling_endpoint_keeps_last_known_value_on_lookup_failure(client, lookup):
    login(client, "s001", "pw-s001")

    first = client.get("/api/network/status").get_json()
    assert first["allowed"] is True
    assert first["success"] is True

    lookup.address = None
    second = client.get("/api/network/status").get_json()
    assert second["allowed"] is True
    assert second["success"] is False
    assert second["error"]


def test_staff_cannot_open_admin_console(client):
    login(client, "s001", "pw-s001")

    assert client.get("/admin/users").status_code == 403


def test_admin_cannot_use_clock_controls(client, store):
    login(client, "admin", "admin123")

    assert client.post("/staff/check-in").status_code == 403
    assert store.tables[ATTENDANCE_TABLE] == []


def test_anonymous_admin_request_goes_to_login(client):
    resp = client.get("/admin/logs")

    assert resp.status_code == 302


def test_admin_cannot_delete_reserved_admin(client, store):
    login(client, "admin", "admin123")

    resp = client.post("/admin/users/delete/admin", follow_redirects=True)

    assert b"cannot be deleted" in resp.data
    assert any(r["id"] == "admin" for r in store.tables[USERS_TABLE])


def test_admin_manages_accounts(client, store):
    login(client, "admin", "admin123")

    resp = client.post(
        "/admin/users/add",
        data={"id": "s002", "name": "Vanna Chan", "password": "pw2", "position": "Clerk", "department": "Front", "role": "STAFF"},
        follow_redirects=True,
    )
    assert b"Vanna Chan" in resp.data

    dup = client.post("/admin/users/add", data={"id": "s001", "name": "X", "password": "y"}, follow_redirects=True)
    assert b"User ID already exists: s001" in dup.data

    client.post("/admin/users/delete/s002")
    assert [r["id"] for r in store.tables[USERS_TABLE]] == ["admin", "s001"]


def test_admin_store_write_failure_is_reported(client, store):
    login(client, "admin", "admin123")
    store.fail_writes = True

    resp = client.post("/admin/users/delete/s001", follow_redirects=True)

    assert b"Failed to delete user" in resp.data


def test_admin_manages_allow_list(client, store):
    login(client, "admin", "admin123")

    client.post("/admin/network/add", data={"ip": "192.168.0.10"})
    dup = client.post("/admin/network/add", data={"ip": "192.168.0.10"}, follow_redirects=True)
    assert b"already on the whitelist" in dup.data

    client.post("/admin/network/remove", data={"ip": "10.0.0.5"})
    assert store.tables[NETWORK_CONFIG_TABLE] == [{"id": 1, "whitelistedIps": ["192.168.0.10"]}]


def test_admin_csv_export(client, store):
    store.tables[ATTENDANCE_TABLE] = [
        {"id": "e1", "userId": "s001", "userName": "Dara Sok", "timestamp": 1770021000000, "type": "CHECK_IN", "ip": "10.0.0.5"},
        {"id": "e2", "userId": "s001", "userName": "Dara Sok", "timestamp": 1770050000000, "type": "CHECK_OUT", "ip": "10.0.0.5"},
    ]
    login(client, "admin", "admin123")

    resp = client.get("/admin/logs.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance_report_" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "ID,Name,Type,Date,Time,IP"
    assert len(lines) == 3
    assert lines[1].startswith("s001,Dara Sok,CHECK_OUT,")


def test_allow_list_entries_stay_out_of_inline_script(client, store):
    store.tables[NETWORK_CONFIG_TABLE] = [{"id": 1, "whitelistedIps": ["legacy');alert(1)//"]}]
    login(client, "admin", "admin123")

    page = client.get("/admin/network").data

    assert b"data-ip=\"legacy&#39;);alert(1)//\"" in page
    assert b"confirm('Remove IP legacy" not in page


def test_admin_cannot_add_address_with_zone_index(client, store):
    login(client, "admin", "admin123")

    resp = client.post("/admin/network/add", data={"ip": "fe80::1%x');alert(1)//"}, follow_redirects=True)

    assert b"must not carry a zone index" in resp.data
    assert store.tables[NETWORK_CONFIG_TABLE] == [{"id": 1, "whitelistedIps": ["10.0.0.5"]}]


def _request_address_client(store):
    return create_app(build_container(store=store, lookup=RequestAddressLookup())).test_client()


def test_forwarded_for_header_ignored_without_trusted_proxy(store):
    client = _request_address_client(store)

    resp = client.post(
        "/",
        data={"userId": "s001", "password": "pw-s001"},
        headers={"X-Forwarded-For": "10.0.0.5"},
        environ_base={"REMOTE_ADDR": "203.0.113.9"},
    )

    assert resp.status_code == 200
    assert b"restricted to authorized networks" in resp.data


def test_trusted_proxy_hop_sets_request_address(store, monkeypatch):
    monkeypatch.setattr(testing_settings, "TRUSTED_PROXIES", 1)
    client = _request_address_client(store)

    spoofed = client.post(
        "/",
        data={"userId": "s001", "password": "pw-s001"},
        headers={"X-Forwarded-For": "10.0.0.5, 203.0.113.9"},
        environ_base={"REMOTE_ADDR": "127.0.0.1"},
    )
    assert b"restricted to authorized networks" in spoofed.data

    resp = client.post(
        "/",
        data={"userId": "s001", "password": "pw-s001"},
        headers={"X-Forwarded-For": "203.0.113.9, 10.0.0.5"},
        environ_base={"REMOTE_ADDR": "127.0.0.1"},
    )
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/console")
