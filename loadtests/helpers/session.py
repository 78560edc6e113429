"""Admin login shared by every admin scenario."""

import os

ADMIN_EMAIL = os.getenv("LOADTEST_ADMIN_EMAIL", os.getenv("ADMIN_EMAIL", "admin@wilaya-store.dz"))
ADMIN_PASSWORD = os.getenv("LOADTEST_ADMIN_PASSWORD", os.getenv("ADMIN_PASSWORD", "change-me-admin"))


def login_admin(client) -> bool:
    """Log the Locust client in; the ``sid`` cookie then rides on every request."""
    with client.post(
        "/api/admin/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        catch_response=True,
        name="POST /api/admin/login",
    ) as resp:
        if resp.status_code != 200:
            resp.failure(f"Admin login failed: {resp.status_code}")
            return False
    return True
