"""Role-gated meditation management and account-role administration tests."""

from __future__ import annotations

import os
import unittest

from fastapi.testclient import TestClient

from zenly.core.config import get_settings
from zenly.main import create_app

TEST_SECRET = "zenly-test-secret-0123456789abcdef"

_MEDITATION = {
    "title": "Body Scan",
    "description": "Slow attention from head to toe.",
    "duration": 10,
    "audio_url": "https://cdn.example.com/body-scan.mp3",
    "category": "guided",
}


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = ("ZENLY_JWT_SECRET", "ZENLY_SEED_ADMIN")

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["ZENLY_JWT_SECRET"] = TEST_SECRET
        os.environ.pop("ZENLY_SEED_ADMIN", None)
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class _RoleGateApiCase(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.app = create_app()
        self.client = TestClient(self.app)

        login = self.client.post("/api/auth/login", json={"email": "admin@zenly.com", "password": "admin1234"})
        self.assertEqual(login.status_code, 200)
        self.admin_headers = {"Authorization": f"Bearer {login.json()['token']}"}

        registered = self.client.post(
            "/api/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret123"},
        )
        self.assertEqual(registered.status_code, 201)
        self.user_id = registered.json()["user"]["id"]
        self.user_headers = {"Authorization": f"Bearer {registered.json()['token']}"}

    def _create_meditation(self, **overrides) -> dict:
        response = self.client.post("/api/meditations", headers=self.admin_headers, json={**_MEDITATION, **overrides})
        self.assertEqual(response.status_code, 201)
        return response.json()


class MeditationRoleGateTests(_RoleGateApiCase):
    def test_reads_are_public(self) -> None:
        created = self._create_meditation()

        listed = self.client.get("/api/meditations")
        fetched = self.client.get(f"/api/meditations/{created['id']}")

        self.assertEqual(listed.status_code, 200)
        self.assertEqual([m["id"] for m in listed.json()], [created["id"]])
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json()["type"], "guided")
        self.assertFalse(fetched.json()["is_premium"])
        self.assertEqual(fetched.json()["instructions"], [])

    def test_user_role_is_forbidden_from_writes(self) -> None:
        created = self._create_meditation()
        writes = self.app.state.store.meditation_write_count

        attempts = [
            ("POST", "/api/meditations", {"json": _MEDITATION}),
            ("PUT", f"/api/meditations/{created['id']}", {"json": {"title": "Mine now"}}),
            ("DELETE", f"/api/meditations/{created['id']}", {}),
        ]
        for method, url, kwargs in attempts:
            with self.subTest(method=method):
                response = self.client.request(method, url, headers=self.user_headers, **kwargs)
                self.assertEqual(response.status_code, 403)
                self.assertEqual(response.json()["code"], "FORBIDDEN")

        self.assertEqual(self.app.state.store.meditation_write_count, writes)

    def test_role_denial_is_logged_without_raw_identifier(self) -> None:
        with self.assertLogs("zenly.domain.access", level="WARNING") as captured:
            response = self.client.post("/api/meditations", headers=self.user_headers, json=_MEDITATION)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(len(captured.output), 1)
        self.assertIn("authz.role_denied", captured.output[0])
        self.assertIn("role=user required=admin", captured.output[0])
        self.assertNotIn(self.user_id, captured.output[0])

    def test_writes_without_credential_are_unauthenticated(self) -> None:
        response = self.client.post("/api/meditations", json=_MEDITATION)

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["code"], "UNAUTHENTICATED")

    def test_admin_update_is_partial_and_delete_removes(self) -> None:
        created = self._create_meditation(is_premium=True, instructions=["Breathe in", "Breathe out"])
        url = f"/api/meditations/{created['id']}"

        updated = self.client.put(url, headers=self.admin_headers, json={"duration": 15, "category": "breathing"})
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["duration"], 15)
        self.assertEqual(updated.json()["category"], "breathing")
        self.assertEqual(updated.json()["title"], "Body Scan")
        self.assertTrue(updated.json()["is_premium"])

        deleted = self.client.delete(url, headers=self.admin_headers)
        self.assertEqual(deleted.status_code, 200)
        self.assertEqual(deleted.json(), {"message": "Meditation removed"})
        self.assertEqual(self.client.get(url).status_code, 404)
        self.assertEqual(self.client.delete(url, headers=self.admin_headers).status_code, 404)

    def test_invalid_meditation_payload_is_validation_error(self) -> None:
        response = self.client.post(
            "/api/meditations",
            headers=self.admin_headers,
            json={**_MEDITATION, "category": "podcast", "duration": 0},
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "VALIDATION_ERROR")

    def test_start_session_requires_credential_only(self) -> None:
        created = self._create_meditation()
        url = f"/api/meditations/{created['id']}/start"

        self.assertEqual(self.client.post(url).status_code, 401)

        started = self.client.post(url, headers=self.user_headers)
        self.assertEqual(started.status_code, 200)
        self.assertEqual(started.json(), {"message": "Meditation session started"})

        missing = self.client.post("/api/meditations/missing-id/start", headers=self.user_headers)
        self.assertEqual(missing.status_code, 404)


class AccountRoleAdministrationTests(_RoleGateApiCase):
    def test_user_cannot_list_or_change_roles(self) -> None:
        listed = self.client.get("/api/admin/users", headers=self.user_headers)
        promoted = self.client.put(
            f"/api/admin/users/{self.user_id}/role",
            headers=self.user_headers,
            json={"role": "admin"},
        )

        self.assertEqual(listed.status_code, 403)
        self.assertEqual(promoted.status_code, 403)
        self.assertEqual(self.client.get("/api/auth/me", headers=self.user_headers).json()["role"], "user")

    def test_admin_lists_accounts_without_password_hashes(self) -> None:
        response = self.client.get("/api/admin/users", headers=self.admin_headers)

        self.assertEqual(response.status_code, 200)
        emails = sorted(user["email"] for user in response.json())
        self.assertEqual(emails, ["ada@example.com", "admin@zenly.com"])
        for user in response.json():
            self.assertNotIn("password_hash", user)

    def test_promotion_takes_effect_on_next_request_with_same_token(self) -> None:
        before = self.client.post("/api/meditations", headers=self.user_headers, json=_MEDITATION)
        self.assertEqual(before.status_code, 403)

        promoted = self.client.put(
            f"/api/admin/users/{self.user_id}/role",
            headers=self.admin_headers,
            json={"role": "admin"},
        )
        self.assertEqual(promoted.status_code, 200)
        self.assertEqual(promoted.json()["role"], "admin")

        after = self.client.post("/api/meditations", headers=self.user_headers, json=_MEDITATION)
        self.assertEqual(after.status_code, 201)

    def test_last_admin_cannot_be_demoted(self) -> None:
        admin_id = self.client.get("/api/auth/me", headers=self.admin_headers).json()["id"]
        writes = self.app.state.store.user_write_count

        response = self.client.put(
            f"/api/admin/users/{admin_id}/role",
            headers=self.admin_headers,
            json={"role": "user"},
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["code"], "LAST_ADMIN")
        self.assertEqual(self.app.state.store.user_write_count, writes)
        self.assertEqual(self.client.get("/api/auth/me", headers=self.admin_headers).json()["role"], "admin")

    def test_admin_can_step_down_once_another_admin_exists(self) -> None:
        admin_id = self.client.get("/api/auth/me", headers=self.admin_headers).json()["id"]
        promoted = self.client.put(
            f"/api/admin/users/{self.user_id}/role",
            headers=self.admin_headers,
            json={"role": "admin"},
        )
        self.assertEqual(promoted.status_code, 200)

        demoted = self.client.put(
            f"/api/admin/users/{admin_id}/role",
            headers=self.admin_headers,
            json={"role": "user"},
        )

        self.assertEqual(demoted.status_code, 200)
        self.assertEqual(demoted.json()["role"], "user")
        self.assertEqual(self.client.get("/api/admin/users", headers=self.admin_headers).status_code, 403)
        self.assertEqual(self.client.get("/api/admin/users", headers=self.user_headers).status_code, 200)

    def test_unknown_account_and_role_values(self) -> None:
        missing = self.client.put("/api/admin/users/missing-id/role", headers=self.admin_headers, json={"role": "user"})
        invalid = self.client.put(
            f"/api/admin/users/{self.user_id}/role",
            headers=self.admin_headers,
            json={"role": "superuser"},
        )

        self.assertEqual(missing.status_code, 404)
        self.assertEqual(invalid.status_code, 400)
        self.assertEqual(invalid.json()["code"], "VALIDATION_ERROR")
