"""
HTTP route tests for cleaner management and admin settings
"""

from datacleaner.plugins.loader import install_cleaners

SITE_CONFIG = {"X-Capabilities": "site:config"}


async def _install(session_factory, registry):
    async with session_factory() as session:
        await install_cleaners(registry, session)


class TestRouteRegistration:
    def test_routes_registered(self):
        from main import app

        paths = {r.path for r in app.routes}
        assert "/api/v1/cleaners" in paths
        assert "/api/v1/cleaners/{name}/enable" in paths
        assert "/admin/settings" in paths


class TestCleanerRoutes:
    async def test_list(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.get("/api/v1/cleaners")
        assert response.status_code == 200
        data = response.json()
        assert data["manage_url"] == "/admin/settings?section=local_cleaner"
        assert {c["name"] for c in data["cleaners"]} == {"core_config", "cron_disabler"}
        assert all(c["enabled"] is False for c in data["cleaners"])

    async def test_get_unknown_returns_404(self, client):
        response = await client.get("/api/v1/cleaners/ghost")
        assert response.status_code == 404
        body = response.json()
        assert body["error"]["error_code"] == "CLEANER_NOT_FOUND"
        assert body["error"]["details"] == {"cleaner": "ghost"}

    async def test_enable_disable(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.post("/api/v1/cleaners/core_config/enable")
        assert response.status_code == 200
        assert response.json()["enabled"] is True

        response = await client.get("/api/v1/cleaners/core_config")
        assert response.json()["enabled"] is True

        response = await client.post("/api/v1/cleaners/core_config/disable")
        assert response.json()["enabled"] is False

    async def test_ordered(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        await client.post("/api/v1/cleaners/core_config/enable")
        await client.post("/api/v1/cleaners/cron_disabler/enable")
        response = await client.get("/api/v1/cleaners/ordered")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["cron_disabler", "core_config"]

    async def test_run_dry(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        await client.post("/api/v1/cleaners/cron_disabler/enable")
        response = await client.post("/api/v1/cleaners/run", params={"dry_run": "true"})
        assert response.status_code == 200
        data = response.json()
        assert data["dry_run"] is True
        assert [r["name"] for r in data["results"]] == ["cron_disabler"]

    async def test_uninstall(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.delete("/api/v1/cleaners/cron_disabler")
        assert response.status_code == 200
        assert response.json() == {"name": "cron_disabler", "removed": 2}

        response = await client.get("/api/v1/cleaners/cron_disabler")
        assert response.json()["installed_version"] is None

    async def test_enable_uninstalled_returns_409(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        await client.delete("/api/v1/cleaners/cron_disabler")

        response = await client.post("/api/v1/cleaners/cron_disabler/enable")

        assert response.status_code == 409
        assert response.json()["error"]["error_code"] == "CLEANER_NOT_INSTALLED"
        response = await client.post("/api/v1/cleaners/run")
        assert response.json()["results"] == []

    async def test_list_without_trailing_slash_not_redirected(self, client):
        response = await client.get("/api/v1/cleaners")
        assert response.status_code == 200
        assert "cleaners" in response.json()


class TestSettingsRoutes:
    async def test_section_lists_pages_with_capability(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.get("/admin/settings", params={"section": "local_cleaner"}, headers=SITE_CONFIG)
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "category"
        assert [c["name"] for c in data["children"]] == ["cleaner_core_config"]

    async def test_section_hides_pages_without_capability(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.get("/admin/settings", params={"section": "local_cleaner"})
        assert response.status_code == 200
        assert response.json()["children"] == []

    async def test_page_not_found_without_capability(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.get("/admin/settings", params={"section": "cleaner_core_config"})
        assert response.status_code == 404

    async def test_get_page(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.get(
            "/admin/settings", params={"section": "cleaner_core_config"}, headers=SITE_CONFIG
        )
        data = response.json()
        assert data["type"] == "page"
        assert data["hidden"] is True
        assert data["req_capability"] == "site:config"
        assert data["settings"][0]["name"] == "names"

    async def test_update_page(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.put(
            "/admin/settings",
            params={"section": "cleaner_core_config"},
            json={"values": {"names": "core/smtphosts"}},
            headers=SITE_CONFIG,
        )
        assert response.status_code == 200
        assert response.json()["settings"][0]["value"] == "core/smtphosts"

    async def test_update_unknown_setting(self, client, session_factory, builtin_registry):
        await _install(session_factory, builtin_registry)
        response = await client.put(
            "/admin/settings",
            params={"section": "cleaner_core_config"},
            json={"values": {"nope": "1"}},
            headers=SITE_CONFIG,
        )
        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == "SETTING_INVALID"

    async def test_update_category_rejected(self, client):
        response = await client.put(
            "/admin/settings",
            params={"section": "local_cleaner"},
            json={"values": {}},
            headers=SITE_CONFIG,
        )
        assert response.status_code == 404
