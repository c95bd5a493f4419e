"""
Tests for the admin dashboard endpoints and aggregate stats.
"""
from wedding_planner.modules.admin.service import compute_overall_stats


def complete_tasks(client, headers, count):
    tasks = client.get("/api/v1/tasks", headers=headers).json()
    for task in tasks[:count]:
        client.put(f"/api/v1/tasks/{task['id']}", headers=headers, json={"completed": True})


class TestOverallStats:

    def test_spread_of_clients(self):
        stats = compute_overall_stats([0, 50, 100])

        assert stats.total_clients == 3
        assert stats.average_progress == 50
        assert stats.active_clients == 2
        assert stats.completed_clients == 1

    def test_no_clients(self):
        stats = compute_overall_stats([])

        assert stats.total_clients == 0
        assert stats.average_progress == 0

    def test_average_rounds_half_up(self):
        assert compute_overall_stats([0, 1]).average_progress == 1
        assert compute_overall_stats([33, 33, 34]).average_progress == 33


class TestAdminEndpoints:

    def test_non_admin_is_forbidden(self, client, signup):
        _, headers = signup()

        assert client.get("/api/v1/admin/clients", headers=headers).status_code == 403
        assert client.get("/api/v1/admin/stats", headers=headers).status_code == 403

    def test_clients_newest_first_with_progress(self, client, signup, make_admin):
        admin_id, admin_headers = signup(email="planner@example.com", couple_names="Agency")
        make_admin(admin_id)
        first_id, first_headers = signup(email="a@example.com", couple_names="First Couple")
        second_id, second_headers = signup(email="b@example.com", couple_names="Second Couple")
        complete_tasks(client, first_headers, 60)
        complete_tasks(client, second_headers, 30)

        response = client.get("/api/v1/admin/clients", headers=admin_headers)

        assert response.status_code == 200
        clients = response.json()
        assert [c["profile"]["id"] for c in clients] == [second_id, first_id, admin_id]
        assert clients[0]["progress"]["percentage"] == 50
        assert clients[0]["status"] == "in_progress"
        assert clients[1]["progress"] == {"total": 60, "completed": 60, "percentage": 100, "tier": "green"}
        assert clients[1]["status"] == "completed"
        assert clients[2]["status"] == "not_started"

    def test_stats(self, client, signup, make_admin):
        admin_id, admin_headers = signup(email="planner@example.com", couple_names="Agency")
        make_admin(admin_id)
        _, first_headers = signup(email="a@example.com", couple_names="First Couple")
        _, second_headers = signup(email="b@example.com", couple_names="Second Couple")
        complete_tasks(client, first_headers, 60)
        complete_tasks(client, second_headers, 30)

        stats = client.get("/api/v1/admin/stats", headers=admin_headers).json()

        assert stats == {
            "total_clients": 3,
            "active_clients": 2,
            "average_progress": 50,
            "completed_clients": 1,
        }

    def test_read_client_collections(self, client, signup, make_admin, sample_vendor):
        admin_id, admin_headers = signup(email="planner@example.com", couple_names="Agency")
        make_admin(admin_id)
        couple_id, couple_headers = signup()
        client.post("/api/v1/vendors", headers=couple_headers, json=sample_vendor)

        tasks = client.get(f"/api/v1/admin/clients/{couple_id}/tasks", headers=admin_headers)
        vendors = client.get(f"/api/v1/admin/clients/{couple_id}/vendors", headers=admin_headers)
        guests = client.get(f"/api/v1/admin/clients/{couple_id}/guests", headers=admin_headers)
        progress = client.get(f"/api/v1/admin/clients/{couple_id}/progress", headers=admin_headers)

        assert len(tasks.json()) == 60
        assert vendors.json()[0]["name"] == "Bloom & Vine"
        assert guests.json() == []
        assert progress.json()["progress"]["percentage"] == 0

    def test_unknown_client_is_404(self, client, signup, make_admin):
        admin_id, admin_headers = signup(email="planner@example.com", couple_names="Agency")
        make_admin(admin_id)

        response = client.get("/api/v1/admin/clients/nobody/tasks", headers=admin_headers)
        assert response.status_code == 404
