import uuid

from conftest import make_project, make_task


def test_create_task(client, auth_headers):
    project = make_project(client, auth_headers)
    r = client.post(
        "/api/tasks",
        json={"title": "  Draft outline  ", "due_date": "2030-02-01", "project_id": project["id"]},
        headers=auth_headers,
    )
    assert r.status_code == 201
    data = r.json()
    assert data["title"] == "Draft outline"
    assert data["priority"] == "Medium"
    assert data["state"] == "NotStarted"
    assert data["due_date"] == "2030-02-01"
    assert data["project_id"] == project["id"]
    assert uuid.UUID(data["id"])


def test_list_tasks_ordered_by_due_date(client, auth_headers):
    project = make_project(client, auth_headers)
    late = make_task(client, auth_headers, project["id"], title="Late one", due_date="2030-05-01")
    early = make_task(client, auth_headers, project["id"], title="Early one", due_date="2030-01-01")
    middle = make_task(client, auth_headers, project["id"], title="Middle one", due_date="2030-03-01")

    r = client.get("/api/tasks", headers=auth_headers)
    assert r.status_code == 200
    assert [t["id"] for t in r.json()] == [early["id"], middle["id"], late["id"]]


def test_list_tasks_filtered_by_project(client, auth_headers):
    first = make_project(client, auth_headers, name="First project")
    second = make_project(client, auth_headers, name="Second project")
    make_task(client, auth_headers, first["id"], title="Belongs to first")
    wanted = make_task(client, auth_headers, second["id"], title="Belongs to second")

    r = client.get("/api/tasks", params={"project_id": second["id"]}, headers=auth_headers)
    assert [t["id"] for t in r.json()] == [wanted["id"]]


def test_task_title_length_is_validated(client, auth_headers):
    project = make_project(client, auth_headers)
    for title in ["ab", "   ab   ", "t" * 121]:
        r = client.post(
            "/api/tasks",
            json={"title": title, "due_date": "2030-01-01", "project_id": project["id"]},
            headers=auth_headers,
        )
        assert r.status_code == 422
        assert "title" in r.json()["errors"]


def test_task_requires_due_date_and_project(client, auth_headers):
    r = client.post("/api/tasks", json={"title": "No date here"}, headers=auth_headers)
    assert r.status_code == 422
    assert {"due_date", "project_id"} <= set(r.json()["errors"])


def test_create_task_in_foreign_project_is_rejected(client, auth_headers, other_headers):
    foreign = make_project(client, other_headers)
    r = client.post(
        "/api/tasks",
        json={"title": "Sneaky task", "due_date": "2030-01-01", "project_id": foreign["id"]},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Project does not exist for this user."
    assert client.get("/api/tasks", headers=other_headers).json() == []


def test_create_task_in_missing_project_is_rejected(client, auth_headers):
    r = client.post(
        "/api/tasks",
        json={"title": "Orphan task", "due_date": "2030-01-01", "project_id": str(uuid.uuid4())},
        headers=auth_headers,
    )
    assert r.status_code == 400


def test_update_task_and_move_between_projects(client, auth_headers):
    first = make_project(client, auth_headers, name="First project")
    second = make_project(client, auth_headers, name="Second project")
    task = make_task(client, auth_headers, first["id"])

    r = client.put(
        f"/api/tasks/{task['id']}",
        json={
            "title": "Rewritten",
            "priority": "Low",
            "state": "Done",
            "due_date": "2031-12-31",
            "project_id": second["id"],
        },
        headers=auth_headers,
    )
    assert r.status_code == 200
    data = r.json()
    assert data["title"] == "Rewritten"
    assert data["priority"] == "Low"
    assert data["state"] == "Done"
    assert data["due_date"] == "2031-12-31"
    assert data["project_id"] == second["id"]
    assert data["created_at"] == task["created_at"]


def test_update_task_into_foreign_project_is_rejected(client, auth_headers, other_headers):
    own = make_project(client, auth_headers)
    foreign = make_project(client, other_headers)
    task = make_task(client, auth_headers, own["id"])

    r = client.put(
        f"/api/tasks/{task['id']}",
        json={"title": "Moved away", "due_date": "2030-01-01", "project_id": foreign["id"]},
        headers=auth_headers,
    )
    assert r.status_code == 400
    fetched = client.get(f"/api/tasks/{task['id']}", headers=auth_headers).json()
    assert fetched["project_id"] == own["id"]


def test_tasks_are_owner_scoped(client, auth_headers, other_headers):
    project = make_project(client, auth_headers)
    task = make_task(client, auth_headers, project["id"])
    other_project = make_project(client, other_headers)
    url = f"/api/tasks/{task['id']}"
    body = {"title": "Hijacked", "due_date": "2030-01-01", "project_id": other_project["id"]}

    assert client.get("/api/tasks", headers=other_headers).json() == []
    assert client.get(url, headers=other_headers).status_code == 404
    assert client.put(url, json=body, headers=other_headers).status_code == 404
    assert client.delete(url, headers=other_headers).status_code == 404

    r = client.get(url, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["title"] == task["title"]


def test_delete_task(client, auth_headers):
    project = make_project(client, auth_headers)
    task = make_task(client, auth_headers, project["id"])

    r = client.delete(f"/api/tasks/{task['id']}", headers=auth_headers)
    assert r.status_code == 204
    assert client.get(f"/api/tasks/{task['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/tasks/{task['id']}", headers=auth_headers).status_code == 404
    # the parent project is untouched
    assert client.get(f"/api/projects/{project['id']}", headers=auth_headers).status_code == 200


def test_malformed_task_id_is_a_validation_error(client, auth_headers):
    r = client.get("/api/tasks/not-a-uuid", headers=auth_headers)
    assert r.status_code == 422
    assert "task_id" in r.json()["errors"]
