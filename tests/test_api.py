"""HTTP-level checks: auth guards, error bodies and the main match workflow."""

API = "/api/v1"

TEAM_BODY = {"name": "Alpha FC", "founded_year": 1920, "city": "Springfield"}


def _create_team(client, headers, name):
    response = client.post(f"{API}/teams", json={**TEAM_BODY, "name": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client):
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_routes_need_token(client):
    response = client.post(f"{API}/teams", json=TEAM_BODY)
    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"


def test_admin_routes_reject_regular_users(client, user_headers):
    response = client.post(f"{API}/teams", json=TEAM_BODY, headers=user_headers)
    assert response.status_code == 403
    assert response.json()["error"] == "forbidden"


def test_bad_token_is_unauthorized(client):
    response = client.post(f"{API}/teams", json=TEAM_BODY, headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_register_login_profile(client):
    response = client.post(
        f"{API}/auth/register",
        json={"name": "Fan Person", "email": "fan@test.local", "password": "secret123"},
    )
    assert response.status_code == 201

    response = client.post(f"{API}/auth/login", json={"email": "fan@test.local", "password": "secret123"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    response = client.get(f"{API}/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["email"] == "fan@test.local"

    response = client.post(f"{API}/auth/login", json={"email": "fan@test.local", "password": "wrong"})
    assert response.status_code == 401


def test_team_not_found_body(client):
    response = client.get(f"{API}/teams/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Team not found", "error": "not_found"}


def test_team_list_pagination(client, admin_headers):
    for i in range(12):
        _create_team(client, admin_headers, f"Team {i}")

    body = client.get(f"{API}/teams", params={"page": 2, "limit": 500}).json()
    assert body["limit"] == 10
    assert body["total"] == 12
    assert body["total_pages"] == 2
    assert len(body["items"]) == 2


def test_match_workflow(client, admin_headers):
    home = _create_team(client, admin_headers, "Alpha FC")
    away = _create_team(client, admin_headers, "Beta FC")

    response = client.post(
        f"{API}/players",
        json={"team_id": home["id"], "name": "Sam Striker", "height": 182, "weight": 78,
              "position": "forward", "jersey_number": 9},
        headers=admin_headers,
    )
    assert response.status_code == 201
    striker = response.json()

    response = client.post(
        f"{API}/players",
        json={"team_id": home["id"], "name": "Copy Cat", "height": 182, "weight": 78,
              "position": "forward", "jersey_number": 9},
        headers=admin_headers,
    )
    assert response.status_code == 409

    response = client.post(
        f"{API}/matches",
        json={"match_date": "2024-05-01", "match_time": "15:00",
              "home_team_id": home["id"], "away_team_id": home["id"]},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation"

    response = client.post(
        f"{API}/matches",
        json={"match_date": "2024-05-01", "match_time": "15:00",
              "home_team_id": home["id"], "away_team_id": away["id"]},
        headers=admin_headers,
    )
    assert response.status_code == 201
    match = response.json()
    assert match["status"] == "scheduled"
    assert match["result"] == "not_played"

    response = client.post(
        f"{API}/matches/{match['id']}/result",
        json={"home_score": 2, "away_score": 1,
              "goals": [{"player_id": striker["id"], "team_id": home["id"], "minute": 34}]},
        headers=admin_headers,
    )
    assert response.status_code == 200, response.text
    detail = response.json()
    assert detail["status"] == "completed"
    assert detail["result"] == "home_win"
    assert detail["result_display"] == "Home Team Win"
    assert detail["goals"][0]["player_name"] == "Sam Striker"

    response = client.put(
        f"{API}/matches/{match['id']}", json={"status": "scheduled"}, headers=admin_headers
    )
    assert response.status_code == 400

    scorers = client.get(f"{API}/reports/top-scorers", params={"limit": 5}).json()
    assert scorers[0]["player_id"] == striker["id"]
    assert scorers[0]["goal_count"] == 1

    report = client.get(f"{API}/reports/matches/{match['id']}").json()
    assert report["home_goal_events"] == 1
    assert report["away_goal_events"] == 0

    completed = client.get(f"{API}/reports/completed").json()
    assert completed["total"] == 1

    record = client.get(f"{API}/reports/teams/{home['id']}").json()
    assert record["wins"] == 1
    assert record["goal_difference"] == 1


def test_match_filters(client, admin_headers):
    home = _create_team(client, admin_headers, "Alpha FC")
    away = _create_team(client, admin_headers, "Beta FC")
    for day in ("2024-05-01", "2024-05-08", "2024-06-01"):
        client.post(
            f"{API}/matches",
            json={"match_date": day, "match_time": "15:00",
                  "home_team_id": home["id"], "away_team_id": away["id"]},
            headers=admin_headers,
        )

    body = client.get(f"{API}/matches", params={"start_date": "2024-05-01", "end_date": "2024-05-31"}).json()
    assert body["total"] == 2

    response = client.get(f"{API}/matches", params={"start_date": "2024-05-01"})
    assert response.status_code == 400
    assert response.json() == {"detail": "start_date and end_date must be given together", "error": "validation"}

    response = client.get(f"{API}/matches", params={"status": "bogus"})
    assert response.status_code == 400
