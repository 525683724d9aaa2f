"""API tests for the coach views, CSV export and admin user management."""

from urllib.parse import quote

import pytest


@pytest.fixture
def athlete(client, signup):
    profile, headers = signup("athlete@example.com", name="김선수")
    client.put("/api/v1/logs/2024-06-05", json={ "trainings": { "cardio": 30 } }, headers=headers)
    client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "strength": 20, "skill": 10 } }, headers=headers)
    client.put("/api/v1/logs/2024-05-20", json={ "trainings": { "other": 5 } }, headers=headers)
    return profile, headers


class TestCoachViews:

    def test_list_athletes(self, client, signup, athlete):
        _, coach = signup("coach@example.com", role="coach")
        signup("other-coach@example.com", role="coach")
        athletes = client.get("/api/v1/athletes", headers=coach).json()
        assert [a["id"] for a in athletes] == [athlete[0]["id"]]

    def test_athlete_cannot_list_athletes(self, client, athlete):
        assert client.get("/api/v1/athletes", headers=athlete[1]).status_code == 403

    def test_athlete_week_ascending(self, client, signup, athlete):
        _, coach = signup("coach@example.com", role="coach")
        response = client.get(f"/api/v1/athletes/{athlete[0]['id']}/logs/week",
                              params={ "as_of": "2024-06-06" }, headers=coach)
        assert response.status_code == 200
        week = response.json()
        assert [log["date"] for log in week["logs"]] == ["2024-06-03", "2024-06-05"]
        assert week["total_duration"] == 60

    def test_week_of_unknown_athlete(self, client, signup):
        _, coach = signup("coach@example.com", role="coach")
        assert client.get("/api/v1/athletes/ghost/logs/week", headers=coach).status_code == 404


class TestExport:

    def test_csv_download(self, client, signup, athlete):
        _, coach = signup("coach@example.com", role="coach")
        response = client.get(f"/api/v1/athletes/{athlete[0]['id']}/logs/export", headers=coach)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert quote("김선수_훈련기록.csv") in response.headers["content-disposition"]

        assert response.content.startswith(b"\xef\xbb\xbf")
        lines = response.content.decode("utf-8-sig").split("\n")
        assert lines[0] == "날짜,스트레칭(분),유산소(분),근력(분),기술(분),기타(분),총합(분)"
        assert lines[1:] == [
            "2024-05-20,0,0,0,0,5,5",
            "2024-06-03,0,0,20,10,0,30",
            "2024-06-05,0,30,0,0,0,30",
        ]

    def test_nothing_to_export(self, client, signup, admin):
        profile, _ = signup("empty@example.com")
        response = client.get(f"/api/v1/athletes/{profile['id']}/logs/export", headers=admin)
        assert response.status_code == 404
        assert response.json()["detail"] == "내보낼 데이터가 없습니다."


class TestAdmin:

    def test_grouped_users(self, client, signup, athlete, admin):
        signup("coach@example.com", role="coach")
        groups = client.get("/api/v1/admin/users", headers=admin).json()
        assert [(g["role"], g["label"], g["count"]) for g in groups] == [
            ("admin", "관리자", 1), ("coach", "코치", 1), ("athlete", "선수", 1),
        ]

    def test_coach_is_not_admin(self, client, signup):
        _, coach = signup("coach@example.com", role="coach")
        assert client.get("/api/v1/admin/users", headers=coach).status_code == 403

    def test_delete_user_cascades(self, client, athlete, admin):
        profile, athlete_headers = athlete

        assert client.delete(f"/api/v1/admin/users/{profile['id']}", headers=admin).status_code == 204

        groups = { g["role"]: g["count"] for g in client.get("/api/v1/admin/users", headers=admin).json() }
        assert groups["athlete"] == 0
        assert client.get(f"/api/v1/athletes/{profile['id']}/logs/week", headers=admin).status_code == 404
        # the old token no longer opens a session
        assert client.get("/api/v1/auth/me", headers=athlete_headers).status_code == 401

    def test_deleted_user_logs_are_gone(self, client, athlete, admin, store):
        from app.db.repositories.training_log import TrainingLogRepository

        profile, _ = athlete
        client.delete(f"/api/v1/admin/users/{profile['id']}", headers=admin)
        with store.session() as session:
            assert TrainingLogRepository(session).fetch_logs_for_user(profile["id"]) == []

    def test_delete_unknown_user(self, client, admin):
        assert client.delete("/api/v1/admin/users/ghost", headers=admin).status_code == 404
