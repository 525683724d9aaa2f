"""API tests for athletes' own training logs."""


class TestUpsertLog:

    def test_round_trip(self, client, signup):
        profile, headers = signup("athlete@example.com", name="최선수")
        response = client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "cardio": 30 } }, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == f"{profile['id']}_2024-06-03"
        assert body["user_name"] == "최선수"
        assert body["total_duration"] == 30
        assert body["trainings"] == { "stretching": 0, "cardio": 30, "strength": 0, "skill": 0, "other": 0 }

    def test_overwrite_leaves_one_record(self, client, signup):
        _, headers = signup("athlete@example.com")
        client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "cardio": 30 } }, headers=headers)
        client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "skill": 50, "other": 10 } }, headers=headers)

        logs = client.get("/api/v1/logs", headers=headers).json()
        assert len(logs) == 1
        assert logs[0]["total_duration"] == 60
        assert logs[0]["trainings"]["cardio"] == 0

    def test_requires_some_minutes(self, client, signup):
        _, headers = signup("athlete@example.com")
        response = client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "cardio": 0 } }, headers=headers)
        assert response.status_code == 422
        assert "하나 이상의 훈련 시간을 입력하세요." in response.text

    def test_negative_minutes_rejected(self, client, signup):
        _, headers = signup("athlete@example.com")
        response = client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "cardio": 30, "skill": -5 } },
                              headers=headers)
        assert response.status_code == 422

    def test_unknown_category_rejected(self, client, signup):
        _, headers = signup("athlete@example.com")
        response = client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "yoga": 30 } }, headers=headers)
        assert response.status_code == 422

    def test_coach_cannot_write_logs(self, client, signup):
        _, headers = signup("coach@example.com", role="coach")
        response = client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "cardio": 30 } }, headers=headers)
        assert response.status_code == 403


class TestReadOwnLogs:

    def test_list_newest_first(self, client, signup):
        _, headers = signup("athlete@example.com")
        for day in ("2024-06-04", "2024-06-09", "2024-06-01"):
            client.put(f"/api/v1/logs/{day}", json={ "trainings": { "cardio": 10 } }, headers=headers)

        dates = [log["date"] for log in client.get("/api/v1/logs", headers=headers).json()]
        assert dates == ["2024-06-09", "2024-06-04", "2024-06-01"]

    def test_only_own_logs(self, client, signup):
        _, mine = signup("a1@example.com")
        _, theirs = signup("a2@example.com")
        client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "cardio": 10 } }, headers=theirs)
        assert client.get("/api/v1/logs", headers=mine).json() == []

    def test_week(self, client, signup):
        _, headers = signup("athlete@example.com")
        client.put("/api/v1/logs/2024-06-02", json={ "trainings": { "cardio": 99 } }, headers=headers)
        client.put("/api/v1/logs/2024-06-05", json={ "trainings": { "cardio": 30, "skill": 15 } }, headers=headers)
        client.put("/api/v1/logs/2024-06-03", json={ "trainings": { "strength": 20 } }, headers=headers)

        week = client.get("/api/v1/logs/week", params={ "as_of": "2024-06-09" }, headers=headers).json()
        assert (week["start"], week["end"]) == ("2024-06-03", "2024-06-09")
        assert week["total_duration"] == 65
        assert [log["date"] for log in week["logs"]] == ["2024-06-03", "2024-06-05"]
        assert [day["day_name"] for day in week["days"]] == ["월", "화", "수", "목", "금", "토", "일"]
        assert week["days"][1]["log"] is None
        assert week["days"][2]["log"]["total_duration"] == 45
