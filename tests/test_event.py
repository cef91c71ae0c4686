class TestProgressionEvents:
    def test_creation_is_logged(self, client, create_adventurer):
        adventurer = create_adventurer()

        response = client.get(f"/adventurers/{adventurer['id']}/events")
        assert response.status_code == 200
        events = response.json()
        assert [e["event_type"] for e in events] == ["created"]

    def test_experience_reason_is_kept(self, client, create_adventurer):
        adventurer = create_adventurer()
        client.post(f"/adventurers/{adventurer['id']}/experience", json={
            "experience_points": 750,
            "target_proficiencies": ["swordsmanship", "leadership"],
            "reason": "Defeated orc chieftain",
        })

        events = client.get(f"/adventurers/{adventurer['id']}/events").json()
        by_type = {}
        for event in events:
            by_type.setdefault(event["event_type"], []).append(event)

        awarded = by_type["experience_awarded"][0]
        assert awarded["description"] == "Defeated orc chieftain"
        assert awarded["data"]["experience_points"] == 750
        assert awarded["data"]["distribution"] == {"swordsmanship": 375, "leadership": 375}

        assert by_type["level_up"][0]["data"] == {"old_level": 1, "new_level": 2}
        assert {e["data"]["skill"] for e in by_type["proficiency_level_up"]} == {"swordsmanship", "leadership"}

    def test_mentor_activity_is_logged(self, client, create_adventurer):
        adventurer = create_adventurer()
        client.post(f"/adventurers/{adventurer['id']}/mentor", json={"mentor_id": "gandalf"})
        session = client.post(f"/adventurers/{adventurer['id']}/guidance", json={
            "session_type": "training",
            "duration_minutes": 30,
            "notes": "Staff work",
        }).json()

        events = client.get(f"/adventurers/{adventurer['id']}/events").json()
        types = [e["event_type"] for e in events]
        assert "mentor_assigned" in types
        guidance = next(e for e in events if e["event_type"] == "guidance_recorded")
        assert guidance["data"] == {"session_id": session["id"], "mentor_id": "gandalf"}
        assert guidance["description"] == "Staff work"

    def test_failed_operation_logs_nothing(self, client, create_adventurer):
        adventurer = create_adventurer()
        client.post(f"/adventurers/{adventurer['id']}/guidance", json={
            "session_type": "training",
            "duration_minutes": 30,
            "experience_points": 100,
        })
        client.post(f"/adventurers/{adventurer['id']}/mentor", json={"mentor_id": "saruman"})

        events = client.get(f"/adventurers/{adventurer['id']}/events").json()
        assert [e["event_type"] for e in events] == ["created"]

    def test_events_limit(self, client, create_adventurer):
        adventurer = create_adventurer()
        for _ in range(3):
            client.post(f"/adventurers/{adventurer['id']}/experience", json={"experience_points": 1})

        events = client.get(f"/adventurers/{adventurer['id']}/events", params={"limit": 2}).json()
        assert len(events) == 2

    def test_events_for_unknown_adventurer(self, client):
        assert client.get("/adventurers/adv_missing/events").status_code == 404
