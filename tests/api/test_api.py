from aurajournal.errors import UpstreamClassificationError


def post_entry(client, content="Had a great day at the park", mood="happy"):
    return client.post("/api/journal-entries", json={"content": content, "mood": mood})


# =================================================
# JOURNAL ENTRIES
# =================================================

def test_create_entry_returns_entry_progress_and_sentiment(client, classifier, make_analysis):
    classifier.push(make_analysis("happy", 0.8, 0.9, emotions=["joy"]))

    r = post_entry(client)
    assert r.status_code == 200, r.text
    body = r.json()

    assert body["entry"]["content"] == "Had a great day at the park"
    assert body["entry"]["mood"] == "happy"
    assert body["entry"]["sentiment_score"] == 0.8
    assert body["entry"]["ai_insights"]["emotions"] == ["joy"]
    assert body["progress"]["total_entries"] == 1
    assert body["progress"]["streak"] == 1
    assert body["progress"]["badges"] == ["first_entry"]
    assert body["sentiment"]["mood"] == "happy"

    points = client.get("/api/mood-data").json()
    assert len(points) == 1
    assert points[0]["intensity"] == 5
    assert points[0]["entry_id"] == body["entry"]["id"]


def test_create_entry_validation(client):
    assert post_entry(client, content="").status_code == 422
    assert post_entry(client, content="   ").status_code == 422
    assert post_entry(client, mood="ecstatic").status_code == 422
    assert client.post("/api/journal-entries", json={"mood": "happy"}).status_code == 422

    assert client.get("/api/journal-entries").json() == []


def test_upstream_failure_is_502_with_entry_id_and_retry(client, classifier, make_analysis):
    classifier.push(UpstreamClassificationError("Sentiment analysis timed out"))

    r = post_entry(client, "Rough day", "sad")
    assert r.status_code == 502
    detail = r.json()["detail"]
    entry_id = detail["entry_id"]
    assert "timed out" in detail["error"]

    saved = client.get(f"/api/journal-entries/{entry_id}").json()
    assert saved["sentiment_score"] is None
    assert client.get("/api/user/progress").json()["total_entries"] == 1

    classifier.push(make_analysis("sad", -0.6, 0.8))
    r = client.post(f"/api/journal-entries/{entry_id}/classify")
    assert r.status_code == 200, r.text
    assert r.json()["sentiment_score"] == -0.6

    # second classify is a conflict, not a second mood point
    assert client.post(f"/api/journal-entries/{entry_id}/classify").status_code == 409
    assert len(client.get("/api/mood-data").json()) == 1
    assert client.get("/api/user/progress").json()["total_entries"] == 1


def test_attach_classification_endpoint(client, classifier):
    classifier.push(UpstreamClassificationError("down"))
    entry_id = post_entry(client, "Long week", "neutral").json()["detail"]["entry_id"]

    r = client.post(
        f"/api/journal-entries/{entry_id}/classification",
        json={"mood": "calm", "sentiment_score": 0.2, "confidence": 0.6},
    )
    assert r.status_code == 200, r.text
    assert r.json()["mood"] == "neutral"

    points = client.get("/api/mood-data").json()
    assert points[0]["mood"] == "calm"
    assert points[0]["intensity"] == 4

    bad = client.post(
        f"/api/journal-entries/{entry_id}/classification",
        json={"mood": "calm", "sentiment_score": 3},
    )
    assert bad.status_code == 422


def test_missing_entry_is_404(client):
    assert client.get("/api/journal-entries/999").status_code == 404
    assert client.delete("/api/journal-entries/999").status_code == 404
    assert client.post("/api/journal-entries/999/classify").status_code == 404
    r = client.post(
        "/api/journal-entries/999/classification",
        json={"mood": "happy", "sentiment_score": 0.5},
    )
    assert r.status_code == 404


def test_delete_entry(client):
    entry_id = post_entry(client).json()["entry"]["id"]

    assert client.delete(f"/api/journal-entries/{entry_id}").status_code == 204
    assert client.get(f"/api/journal-entries/{entry_id}").status_code == 404


# =================================================
# MOOD DATA
# =================================================

def test_mood_check_in_and_range(client):
    for day, intensity in [("2024-03-01", 2), ("2024-03-05", 3), ("2024-03-09", 4)]:
        r = client.post("/api/mood-data", json={"date": day, "mood": "calm", "intensity": intensity})
        assert r.status_code == 200, r.text

    in_range = client.get("/api/mood-data", params={"startDate": "2024-03-01", "endDate": "2024-03-05"}).json()
    assert sorted(p["date"] for p in in_range) == ["2024-03-01", "2024-03-05"]

    # one bound alone is ignored
    assert len(client.get("/api/mood-data", params={"startDate": "2024-03-06"}).json()) == 3

    inverted = client.get("/api/mood-data", params={"startDate": "2024-03-09", "endDate": "2024-03-01"})
    assert inverted.status_code == 422


def test_mood_check_in_rejects_out_of_range_intensity(client):
    for intensity in (0, 6):
        r = client.post("/api/mood-data", json={"date": "2024-03-01", "mood": "calm", "intensity": intensity})
        assert r.status_code == 422


def test_trend_weekly_and_calendar(client):
    for day, intensity, mood in [
        ("2024-03-02", 2, "sad"),
        ("2024-03-08", 4, "calm"),
        ("2024-03-10", 5, "happy"),
    ]:
        client.post("/api/mood-data", json={"date": day, "mood": mood, "intensity": intensity})

    trend = client.get("/api/mood-data/trend", params={"limit": 2}).json()
    assert len(trend) == 2
    assert client.get("/api/mood-data/trend", params={"limit": 0}).status_code == 422

    # clock is 2024-03-11: window 03-04 .. 03-11
    weekly = client.get("/api/mood-data/weekly").json()
    assert weekly["entries_this_week"] == 2
    # average covers the seven most recent points, not just this week
    assert weekly["average_intensity"] == 3.7
    assert weekly["most_common_mood"] == "calm"

    cal = client.get("/api/mood-data/calendar", params={"year": 2024, "month": 3}).json()
    assert cal["days"]["2024-03-02"] == {"mood": "sad", "intensity": 2}
    assert len(cal["days"]) == 3

    assert client.get("/api/mood-data/calendar", params={"year": 2024, "month": 13}).status_code == 422


# =================================================
# PROGRESS / ANALYTICS / MUSIC
# =================================================

def test_fresh_store_progress_and_insights(client):
    progress = client.get("/api/user/progress").json()
    assert progress["streak"] == 0
    assert progress["total_entries"] == 0
    assert progress["badges"] == []

    insights = client.get("/api/analytics/insights").json()["insights"]
    assert insights[0] == "Start journaling regularly to unlock personalized insights!"


def test_user_stats(client, classifier, make_analysis):
    classifier.push(make_analysis("happy", 0.6))
    post_entry(client, "good", "happy")

    body = client.get("/api/user/stats").json()

    assert body["progress"]["total_entries"] == 1
    assert body["stats"]["positive_percentage"] == 100
    assert body["stats"]["most_frequent_mood"] == "happy"
    assert body["stats"]["entries_this_week"] == 1
    assert body["stats"]["mood_distribution"] == {"happy": 1}


def test_music_recommendations(client):
    assert len(client.get("/api/music/recommendations").json()) == 10

    sad = client.get("/api/music/recommendations", params={"mood": "sad"}).json()
    assert {m["title"] for m in sad} == {"Someone Like You", "The Sound of Silence"}

    assert client.get("/api/music/recommendations", params={"mood": "bored"}).status_code == 422


def test_trend_rejects_inverted_range(client):
    r = client.get("/api/mood-data/trend", params={"startDate": "2024-03-09", "endDate": "2024-03-01"})
    assert r.status_code == 422
