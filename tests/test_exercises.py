def test_add_and_list_exercises(client, fake_db):
    resp = client.post("/api/users/u1/exercises", json={"name": "Bench press", "muscleGroup": "chest"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Exercise added successfully"
    assert fake_db.docs[f"users/u1/exercises/{body['id']}"] == {"name": "Bench press", "muscleGroup": "chest"}

    client.post("/api/users/u1/exercises", json={"name": "Squat", "muscleGroup": "legs"})

    resp = client.get("/api/users/u1/exercises")
    assert resp.status_code == 200
    assert sorted(e["name"] for e in resp.json()) == ["Bench press", "Squat"]
    assert all("id" in e for e in resp.json())


def test_list_exercises_filtered_by_muscle_group(client):
    client.post("/api/users/u1/exercises", json={"name": "Bench press", "muscleGroup": "chest"})
    client.post("/api/users/u1/exercises", json={"name": "Squat", "muscleGroup": "legs"})

    resp = client.get("/api/users/u1/exercises", params={"muscleGroup": "legs"})
    assert resp.status_code == 200
    assert [e["name"] for e in resp.json()] == ["Squat"]

    resp = client.get("/api/users/u1/exercises", params={"muscleGroup": "back"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_update_exercise(client, fake_db):
    exercise_id = client.post("/api/users/u1/exercises", json={"name": "Row", "muscleGroup": "back"}).json()["id"]

    resp = client.put(f"/api/users/u1/exercises/{exercise_id}", json={"name": "Barbell row", "muscleGroup": "back"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Exercise updated successfully"}
    assert fake_db.docs[f"users/u1/exercises/{exercise_id}"]["name"] == "Barbell row"


def test_update_missing_exercise_returns_500(client):
    resp = client.put("/api/users/u1/exercises/missing", json={"name": "Row", "muscleGroup": "back"})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to update exercise"}


def test_delete_exercise_existing_and_missing(client, fake_db):
    exercise_id = client.post("/api/users/u1/exercises", json={"name": "Row", "muscleGroup": "back"}).json()["id"]

    assert client.delete(f"/api/users/u1/exercises/{exercise_id}").status_code == 200
    assert f"users/u1/exercises/{exercise_id}" not in fake_db.docs

    resp = client.delete("/api/users/u1/exercises/never-existed")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Exercise deleted successfully"}


def test_exercise_failures_return_500(client, fake_db):
    fake_db.failing.update({"add", "stream", "delete"})

    resp = client.post("/api/users/u1/exercises", json={"name": "Row", "muscleGroup": "back"})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to add exercise"}

    resp = client.get("/api/users/u1/exercises")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to retrieve exercises"}

    resp = client.delete("/api/users/u1/exercises/x")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to delete exercise"}


def test_exercise_workouts(client, fake_db):
    resp = client.post("/api/users/u1/exercises/ex1/workouts", json={"name": "Heavy day", "sets": 5, "reps": 5})
    assert resp.status_code == 201
    workout_id = resp.json()["id"]
    assert resp.json()["message"] == "Workout added successfully"
    assert fake_db.docs[f"users/u1/exercises/ex1/workouts/{workout_id}"] == {"name": "Heavy day", "sets": 5, "reps": 5}

    resp = client.get("/api/users/u1/exercises/ex1/workouts")
    assert resp.status_code == 200
    assert resp.json() == [{"id": workout_id, "name": "Heavy day", "sets": 5, "reps": 5}]


def test_exercise_workout_failure_returns_500(client, fake_db):
    fake_db.failing.add("add")
    resp = client.post("/api/users/u1/exercises/ex1/workouts", json={"name": "Heavy day", "sets": 5, "reps": 5})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to add workout"}
