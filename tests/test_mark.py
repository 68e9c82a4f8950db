from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def _question(topic, seed=3):
    return client.get(f"/questions/{topic}", params={"seed": seed, "count": 1}).json()[0]


def test_mark_correct_numeric():
    q = _question("arithmetic")
    r = client.post("/mark", json={"question": q, "answer": str(q["answer"])})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["correct"] is True and body["score"] == 1


def test_mark_incorrect_numeric():
    q = _question("distribution")
    r = client.post("/mark", json={"question": q, "answer": str(q["answer"] + 1)})
    body = r.json()
    assert body["ok"] is True and body["correct"] is False and body["score"] == 0
    assert body["expected"] == str(q["answer"])
    assert body["hint"] == q["hint"]


def test_mark_integer_answer():
    q = _question("decimalStructure")
    body = client.post("/mark", json={"question": q, "answer": q["answer"]}).json()
    assert body["correct"] is True


def test_mark_invalid_chars():
    q = _question("orderOfOps")
    body = client.post("/mark", json={"question": q, "answer": "abc"}).json()
    assert body["ok"] is False and body["score"] == 0


def test_mark_triangle_round_trip():
    q = _question("triangles")
    body = client.post("/mark", json={"question": q, "answer": q["answer"]}).json()
    assert body["ok"] and body["correct"]


def test_mark_unknown_topic_rejected():
    r = client.post("/mark", json={"question": {"topic": "nope"}, "answer": "1"})
    assert r.status_code == 422


def test_stars():
    assert client.get("/stars", params={"score": 9, "total": 10}).json()["stars"] == 3
    assert client.get("/stars", params={"score": 6, "total": 10}).json()["stars"] == 2
    assert client.get("/stars", params={"score": 5, "total": 10}).json()["stars"] == 1
    assert client.get("/stars", params={"score": 11, "total": 10}).status_code == 422
    assert client.get("/stars", params={"score": 1, "total": 0}).status_code == 422


def _steps(q):
    return {
        "tens": q["tens"],
        "ones": q["ones"],
        "tens_product": q["tens_product"],
        "ones_product": q["ones_product"],
    }


def test_mark_distribution_stages():
    q = _question("distribution")
    body = client.post(
        "/mark", json={"question": q, "answer": q["answer"], "steps": _steps(q)}
    ).json()
    assert body["correct"] is True and body["score"] == 1
    assert body["stages"] == {"split": True, "multiply": True, "sum": True}


def test_mark_distribution_right_total_wrong_split():
    q = _question("distribution")
    steps = dict(_steps(q), tens=q["tens"] + 10, ones=q["ones"] - 10)
    body = client.post(
        "/mark", json={"question": q, "answer": q["answer"], "steps": steps}
    ).json()
    assert body["ok"] is True and body["correct"] is False and body["score"] == 0
    assert body["stages"]["split"] is False and body["stages"]["sum"] is True


def test_mark_without_steps_has_no_stages():
    q = _question("distribution")
    body = client.post("/mark", json={"question": q, "answer": q["answer"]}).json()
    assert body["correct"] is True
    assert body["stages"] is None


def test_mark_steps_on_other_topic():
    q = _question("arithmetic")
    steps = {"tens": 1, "ones": 2, "tens_product": 3, "ones_product": 4}
    body = client.post(
        "/mark", json={"question": q, "answer": q["answer"], "steps": steps}
    ).json()
    assert body["ok"] is False and body["score"] == 0
