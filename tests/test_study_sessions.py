"""Tests for flip-card study session API endpoints."""

from typing import Any

from fastapi import status
from fastapi.testclient import TestClient

from flashdeck import models

BOB = {"X-Owner-Id": "bob"}


def _start(client: TestClient, **body: Any) -> dict[str, Any]:
    response = client.post("/api/v1/study-sessions", json=body)
    assert response.status_code == status.HTTP_201_CREATED, response.text
    data: dict[str, Any] = response.json()
    return data


def _step(client: TestClient, session_id: str, action: str) -> dict[str, Any]:
    response = client.post(f"/api/v1/study-sessions/{session_id}/{action}")
    assert response.status_code == status.HTTP_200_OK, response.text
    data: dict[str, Any] = response.json()
    return data


class TestStartStudy:
    """Test suite for POST /study-sessions endpoint."""

    def test_start_study_defaults(self, client: TestClient, french_lesson: models.Lesson) -> None:
        state = _start(client)

        assert state["index"] == 0
        assert state["total"] == 6
        assert state["wrap"] is True
        assert state["completed_cycles"] == 0
        assert state["showing_back"] is False
        assert state["visible_text"] == state["card"]["front"]
        assert state["card"]["lesson_id"] == french_lesson.id
        assert state["last_step"] is None

    def test_start_study_selected_lesson(
        self,
        client: TestClient,
        french_lesson: models.Lesson,
        spanish_lesson: models.Lesson,
    ) -> None:
        state = _start(client, lesson_ids=[spanish_lesson.id], wrap=False)

        assert state["total"] == 6
        assert state["wrap"] is False
        assert state["card"]["lesson_id"] == spanish_lesson.id

    def test_start_study_empty_selection(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        response = client.post("/api/v1/study-sessions", json={"lesson_ids": []})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["rule"] == "no_eligible_cards"

    def test_start_study_shared_scope(
        self, client: TestClient, shared_lesson: models.Lesson
    ) -> None:
        state = _start(client, scope="shared")
        assert state["total"] == 3


class TestStudyNavigation:
    """Test suite for next/prev/flip on a study session."""

    def test_flip_toggles_visible_face(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        state = _start(client)
        session_id = state["session_id"]

        flipped = _step(client, session_id, "flip")
        assert flipped["showing_back"] is True
        assert flipped["visible_text"] == state["card"]["back"]

        unflipped = _step(client, session_id, "flip")
        assert unflipped["showing_back"] is False
        assert unflipped["visible_text"] == state["card"]["front"]

    def test_next_resets_flip(self, client: TestClient, french_lesson: models.Lesson) -> None:
        state = _start(client)
        session_id = state["session_id"]
        _step(client, session_id, "flip")

        moved = _step(client, session_id, "next")

        assert moved["index"] == 1
        assert moved["last_step"] == "moved"
        assert moved["showing_back"] is False
        assert moved["card"]["flashcard_id"] != state["card"]["flashcard_id"]

    def test_cycle_visits_every_card_then_wraps(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        state = _start(client)
        session_id = state["session_id"]
        seen = [state["card"]["flashcard_id"]]

        for _ in range(5):
            state = _step(client, session_id, "next")
            seen.append(state["card"]["flashcard_id"])
        wrapped = _step(client, session_id, "next")

        assert sorted(seen) == sorted(card.id for card in french_lesson.flashcards)
        assert wrapped["last_step"] == "cycle_complete"
        assert wrapped["index"] == 0
        assert wrapped["completed_cycles"] == 1
        assert wrapped["card"]["flashcard_id"] == seen[0]

    def test_without_wrap_stays_on_last_card(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        state = _start(client, wrap=False)
        session_id = state["session_id"]
        for _ in range(5):
            state = _step(client, session_id, "next")
        _step(client, session_id, "flip")

        end = _step(client, session_id, "next")

        assert end["last_step"] == "cycle_complete"
        assert end["index"] == 5
        assert end["card"]["flashcard_id"] == state["card"]["flashcard_id"]
        assert end["showing_back"] is True

    def test_prev(self, client: TestClient, french_lesson: models.Lesson) -> None:
        state = _start(client)
        session_id = state["session_id"]

        at_first = _step(client, session_id, "prev")
        assert at_first["last_step"] == "at_first_card"
        assert at_first["index"] == 0

        _step(client, session_id, "next")
        back = _step(client, session_id, "prev")
        assert back["last_step"] == "moved"
        assert back["index"] == 0
        assert back["card"]["flashcard_id"] == state["card"]["flashcard_id"]

    def test_get_study(self, client: TestClient, french_lesson: models.Lesson) -> None:
        state = _start(client)
        _step(client, state["session_id"], "next")

        response = client.get(f"/api/v1/study-sessions/{state['session_id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["index"] == 1

    def test_study_of_other_owner(self, client: TestClient, french_lesson: models.Lesson) -> None:
        state = _start(client)

        response = client.post(
            f"/api/v1/study-sessions/{state['session_id']}/next", headers=BOB
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_quiz_id_is_not_a_study_session(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        quiz = client.post("/api/v1/quiz-sessions", json={}).json()

        response = client.get(f"/api/v1/study-sessions/{quiz['session_id']}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
