"""Tests for lessons API endpoints."""

from collections.abc import Callable

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models

BOB = {"X-Owner-Id": "bob"}


class TestCreateLesson:
    """Test suite for POST /lessons endpoint."""

    def test_create_lesson_success(self, client: TestClient, db_session: Session) -> None:
        """Test successful creation of a private lesson."""
        response = client.post("/api/v1/lessons", json={"name": "  French basics "})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        lesson = data["lesson"]
        assert lesson["name"] == "French basics"
        assert lesson["visibility"] == "private"
        assert lesson["flashcard_count"] == 0

        db_lesson = db_session.query(models.Lesson).filter_by(id=lesson["id"]).first()
        assert db_lesson is not None
        assert db_lesson.owner_id == "local"

    def test_create_public_lesson(self, client: TestClient) -> None:
        """Test creating a lesson shared with every owner."""
        response = client.post(
            "/api/v1/lessons", json={"name": "Shared", "visibility": "public"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["lesson"]["visibility"] == "public"

    def test_create_lesson_empty_name(self, client: TestClient) -> None:
        """Test creating a lesson with empty name fails validation."""
        response = client.post("/api/v1/lessons", json={"name": ""})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_lesson_blank_name(self, client: TestClient) -> None:
        """Test creating a lesson with a whitespace name is rejected by the domain."""
        response = client.post("/api/v1/lessons", json={"name": "   "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestListLessons:
    """Test suite for GET /lessons endpoint."""

    def test_list_own_lessons_with_counts(
        self,
        client: TestClient,
        test_lesson: models.Lesson,
        french_lesson: models.Lesson,
        shared_lesson: models.Lesson,
    ) -> None:
        """Test that only the caller's lessons are listed, newest first."""
        response = client.get("/api/v1/lessons")

        assert response.status_code == status.HTTP_200_OK
        lessons = response.json()["lessons"]
        assert [lesson["id"] for lesson in lessons] == [french_lesson.id, test_lesson.id]
        assert [lesson["flashcard_count"] for lesson in lessons] == [6, 0]

    def test_list_shared_lessons(
        self,
        client: TestClient,
        french_lesson: models.Lesson,
        shared_lesson: models.Lesson,
    ) -> None:
        """Test that the shared scope lists every public lesson."""
        response = client.get("/api/v1/lessons", params={"scope": "shared"})

        assert response.status_code == status.HTTP_200_OK
        lessons = response.json()["lessons"]
        assert [lesson["id"] for lesson in lessons] == [shared_lesson.id]
        assert lessons[0]["owner_id"] == "bob"
        assert lessons[0]["flashcard_count"] == 3

    def test_list_invalid_scope(self, client: TestClient) -> None:
        """Test that an unknown scope fails validation."""
        response = client.get("/api/v1/lessons", params={"scope": "everyone"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestGetLesson:
    """Test suite for GET /lessons/:id endpoint."""

    def test_get_own_lesson(self, client: TestClient, french_lesson: models.Lesson) -> None:
        response = client.get(f"/api/v1/lessons/{french_lesson.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "French basics"
        assert data["flashcard_count"] == 6

    def test_get_public_lesson_of_other_owner(
        self, client: TestClient, shared_lesson: models.Lesson
    ) -> None:
        response = client.get(f"/api/v1/lessons/{shared_lesson.id}")
        assert response.status_code == status.HTTP_200_OK

    def test_get_private_lesson_of_other_owner(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        """Test that another owner's private lesson looks missing."""
        response = client.get(f"/api/v1/lessons/{french_lesson.id}", headers=BOB)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_lesson_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/lessons/99999")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateLesson:
    """Test suite for PATCH /lessons/:id endpoint."""

    def test_rename_lesson(self, client: TestClient, french_lesson: models.Lesson) -> None:
        response = client.patch(
            f"/api/v1/lessons/{french_lesson.id}", json={"name": "French animals"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["lesson"]["name"] == "French animals"
        assert data["lesson"]["visibility"] == "private"

    def test_share_lesson_updates_flashcards(
        self, client: TestClient, db_session: Session, french_lesson: models.Lesson
    ) -> None:
        """Test that a visibility change is applied to every flashcard of the lesson."""
        response = client.patch(
            f"/api/v1/lessons/{french_lesson.id}", json={"visibility": "public"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["lesson"]["visibility"] == "public"
        visibilities = {
            row.visibility
            for row in db_session.query(models.Flashcard.visibility).filter_by(
                lesson_id=french_lesson.id
            )
        }
        assert visibilities == {"public"}

        shared = client.get("/api/v1/flashcards", params={"scope": "shared"}, headers=BOB)
        assert len(shared.json()["flashcards"]) == 6

    def test_update_without_changes(
        self, client: TestClient, french_lesson: models.Lesson
    ) -> None:
        response = client.patch(f"/api/v1/lessons/{french_lesson.id}", json={})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_lesson_of_other_owner(
        self, client: TestClient, shared_lesson: models.Lesson
    ) -> None:
        """Test that public lessons are still only editable by their owner."""
        response = client.patch(f"/api/v1/lessons/{shared_lesson.id}", json={"name": "Mine now"})
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteLesson:
    """Test suite for DELETE /lessons/:id endpoint."""

    def test_delete_lesson_cascades(
        self, client: TestClient, db_session: Session, french_lesson: models.Lesson
    ) -> None:
        lesson_id = french_lesson.id

        response = client.delete(f"/api/v1/lessons/{lesson_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert db_session.query(models.Lesson).filter_by(id=lesson_id).count() == 0
        assert db_session.query(models.Flashcard).filter_by(lesson_id=lesson_id).count() == 0

    def test_delete_lesson_of_other_owner(
        self,
        client: TestClient,
        db_session: Session,
        make_lesson: Callable[..., models.Lesson],
    ) -> None:
        lesson = make_lesson(name="Bob's", owner_id="bob")

        response = client.delete(f"/api/v1/lessons/{lesson.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.Lesson).filter_by(id=lesson.id).count() == 1

    def test_delete_lesson_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/lessons/99999")
        assert response.status_code == status.HTTP_404_NOT_FOUND
