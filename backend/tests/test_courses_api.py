"""
Sword Tracker Backend: Course API Tests
=======================================

What:  Tests for /api/courses.
"""

import pytest


class TestCourses:

    @pytest.mark.asyncio
    async def test_missing_title_is_rejected(self, api_client, mock_storage):
        response = await api_client.post("/api/courses", json={"userId": 1, "platform": "Chessable"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid course data"
        mock_storage.create_course.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_progress_beyond_total_is_rejected(self, api_client, mock_storage):
        response = await api_client.post(
            "/api/courses",
            json={"userId": 1, "title": "Lifetime Repertoires", "totalLessons": 10, "completedLessons": 11},
        )

        assert response.status_code == 400
        mock_storage.create_course.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_defaults(self, memory_client):
        response = await memory_client.post("/api/courses", json={"userId": 1, "title": "Endgame Manual"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "in_progress"
        assert body["totalLessons"] == 0
        assert body["completedLessons"] == 0

    @pytest.mark.asyncio
    async def test_update_progress_and_delete(self, memory_client):
        created = await memory_client.post(
            "/api/courses", json={"userId": 2, "title": "Opening Principles", "totalLessons": 12}
        )
        course_id = created.json()["id"]

        patched = await memory_client.patch(
            f"/api/courses/{course_id}", json={"completedLessons": 12, "status": "completed"}
        )
        assert patched.status_code == 200
        assert patched.json()["completedLessons"] == 12
        assert patched.json()["status"] == "completed"

        deleted = await memory_client.delete(f"/api/courses/{course_id}")
        assert deleted.json() == {"success": True}
        assert (await memory_client.get("/api/courses/2")).json() == []

    @pytest.mark.asyncio
    async def test_update_unknown_course_returns_404(self, api_client, mock_storage):
        mock_storage.update_course.return_value = None

        response = await api_client.patch("/api/courses/9", json={"status": "paused"})

        assert response.status_code == 404
        assert response.json()["message"] == "Course not found"

    @pytest.mark.asyncio
    async def test_unknown_update_field_is_rejected(self, api_client, mock_storage):
        response = await api_client.patch("/api/courses/9", json={"userId": 5})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid course update"
        mock_storage.update_course.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, memory_client):
        for title in ["First", "Second", "Third"]:
            await memory_client.post("/api/courses", json={"userId": 4, "title": title})

        listed = (await memory_client.get("/api/courses/4")).json()

        assert [course["title"] for course in listed] == ["Third", "Second", "First"]
