"""Tests for exercise API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from nvc_exercises import models
from nvc_exercises.application.identity.use_cases.api_key_use_case import IssuedApiKey
from nvc_exercises.core import Container
from nvc_exercises.domain.content.entities import Exercise

EXERCISES_URL = "/api/v1/exercises"


class TestAuthentication:
    """Test suite for API key checks on exercise endpoints."""

    def test_missing_key_is_rejected(self, client: TestClient, exercises: list[Exercise]) -> None:
        """Test that a request without Authorization header gets 401."""
        response = client.get(EXERCISES_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Invalid or missing API key"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_empty_bearer_is_rejected(self, client: TestClient) -> None:
        """Test that 'Bearer ' with nothing after it gets 401."""
        response = client.get(EXERCISES_URL, headers={"Authorization": "Bearer "})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unknown_key_is_rejected(self, client: TestClient, api_key: IssuedApiKey) -> None:
        """Test that a well-formed key that was never issued gets 401."""
        response = client.get(
            EXERCISES_URL, headers={"Authorization": "Bearer nvc_" + "x" * 32}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Invalid or missing API key"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_revoked_key_is_rejected(
        self,
        client: TestClient,
        container: Container,
        api_key: IssuedApiKey,
        auth_headers: dict[str, str],
    ) -> None:
        """Test that a key stops working once revoked."""
        assert client.get(EXERCISES_URL, headers=auth_headers).status_code == status.HTTP_200_OK

        assert container.api_key_use_case().revoke(api_key.id) is True

        response = client.get(EXERCISES_URL, headers=auth_headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_bare_key_is_accepted(self, client: TestClient, api_key: IssuedApiKey) -> None:
        """Test that the key works without the Bearer prefix."""
        response = client.get(EXERCISES_URL, headers={"Authorization": api_key.key})

        assert response.status_code == status.HTTP_200_OK

    def test_bearer_prefix_is_case_insensitive(
        self, client: TestClient, api_key: IssuedApiKey
    ) -> None:
        """Test that 'bearer' in lower case is stripped too."""
        response = client.get(EXERCISES_URL, headers={"Authorization": f"bearer {api_key.key}"})

        assert response.status_code == status.HTTP_200_OK

    def test_auth_is_checked_before_parameters(self, client: TestClient) -> None:
        """Test that an unauthenticated request with bad filters still gets 401."""
        response = client.get(EXERCISES_URL, params={"category": "nope", "lang": "fr"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_successful_request_records_last_use(
        self,
        client: TestClient,
        container: Container,
        api_key: IssuedApiKey,
        auth_headers: dict[str, str],
    ) -> None:
        """Test that a successful request stamps last_used_at on the key."""
        assert container.api_key_use_case().get(api_key.id).last_used_at is None

        client.get(EXERCISES_URL, headers=auth_headers)

        assert container.api_key_use_case().get(api_key.id).last_used_at is not None


class TestListExercises:
    """Test suite for GET /exercises endpoint."""

    def test_list_all(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that no filters returns every exercise in id order."""
        response = client.get(EXERCISES_URL, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item["id"] for item in data] == [str(i) for i in range(1, 11)]

    def test_list_empty_catalog(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test that an empty table gives an empty array."""
        response = client.get(EXERCISES_URL, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_filter_by_category(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that the gratitude filter returns the single gratitude exercise."""
        response = client.get(EXERCISES_URL, params={"category": "gratitude"}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == "9"
        assert data[0]["category"] == "gratitude"
        assert data[0]["gratitudeExpression"]["en"].startswith("When you helped me")

    def test_filter_by_difficulty(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test filtering by difficulty alone."""
        response = client.get(
            EXERCISES_URL, params={"difficulty": "advanced"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert [item["id"] for item in response.json()] == ["4", "8", "10"]

    def test_filter_by_audience(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that exercises without an audience never match an audience filter."""
        response = client.get(
            EXERCISES_URL, params={"audience": "individual"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert [item["id"] for item in response.json()] == ["1", "3", "7", "9"]

    def test_filters_combine_with_and(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that several filters must all match."""
        response = client.get(
            EXERCISES_URL,
            params={"difficulty": "beginner", "audience": "individual"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item["id"] for item in data] == ["1", "3", "9"]
        assert all(item["difficulty"] == "beginner" for item in data)
        assert all(item["audience"] == "individual" for item in data)

    def test_filters_with_no_match(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that a valid but unmatched combination gives an empty array."""
        response = client.get(
            EXERCISES_URL,
            params={"category": "gratitude", "audience": "group"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_empty_filter_values_are_ignored(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that ?category= behaves like an omitted category."""
        response = client.get(
            EXERCISES_URL, params={"category": "", "lang": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 10

    def test_invalid_category(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that an unknown category is a 400 listing the valid values."""
        response = client.get(EXERCISES_URL, params={"category": "empathy"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        detail = response.json()["detail"]
        assert detail.startswith("Invalid category.")
        assert "observation-evaluation" in detail
        assert "conflict-resolution" in detail

    def test_invalid_difficulty(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test that an unknown difficulty is a 400."""
        response = client.get(EXERCISES_URL, params={"difficulty": "expert"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "detail": "Invalid difficulty. Valid values are: beginner, intermediate, advanced"
        }

    def test_invalid_audience(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test that an unknown audience is a 400."""
        response = client.get(EXERCISES_URL, params={"audience": "team"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "detail": "Invalid audience. Valid values are: individual, group"
        }

    def test_filter_values_are_case_sensitive(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test that enumeration values must match exactly."""
        response = client.get(EXERCISES_URL, params={"category": "Gratitude"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_invalid_language(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test that an unsupported language is a 400, even for an empty catalog."""
        response = client.get(EXERCISES_URL, params={"lang": "fr"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid language. Use 'en' or 'zh'."}


class TestLanguageProjection:
    """Test suite for the lang parameter."""

    def test_without_language_fields_are_maps(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that bilingual fields are {en, zh} maps by default."""
        response = client.get(f"{EXERCISES_URL}/3", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == {"en": "Feelings versus Thoughts", "zh": "感受与想法"}
        assert data["steps"][0] == {"en": "Write the sentence.", "zh": "写下这句话。"}
        assert len(data["steps"]) == 3

    def test_english_collapses_fields(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that lang=en returns plain English strings."""
        response = client.get(f"{EXERCISES_URL}/3", params={"lang": "en"}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Feelings versus Thoughts"
        assert data["description"] == "Separate feelings from thoughts."
        assert data["steps"] == [
            "Write the sentence.",
            "Underline words about others.",
            "Rewrite with your own feeling.",
        ]

    def test_chinese_collapses_fields(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that lang=zh returns plain Chinese strings, steps in the same order."""
        response = client.get(f"{EXERCISES_URL}/10", params={"lang": "zh"}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "调解冲突"
        assert data["scenario"] == "两位同事对截止日期有分歧。"
        assert data["steps"] == ["复述双方的感受。", "说出双方的需要。"]

    def test_language_applies_to_list(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that every listed exercise is collapsed."""
        response = client.get(EXERCISES_URL, params={"lang": "zh"}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert all(isinstance(item["name"], str) for item in response.json())

    def test_wire_shape(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test camelCase keys, string ids and omission of absent fields."""
        response = client.get(f"{EXERCISES_URL}/1", params={"lang": "en"}, headers=auth_headers)

        assert response.json() == {
            "id": "1",
            "category": "observation-evaluation",
            "name": "Observation or Evaluation?",
            "description": "Spot the evaluation in each statement.",
            "difficulty": "beginner",
            "audience": "individual",
            "relatedIds": ["2"],
            "example": "John is lazy.",
            "alternative": "John did not do the dishes today.",
        }

    def test_request_template_key(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that request templates use the camelCase key."""
        response = client.get(f"{EXERCISES_URL}/7", params={"lang": "en"}, headers=auth_headers)

        assert response.json()["requestTemplate"] == "Would you be willing to ...?"

    def test_missing_optional_attributes_are_omitted(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that an exercise without audience or steps has no such keys."""
        data = client.get(f"{EXERCISES_URL}/5", headers=auth_headers).json()

        assert data["difficulty"] == "intermediate"
        assert "audience" not in data
        assert "steps" not in data
        assert "relatedIds" not in data


class TestGetExercise:
    """Test suite for GET /exercises/:id endpoint."""

    def test_get_exercise_success(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test fetching an existing exercise."""
        response = client.get(f"{EXERCISES_URL}/9", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["category"] == "gratitude"

    def test_get_exercise_not_found(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that a well-formed id with no exercise is a 404."""
        response = client.get(f"{EXERCISES_URL}/999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Exercise with id 999 not found"}

    def test_get_exercise_huge_id_not_found(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that an id beyond the integer range is a 404, not a server error."""
        response = client.get(f"{EXERCISES_URL}/{'9' * 30}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_exercise_invalid_id(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that a non-numeric id is a 400."""
        response = client.get(f"{EXERCISES_URL}/abc", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid exercise ID format"}

    def test_get_exercise_negative_id(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test that a signed id is a 400."""
        response = client.get(f"{EXERCISES_URL}/-1", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_exercise_invalid_language(
        self, client: TestClient, auth_headers: dict[str, str], exercises: list[Exercise]
    ) -> None:
        """Test that an unsupported language is a 400 for single lookups too."""
        response = client.get(f"{EXERCISES_URL}/1", params={"lang": "de"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_exercise_requires_key(
        self, client: TestClient, exercises: list[Exercise]
    ) -> None:
        """Test that single lookups are authenticated."""
        response = client.get(f"{EXERCISES_URL}/1")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestStoredDataIntegrity:
    """Test suite for rows that break the step pairing invariant."""

    def test_mismatched_steps_are_a_server_error(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        """Test that a corrupt row surfaces as 500 rather than truncated steps."""
        db_session.add(
            models.Exercise(
                category="requests",
                name_en="Broken",
                name_zh="损坏",
                description_en="Uneven steps",
                description_zh="步骤不一致",
                steps_en=["one", "two"],
                steps_zh=["一"],
            )
        )
        db_session.commit()

        response = client.get(f"{EXERCISES_URL}/1", params={"lang": "en"}, headers=auth_headers)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Internal server error"}

    def test_empty_stored_step_is_a_server_error(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        """Test that an empty text variant in a stored row is a 500, not a 400."""
        db_session.add(
            models.Exercise(
                category="requests",
                name_en="Broken",
                name_zh="损坏",
                description_en="Empty step",
                description_zh="空步骤",
                steps_en=["one", ""],
                steps_zh=["一", "二"],
            )
        )
        db_session.commit()

        response = client.get(f"{EXERCISES_URL}/1", headers=auth_headers)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Internal server error"}

    def test_corrupt_row_fails_the_listing(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        """Test that listing a table with an empty stored name is a 500."""
        db_session.add(
            models.Exercise(
                category="gratitude",
                name_en="",
                name_zh="空",
                description_en="No English name",
                description_zh="没有英文名",
            )
        )
        db_session.commit()

        response = client.get(EXERCISES_URL, params={"category": "gratitude"}, headers=auth_headers)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
