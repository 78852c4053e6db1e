"""Tests for REST error response models."""

from car_finder.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="page_size", message="Must be <= 200")

        assert detail.code is None
        assert detail.model_dump() == {
            "field": "page_size",
            "message": "Must be <= 200",
            "code": None,
        }


class TestErrorResponse:
    def test_simple_error_excludes_empty_fields(self) -> None:
        response = ErrorResponse(detail="Car with identifier '42' not found", code="NOT_FOUND")

        assert response.model_dump(exclude_none=True) == {
            "detail": "Car with identifier '42' not found",
            "code": "NOT_FOUND",
        }

    def test_error_with_field_errors(self) -> None:
        response = ErrorResponse(
            detail="Invalid request parameters",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="page", message="Must be >= 1", code="greater_than_equal")],
        )

        data = response.model_dump(exclude_none=True)

        assert data["errors"] == [
            {"field": "page", "message": "Must be >= 1", "code": "greater_than_equal"}
        ]

    def test_schema_carries_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
        assert schema["examples"][0]["code"] == "NOT_FOUND"
