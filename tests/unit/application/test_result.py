"""
Tests unitaires pour le type Result.
"""

from portal.application.result import Result, ResultStatus


class TestResult:
    """Tests pour Result."""

    def test_ok(self):
        result = Result.ok("value")

        assert result.status is ResultStatus.OK
        assert result.value == "value"
        assert result.errors == []
        assert result.is_success

    def test_created_and_no_content_are_success(self):
        assert Result.created(1).is_success
        assert Result.no_content().is_success
        assert Result.no_content().value is None

    def test_not_found_carries_errors(self):
        result = Result.not_found("Contributeur 3 non trouve")

        assert result.status is ResultStatus.NOT_FOUND
        assert result.errors == ["Contributeur 3 non trouve"]
        assert not result.is_success

    def test_invalid_multiple_errors(self):
        result = Result.invalid("nom vide", "prix negatif")

        assert result.status is ResultStatus.INVALID
        assert result.errors == ["nom vide", "prix negatif"]
