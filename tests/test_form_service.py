"""
Tests for FormService, the form processing orchestrator.

Validator and repository are replaced by mocks, so these tests check
only the decision between rejecting input and delegating it.
"""

from unittest.mock import MagicMock

import pytest

from app.application.articles.form_service import FormService
from app.domain.articles.entities import ValidationResult
from app.domain.articles.ports import FormRepository, FormValidator


def _validator(result: ValidationResult) -> MagicMock:
    validator = MagicMock(spec=FormValidator)
    validator.validate.return_value = result
    return validator


def _repository(create: bool = True, update: bool = True) -> MagicMock:
    repository = MagicMock(spec=FormRepository)
    repository.create.return_value = create
    repository.update.return_value = update
    return repository


TITLE_REQUIRED = {"title": ["title is required"]}


class TestSave:
    """Tests for FormService.save."""

    def test_rejected_input_is_never_persisted(self) -> None:
        """Empty title fails validation; create is not called."""
        repository = _repository()
        service = FormService(
            _validator(ValidationResult.failed(TITLE_REQUIRED)), repository
        )

        assert service.save({"title": ""}) is False
        assert service.errors() == TITLE_REQUIRED
        assert repository.create.call_count == 0
        assert repository.update.call_count == 0

    def test_valid_input_is_created(self) -> None:
        repository = _repository(create=True)
        service = FormService(_validator(ValidationResult.ok()), repository)

        assert service.save({"title": "Hello"}) is True
        repository.create.assert_called_once_with({"title": "Hello"})
        assert service.errors() == {}

    @pytest.mark.parametrize("outcome", [True, False])
    def test_returns_repository_outcome(self, outcome: bool) -> None:
        service = FormService(
            _validator(ValidationResult.ok()), _repository(create=outcome)
        )
        assert service.save({"title": "Hello"}) is outcome

    def test_validator_receives_the_input(self) -> None:
        validator = _validator(ValidationResult.ok())
        service = FormService(validator, _repository())
        data = {"title": "Hello", "content": "Body"}

        service.save(data)

        validator.validate.assert_called_once_with(data)


class TestUpdate:
    """Tests for FormService.update."""

    def test_missing_record_reports_failure_without_errors(self) -> None:
        """Repository returns False for id 999; errors() stays empty."""
        repository = _repository(update=False)
        service = FormService(_validator(ValidationResult.ok()), repository)

        assert service.update({"id": 999, "title": "X"}) is False
        repository.update.assert_called_once_with({"id": 999, "title": "X"})
        assert service.errors() == {}

    def test_rejected_input_is_never_persisted(self) -> None:
        repository = _repository()
        service = FormService(
            _validator(ValidationResult.failed(TITLE_REQUIRED)), repository
        )

        assert service.update({"id": 1, "title": ""}) is False
        repository.update.assert_not_called()
        repository.create.assert_not_called()

    def test_valid_input_is_updated(self) -> None:
        repository = _repository(update=True)
        service = FormService(_validator(ValidationResult.ok()), repository)

        assert service.update({"id": 1, "title": "New"}) is True
        repository.update.assert_called_once_with({"id": 1, "title": "New"})
        repository.create.assert_not_called()


class TestErrors:
    """Tests for FormService.errors and the retained validation state."""

    def test_empty_before_any_submission(self) -> None:
        service = FormService(_validator(ValidationResult.ok()), _repository())
        assert service.errors() == {}
        assert service.last_result is None

    def test_repeated_calls_return_the_same_value(self) -> None:
        service = FormService(
            _validator(ValidationResult.failed(TITLE_REQUIRED)), _repository()
        )
        service.save({"title": ""})

        assert service.errors() == service.errors() == TITLE_REQUIRED

    def test_mutating_returned_errors_does_not_change_state(self) -> None:
        service = FormService(
            _validator(ValidationResult.failed(TITLE_REQUIRED)), _repository()
        )
        service.save({"title": ""})

        service.errors()["title"].append("tampered")

        assert service.errors() == TITLE_REQUIRED

    def test_passing_submission_clears_previous_errors(self) -> None:
        validator = MagicMock(spec=FormValidator)
        validator.validate.side_effect = [
            ValidationResult.failed(TITLE_REQUIRED),
            ValidationResult.ok(),
        ]
        service = FormService(validator, _repository())

        service.save({"title": ""})
        assert service.errors() == TITLE_REQUIRED

        service.save({"title": "Hello"})
        assert service.errors() == {}
        assert service.last_result == ValidationResult.ok()


class TestUnexpectedFailures:
    """Collaborator exceptions are not swallowed."""

    def test_repository_exception_propagates(self) -> None:
        repository = _repository()
        repository.create.side_effect = RuntimeError("database down")
        service = FormService(_validator(ValidationResult.ok()), repository)

        with pytest.raises(RuntimeError, match="database down"):
            service.save({"title": "Hello"})

    def test_validator_exception_propagates(self) -> None:
        validator = MagicMock(spec=FormValidator)
        validator.validate.side_effect = TypeError("bad input")
        repository = _repository()
        service = FormService(validator, repository)

        with pytest.raises(TypeError):
            service.update({"id": 1})
        repository.update.assert_not_called()

    def test_validator_exception_clears_previous_errors(self) -> None:
        """errors() never reports a mapping from an earlier submission."""
        validator = MagicMock(spec=FormValidator)
        validator.validate.side_effect = [
            ValidationResult.failed(TITLE_REQUIRED),
            TypeError("bad input"),
        ]
        service = FormService(validator, _repository())

        service.save({"title": ""})
        with pytest.raises(TypeError):
            service.save({"title": object()})

        assert service.errors() == {}
        assert service.last_result is None
