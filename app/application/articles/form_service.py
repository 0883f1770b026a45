"""
Use case: Process a submitted form (validate, then create or update).

Input: raw form input (flat field -> value mapping)
Output: bool outcome; validation errors via errors()
Side effects: Delegates a single create/update to the injected repository,
    only after validation has passed.
Failure cases:
    - Validation failure: returns False, errors() holds the messages.
    - Repository failure: returns False, errors() stays empty.
    - Collaborator exceptions propagate unchanged.
"""

import logging
from typing import Callable, Optional

from app.domain.articles.entities import ValidationResult
from app.domain.articles.ports import FormInput, FormRepository, FormValidator

logger = logging.getLogger(__name__)


class FormService:
    """Orchestrates form processing between a controller and a repository.

    Runs the injected validator on the input and, only when it passes,
    hands the same input to the injected repository. It neither validates
    nor persists anything itself. The only state kept between calls is
    the most recent validation result, so build one instance per request.
    """

    def __init__(
        self, validator: FormValidator, repository: FormRepository
    ) -> None:
        self._validator = validator
        self._repository = repository
        self._last_result: Optional[ValidationResult] = None

    @property
    def last_result(self) -> Optional[ValidationResult]:
        """The most recent validation result, or None before any call."""
        return self._last_result

    def save(self, data: FormInput) -> bool:
        """Validate the input and create a new record from it.

        Args:
            data: Raw form input.

        Returns:
            False if validation failed, otherwise the repository's result.
        """
        return self._process(data, self._repository.create, "create")

    def update(self, data: FormInput) -> bool:
        """Validate the input and update an existing record from it.

        Args:
            data: Raw form input, including the record id.

        Returns:
            False if validation failed, otherwise the repository's result.
        """
        return self._process(data, self._repository.update, "update")

    def errors(self) -> dict[str, list[str]]:
        """Return field error messages from the most recent validation.

        Empty when nothing was validated yet or the last attempt passed.
        """
        if self._last_result is None:
            return {}
        return {
            name: list(messages)
            for name, messages in self._last_result.errors.items()
        }

    def _process(
        self,
        data: FormInput,
        operation: Callable[[FormInput], bool],
        action: str,
    ) -> bool:
        self._last_result = None
        result = self._validator.validate(data)
        self._last_result = result

        if not result.passed:
            logger.info(
                "Rejected %s submission, invalid fields: %s",
                action,
                ", ".join(sorted(result.errors)),
            )
            return False

        succeeded = bool(operation(data))
        if succeeded:
            logger.info("Accepted %s submission.", action)
        else:
            logger.warning("Repository reported failure on %s.", action)
        return succeeded
