"""namecraft.core.rename.validation_manager

Validation management for the unified rename engine.

This module provides the ValidationManager class that validates preview
results and detects duplicates.

Author: Michael Economou
Date: 2026-10-15
"""

from namecraft.core.rename.data_classes import ValidationItem, ValidationResult
from namecraft.utils.logging.logger_factory import get_cached_logger
from namecraft.utils.naming.filename_validator import validate_filename

logger = get_cached_logger(__name__)


class ValidationManager:
    """Validate preview results and detect duplicates.

    The class produces a :class:`ValidationResult` that contains per-file
    validation results and a set of duplicated target filenames.
    """

    def validate_preview(self, preview_pairs: list[tuple[str, str]]) -> ValidationResult:
        """Validate a sequence of (old_name, new_name) pairs."""
        results = []
        duplicates: set[str] = set()
        seen_names: set[str] = set()

        for old_name, new_name in preview_pairs:
            is_valid, error = validate_filename(new_name)

            is_duplicate = new_name in seen_names
            if is_duplicate:
                duplicates.add(new_name)
                if not error:
                    error = "Duplicate name in this batch"
            else:
                seen_names.add(new_name)

            results.append(
                ValidationItem(
                    old_name=old_name,
                    new_name=new_name,
                    is_valid=is_valid,
                    is_duplicate=is_duplicate,
                    is_unchanged=old_name == new_name,
                    error_message=error,
                )
            )

        result = ValidationResult(results, duplicates)
        if result.has_errors:
            logger.info(
                "[ValidationManager] %d invalid and %d duplicate name(s) in preview",
                result.invalid_count,
                result.duplicate_count,
            )
        return result
