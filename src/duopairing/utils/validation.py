"""Validation utilities for Duo Pairing.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Iterable, Optional

from duopairing.constants import (
    ALGORITHM_ROUND_ROBIN,
    ALGORITHMS,
    ENTERABLE_RESULTS,
    MAX_ROUNDS,
    MIN_ROUNDS,
)
from duopairing.exceptions import (
    InvalidConfigurationException,
    InvalidPairingException,
    InvalidResultException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Result Validation ==========


def validate_result(result: Optional[str]) -> ValidationResult:
    """Validate a result literal entered for a two-sided pairing.

    The value must be one of the literals exactly; nothing is normalized, so
    " 1-0", "0.5-0.5" or "½-½" are rejected.

    Example:
        >>> validate_result("1-0")
        ValidationResult(VALID, '1-0')
    """
    if result is None or result == "":
        return ValidationResult(is_valid=False, error_message="Result is required")

    if result in ENTERABLE_RESULTS:
        return ValidationResult(is_valid=True, sanitized_value=result)

    allowed = ", ".join(ENTERABLE_RESULTS)
    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid result {result!r} (must be one of: {allowed})",
    )


def validate_result_strict(result: Optional[str]) -> str:
    """Validate a result literal and raise if invalid.

    Raises:
        InvalidResultException: If the literal is not accepted
    """
    validation = validate_result(result)
    if not validation.is_valid:
        raise InvalidResultException(validation.error_message)
    return validation.sanitized_value


# ========== Configuration Validation ==========


def validate_algorithm(algorithm: Optional[str]) -> ValidationResult:
    """Validate a pairing algorithm name."""
    if not algorithm:
        return ValidationResult(
            is_valid=False, error_message="Pairing algorithm is required"
        )

    algorithm = algorithm.strip().lower().replace("-", "_")
    if algorithm in ALGORITHMS:
        return ValidationResult(is_valid=True, sanitized_value=algorithm)

    return ValidationResult(
        is_valid=False,
        error_message=f"Unknown pairing algorithm: {algorithm} "
        f"(must be one of: {', '.join(ALGORITHMS)})",
    )


def validate_total_rounds(total_rounds: Any, algorithm: str) -> ValidationResult:
    """Validate the number of rounds for a tournament.

    Round robin computes its own total, so any value is accepted for it and
    passed through untouched.
    """
    if algorithm == ALGORITHM_ROUND_ROBIN:
        return ValidationResult(is_valid=True, sanitized_value=total_rounds)

    try:
        rounds = int(total_rounds)
    except (TypeError, ValueError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of rounds must be a whole number: {total_rounds!r}",
        )

    if isinstance(total_rounds, float) and total_rounds != rounds:
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of rounds must be a whole number: {total_rounds!r}",
        )

    if MIN_ROUNDS <= rounds <= MAX_ROUNDS:
        return ValidationResult(is_valid=True, sanitized_value=rounds)

    return ValidationResult(
        is_valid=False,
        error_message=f"Number of rounds {rounds} out of range "
        f"({MIN_ROUNDS}-{MAX_ROUNDS})",
    )


def validate_tournament_settings(algorithm: str, total_rounds: Any) -> tuple:
    """Validate algorithm and rounds together.

    Returns:
        Tuple of (algorithm, total_rounds) normalized

    Raises:
        InvalidConfigurationException: If either value is invalid
    """
    algo_result = validate_algorithm(algorithm)
    if not algo_result:
        raise InvalidConfigurationException(algo_result.error_message)

    rounds_result = validate_total_rounds(total_rounds, algo_result.sanitized_value)
    if not rounds_result:
        raise InvalidConfigurationException(rounds_result.error_message)

    return algo_result.sanitized_value, rounds_result.sanitized_value


# ========== Roster Validation ==========


def validate_rating(rating: Any) -> ValidationResult:
    """Validate a player rating (non-negative number)."""
    if rating is None or rating == "":
        return ValidationResult(is_valid=True, sanitized_value=0)

    try:
        value = float(rating)
    except (TypeError, ValueError):
        return ValidationResult(
            is_valid=False, error_message=f"Rating must be a number: {rating!r}"
        )

    if value < 0:
        return ValidationResult(
            is_valid=False, error_message=f"Rating cannot be negative: {rating!r}"
        )

    sanitized = int(value) if value.is_integer() else value
    return ValidationResult(is_valid=True, sanitized_value=sanitized)


def ensure_unique_ids(team_ids: Iterable) -> None:
    """Raise if the same team id occurs twice in a roster.

    Raises:
        InvalidPairingException: On the first duplicate found
    """
    seen = set()
    for team_id in team_ids:
        if team_id in seen:
            raise InvalidPairingException(f"Duplicate team id in roster: {team_id!r}")
        seen.add(team_id)
