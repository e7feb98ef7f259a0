"""Exceptions for use in Duo Pairing"""

# Duo Pairing
# Copyright (C) 2025  Duo Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class DuoPairingException(Exception):
    """Base exception for all Duo Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(DuoPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when the input to a pairing strategy is invalid."""

    pass


class NotEnoughTeamsException(PairingException):
    """Raised when the roster is too small for any round to be paired."""

    pass


class InvariantViolationException(PairingException):
    """Raised when a generated round breaks a structural invariant.

    This is an internal-consistency fault (a team paired twice, a team paired
    with itself), never a user-facing validation error.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(DuoPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundSequenceException(TournamentStateException):
    """Raised when a round is requested out of sequence (gap or skip)."""

    pass


class PendingResultsException(TournamentStateException):
    """Raised when the open round still has decisive games without a result."""

    pass


class TournamentCompleteException(TournamentStateException):
    """Raised when every scheduled round has already been generated."""

    pass


class RoundConflictException(TournamentStateException):
    """Raised when a round with the same number was created concurrently."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class DuplicateTeamException(TournamentException):
    """Raised when attempting to register a team id that already exists."""

    pass


# ========== Result Exceptions ==========


class ResultException(DuoPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result literal is not one of the accepted values."""

    pass


class ByeResultException(ResultException):
    """Raised when attempting to enter a result for a bye."""

    pass


class PairingNotFoundException(ResultException):
    """Raised when a requested pairing cannot be found."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DuoPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(DuoPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
