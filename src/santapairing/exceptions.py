"""Exceptions raised by Santa Pairing."""

# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
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


class SantaPairingException(Exception):
    """Base class for all Santa Pairing exceptions."""


class PairingException(SantaPairingException):
    """Raised when a pairing request is malformed beyond reporting.

    Generation failures caused by user input are returned in a
    GenerationResult instead.
    """


class SettingsException(SantaPairingException):
    """Raised when generation settings can not be parsed."""
