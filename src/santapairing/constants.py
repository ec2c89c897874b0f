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

# --- Constants ---

# Upper bound on randomized constructions per generation call
MAX_GENERATION_ATTEMPTS = 1000

# Cycle size used when N-cycle constraints are enabled without a size
DEFAULT_CYCLE_SIZE = 3

# Cycle operator values
OPERATOR_GREATER = "greater"
OPERATOR_LESS = "less"
OPERATOR_EQUAL = "equal"

OPERATOR_SYMBOLS = {
    OPERATOR_GREATER: ">",
    OPERATOR_LESS: "<",
    OPERATOR_EQUAL: "=",
}

# Arrow used when rendering pairings as text
PAIRING_ARROW = "→"

# --- Messages ---
MSG_NO_PARTICIPANTS = "No participants to pair."
MSG_TOO_FEW_PARTICIPANTS = "At least 2 participants are needed to exchange gifts."
MSG_CYCLE_SIZE_NOT_POSITIVE = "Cycle size must be positive."
MSG_CYCLE_SIZE_NOT_NUMBER = "Cycle size must be a number"
MSG_N_NOT_POSITIVE = "N must be positive"
MSG_SELF_PAIRING = "N=1 creates self-pairings (A{arrow}A).".format(arrow=PAIRING_ARROW)
MSG_BEST_ATTEMPT = "Could not find perfect solution. Showing best attempt."
MSG_UNEQUAL_CYCLES = "Could not achieve perfectly equal cycles. Showing best attempt."


def msg_conflict(giver: str, receiver: str) -> str:
    """Warning for a pairing that is both forced and banned."""
    return f"Conflict: {giver} {PAIRING_ARROW} {receiver} is both forced and banned."


def msg_forced_giver_conflict(giver: str, first: str, second: str) -> str:
    """Warning for a participant forced to give to two receivers."""
    return (
        f"Conflict: {giver} is forced to give to both {first} and {second}."
    )


def msg_forced_receiver_conflict(receiver: str, first: str, second: str) -> str:
    """Warning for a participant forced to receive from two givers."""
    return (
        f"Conflict: {receiver} is forced to receive from both {first} and {second}."
    )


def msg_overflow(n: int, cycle_size: int, overflow_size: int) -> str:
    """Informational text for an equal-cycle overflow."""
    return (
        f"M={n} is not divisible by N={cycle_size}. "
        f"Created overflow cycle of size {overflow_size}."
    )


def msg_will_overflow(n: int, cycle_size: int, overflow_size: int) -> str:
    """Settings warning announcing an equal-cycle overflow."""
    return (
        f"M={n} is not divisible by N={cycle_size}. "
        f"Will create overflow cycle of size {overflow_size}"
    )


def msg_banned_remaining(max_attempts: int, banned_count: int) -> str:
    """Warning for banned pairings that could not be avoided."""
    return (
        f"Could not avoid all banned pairings after {max_attempts} attempts. "
        f"{banned_count} banned pairing(s) included."
    )


def msg_inequality_boundary(n: int, cycle_size: int) -> str:
    """Error for an inequality size past floor(n/2)."""
    return (
        f"{cycle_size}-cycle necessitates a ({n}-{cycle_size})-cycle "
        f"({n - cycle_size}-cycle) which violates the rule"
    )
