"""Type hints used in Santa Pairing."""

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

from typing import Dict, List, Sequence, Tuple

# a participant is identified by its display name
Participant = str
Participants = Sequence[Participant]

# a forced chain of participants, p1 -> p2 -> ... -> pk
Chain = List[Participant]

# one closed loop of participant indices
Cycle = List[int]

# giver -> receiver lookups built from forced constraints
ForcedMap = Dict[Participant, Participant]
ForcedMaps = Tuple[ForcedMap, ForcedMap]

#  LocalWords:  ForcedMap ForcedMaps
