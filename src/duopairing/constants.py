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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0
BYE_SCORE = 1.0

# Result literals, always from team1's point of view
RESULT_TEAM1_WIN = "1-0"
RESULT_TEAM2_WIN = "0-1"
RESULT_DRAW = "1/2-1/2"
RESULT_BYE = "bye"

# Results a director may enter for a two-sided pairing
ENTERABLE_RESULTS = (RESULT_TEAM1_WIN, RESULT_TEAM2_WIN, RESULT_DRAW)
ALL_RESULTS = ENTERABLE_RESULTS + (RESULT_BYE,)

# Round status
ROUND_OPEN = "open"
ROUND_DONE = "done"

# Pairing algorithms
ALGORITHM_SWISS = "swiss"
ALGORITHM_ROUND_ROBIN = "round_robin"
ALGORITHM_RANDOM = "random"
ALGORITHMS = (ALGORITHM_SWISS, ALGORITHM_ROUND_ROBIN, ALGORITHM_RANDOM)
DEFAULT_ALGORITHM = ALGORITHM_SWISS

ALGORITHM_NAMES = {
    ALGORITHM_SWISS: "Swiss (Dutch)",
    ALGORITHM_ROUND_ROBIN: "Round Robin",
    ALGORITHM_RANDOM: "Random",
}

# Allowed number of rounds for algorithms that do not compute their own
MIN_ROUNDS = 1
MAX_ROUNDS = 20

# Minimum roster size for any round to be possible
MIN_TEAMS = 2
