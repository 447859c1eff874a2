# Ladder League
# Copyright (C) 2025  Ladder League developers
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

# Group sizes
BRACKET_GROUP_SIZE = 4
ROUND_ROBIN_GROUP_SIZE = 3
EXHIBITION_GROUP_SIZE = 2
MIN_PRESENT_PLAYERS = 2

# Match key templates (shared with stored rounds and exports, do not change)
BRACKET_MATCH_ID_TEMPLATE = "g{group}-r{round}-m{match}"
GROUP_MATCH_ID_TEMPLATE = "g{group}-m{match}"
MATCH_ID_PATTERN = r"^g(?P<group>\d+)(?:-r(?P<round>\d+))?-m(?P<match>\d+)$"

# 4-player bracket: (round, match) -> seed indices
BRACKET_FIRST_ROUND = {1: (0, 3), 2: (1, 2)}
BRACKET_FINAL = (2, 1)
BRACKET_CONSOLATION = (2, 2)

# 3-player round robin: match number -> seed indices
ROUND_ROBIN_PAIRS = {1: (0, 1), 2: (0, 2), 3: (1, 2)}

# Score fallback used by the 4-player bracket for unset or invalid sides
DEFAULT_BRACKET_SCORE = 0

# Streak / outcome markers
OUTCOME_WIN = "W"
OUTCOME_LOSS = "L"
OUTCOME_TIE = "T"

# Logging
LOG_LEVEL_ENV_VAR = "LADDERLEAGUE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# League defaults
DEFAULT_LEAGUE_NAME = "Untitled League"
