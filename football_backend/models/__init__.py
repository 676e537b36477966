# football_backend/models/__init__.py
# Centralized imports for all database models and schemas

# Team
from .team_model import Team, TeamCreate, TeamUpdate, TeamRead, TeamSummary

# Player
from .player_model import (
    Player, PlayerPosition, PlayerCreate, PlayerUpdate, PlayerRead, TeamWithPlayersRead
)

# Goal
from .goal_model import Goal, GoalRead

# Match and results
from .match_model import (
    Match, MatchStatus, MatchResult, get_result, MatchCreate, MatchUpdate,
    GoalCreate, MatchResultCreate, MatchRead, MatchDetailRead
)

# User
from .user_model import User, UserRole, UserRegister, UserLogin, UserRead, TokenResponse
