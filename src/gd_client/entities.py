"""Domain values decoded from server responses."""

from dataclasses import dataclass
from enum import Enum


class LeaderboardType(Enum):
    """Leaderboard kinds, valued by their wire name."""

    TOP = "top"
    FRIENDS = "friends"
    RELATIVE = "relative"
    CREATORS = "creators"


class DemonDifficulty(Enum):
    """Demon difficulties, valued by the rating sent to the server."""

    EASY = 1
    MEDIUM = 2
    HARD = 3
    INSANE = 4
    EXTREME = 5


class UserListType(Enum):
    """Account user lists, valued by their wire code."""

    FRIENDS = 0
    BLOCKED = 1


@dataclass(frozen=True)
class UserSearchResult:
    """A user as listed in searches, leaderboards, and friend/blocked lists."""

    account_id: int
    player_id: int
    name: str
    stars: int = 0
    demons: int = 0
    diamonds: int = 0
    creator_points: int = 0
    secret_coins: int = 0
    user_coins: int = 0
    rank: int = 0
    icon: int = 0
    color1: int = 0
    color2: int = 0


@dataclass(frozen=True)
class User:
    """Full profile of a registered user."""

    account_id: int
    player_id: int
    name: str
    stars: int
    demons: int
    diamonds: int
    creator_points: int
    secret_coins: int
    user_coins: int
    global_rank: int
    youtube: str = ""
    twitter: str = ""
    twitch: str = ""


@dataclass(frozen=True)
class Message:
    """A private message header. The body is fetched separately."""

    message_id: int
    sender_account_id: int
    sender_player_id: int
    sender_name: str
    subject: str
    age: str
    is_read: bool
    is_sent: bool
