"""Transport-ready records built from query rows.

Records are frozen and created fresh per request; nothing here touches the
database.
"""

import calendar
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple

RFC1123_UTC = '%a, %d %b %Y %H:%M:%S UTC'


def to_epoch(value: datetime) -> int:
    """Seconds since epoch for a UTC timestamp, naive or aware."""
    return calendar.timegm(value.utctimetuple())


def format_timestamp(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(RFC1123_UTC)


@dataclass(frozen=True)
class BlackCardSnapshot:
    text: str
    watermark: str
    pick: int
    draw: int
    color: str = 'black'

    def to_dict(self):
        return {
            'text': self.text,
            'watermark': self.watermark,
            'color': self.color,
            'pick': self.pick,
            'draw': self.draw,
        }


@dataclass(frozen=True)
class RoundRecord:
    round_id: str
    timestamp: int
    black_card: BlackCardSnapshot

    @property
    def formatted_timestamp(self) -> str:
        return format_timestamp(self.timestamp)

    def to_dict(self):
        return {
            'round_id': self.round_id,
            'timestamp': self.timestamp,
            'black_card': self.black_card.to_dict(),
        }


@dataclass(frozen=True)
class GameRecord:
    game_id: str
    timestamp: int

    @property
    def formatted_timestamp(self) -> str:
        return format_timestamp(self.timestamp)

    def to_dict(self):
        return {'game_id': self.game_id, 'timestamp': self.timestamp}


@dataclass(frozen=True)
class SessionRecord:
    session_id: str
    login_timestamp: int

    @property
    def formatted_timestamp(self) -> str:
        return format_timestamp(self.login_timestamp)

    @property
    def server_id(self) -> str:
        """Server the session logged in through, e.g. ``serverA`` for ``serverA_xyz123``."""
        return self.session_id.split('_')[0]

    def to_dict(self):
        return {
            'session_id': self.session_id,
            'login_timestamp': self.login_timestamp,
        }


@dataclass(frozen=True)
class UserSessions:
    sessions: Tuple[SessionRecord, ...] = field(default_factory=tuple)

    def to_dict(self):
        return {'sessions': [s.to_dict() for s in self.sessions]}
