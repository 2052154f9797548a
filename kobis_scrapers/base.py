"""Record types shared by all KOBIS scrapers."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

__all__ = [
    "MovieCode",
    "BoxOfficeEntry",
    "RoleType",
    "ActorEntry",
    "ImageKind",
]


@dataclass(slots=True)
class MovieCode:
    """A search hit: the movie title and its FIMS code.

    Identity is the title alone. Two hits with the same title compare equal
    even when their codes differ.
    """

    title: str
    code: int = field(compare=False)

    def __hash__(self) -> int:
        return hash(self.title)

    def as_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "code": self.code}


@dataclass(frozen=True, slots=True)
class BoxOfficeEntry:
    """One ranked movie on one day of the daily box office."""

    rank: int
    title: str
    code: int
    date: dt.date

    def as_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "title": self.title,
            "code": self.code,
            "date": self.date.isoformat(),
        }


class RoleType(Enum):
    LEAD = 1
    SUPPORTING = 2
    SPECIAL_APPEARANCE = 3
    EXTRA = 5
    UNKNOWN = 0

    @classmethod
    def from_code(cls, raw: Union[str, int, None]) -> "RoleType":
        """Map the site's ``actorGb`` value; 4 and anything unrecognised is UNKNOWN."""
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def label(self) -> Optional[str]:
        return _ROLE_LABELS.get(self)


_ROLE_LABELS = {
    RoleType.LEAD: "주연",
    RoleType.SUPPORTING: "조연",
    RoleType.SPECIAL_APPEARANCE: "특별출연",
    RoleType.EXTRA: "단역",
}


@dataclass(frozen=True, slots=True)
class ActorEntry:
    actor_name: str
    character_name: str
    role_type: RoleType

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ActorEntry":
        return cls(
            actor_name=str(record.get("peopleNm") or ""),
            character_name=str(record.get("cast") or ""),
            role_type=RoleType.from_code(record.get("actorGb")),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "actor_name": self.actor_name,
            "character_name": self.character_name,
            "role_type": self.role_type.name,
            "role_label": self.role_type.label,
        }


class ImageKind(Enum):
    """Which image panel of the detail popup to read."""

    POSTER = 0
    STILL_CUT = 1

    @property
    def panel_index(self) -> int:
        return self.value
