from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Tetapan:
    """One key-value setting (``kunci`` = key, ``nilai`` = value)."""

    kunci: str
    nilai: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "Tetapan":
        nilai = data.get("nilai")
        return cls(kunci=str(data.get("kunci") or ""), nilai=None if nilai is None else str(nilai))

    def to_json(self) -> dict:
        return {"kunci": self.kunci, "nilai": self.nilai}


@dataclass(frozen=True)
class TetapanType:
    """Describes a setting key and the group it is shown under."""

    kunci: str
    group_name: str
    keterangan: Optional[str] = None
    id: Optional[int] = None

    def to_json(self) -> dict:
        return {"id": self.id, "kunci": self.kunci, "groupName": self.group_name, "keterangan": self.keterangan}
