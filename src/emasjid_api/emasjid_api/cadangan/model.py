from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import optional_int


@dataclass(frozen=True)
class CadanganType:
    id: int
    name: Optional[str] = None

    def to_json(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Cadangan:
    """A suggestion or complaint dropped into the mosque's suggestion box."""

    cadangan_text: str
    cadangan_type: Optional[CadanganType] = None
    cadangan_nama: Optional[str] = None
    cadangan_email: Optional[str] = None
    cadangan_phone: Optional[str] = None
    tindakan_text: Optional[str] = None
    create_date: Optional[int] = None
    is_open: bool = True
    score: int = 0
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "Cadangan":
        ctype = data.get("cadanganType")
        type_id = ctype.get("id") if isinstance(ctype, dict) else data.get("cadanganTypeId")
        type_id = optional_int(type_id)
        create_date = data.get("createDate")
        return cls(
            id=optional_int(data.get("id")),
            cadangan_type=CadanganType(id=type_id) if type_id is not None else None,
            cadangan_text=data.get("cadanganText") or "",
            cadangan_nama=data.get("cadanganNama"),
            cadangan_email=data.get("cadanganEmail"),
            cadangan_phone=data.get("cadanganPhone"),
            tindakan_text=data.get("tindakanText"),
            create_date=int(create_date) if create_date is not None else None,
            is_open=bool(data.get("isOpen", True)),
            score=int(data.get("score") or 0),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "cadanganType": self.cadangan_type.to_json() if self.cadangan_type else None,
            "cadanganText": self.cadangan_text,
            "cadanganNama": self.cadangan_nama,
            "cadanganEmail": self.cadangan_email,
            "cadanganPhone": self.cadangan_phone,
            "tindakanText": self.tindakan_text,
            "createDate": self.create_date,
            "isOpen": self.is_open,
            "score": self.score,
        }


@dataclass(frozen=True)
class CadanganPage:
    content: Sequence[Cadangan]
    total: int

    def to_json(self) -> dict:
        return {"content": [c.to_json() for c in self.content], "total": self.total}


@dataclass(frozen=True)
class CadanganCount:
    total_new: int = 0
    total_cadangan: int = 0
    total_aduan: int = 0
    total_lain: int = 0
    total_closed: int = 0

    def to_json(self) -> list[int]:
        # Positional order is what the dashboard reads.
        return [self.total_new, self.total_cadangan, self.total_aduan, self.total_lain, self.total_closed]
