from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import optional_int

# (field, JSON key, face value in RM)
DENOMINATIONS = (
    ("total_1c", "total1c", Decimal("0.01")),
    ("total_5c", "total5c", Decimal("0.05")),
    ("total_10c", "total10c", Decimal("0.10")),
    ("total_20c", "total20c", Decimal("0.20")),
    ("total_50c", "total50c", Decimal("0.50")),
    ("total_1d", "total1d", Decimal("1")),
    ("total_5d", "total5d", Decimal("5")),
    ("total_10d", "total10d", Decimal("10")),
    ("total_20d", "total20d", Decimal("20")),
    ("total_50d", "total50d", Decimal("50")),
    ("total_100d", "total100d", Decimal("100")),
)


@dataclass(frozen=True)
class TabungType:
    name: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "TabungType":
        return cls(id=optional_int(data.get("id")), name=data.get("name"))

    def to_json(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Tabung:
    """A collection box (or account) that kutipan are counted into.

    ``cents`` marks boxes whose kutipan also record coin denominations.
    """

    name: str
    tabung_type: Optional[TabungType] = None
    cents: bool = False
    id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "Tabung":
        ttype = data.get("tabungType")
        return cls(
            id=optional_int(data.get("id")),
            name=str(data.get("name") or ""),
            tabung_type=TabungType.from_json(ttype) if isinstance(ttype, dict) else None,
            cents=bool(data.get("cents", False)),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "cents": self.cents,
            "tabungType": self.tabung_type.to_json() if self.tabung_type else None,
        }


@dataclass(frozen=True)
class Kutipan:
    """One counted collection of a tabung, recorded as note/coin counts."""

    tabung: Tabung
    create_date: Optional[int] = None
    total_1c: int = 0
    total_5c: int = 0
    total_10c: int = 0
    total_20c: int = 0
    total_50c: int = 0
    total_1d: int = 0
    total_5d: int = 0
    total_10d: int = 0
    total_20d: int = 0
    total_50d: int = 0
    total_100d: int = 0
    id: Optional[int] = None

    @property
    def total(self) -> float:
        amount = sum((getattr(self, f) * value for f, _, value in DENOMINATIONS), Decimal("0"))
        return float(amount)

    def counts(self) -> dict[str, int]:
        return {f: getattr(self, f) for f, _, _ in DENOMINATIONS}

    @classmethod
    def from_json(cls, data: dict) -> "Kutipan":
        tabung = data.get("tabung")
        if not isinstance(tabung, dict):
            tabung = {"id": data.get("tabungId")}
        create_date = data.get("createDate")
        return cls(
            id=optional_int(data.get("id")),
            tabung=Tabung(id=optional_int(tabung.get("id")), name=str(tabung.get("name") or "")),
            create_date=int(create_date) if create_date is not None else None,
            **{f: int(data.get(key) or 0) for f, key, _ in DENOMINATIONS},
        )

    def to_json(self) -> dict:
        body = {
            "id": self.id,
            "tabung": self.tabung.to_json(),
            "createDate": self.create_date,
        }
        body.update({key: getattr(self, f) for f, key, _ in DENOMINATIONS})
        body["total"] = self.total
        return body


@dataclass(frozen=True)
class KutipanPage:
    content: Sequence[Kutipan]
    total: int

    def to_json(self) -> dict:
        return {"content": [k.to_json() for k in self.content], "total": self.total}
