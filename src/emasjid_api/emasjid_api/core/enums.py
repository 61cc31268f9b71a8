from __future__ import annotations

from enum import Enum


class SortDirection(str, Enum):
    """Arah susunan untuk senarai bermuka surat."""

    ASC = "asc"
    DESC = "desc"


class CadanganTypeId(int, Enum):
    """Jenis cadangan seperti dalam jadual cadangan_types."""

    BARU = 1
    CADANGAN = 2
    ADUAN = 3
    LAIN_LAIN = 4
