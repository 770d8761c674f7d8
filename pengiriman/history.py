"""Shipment history lookup by receipt code."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

DEFAULT_FILE = "RiwayatPengiriman.txt"
CODE_LENGTH = 10
FORBIDDEN_CHARS = '\\/:*?"<>|'

MSG_NOT_FOUND = "Data tidak ditemukan."
MSG_EMPTY_CODE = "Kode resi tidak boleh kosong."
MSG_BAD_LENGTH = "Kode resi harus terdiri dari 10 karakter."
MSG_NO_DATA = "Tidak ada data untuk disimpan."
MSG_BAD_CHARS = "Kode resi mengandung karakter yang tidak diperbolehkan dalam nama file."
MSG_SAVE_FAILED = "Gagal menyimpan file."


class HistoryError(Exception):
    """Raised for invalid receipt codes or failed saves."""


@dataclass(frozen=True)
class ShipmentRecord:
    """One shipment line of the history file."""

    code: str
    origin: str
    destination: str
    date: str
    status: str
    position: str

    def format(self) -> str:
        """Return the record as the multi-line text shown to the user."""
        return "\n".join(
            (
                f"Kode: {self.code}",
                f"Asal: {self.origin}",
                f"Tujuan: {self.destination}",
                f"Tanggal: {self.date}",
                f"Status: {self.status}",
                f"Posisi: {self.position}",
            )
        )


def validate_code(code: str) -> str:
    """Return the trimmed code, or raise HistoryError if it is unusable."""
    code = code.strip()
    if not code:
        raise HistoryError(MSG_EMPTY_CODE)
    if len(code) != CODE_LENGTH:
        raise HistoryError(MSG_BAD_LENGTH)
    return code


def _fields(line: str) -> list[str]:
    if not line:
        return []
    parts = line.split("|")
    if parts[-1] == "":
        parts.pop()
    return parts


def find_record(path: str | PathLike[str], code: str) -> ShipmentRecord | None:
    """Return the first record whose code matches, ignoring case."""
    wanted = code.lower()
    try:
        with Path(path).open(encoding="utf-8") as handle:
            for line in handle:
                fields = _fields(line.rstrip("\n"))
                if len(fields) >= 6 and fields[0].lower() == wanted:
                    return ShipmentRecord(*fields[:6])
    except OSError:
        return None
    return None


def search(path: str | PathLike[str], code: str) -> str:
    """Validate the code and return the text describing its shipment."""
    record = find_record(path, validate_code(code))
    return record.format() if record else MSG_NOT_FOUND


def save_result(code: str, text: str, directory: str | PathLike[str] = ".") -> Path:
    """Write ``text`` to ``<code>.txt`` in ``directory`` and return the path."""
    code = code.strip()
    text = text.strip()
    if not code:
        raise HistoryError(MSG_EMPTY_CODE)
    if not text:
        raise HistoryError(MSG_NO_DATA)
    if any(char in FORBIDDEN_CHARS for char in code):
        raise HistoryError(MSG_BAD_CHARS)
    target = Path(directory) / f"{code}.txt"
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise HistoryError(MSG_SAVE_FAILED) from exc
    return target