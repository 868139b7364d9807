"""
Interface mínima de acesso à grade de células.

Tudo o que as tabelas precisam do host passa por estes dois protocolos.
Linhas e colunas são sempre 1-based, como no Google Sheets.
"""
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any, Protocol

CellValue = str | int | float | bool | datetime | date | None


class Grid(Protocol):
    """Uma aba do host, vista como uma grade retangular de células."""

    title: str

    def read(self, row: int, column: int, row_count: int, column_count: int) -> list[list[Any]]:
        ...

    def write(self, row: int, column: int, values: Sequence[Sequence[CellValue]]) -> None:
        ...

    def clear(self, row: int, column: int, row_count: int, column_count: int) -> None:
        ...

    def used_extent(self) -> tuple[int, int]:
        ...

    def last_row(self) -> int:
        ...

    def last_column(self) -> int:
        ...

    def flush(self) -> None:
        ...


class Workbook(Protocol):
    """Conjunto de abas endereçáveis pelo nome."""

    def find_grid(self, name: str) -> Grid | None:
        ...


def pad_rows(rows: Sequence[Sequence[Any]], width: int | None = None) -> list[list[Any]]:
    """
    Completa linhas irregulares com strings vazias até formar um retângulo.

    Args:
        rows (Sequence[Sequence[Any]]): Linhas a completar.
        width (int | None): Largura desejada. Se omitida, usa a maior linha.

    Returns:
        list[list[Any]]: Novas listas com a mesma largura.
    """
    if width is None:
        width = max((len(row) for row in rows), default=0)
    return [list(row[:width]) + [""] * (width - len(row)) for row in rows]
