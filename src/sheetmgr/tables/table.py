"""
Tabela baseada em cabeçalho sobre uma aba do Google Sheets.

A aba é lida uma única vez na construção (snapshot em memória); as linhas são
expostas como Records acessados pelo nome do cabeçalho, e as alterações são
devolvidas à aba por escritas explícitas.
"""
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

from gspread import Spreadsheet

from ..gateway import CellValue, Grid, SpreadsheetWorkbook, Workbook, pad_rows
from .headers import HeaderIndex
from .record import Record

logger = logging.getLogger(__name__)

ReturnType = TypeVar("ReturnType")


class Table:
    """
    Visão vinculada a uma aba: snapshot dos valores mais o índice de cabeçalhos.

    Se a aba não existir, a tabela fica desvinculada (is_bound == False) e todas
    as operações são ignoradas com um aviso no log, sem lançar exceção.

    Attributes:
        sheet_name (str): Nome da aba.
        grid (Grid | None): Aba do host, ou None se a tabela não estiver vinculada.
        header_row (int): Linha do cabeçalho na aba (1-based).
        column_count (int): Número de colunas consideradas parte da tabela.
        values (list[list[Any]]): Snapshot em memória; values[0] é o cabeçalho.
        headers (HeaderIndex): Mapeamento {cabeçalho_normalizado: índice_da_coluna}.
    """

    def __init__(
        self,
        source: Workbook | Spreadsheet,
        sheet_name: str,
        header_row: int = 1,
        column_count: int | None = None,
        strict_headers: bool = False,
    ):
        """
        Vincula a tabela a uma aba e carrega seus valores.

        Args:
            source (Workbook | Spreadsheet): Workbook ou planilha do gspread que contém a aba.
            sheet_name (str): Nome da aba.
            header_row (int): Linha do cabeçalho (1-based). Padrão é 1.
            column_count (int | None): Número de colunas da tabela. Se omitido, usa a última coluna com conteúdo.
            strict_headers (bool): Se True, cabeçalhos duplicados lançam ValueError.
        """
        if header_row < 1:
            raise ValueError("A linha do cabeçalho deve ser maior ou igual a 1.")

        if isinstance(source, Spreadsheet):
            source = SpreadsheetWorkbook(source)

        self.sheet_name = sheet_name
        self.header_row = header_row
        self.strict_headers = strict_headers
        self._explicit_column_count = column_count
        self.column_count: int = column_count or 0
        self.values: list[list[Any]] = [[]]
        self.headers = HeaderIndex()

        self.grid: Grid | None = source.find_grid(sheet_name)
        if self.grid is None:
            logger.warning("Tabela '%s' não vinculada: a aba não existe.", sheet_name)
            return

        self._load()

    def __repr__(self) -> str:
        state = "bound" if self.is_bound else "unbound"
        return f"Table(sheet_name={self.sheet_name!r}, {state}, rows={self.row_count})"

    def __iter__(self) -> Iterator[Record]:
        return self.iter_records()

    def __len__(self) -> int:
        return self.row_count

    @property
    def is_bound(self) -> bool:
        return self.grid is not None

    @property
    def row_count(self) -> int:
        """Número de linhas de dados no snapshot (sem o cabeçalho)."""
        return max(len(self.values) - 1, 0)

    def _is_unbound(self, operation: str) -> bool:
        if self.grid is None:
            logger.warning(
                "Tabela '%s' não vinculada; operação '%s' ignorada.", self.sheet_name, operation
            )
            return True
        return False

    def _load(self) -> None:
        """
        Lê da aba o retângulo que vai da linha do cabeçalho até a última linha com
        conteúdo e reconstrói o índice de cabeçalhos.
        """
        last_row, last_column = self.grid.used_extent()
        if self._explicit_column_count is None:
            self.column_count = last_column

        row_count = last_row - self.header_row + 1
        values = self.grid.read(self.header_row, 1, row_count, self.column_count)

        self.values = values or [[]]
        self.headers = HeaderIndex.from_row(self.values[0], strict=self.strict_headers)

        logger.info(
            "Tabela '%s' carregada: %d linhas de dados, %d colunas.",
            self.sheet_name,
            self.row_count,
            self.column_count,
        )

    def reload(self) -> None:
        """Relê a aba, descartando o snapshot atual e reconstruindo o índice de cabeçalhos."""
        if self._is_unbound("reload"):
            return
        self._load()

    def _column_index(self, header: str) -> int | None:
        column_index = self.headers.get(header)
        if column_index is None:
            logger.warning(
                "%s não encontrado nos cabeçalhos da aba '%s'.", header, self.sheet_name
            )
        return column_index

    def get_column(self, header: str, values_only: bool = False) -> list[Any] | None:
        """
        Obtém os valores de uma coluna (sem o cabeçalho) a partir do snapshot.

        Args:
            header (str): Nome (normalizado) do cabeçalho.
            values_only (bool): Se True, retorna os valores soltos; se False, cada valor
                vem em uma lista de um elemento, pronta para ser escrita como coluna.

        Returns:
            list[Any] | None: Valores da coluna em ordem de linha, ou None se o cabeçalho não existir.
        """
        if self._is_unbound("get_column"):
            return None

        column_index = self._column_index(header)
        if column_index is None:
            return None

        column = []
        for row in self.values[1:]:
            cell = row[column_index] if column_index < len(row) else ""
            column.append(cell if values_only else [cell])
        return column

    def set_column(self, header: str, column_values: Sequence[Any]) -> bool:
        """
        Escreve valores na aba, descendo pela coluna do cabeçalho a partir da
        primeira linha de dados. O snapshot em memória não é alterado.

        Args:
            header (str): Nome (normalizado) do cabeçalho.
            column_values (Sequence[Any]): Valores soltos ou listas de um elemento.

        Returns:
            bool: True se a coluna foi escrita, False se o cabeçalho não existir.
        """
        if self._is_unbound("set_column"):
            return False

        column_index = self._column_index(header)
        if column_index is None:
            return False

        rows = [
            list(value) if isinstance(value, (list, tuple)) else [value]
            for value in column_values
        ]
        self.grid.write(self.header_row + 1, column_index + 1, rows)
        logger.debug(
            "%d valores escritos na coluna '%s' da aba '%s'.", len(rows), header, self.sheet_name
        )
        return True

    def append_rows(self, rows: Sequence[CellValue] | Sequence[Sequence[CellValue]]) -> None:
        """
        Adiciona uma ou mais linhas logo após a última linha com conteúdo na aba.
        O snapshot em memória não é alterado.

        Args:
            rows: Uma linha (lista de valores) ou uma lista de linhas.
        """
        if self._is_unbound("append_rows"):
            return

        if not rows:
            logger.debug("Nenhuma linha para adicionar na aba '%s'.", self.sheet_name)
            return

        if not isinstance(rows[0], (list, tuple)):
            rows = [rows]

        last_row = self.grid.last_row()
        self.grid.write(last_row + 1, 1, pad_rows(rows))
        logger.debug(
            "%d linhas adicionadas após a linha %d da aba '%s'.",
            len(rows),
            last_row,
            self.sheet_name,
        )

    def append_rows_from_records(self, records: Sequence[Mapping[str, Any] | Record]) -> None:
        """
        Adiciona linhas a partir de dicionários {cabeçalho: valor}.

        Cabeçalhos ausentes no dicionário (ou com valor None) viram string vazia;
        chaves que não são cabeçalhos são ignoradas.

        Args:
            records: Dicionários ou Records a serem adicionados.
        """
        if self._is_unbound("append_rows_from_records"):
            return

        width = self.headers.width
        rows = []
        for record in records:
            if isinstance(record, Record):
                record = record.to_dict()

            row: list[Any] = [""] * width
            for header, column_index in self.headers.items():
                value = record.get(header)
                row[column_index] = "" if value is None else value
            rows.append(row)

        self.append_rows(rows)

    def iter_records(self, bottom_up: bool = False) -> Iterator[Record]:
        """
        Percorre as linhas de dados como Records.

        Args:
            bottom_up (bool): Se True, percorre da última linha para a primeira.
        """
        if self._is_unbound("iter_records"):
            return

        indices = range(1, len(self.values))
        if bottom_up:
            indices = reversed(indices)

        for index in indices:
            yield Record(self, index)

    def for_each(
        self,
        callback: Callable[[Record], ReturnType | None],
        bottom_up: bool = False,
    ) -> ReturnType | None:
        """
        Chama callback para cada linha de dados.

        Se callback retornar qualquer valor diferente de None, o percurso é
        interrompido e esse valor é retornado.

        Args:
            callback (Callable[[Record], Any]): Função chamada com o Record de cada linha.
            bottom_up (bool): Se True, percorre da última linha para a primeira.

        Returns:
            O primeiro valor não-None retornado por callback, ou None.
        """
        for record in self.iter_records(bottom_up=bottom_up):
            result = callback(record)
            if result is not None:
                return result
        return None

    def to_dicts(self) -> list[dict[str, Any]] | None:
        """Converte cada linha de dados em um dicionário {cabeçalho: valor}, em ordem de linha."""
        if self._is_unbound("to_dicts"):
            return None
        return [record.to_dict() for record in self.iter_records()]

    def last_row_values(self) -> list[Any] | None:
        """
        Retorna a última linha do snapshot (o próprio cabeçalho se não houver dados).
        """
        if self._is_unbound("last_row_values"):
            return None
        return self.values[-1] if self.values else None

    def clear_and_rewrite(self) -> None:
        """
        Limpa toda a área usada a partir da linha do cabeçalho e reescreve o
        snapshot inteiro (cabeçalho incluso). Use quando o número de linhas ou o
        layout das colunas mudou.
        """
        if self._is_unbound("clear_and_rewrite"):
            return

        rows = pad_rows(self.values)
        width = len(rows[0]) if rows else 0
        last_row, last_column = self.grid.used_extent()

        self.grid.clear(
            self.header_row,
            1,
            last_row - self.header_row + 1,
            max(last_column, width),
        )
        self.grid.write(self.header_row, 1, rows)
        self.grid.flush()
        logger.info(
            "Aba '%s' limpa e reescrita com %d linhas.", self.sheet_name, len(rows)
        )

    def flush_all(self) -> None:
        """
        Reescreve o snapshot inteiro no mesmo intervalo que ele ocupa, sem limpar.
        Use quando apenas o conteúdo das células mudou.
        """
        if self._is_unbound("flush_all"):
            return

        rows = pad_rows(self.values)
        self.grid.write(self.header_row, 1, rows)
        self.grid.flush()
        logger.info("Snapshot da aba '%s' gravado (%d linhas).", self.sheet_name, len(rows))

    def clear_data_rows(self) -> None:
        """
        Limpa todas as linhas abaixo do cabeçalho, mantendo o cabeçalho.
        O snapshot em memória não é alterado.
        """
        if self._is_unbound("clear_data_rows"):
            return

        last_row, last_column = self.grid.used_extent()
        self.grid.clear(self.header_row + 1, 1, last_row - self.header_row, last_column)
        self.grid.flush()
        logger.info("Linhas de dados da aba '%s' limpas.", self.sheet_name)
