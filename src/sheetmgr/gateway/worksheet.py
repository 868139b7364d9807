import logging
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from gspread import Spreadsheet, Worksheet, WorksheetNotFound
from gspread.utils import DateTimeOption, ValueInputOption, ValueRenderOption, rowcol_to_a1

from .grid import CellValue, pad_rows

logger = logging.getLogger(__name__)


def _range_a1(row: int, column: int, row_count: int, column_count: int) -> str:
    """
    Converte um retângulo (linha, coluna, altura, largura) para notação A1.

    Args:
        row (int): Linha inicial (1-based).
        column (int): Coluna inicial (1-based).
        row_count (int): Número de linhas.
        column_count (int): Número de colunas.

    Returns:
        str: Intervalo em notação A1, ex.: 'A2:C10'.
    """
    start = rowcol_to_a1(row, column)
    end = rowcol_to_a1(row + row_count - 1, column + column_count - 1)
    return f"{start}:{end}"


def _to_cell(value: CellValue) -> Any:
    # Datas viram texto para serem interpretadas pelo Sheets (USER_ENTERED)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if value is None:
        return ""
    return value


class WorksheetGrid:
    """
    Implementação da interface Grid sobre uma aba do gspread.

    Cada chamada é uma requisição síncrona à API; falhas (APIError etc.)
    não são tratadas aqui e propagam para o chamador.
    """

    def __init__(self, worksheet: Worksheet):
        self.worksheet = worksheet

    @property
    def title(self) -> str:
        return self.worksheet.title

    def read(self, row: int, column: int, row_count: int, column_count: int) -> list[list[Any]]:
        """
        Lê um retângulo de células, preservando números e devolvendo datas formatadas.

        A API omite células vazias no fim de cada linha; o resultado é completado
        com strings vazias para ter exatamente row_count x column_count células.
        """
        if row_count <= 0 or column_count <= 0:
            return []

        cell_range = _range_a1(row, column, row_count, column_count)
        logger.debug("Lendo o intervalo %s da aba '%s'.", cell_range, self.title)

        values = self.worksheet.get(
            cell_range,
            value_render_option=ValueRenderOption.unformatted,
            date_time_render_option=DateTimeOption.formatted_string,
        )
        rows = [list(r) for r in values]
        rows.extend([] for _ in range(row_count - len(rows)))
        return pad_rows(rows, column_count)

    def write(self, row: int, column: int, values: Sequence[Sequence[CellValue]]) -> None:
        if not values:
            logger.debug("Nenhum valor para escrever na aba '%s'.", self.title)
            return

        rows = pad_rows([[_to_cell(v) for v in r] for r in values])
        if not rows[0]:
            logger.debug("Linhas sem células, nada a escrever na aba '%s'.", self.title)
            return

        cell_range = _range_a1(row, column, len(rows), len(rows[0]))
        logger.debug(
            "Escrevendo %d linhas no intervalo %s da aba '%s'.",
            len(rows),
            cell_range,
            self.title,
        )
        self.worksheet.update(
            values=rows,
            range_name=cell_range,
            value_input_option=ValueInputOption.user_entered,
        )

    def clear(self, row: int, column: int, row_count: int, column_count: int) -> None:
        if row_count <= 0 or column_count <= 0:
            logger.debug("Intervalo vazio, nada a limpar na aba '%s'.", self.title)
            return

        cell_range = _range_a1(row, column, row_count, column_count)
        logger.debug("Limpando o intervalo %s da aba '%s'.", cell_range, self.title)
        self.worksheet.batch_clear([cell_range])

    def used_extent(self) -> tuple[int, int]:
        """
        Obtém a última linha e a última coluna com conteúdo.

        Returns:
            tuple[int, int]: (ultima_linha, ultima_coluna), ambos 1-based; (0, 0) se a aba estiver vazia.
        """
        values = self.worksheet.get_all_values()
        last_row = len(values)
        last_column = max((len(r) for r in values), default=0)
        return last_row, last_column

    def last_row(self) -> int:
        return self.used_extent()[0]

    def last_column(self) -> int:
        return self.used_extent()[1]

    def flush(self) -> None:
        # A API confirma cada requisição antes de retornar; não há buffer local
        logger.debug("Flush na aba '%s': nenhuma escrita pendente.", self.title)


class SpreadsheetWorkbook:
    """Implementação da interface Workbook sobre uma planilha do gspread."""

    def __init__(self, spreadsheet: Spreadsheet):
        self.spreadsheet = spreadsheet

    def find_grid(self, name: str) -> WorksheetGrid | None:
        """
        Obtém uma aba da planilha pelo nome.

        Args:
            name (str): Nome da aba.

        Returns:
            WorksheetGrid | None: A aba encontrada, ou None se ela não existir.
        """
        try:
            logger.debug("Obtendo a aba '%s' da planilha '%s'.", name, self.spreadsheet.title)
            worksheet = self.spreadsheet.worksheet(name)
        except WorksheetNotFound:
            logger.warning(
                "Aba '%s' não encontrada na planilha '%s'.", name, self.spreadsheet.title
            )
            return None

        logger.info("Aba obtida com sucesso: %s", worksheet.title)
        return WorksheetGrid(worksheet)
