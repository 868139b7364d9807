import logging
from typing import TYPE_CHECKING, Any

from ..gateway.grid import CellValue
from .headers import HeaderIndex

if TYPE_CHECKING:
    from .table import Table

logger = logging.getLogger(__name__)

_MISSING = object()


class Record:
    """
    Visão de uma linha da tabela, acessada pelo nome do cabeçalho.

    Não guarda os valores: referencia a linha pelo índice no snapshot da Table,
    então alterações feitas aqui aparecem no snapshot e em escritas posteriores
    da tabela (flush_all, clear_and_rewrite).

    Attributes:
        table (Table): Tabela de origem.
        index (int): Posição da linha no snapshot (0 é o cabeçalho).
        row_number (int): Linha absoluta na aba (1-based) de onde a linha veio.
    """

    __slots__ = ("table", "index", "row_number")

    def __init__(self, table: "Table", index: int):
        self.table = table
        self.index = index
        self.row_number = table.header_row + index

    def __repr__(self) -> str:
        return f"Record(row_number={self.row_number}, cells={self.cells!r})"

    @property
    def cells(self) -> list[Any]:
        return self.table.values[self.index]

    @property
    def headers(self) -> HeaderIndex:
        return self.table.headers

    def get(self, header: str) -> Any:
        """
        Lê o valor da célula sob o cabeçalho informado.

        Args:
            header (str): Nome (normalizado) do cabeçalho.

        Returns:
            Any: Valor da célula, ou None se o cabeçalho não existir ou a linha for mais curta.
        """
        column_index = self.headers.get(header)
        if column_index is None:
            logger.warning("'%s' não é uma coluna da aba '%s'.", header, self.table.sheet_name)
            return None

        cells = self.cells
        if column_index >= len(cells):
            logger.warning(
                "Linha %d não possui valor na coluna '%s' (índice %d).",
                self.row_number,
                header,
                column_index,
            )
            return None

        return cells[column_index]

    def set(self, header: str, value: CellValue = _MISSING) -> Any:
        """
        Escreve um valor na célula sob o cabeçalho informado (apenas em memória).

        Sem value, comporta-se como get.

        Args:
            header (str): Nome (normalizado) do cabeçalho.
            value (CellValue): Novo valor da célula. Valores falsy também são escritos.

        Returns:
            Any: O valor escrito, ou None se o cabeçalho não existir.
        """
        if value is _MISSING:
            return self.get(header)

        column_index = self.headers.get(header)
        if column_index is None:
            logger.warning("'%s' não é uma coluna da aba '%s'.", header, self.table.sheet_name)
            return None

        cells = self.cells
        if column_index >= len(cells):
            cells.extend([""] * (column_index + 1 - len(cells)))
        cells[column_index] = value
        return value

    def to_dict(self) -> dict[str, Any]:
        """
        Converte a linha em um dicionário {cabeçalho: valor}.

        Células ausentes (linha mais curta que o cabeçalho) aparecem como None.
        """
        cells = self.cells
        return {
            header: cells[column_index] if column_index < len(cells) else None
            for header, column_index in self.headers.items()
        }

    def write_back(self) -> None:
        """
        Grava os valores atuais desta linha na aba, na linha de origem.

        É a única forma de persistir uma linha sem reescrever a tabela inteira.
        """
        grid = self.table.grid
        if grid is None:
            logger.warning("Tabela '%s' não vinculada; linha não gravada.", self.table.sheet_name)
            return

        logger.debug("Gravando a linha %d da aba '%s'.", self.row_number, grid.title)
        grid.write(self.row_number, 1, [self.cells])
