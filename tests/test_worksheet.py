"""
Testes unitários para o módulo worksheet (implementação gspread da grade).
"""
from datetime import date, datetime
from unittest.mock import Mock

import pytest
from gspread.exceptions import APIError, WorksheetNotFound
from gspread.utils import DateTimeOption, ValueInputOption, ValueRenderOption

from sheetmgr.gateway.grid import pad_rows
from sheetmgr.gateway.worksheet import (
    SpreadsheetWorkbook,
    WorksheetGrid,
    _range_a1,
    _to_cell,
)


def _mock_worksheet():
    mock_worksheet = Mock()
    mock_worksheet.title = "TestSheet"
    return mock_worksheet


class TestHelpers:
    """Testes para as funções auxiliares."""

    def test_range_a1(self):
        """Deve converter retângulos para notação A1."""
        assert _range_a1(1, 1, 1, 1) == "A1:A1"
        assert _range_a1(2, 1, 3, 2) == "A2:B4"
        assert _range_a1(1, 27, 1, 2) == "AA1:AB1"

    def test_to_cell(self):
        """Datas devem virar texto; None vira string vazia; o resto passa direto."""
        assert _to_cell(datetime(2024, 3, 1, 9, 30)) == "2024-03-01 09:30:00"
        assert _to_cell(date(2024, 3, 1)) == "2024-03-01"
        assert _to_cell(None) == ""
        assert _to_cell(10) == 10
        assert _to_cell("x") == "x"

    def test_pad_rows(self):
        """Deve completar linhas irregulares até a maior largura."""
        assert pad_rows([["a"], ["b", "c"], []]) == [["a", ""], ["b", "c"], ["", ""]]
        assert pad_rows([["a", "b", "c"]], width=2) == [["a", "b"]]
        assert pad_rows([]) == []


class TestWorksheetGridRead:
    """Testes para WorksheetGrid.read."""

    def test_read_pads_to_requested_size(self):
        """Deve completar linhas e colunas omitidas pela API."""
        mock_worksheet = _mock_worksheet()
        mock_worksheet.get.return_value = [["Name", "Score"], ["Ann"]]

        result = WorksheetGrid(mock_worksheet).read(1, 1, 3, 2)

        assert result == [["Name", "Score"], ["Ann", ""], ["", ""]]
        mock_worksheet.get.assert_called_once_with(
            "A1:B3",
            value_render_option=ValueRenderOption.unformatted,
            date_time_render_option=DateTimeOption.formatted_string,
        )

    def test_read_empty_range(self):
        """Intervalo sem linhas ou colunas não deve chamar a API."""
        mock_worksheet = _mock_worksheet()

        assert WorksheetGrid(mock_worksheet).read(1, 1, 0, 2) == []
        mock_worksheet.get.assert_not_called()

    def test_read_api_error_propagates(self):
        """Erros da API devem propagar sem retry."""
        mock_worksheet = _mock_worksheet()
        mock_worksheet.get.side_effect = APIError(Mock(status_code=500))

        with pytest.raises(APIError):
            WorksheetGrid(mock_worksheet).read(1, 1, 1, 1)

        assert mock_worksheet.get.call_count == 1


class TestWorksheetGridWrite:
    """Testes para WorksheetGrid.write."""

    def test_write_values(self):
        """Deve escrever o retângulo com USER_ENTERED."""
        mock_worksheet = _mock_worksheet()

        WorksheetGrid(mock_worksheet).write(2, 1, [["Bob", 5], ["Eve"]])

        mock_worksheet.update.assert_called_once_with(
            values=[["Bob", 5], ["Eve", ""]],
            range_name="A2:B3",
            value_input_option=ValueInputOption.user_entered,
        )

    def test_write_converts_dates(self):
        """Datas devem ser enviadas como texto."""
        mock_worksheet = _mock_worksheet()

        WorksheetGrid(mock_worksheet).write(1, 3, [[datetime(2024, 1, 2, 3, 4, 5)]])

        kwargs = mock_worksheet.update.call_args.kwargs
        assert kwargs["values"] == [["2024-01-02 03:04:05"]]
        assert kwargs["range_name"] == "C1:C1"

    def test_write_nothing(self):
        """Sem valores (ou sem células), não deve chamar a API."""
        mock_worksheet = _mock_worksheet()
        grid = WorksheetGrid(mock_worksheet)

        grid.write(1, 1, [])
        grid.write(1, 1, [[]])

        mock_worksheet.update.assert_not_called()


class TestWorksheetGridOther:
    """Testes para clear, extensão usada e flush."""

    def test_clear(self):
        """Deve limpar o intervalo com batch_clear."""
        mock_worksheet = _mock_worksheet()

        WorksheetGrid(mock_worksheet).clear(2, 1, 3, 2)

        mock_worksheet.batch_clear.assert_called_once_with(["A2:B4"])

    def test_clear_empty_range(self):
        """Intervalo vazio não deve chamar a API."""
        mock_worksheet = _mock_worksheet()

        WorksheetGrid(mock_worksheet).clear(2, 1, 0, 2)

        mock_worksheet.batch_clear.assert_not_called()

    def test_used_extent(self):
        """Deve retornar a última linha e coluna com conteúdo."""
        mock_worksheet = _mock_worksheet()
        mock_worksheet.get_all_values.return_value = [["a", "b", "c"], ["d", "", ""]]
        grid = WorksheetGrid(mock_worksheet)

        assert grid.used_extent() == (2, 3)
        assert grid.last_row() == 2
        assert grid.last_column() == 3

    def test_used_extent_empty(self):
        """Aba vazia deve ter extensão (0, 0)."""
        mock_worksheet = _mock_worksheet()
        mock_worksheet.get_all_values.return_value = []

        assert WorksheetGrid(mock_worksheet).used_extent() == (0, 0)

    def test_flush_makes_no_request(self):
        """flush não deve fazer requisições."""
        mock_worksheet = Mock(spec=["title"])
        mock_worksheet.title = "TestSheet"

        WorksheetGrid(mock_worksheet).flush()

    def test_title(self):
        """title deve refletir o título da aba."""
        assert WorksheetGrid(_mock_worksheet()).title == "TestSheet"


class TestSpreadsheetWorkbook:
    """Testes para SpreadsheetWorkbook.find_grid."""

    def test_find_grid_exists(self):
        """Deve retornar a aba encapsulada em WorksheetGrid."""
        mock_worksheet = _mock_worksheet()
        mock_spreadsheet = Mock()
        mock_spreadsheet.title = "TestSpreadsheet"
        mock_spreadsheet.worksheet.return_value = mock_worksheet

        grid = SpreadsheetWorkbook(mock_spreadsheet).find_grid("TestSheet")

        assert isinstance(grid, WorksheetGrid)
        assert grid.worksheet is mock_worksheet
        mock_spreadsheet.worksheet.assert_called_once_with("TestSheet")

    def test_find_grid_not_found(self):
        """Aba inexistente deve resultar em None."""
        mock_spreadsheet = Mock()
        mock_spreadsheet.title = "TestSpreadsheet"
        mock_spreadsheet.worksheet.side_effect = WorksheetNotFound("Not found")

        assert SpreadsheetWorkbook(mock_spreadsheet).find_grid("Missing") is None

    def test_find_grid_api_error_propagates(self):
        """Outros erros da API devem propagar."""
        mock_spreadsheet = Mock()
        mock_spreadsheet.title = "TestSpreadsheet"
        mock_spreadsheet.worksheet.side_effect = APIError(Mock(status_code=403))

        with pytest.raises(APIError):
            SpreadsheetWorkbook(mock_spreadsheet).find_grid("TestSheet")
