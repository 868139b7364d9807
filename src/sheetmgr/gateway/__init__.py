"""
Gateway para acesso ao Google Sheets.

Este módulo encapsula todas as operações de leitura e escrita na API do Google Sheets
atrás de uma interface mínima de grade (Grid/Workbook).

Módulos:
    - grid: Protocolos Grid e Workbook
    - connection: Conexão e obtenção de spreadsheets
    - worksheet: Implementação das interfaces sobre o gspread
"""

from .connection import get_spreadsheet, open_workbook
from .grid import CellValue, Grid, Workbook, pad_rows
from .worksheet import SpreadsheetWorkbook, WorksheetGrid

__all__ = [
    "CellValue",
    "Grid",
    "Workbook",
    "get_spreadsheet",
    "open_workbook",
    "SpreadsheetWorkbook",
    "WorksheetGrid",
    "pad_rows",
]
