"""
sheetmgr

Camada de conveniência sobre o Google Sheets que permite tratar as linhas de
uma aba como registros acessados pelo nome do cabeçalho, em vez de coordenadas.

Este módulo expõe as principais classes para uso externo:

- Config: Configuração de acesso à planilha
- Table: Visão de uma aba (snapshot + índice de cabeçalhos)
- Record: Visão de uma linha, acessada por cabeçalho
- open_workbook: Abre a planilha configurada como Workbook
"""

from .__version__ import __version__
from .config import Config
from .gateway import open_workbook
from .tables import HeaderIndex, Record, Table, normalize_header

__all__ = [
    '__version__',
    'Config',
    'HeaderIndex',
    'Record',
    'Table',
    'normalize_header',
    'open_workbook',
]
