"""
Tabelas baseadas em cabeçalho.

Módulos:
    - headers: Normalização de cabeçalhos e HeaderIndex
    - record: Record, a visão de uma linha
    - table: Table, a visão de uma aba inteira
"""

from .headers import HeaderIndex, normalize_header
from .record import Record
from .table import Table

__all__ = [
    "HeaderIndex",
    "normalize_header",
    "Record",
    "Table",
]
