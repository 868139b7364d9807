"""
Normalização de cabeçalhos e índice cabeçalho -> coluna.

Cabeçalhos digitados no Sheets costumam ter quebras de linha "soft" e espaços
repetidos; a normalização torna as buscas por nome resistentes a isso.
"""
import logging
import re
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"\r\n|\n|\r")
_REPEATED_WHITESPACE = re.compile(r"\s\s+")


def normalize_header(value: Any) -> str:
    """
    Normaliza o texto de um cabeçalho.

    Cada quebra de linha (CRLF, LF ou CR) vira um espaço e sequências de dois ou
    mais caracteres de espaço viram um único espaço. A operação é idempotente.

    Args:
        value (Any): Conteúdo da célula do cabeçalho.

    Returns:
        str: Texto normalizado.
    """
    text = _LINE_BREAKS.sub(" ", str(value))
    return _REPEATED_WHITESPACE.sub(" ", text)


class HeaderIndex(Mapping[str, int]):
    """
    Mapeamento imutável {cabeçalho_normalizado: índice_da_coluna (0-based)}.

    Construído uma única vez a partir da linha de cabeçalho.
    """

    def __init__(self, mapping: Mapping[str, int] | None = None):
        self._mapping = MappingProxyType(dict(mapping or {}))

    @classmethod
    def from_row(cls, row: Sequence[Any], strict: bool = False) -> "HeaderIndex":
        """
        Constrói o índice a partir da linha de cabeçalho.

        Em caso de nomes duplicados, a última ocorrência vence (com aviso no log),
        a menos que strict seja True. Cabeçalhos em branco também são indexados
        (a última coluna em branco vence), mas nunca geram aviso nem erro.

        Args:
            row (Sequence[Any]): Células da linha de cabeçalho.
            strict (bool): Se True, lança ValueError em nomes duplicados.

        Returns:
            HeaderIndex: Índice construído.
        """
        mapping: dict[str, int] = {}

        for index, cell in enumerate(row):
            header = normalize_header(cell)
            # Células em branco (ex.: padding até column_count) não contam como duplicatas
            if header and header in mapping:
                if strict:
                    raise ValueError(f"Nome de coluna duplicado encontrado no cabeçalho: '{header}'")
                logger.warning(
                    "Cabeçalho '%s' duplicado: coluna %d substitui a coluna %d.",
                    header,
                    index,
                    mapping[header],
                )
            mapping[header] = index

        return cls(mapping)

    def __getitem__(self, header: str) -> int:
        return self._mapping[header]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"HeaderIndex({dict(self._mapping)!r})"

    @property
    def width(self) -> int:
        """Número de colunas necessárias para conter todos os cabeçalhos indexados."""
        return max(self._mapping.values(), default=-1) + 1

    def names(self) -> list[str]:
        """Nomes dos cabeçalhos em ordem de coluna."""
        return sorted(self._mapping, key=self._mapping.__getitem__)
