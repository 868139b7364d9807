"""Configuração de testes pytest."""
import sys
from pathlib import Path

import pytest

# Adicionar src ao path para importação dos módulos
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


class FakeGrid:
    """Aba em memória que segue a interface Grid (linhas e colunas 1-based)."""

    def __init__(self, title, rows):
        self.title = title
        self.rows = [list(row) for row in rows]
        self.writes = []
        self.clears = []
        self.flush_count = 0
        self.extent_calls = 0

    def read(self, row, column, row_count, column_count):
        if row_count <= 0 or column_count <= 0:
            return []
        result = []
        for r in range(row - 1, row - 1 + row_count):
            source = self.rows[r] if r < len(self.rows) else []
            result.append([
                source[c] if c < len(source) else ""
                for c in range(column - 1, column - 1 + column_count)
            ])
        return result

    def write(self, row, column, values):
        self.writes.append((row, column, [list(v) for v in values]))
        for offset, row_values in enumerate(values):
            r = row - 1 + offset
            while len(self.rows) <= r:
                self.rows.append([])
            target = self.rows[r]
            end = column - 1 + len(row_values)
            if len(target) < end:
                target.extend([""] * (end - len(target)))
            target[column - 1:end] = list(row_values)

    def clear(self, row, column, row_count, column_count):
        self.clears.append((row, column, row_count, column_count))
        for r in range(row - 1, min(row - 1 + row_count, len(self.rows))):
            target = self.rows[r]
            for c in range(column - 1, min(column - 1 + column_count, len(target))):
                target[c] = ""

    def used_extent(self):
        self.extent_calls += 1
        return self.last_row(), self.last_column()

    def last_row(self):
        for index in range(len(self.rows) - 1, -1, -1):
            if any(cell != "" for cell in self.rows[index]):
                return index + 1
        return 0

    def last_column(self):
        last = 0
        for row in self.rows:
            for index, cell in enumerate(row):
                if cell != "":
                    last = max(last, index + 1)
        return last

    def flush(self):
        self.flush_count += 1

    def used_values(self):
        """Conteúdo da aba recortado à área usada."""
        return [row[:self.last_column()] for row in self.rows[:self.last_row()]]


class FakeWorkbook:
    """Workbook em memória: {nome_da_aba: FakeGrid}."""

    def __init__(self, grids):
        self.grids = grids

    def find_grid(self, name):
        return self.grids.get(name)


@pytest.fixture
def make_workbook():
    """Cria um FakeWorkbook com uma única aba a partir das linhas informadas."""
    def _make(rows, title="Sheet1"):
        grid = FakeGrid(title, rows)
        return FakeWorkbook({title: grid}), grid
    return _make


@pytest.fixture
def scores(make_workbook):
    """Aba com cabeçalho ["Name", "Score"] e três alunos."""
    return make_workbook([
        ["Name", "Score"],
        ["Ann", 10],
        ["Bob", 7],
        ["Cid", 3],
    ])
