"""
Exemplo básico de uso do sheetmgr.

Lê a aba "Notas", dobra a pontuação de cada aluno e grava o resultado.
"""

import logging

from dotenv import load_dotenv

from sheetmgr import Config, Table, open_workbook

# Carrega variáveis de ambiente do arquivo .env
load_dotenv()

logging.basicConfig(level=logging.INFO)


def main():
    """Função principal."""
    config = Config()
    workbook = open_workbook(config)

    table = Table(workbook, "Notas", header_row=config.header_row)
    if not table.is_bound:
        print("Aba 'Notas' não encontrada.")
        return

    print(f"Pontuações atuais: {table.get_column('Score', values_only=True)}")

    def double_score(record):
        score = record.get("Score")
        if isinstance(score, (int, float)):
            record.set("Score", score * 2)

    table.for_each(double_score)
    table.flush_all()

    # Procura de baixo para cima o último aluno sem nota
    missing = table.for_each(
        lambda record: record.get("Name") if record.get("Score") == "" else None,
        bottom_up=True,
    )
    if missing:
        print(f"Último aluno sem nota: {missing}")

    table.append_rows_from_records([{"Name": "Bob", "Score": 5}])


if __name__ == "__main__":
    main()
