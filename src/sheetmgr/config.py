from dataclasses import dataclass
import os

from dotenv import load_dotenv

# Carrega as variáveis de ambiente do arquivo .env
load_dotenv()

@dataclass(frozen=True)
class Config:
    """
    Configurações de acesso à planilha, obtidas de variáveis de ambiente.

    Attributes:
        spreadsheet_id (str | None): ID da planilha, obtido da variável de ambiente SPREADSHEET_ID.
        service_account_file (str | None): Caminho para o arquivo de conta de serviço, obtido da variável de ambiente SERVICE_ACCOUNT_FILE.
        header_row (int | None): Linha do cabeçalho (1-based), obtida da variável de ambiente HEADER_ROW. Padrão é 1.
    """
    spreadsheet_id: str | None = None
    service_account_file: str | None = None
    header_row: int | None = None

    def __post_init__(self):
        if self.spreadsheet_id is None:
            object.__setattr__(self, 'spreadsheet_id', os.getenv('SPREADSHEET_ID'))
        if self.service_account_file is None:
            object.__setattr__(self, 'service_account_file', os.getenv('SERVICE_ACCOUNT_FILE'))
        if self.header_row is None:
            raw_header_row = os.getenv('HEADER_ROW') or '1'
            try:
                object.__setattr__(self, 'header_row', int(raw_header_row))
            except ValueError:
                raise ValueError(
                    f"A variável de ambiente 'HEADER_ROW' deve ser um inteiro, recebido: '{raw_header_row}'."
                ) from None

        if not self.spreadsheet_id:
            raise ValueError("A variável de ambiente 'SPREADSHEET_ID' é obrigatória.")
        if not self.service_account_file:
            raise ValueError("A variável de ambiente 'SERVICE_ACCOUNT_FILE' é obrigatória.")
        if self.header_row < 1:
            raise ValueError("A linha do cabeçalho ('HEADER_ROW') deve ser maior ou igual a 1.")
