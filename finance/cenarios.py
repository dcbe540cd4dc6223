# finance/cenarios.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .erros import EntradaInvalida

# Códigos SGS
SGS_IPCA_MENSAL = 433        # IPCA var. mensal (% ao mês)
SGS_SELIC_MENSAL = 4390      # Selic acumulada no mês (% ao mês)


class Cenario(str, Enum):
    IPCA_MAIS_FIXA = "ipca_mais_fixa"
    SELIC_MAIS_FIXA = "selic_mais_fixa"
    SOMENTE_FIXA = "somente_fixa"


@dataclass(frozen=True)
class SerieSelecionada:
    codigo: int
    rotulo: Optional[str]
    usar_indice: bool


# Somente taxa fixa ainda busca o IPCA: a série dá o calendário de meses do período.
SERIES_POR_CENARIO: Dict[Cenario, SerieSelecionada] = {
    Cenario.IPCA_MAIS_FIXA: SerieSelecionada(SGS_IPCA_MENSAL, "IPCA", True),
    Cenario.SELIC_MAIS_FIXA: SerieSelecionada(SGS_SELIC_MENSAL, "SELIC", True),
    Cenario.SOMENTE_FIXA: SerieSelecionada(SGS_IPCA_MENSAL, None, False),
}

NOMES_CENARIO: Dict[Cenario, str] = {
    Cenario.IPCA_MAIS_FIXA: "IPCA + taxa fixa",
    Cenario.SELIC_MAIS_FIXA: "SELIC + taxa fixa",
    Cenario.SOMENTE_FIXA: "Somente taxa fixa",
}


def selecionar_serie(cenario: Cenario | str) -> SerieSelecionada:
    """
    Série SGS, rótulo de exibição e se a taxa do índice entra na conta.
    Aceita o enum ou o valor textual ("ipca_mais_fixa", ...).
    """
    try:
        return SERIES_POR_CENARIO[Cenario(cenario)]
    except ValueError:
        raise EntradaInvalida(f"Cenário desconhecido: {cenario!r}.") from None
