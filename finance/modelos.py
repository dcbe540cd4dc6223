# finance/modelos.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class Observacao:
    data: date
    taxa: float                 # % a.m. (0.53 = 0,53%), não fração
    projetada: bool = False


@dataclass(frozen=True)
class PontoEvolucao:
    data: date
    valor_indice: float         # só o índice (sem taxa fixa)
    valor_combinado: float      # índice + taxa fixa
    taxa: float                 # taxa do índice efetivamente aplicada no mês
    projetada: bool = False


@dataclass(frozen=True)
class ResultadoCalculo:
    valor_inicial: float
    valor_final: float
    variacao_total_pct: float
    evolucao: Tuple[PontoEvolucao, ...]
    cenario: Optional[str] = None
    rotulo: Optional[str] = None    # "IPCA", "SELIC" ou None (só taxa fixa)
    taxa_fixa_aa: float = 0.0       # % a.a.
    data_inicial: Optional[date] = None
    data_final: Optional[date] = None

    @property
    def ganho_total_pct(self) -> float:
        return (self.valor_final - self.valor_inicial) / self.valor_inicial * 100.0

    @property
    def meses_projetados(self) -> int:
        return sum(1 for p in self.evolucao if p.projetada)
