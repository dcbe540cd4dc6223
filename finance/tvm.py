# finance/tvm.py
from __future__ import annotations
from typing import List, Sequence

from .erros import ErroCalculo
from .modelos import Observacao, PontoEvolucao


def taxa_fixa_am(taxa_aa: float) -> float:
    """
    Taxa fixa % a.a. -> % a.m. por divisão simples (taxa/12).
    Não é a equivalente composta (1+i)^(1/12)-1; todos os resultados dependem disso.
    """
    return taxa_aa / 12.0


def variacao_acumulada(observacoes: Sequence[Observacao]) -> float:
    """
    Variação acumulada do índice em %: (Π(1 + taxa_i/100) - 1) * 100
    """
    if not observacoes:
        raise ErroCalculo("Nenhuma observação para acumular.")
    fator = 1.0
    for obs in observacoes:
        fator *= (1.0 + obs.taxa / 100.0)
    return (fator - 1.0) * 100.0


def valor_corrigido(principal: float, observacoes: Sequence[Observacao],
                    taxa_fixa_aa: float = 0.0, usar_indice: bool = True) -> float:
    """
    VF com índice + taxa fixa compostos mês a mês, em ordem cronológica:
    valor *= (1 + indice/100) * (1 + taxa_fixa_am/100)
    Com usar_indice=False a taxa do índice vale 0 (só o calendário é usado).
    """
    valor = principal
    i_fixa_am = taxa_fixa_am(taxa_fixa_aa)
    for obs in observacoes:
        i_indice = obs.taxa if usar_indice else 0.0
        valor *= (1.0 + i_indice / 100.0) * (1.0 + i_fixa_am / 100.0)
    return valor


def evolucao_investimento(principal: float, observacoes: Sequence[Observacao],
                          taxa_fixa_aa: float = 0.0, usar_indice: bool = True) -> List[PontoEvolucao]:
    """
    Evolução mês a mês com dois saldos acumulados em paralelo:
    - valor_indice: só o índice
    - valor_combinado: índice + taxa fixa (mesma regra de valor_corrigido)
    """
    evolucao = []
    saldo_indice = principal
    saldo_combinado = principal
    i_fixa_am = taxa_fixa_am(taxa_fixa_aa)
    for obs in observacoes:
        i_indice = obs.taxa if usar_indice else 0.0
        saldo_indice *= (1.0 + i_indice / 100.0)
        saldo_combinado *= (1.0 + i_indice / 100.0) * (1.0 + i_fixa_am / 100.0)
        evolucao.append(PontoEvolucao(
            data=obs.data,
            valor_indice=saldo_indice,
            valor_combinado=saldo_combinado,
            taxa=i_indice,
            projetada=obs.projetada,
        ))
    return evolucao
