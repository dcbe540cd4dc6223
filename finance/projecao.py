# finance/projecao.py
from __future__ import annotations
from datetime import date
from typing import List, Sequence

from dateutil.relativedelta import relativedelta

from .modelos import Observacao

JANELA_MEDIA = 12   # meses usados na média para projetar


def taxa_media(observacoes: Sequence[Observacao], janela: int = JANELA_MEDIA) -> float:
    """Média simples das últimas `janela` taxas (ou de todas, se houver menos). 0 se vazio."""
    ultimas = list(observacoes)[-janela:]
    if not ultimas:
        return 0.0
    return sum(obs.taxa for obs in ultimas) / len(ultimas)


def projetar_serie(ultima_data: date, data_final: date, taxa: float) -> List[Observacao]:
    """
    Uma observação sintética por mês após `ultima_data`, até o mês de `data_final` (inclusive),
    todas com a mesma taxa. Passo de mês calendário: mantém o dia de `ultima_data`,
    limitado ao último dia do mês (31/01 -> 29/02 -> 31/03).
    """
    limite = (data_final.year, data_final.month)
    out = []
    k = 1
    while True:
        d = ultima_data + relativedelta(months=k)
        if (d.year, d.month) > limite:
            break
        out.append(Observacao(data=d, taxa=taxa, projetada=True))
        k += 1
    return out
