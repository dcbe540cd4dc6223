# services/series.py
from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Sequence

from finance.erros import DadosIndisponiveis
from finance.modelos import Observacao
from finance.projecao import projetar_serie, taxa_media

logger = logging.getLogger(__name__)

Buscador = Callable[[int, date, date], Optional[Sequence[Dict[str, str]]]]


def parse_registro(item: Dict[str, str]) -> Observacao:
    """{"data": "dd/mm/aaaa", "valor": "0,53"} -> Observacao (taxa em % a.m.)"""
    try:
        d = datetime.strptime(item["data"], "%d/%m/%Y").date()
        taxa = float(str(item["valor"]).replace(",", "."))
    except (KeyError, TypeError, ValueError) as e:
        raise DadosIndisponiveis(f"Registro inválido na série: {item!r}") from e
    return Observacao(data=d, taxa=taxa)


def resolver_observacoes(code: int, data_inicial: date, data_final: date,
                         buscar: Optional[Buscador] = None) -> List[Observacao]:
    """
    Observações mensais de `data_inicial` a `data_final`.
    Se a última publicada for anterior a `data_final`, completa com projeção
    pela média das últimas 12 taxas publicadas.
    """
    if buscar is None:
        from services.bcb_api import buscar_serie as buscar
    registros = buscar(code, data_inicial, data_final)
    if not registros:
        raise DadosIndisponiveis("Nenhum dado disponível para o período selecionado.")

    reais = sorted((parse_registro(item) for item in registros), key=lambda o: o.data)
    meses = [(o.data.year, o.data.month) for o in reais]
    if len(set(meses)) != len(meses):
        raise DadosIndisponiveis(f"Série {code} com meses repetidos no período.")
    ultima = reais[-1].data
    if ultima >= data_final:
        return reais

    media = taxa_media(reais)
    projetadas = projetar_serie(ultima, data_final, media)
    if projetadas:
        logger.info("Série %s publicada até %s; projetando %d meses a %.4f%% a.m.",
                    code, ultima.isoformat(), len(projetadas), media)
    return reais + projetadas
