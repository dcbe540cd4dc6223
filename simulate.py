# simulate.py
from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from finance.cenarios import Cenario, selecionar_serie
from finance.modelos import ResultadoCalculo
from finance.tvm import variacao_acumulada, valor_corrigido, evolucao_investimento
from finance.validacao import validar_entrada, normalizar_taxa_fixa
from services.series import Buscador, resolver_observacoes

logger = logging.getLogger(__name__)


def calcular(valor_inicial: float, data_inicial, data_final, taxa_fixa_aa: float = 0.0,
             cenario: Cenario | str = Cenario.IPCA_MAIS_FIXA, permitir_futuro: bool = False,
             hoje: Optional[date] = None, buscar: Optional[Buscador] = None) -> ResultadoCalculo:
    """
    Fluxo completo de um pedido:
    - valida entrada (antes de qualquer I/O)
    - escolhe a série pelo cenário
    - busca/projeta as observações mensais
    - compõe índice + taxa fixa mês a mês
    Qualquer erro encerra o pedido sem resultado parcial.
    """
    vp, inicio, fim = validar_entrada(valor_inicial, data_inicial, data_final,
                                      permitir_futuro=permitir_futuro, hoje=hoje)
    taxa_fixa_aa = normalizar_taxa_fixa(taxa_fixa_aa)
    serie = selecionar_serie(cenario)

    observacoes = resolver_observacoes(serie.codigo, inicio, fim, buscar=buscar)

    # Somente taxa fixa: a variação do índice exibida é 0 por definição.
    variacao = variacao_acumulada(observacoes) if serie.usar_indice else 0.0
    vf = valor_corrigido(vp, observacoes, taxa_fixa_aa, serie.usar_indice)
    evolucao = evolucao_investimento(vp, observacoes, taxa_fixa_aa, serie.usar_indice)

    logger.debug("Cálculo %s: %d meses, VF=%.2f", Cenario(cenario).value, len(evolucao), vf)
    return ResultadoCalculo(
        valor_inicial=vp,
        valor_final=vf,
        variacao_total_pct=variacao,
        evolucao=tuple(evolucao),
        cenario=Cenario(cenario).value,
        rotulo=serie.rotulo,
        taxa_fixa_aa=taxa_fixa_aa,
        data_inicial=inicio,
        data_final=fim,
    )
