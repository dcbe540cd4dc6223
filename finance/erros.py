# finance/erros.py
from __future__ import annotations


class ErroCorrecao(Exception):
    """Base dos erros de um cálculo. Qualquer um deles encerra o pedido inteiro."""


class EntradaInvalida(ErroCorrecao, ValueError):
    """Valor, datas ou período inválidos. Levantado antes de qualquer consulta à API."""


class DadosIndisponiveis(ErroCorrecao, RuntimeError):
    """Série do SGS vazia ou falha na consulta. Não há nova tentativa automática."""


class ErroCalculo(ErroCorrecao, ArithmeticError):
    pass
