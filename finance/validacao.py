# finance/validacao.py
from __future__ import annotations
import math
from datetime import date, datetime
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from .erros import EntradaInvalida

DATA_MINIMA = date(1980, 1, 1)   # início do IPCA mensal no SGS


def _como_data(valor) -> Optional[date]:
    if valor is None or valor == "":
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    try:
        return date.fromisoformat(str(valor))
    except ValueError:
        raise EntradaInvalida(f"Data inválida: {valor!r} (use AAAA-MM-DD).") from None


def validar_entrada(valor_inicial, data_inicial, data_final,
                    permitir_futuro: bool = False, hoje: Optional[date] = None) -> Tuple[float, date, date]:
    """
    Regras do formulário, aplicadas antes de qualquer consulta à API.
    Retorna (valor, data_inicial, data_final) já convertidos.
    """
    try:
        valor = float(valor_inicial)
    except (TypeError, ValueError):
        valor = 0.0
    if not math.isfinite(valor) or valor <= 0:
        raise EntradaInvalida("Por favor, insira um valor de investimento válido (maior que zero).")

    inicio = _como_data(data_inicial)
    fim = _como_data(data_final)
    if inicio is None or fim is None:
        raise EntradaInvalida("Por favor, selecione as datas inicial e final.")
    if inicio >= fim:
        raise EntradaInvalida("A data inicial deve ser anterior à data final.")

    hoje = hoje or date.today()
    if not permitir_futuro and fim > hoje:
        raise EntradaInvalida("A data final não pode ser no futuro.")
    if inicio < DATA_MINIMA:
        raise EntradaInvalida("A data inicial deve ser posterior a janeiro de 1980.")
    return valor, inicio, fim


def periodo_padrao(hoje: Optional[date] = None) -> Tuple[date, date]:
    """Último ano até hoje (valores iniciais do formulário)."""
    hoje = hoje or date.today()
    return hoje - relativedelta(years=1), hoje


def normalizar_taxa_fixa(taxa_fixa_aa) -> float:
    """Taxa fixa % a.a.; vazia, não numérica ou não finita vale 0 (campo opcional)."""
    if taxa_fixa_aa is None:
        return 0.0
    try:
        taxa = float(str(taxa_fixa_aa).replace(",", "."))
    except ValueError:
        return 0.0
    return taxa if math.isfinite(taxa) else 0.0
