# report/formatacao.py
from __future__ import annotations
from datetime import date


def _pt_br(valor: float, casas: int = 2) -> str:
    # 1,234.56 -> 1.234,56
    return f"{valor:,.{casas}f}".replace(",", "X").replace(".", ",").replace("X", ".")


def formatar_moeda(valor: float) -> str:
    """R$ 1.234,56"""
    return f"R$ {_pt_br(valor)}"


def formatar_percentual(valor_pct: float, casas: int = 2) -> str:
    """Recebe em % (1.5 = 1,5%)."""
    return f"{_pt_br(valor_pct, casas)}%"


def formatar_data(d: date) -> str:
    return d.strftime("%d/%m/%Y")


def formatar_mes(d: date) -> str:
    return d.strftime("%m/%Y")
