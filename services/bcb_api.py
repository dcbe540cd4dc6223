# services/bcb_api.py
from __future__ import annotations
import logging
import os
import requests
from typing import Dict, List
from datetime import date

from finance.erros import DadosIndisponiveis

logger = logging.getLogger(__name__)

SGS_BASE = "https://api.bcb.gov.br/dados/serie/bcdata.sgs.{code}/dados"
SGS_TIMEOUT = float(os.getenv("SGS_TIMEOUT", "10"))  # segundos


def formatar_data_api(d: date) -> str:
    return d.strftime("%d/%m/%Y")


def buscar_serie(code: int, data_inicial: date, data_final: date) -> List[Dict[str, str]]:
    """
    Registros da série SGS no período, em ordem cronológica:
    [{"data": "dd/mm/aaaa", "valor": "0.53"}, ...]
    Falha de rede, HTTP ou JSON vira DadosIndisponiveis (sem nova tentativa).
    """
    url = SGS_BASE.format(code=code)
    params = {
        "formato": "json",
        "dataInicial": formatar_data_api(data_inicial),
        "dataFinal": formatar_data_api(data_final),
    }
    logger.debug("GET %s %s", url, params)
    try:
        r = requests.get(url, params=params, timeout=SGS_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("Falha ao consultar série %s: %s", code, e)
        raise DadosIndisponiveis(
            f"Não foi possível obter os dados da série {code}. Verifique sua conexão e tente novamente."
        ) from e
    if not data:
        logger.warning("Série %s sem dados entre %s e %s", code, params["dataInicial"], params["dataFinal"])
        raise DadosIndisponiveis("Nenhum dado disponível para o período selecionado.")
    return data
