from datetime import date

import pytest

from finance.cenarios import (
    Cenario, SerieSelecionada, SGS_IPCA_MENSAL, SGS_SELIC_MENSAL, selecionar_serie
)
from finance.erros import DadosIndisponiveis, EntradaInvalida
from services.series import parse_registro, resolver_observacoes


def _fake(registros):
    chamadas = []
    def buscar(code, data_inicial, data_final):
        chamadas.append((code, data_inicial, data_final))
        return registros
    buscar.chamadas = chamadas
    return buscar


def test_selecionar_serie_tabela():
    assert selecionar_serie(Cenario.IPCA_MAIS_FIXA) == SerieSelecionada(SGS_IPCA_MENSAL, "IPCA", True)
    assert selecionar_serie(Cenario.SELIC_MAIS_FIXA) == SerieSelecionada(SGS_SELIC_MENSAL, "SELIC", True)
    # somente taxa fixa ainda usa o calendário do IPCA
    assert selecionar_serie(Cenario.SOMENTE_FIXA) == SerieSelecionada(SGS_IPCA_MENSAL, None, False)

def test_selecionar_serie_por_texto():
    assert selecionar_serie("selic_mais_fixa").rotulo == "SELIC"

def test_selecionar_serie_desconhecida():
    with pytest.raises(EntradaInvalida):
        selecionar_serie("cdi")

def test_parse_registro_virgula_decimal():
    obs = parse_registro({"data": "01/03/2024", "valor": "0,16"})
    assert obs.data == date(2024, 3, 1)
    assert abs(obs.taxa - 0.16) < 1e-12
    assert obs.projetada is False

def test_parse_registro_invalido():
    with pytest.raises(DadosIndisponiveis):
        parse_registro({"data": "2024-03-01", "valor": "0.16"})

def test_resolver_cobertura_completa_sem_projecao():
    buscar = _fake([{"data": "01/02/2024", "valor": "0.83"}, {"data": "01/03/2024", "valor": "0.16"}])
    obs = resolver_observacoes(433, date(2024, 1, 15), date(2024, 3, 1), buscar=buscar)
    assert [o.taxa for o in obs] == [0.83, 0.16]
    assert not any(o.projetada for o in obs)
    assert buscar.chamadas == [(433, date(2024, 1, 15), date(2024, 3, 1))]

def test_resolver_mesmo_mes_nao_projeta():
    buscar = _fake([{"data": "01/03/2024", "valor": "0.16"}])
    obs = resolver_observacoes(433, date(2024, 2, 15), date(2024, 3, 20), buscar=buscar)
    assert len(obs) == 1

def test_resolver_projeta_faltantes_pela_media():
    buscar = _fake([
        {"data": "01/01/2024", "valor": "0.42"},
        {"data": "01/02/2024", "valor": "0.83"},
        {"data": "01/03/2024", "valor": "0.16"},
    ])
    obs = resolver_observacoes(433, date(2023, 12, 15), date(2024, 6, 1), buscar=buscar)
    assert [o.data for o in obs] == [date(2024, m, 1) for m in range(1, 7)]
    proj = [o for o in obs if o.projetada]
    assert len(proj) == 3
    media = (0.42 + 0.83 + 0.16) / 3
    assert all(abs(o.taxa - media) < 1e-12 for o in proj)
    assert obs[:3] == [o for o in obs if not o.projetada]

@pytest.mark.parametrize("vazio", [[], None])
def test_resolver_sem_dados(vazio):
    with pytest.raises(DadosIndisponiveis):
        resolver_observacoes(433, date(2024, 1, 1), date(2024, 3, 1), buscar=_fake(vazio))

def test_resolver_ordena_por_data():
    buscar = _fake([{"data": "01/03/2024", "valor": "0.16"}, {"data": "01/02/2024", "valor": "0.83"}])
    obs = resolver_observacoes(433, date(2024, 1, 15), date(2024, 3, 1), buscar=buscar)
    assert [o.data for o in obs] == [date(2024, 2, 1), date(2024, 3, 1)]
    assert not any(o.projetada for o in obs)

def test_resolver_mes_repetido():
    buscar = _fake([{"data": "01/02/2024", "valor": "0.83"}, {"data": "01/02/2024", "valor": "0.83"}])
    with pytest.raises(DadosIndisponiveis, match="repetidos"):
        resolver_observacoes(433, date(2024, 1, 15), date(2024, 3, 1), buscar=buscar)
