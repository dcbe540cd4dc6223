import os, tempfile
from datetime import date

from finance.modelos import Observacao, ResultadoCalculo
from finance.tvm import evolucao_investimento, valor_corrigido, variacao_acumulada
from report.formatacao import formatar_moeda, formatar_percentual
from report.report import (
    rotulos_curvas, figura_evolucao, tabela_evolucao, salvar_csv, grafico_png, html_relatorio, pdf_relatorio
)

def _fake_resultado(rotulo="IPCA", taxa_fixa_aa=6.0, cenario="ipca_mais_fixa"):
    obs = [Observacao(date(2024, m, 1), 0.4) for m in range(1, 7)]
    obs += [Observacao(date(2024, m, 1), 0.35, projetada=True) for m in range(7, 10)]
    ev = evolucao_investimento(1000.0, obs, taxa_fixa_aa)
    return ResultadoCalculo(
        valor_inicial=1000.0, valor_final=valor_corrigido(1000.0, obs, taxa_fixa_aa),
        variacao_total_pct=variacao_acumulada(obs), evolucao=tuple(ev), cenario=cenario,
        rotulo=rotulo, taxa_fixa_aa=taxa_fixa_aa, data_inicial=date(2023, 12, 15), data_final=date(2024, 9, 1),
    )

def test_formatacao_pt_br():
    assert formatar_moeda(1234567.891) == "R$ 1.234.567,89"
    assert formatar_percentual(1.5) == "1,50%"

def test_rotulos_curvas():
    assert list(rotulos_curvas(_fake_resultado())) == ["valor_indice", "valor_combinado"]
    assert list(rotulos_curvas(_fake_resultado(taxa_fixa_aa=0.0))) == ["valor_indice"]
    assert list(rotulos_curvas(_fake_resultado(rotulo=None, cenario="somente_fixa"))) == ["valor_combinado"]

def test_tabela_evolucao():
    df = tabela_evolucao(_fake_resultado())
    assert len(df) == 9
    assert df["Projetado"].sum() == 3

def test_figura_evolucao_curvas_e_projecao():
    import matplotlib.pyplot as plt
    fig = figura_evolucao(_fake_resultado())
    ax = fig.axes[0]
    assert [l.get_label() for l in ax.get_lines()] == ["Somente IPCA", "IPCA + 6.00% a.a."]
    assert len(ax.patches) == 1  # faixa da projeção
    plt.close(fig)

def test_relatorios_arquivos():
    with tempfile.TemporaryDirectory() as d:
        png = os.path.join(d, "g.png")
        html = os.path.join(d, "r.html")
        pdf  = os.path.join(d, "r.pdf")
        csv  = os.path.join(d, "e.csv")
        res = _fake_resultado()
        salvar_csv(csv, res)
        grafico_png(png, res)
        html_relatorio(html, res, png, csv)
        pdf_relatorio(pdf, res, png)
        assert os.path.exists(png) and os.path.getsize(png) > 0
        assert os.path.exists(html) and os.path.getsize(html) > 0
        assert os.path.exists(pdf) and os.path.getsize(pdf) > 0
        with open(csv, encoding="utf-8") as f:
            linhas = f.read().splitlines()
        assert len(linhas) == 10
        assert linhas[-1].endswith(";sim")
