# report/report.py
from __future__ import annotations
import csv, os
from datetime import datetime
import matplotlib.pyplot as plt
import pandas as pd

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm
from reportlab.lib.utils import ImageReader

from finance.cenarios import Cenario, NOMES_CENARIO
from finance.modelos import ResultadoCalculo
from .formatacao import formatar_moeda, formatar_percentual, formatar_data, formatar_mes


def rotulos_curvas(res: ResultadoCalculo) -> dict:
    """
    Curvas exibidas no gráfico ({campo: legenda}).
    - índice sozinho sempre que houver índice
    - combinada só com taxa fixa > 0, ou no cenário somente taxa fixa
    """
    curvas = {}
    if res.rotulo:
        curvas["valor_indice"] = f"Somente {res.rotulo}"
        if res.taxa_fixa_aa > 0:
            curvas["valor_combinado"] = f"{res.rotulo} + {res.taxa_fixa_aa:.2f}% a.a."
    else:
        curvas["valor_combinado"] = f"Taxa fixa {res.taxa_fixa_aa:.2f}% a.a."
    return curvas


def tabela_evolucao(res: ResultadoCalculo) -> pd.DataFrame:
    df = pd.DataFrame([{
        "Data": p.data,
        "Taxa do índice (% a.m.)": p.taxa,
        "Somente índice (R$)": p.valor_indice,
        "Combinado (R$)": p.valor_combinado,
        "Projetado": p.projetada,
    } for p in res.evolucao])
    return df


def salvar_csv(csv_path: str, res: ResultadoCalculo) -> None:
    header = ["Mes", "Data", "Taxa indice (% a.m.)", "Somente indice", "Combinado", "Projetado"]
    rows = []
    for mes, p in enumerate(res.evolucao, start=1):
        rows.append([mes, formatar_data(p.data), round(p.taxa, 4), round(p.valor_indice, 2),
                     round(p.valor_combinado, 2), "sim" if p.projetada else "não"])
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter=";")
        w.writerow(header); w.writerows(rows)


def figura_evolucao(res: ResultadoCalculo):
    datas = [p.data for p in res.evolucao]
    fig = plt.figure()
    for campo, legenda in rotulos_curvas(res).items():
        plt.plot(datas, [getattr(p, campo) for p in res.evolucao], label=legenda)
    projetadas = [p.data for p in res.evolucao if p.projetada]
    if projetadas:
        # faixa projetada começa no último mês publicado
        idx = len(datas) - len(projetadas)
        plt.axvspan(datas[max(idx - 1, 0)], datas[-1], alpha=0.15, label="Projeção")
    plt.title("Evolução do investimento (mês a mês)")
    plt.xlabel("Mês"); plt.ylabel("Saldo (R$)")
    plt.legend(); plt.tight_layout()
    return fig


def grafico_png(png_path: str, res: ResultadoCalculo) -> None:
    fig = figura_evolucao(res)
    fig.savefig(png_path, dpi=150); plt.close(fig)


def html_relatorio(html_path: str, res: ResultadoCalculo, png_path: str, csv_path: str) -> None:
    linhas = "".join([
        f"<tr><td>{formatar_mes(p.data)}{' *' if p.projetada else ''}</td>"
        f"<td>{formatar_percentual(p.taxa, 4)}</td><td>{formatar_moeda(p.valor_indice)}</td>"
        f"<td>{formatar_moeda(p.valor_combinado)}</td></tr>"
        for p in res.evolucao
    ])
    nome_cenario = NOMES_CENARIO[Cenario(res.cenario)] if res.cenario else ""
    html = f"""<!doctype html>
<html lang="pt-br"><head><meta charset="utf-8">
<title>Relatório – Correção de Investimento</title>
<style>
body{{font-family:Arial,Helvetica,sans-serif;margin:2rem}}
h1,h2{{margin:.3rem 0}} small{{color:#555}}
table{{border-collapse:collapse;width:100%;margin:1rem 0}}
th,td{{border:1px solid #ddd;padding:8px;text-align:right}}
th{{background:#f2f2f2}} td:first-child,th:first-child{{text-align:left}}
blockquote{{background:#fafafa;border-left:4px solid #ccc;padding:.5rem 1rem}}
</style></head><body>
<h1>Relatório – Correção de Investimento</h1>
<small>Gerado em {datetime.now().strftime("%d/%m/%Y %H:%M:%S")}</small>

<h2>Parâmetros</h2>
<table>
<tr><th>Cenário</th><td>{nome_cenario}</td></tr>
<tr><th>Período</th><td>{formatar_data(res.data_inicial)} – {formatar_data(res.data_final)}</td></tr>
<tr><th>Valor inicial</th><td>{formatar_moeda(res.valor_inicial)}</td></tr>
<tr><th>Taxa fixa</th><td>{formatar_percentual(res.taxa_fixa_aa)} a.a.</td></tr>
</table>

<h2>Resultado</h2>
<table>
<tr><th>Valor final</th><td><b>{formatar_moeda(res.valor_final)}</b></td></tr>
<tr><th>Variação do índice</th><td>{formatar_percentual(res.variacao_total_pct)}</td></tr>
<tr><th>Ganho total</th><td>{formatar_percentual(res.ganho_total_pct)}</td></tr>
<tr><th>Meses projetados</th><td>{res.meses_projetados}</td></tr>
</table>

<h2>Gráfico</h2>
<img src="{os.path.basename(png_path)}" alt="Gráfico" style="max-width:100%;height:auto"/>

<h2>Evolução mensal</h2>
<table>
<tr><th>Mês</th><th>Taxa do índice (a.m.)</th><th>Somente índice</th><th>Combinado</th></tr>
{linhas}
</table>

<h2>CSV</h2>
<p><a href="{os.path.basename(csv_path)}">{os.path.basename(csv_path)}</a></p>

<blockquote><b>Notas:</b><br>
1) Taxa fixa convertida para mensal por divisão simples (a.a./12) e composta mês a mês com o índice.<br>
2) (*) Meses ainda não publicados no SGS/BCB, projetados pela média das últimas 12 taxas.<br>
3) No cenário somente taxa fixa, a variação do índice é exibida como 0.</blockquote>
</body></html>"""
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(html)


def pdf_relatorio(pdf_path: str, res: ResultadoCalculo, png_path: str) -> None:
    """
    Gera PDF simples com sumário, evolução mensal e o gráfico.
    """
    c = canvas.Canvas(pdf_path, pagesize=A4)
    w, h = A4
    x, y = 2*cm, h - 2*cm

    def draw_line(txt: str, dy=0.6*cm, bold=False):
        nonlocal y
        y -= dy
        if bold:
            c.setFont("Helvetica-Bold", 11)
        else:
            c.setFont("Helvetica", 10)
        c.drawString(x, y, txt)

    c.setFont("Helvetica-Bold", 14)
    c.drawString(x, y, "Relatório – Correção de Investimento")
    c.setFont("Helvetica", 9)
    c.drawRightString(w-2*cm, y, datetime.now().strftime("%d/%m/%Y %H:%M:%S"))

    nome_cenario = NOMES_CENARIO[Cenario(res.cenario)] if res.cenario else ""
    draw_line(f"Cenário: {nome_cenario} | Taxa fixa: {formatar_percentual(res.taxa_fixa_aa)} a.a.", dy=1.0*cm)
    draw_line(f"Período: {formatar_data(res.data_inicial)} – {formatar_data(res.data_final)}")
    draw_line(f"Valor inicial: {formatar_moeda(res.valor_inicial)}")

    draw_line("Resultado:", dy=0.8*cm, bold=True)
    draw_line(f"Valor final: {formatar_moeda(res.valor_final)}")
    draw_line(f"Variação do índice: {formatar_percentual(res.variacao_total_pct)} | "
              f"Ganho total: {formatar_percentual(res.ganho_total_pct)}")
    if res.meses_projetados:
        draw_line(f"Meses projetados (média 12m): {res.meses_projetados}")

    # Tabela mensal
    draw_line("Evolução mensal:", dy=0.8*cm, bold=True)
    c.setFont("Helvetica-Bold", 9)
    y -= 0.5*cm
    c.drawString(x, y, "Mês")
    c.drawRightString(x+6*cm, y, "Taxa (a.m.)")
    c.drawRightString(x+11*cm, y, "Somente índice")
    c.drawRightString(w-2*cm, y, "Combinado")

    c.setFont("Helvetica", 9)
    for p in res.evolucao:
        y -= 0.5*cm
        if y < 2*cm:
            c.showPage()
            c.setFont("Helvetica", 9)
            y = h - 2*cm
        c.drawString(x, y, formatar_mes(p.data) + (" *" if p.projetada else ""))
        c.drawRightString(x+6*cm, y, formatar_percentual(p.taxa, 4))
        c.drawRightString(x+11*cm, y, formatar_moeda(p.valor_indice))
        c.drawRightString(w-2*cm, y, formatar_moeda(p.valor_combinado))

    # Gráfico
    if os.path.exists(png_path):
        c.showPage()
        c.setFont("Helvetica-Bold", 12)
        c.drawString(2*cm, h - 2*cm, "Gráfico – Evolução")
        img = ImageReader(png_path)
        # largura útil ~17cm
        img_w = 17*cm
        c.drawImage(img, 2*cm, h - 2*cm - 12*cm, width=img_w, height=12*cm, preserveAspectRatio=True, anchor='n')

    c.save()
