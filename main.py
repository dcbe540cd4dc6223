# main.py
from __future__ import annotations
import logging
import os
from datetime import date, datetime

from finance.cenarios import Cenario, NOMES_CENARIO
from finance.erros import ErroCorrecao
from finance.validacao import periodo_padrao
from simulate import calcular
from report.formatacao import formatar_moeda, formatar_percentual, formatar_data, formatar_mes
from report.report import salvar_csv, grafico_png, html_relatorio, pdf_relatorio


# =========================
# Helpers de entrada
# =========================
def _input_float(msg: str, default: float) -> float:
    raw = input(f"{msg} [{default}]: ").strip()
    return float(raw.replace(",", ".") or default)

def _input_bool(msg: str, default: bool=False) -> bool:
    raw = input(f"{msg} [{'s' if default else 'n'}]: ").strip().lower()
    if raw == "":
        return default
    return raw.startswith("s")

def _input_date(msg: str, default: date) -> date:
    raw = input(f"{msg} [{formatar_data(default)}]: ").strip()
    if not raw:
        return default
    return datetime.strptime(raw, "%d/%m/%Y").date()

def _input_cenario() -> Cenario:
    opcoes = list(Cenario)
    for i, c in enumerate(opcoes, start=1):
        print(f"  {i}) {NOMES_CENARIO[c]}")
    raw = input("Cenário [1]: ").strip()
    idx = int(raw or 1) - 1
    if not 0 <= idx < len(opcoes):
        raise ValueError("Cenário inválido.")
    return opcoes[idx]


# =========================
# Menu
# =========================
def menu():
    print("\n=== Calculadora de Correção (API SGS/BCB: IPCA / SELIC + taxa fixa) ===")
    print("1) Calcular correção")
    print("2) Relatório completo (HTML + CSV + PNG + PDF)")
    print("0) Sair")


def _ler_parametros() -> dict:
    print("\n-- Parâmetros --")
    inicio_padrao, fim_padrao = periodo_padrao()
    cenario = _input_cenario()
    vp = _input_float("Valor do investimento (R$)", 10000.0)
    taxa_fixa_aa = _input_float("Taxa fixa (% a.a., ex.: 6 = 6%)", 6.0)
    data_inicial = _input_date("Data inicial (dd/mm/aaaa)", inicio_padrao)
    data_final = _input_date("Data final (dd/mm/aaaa)", fim_padrao)
    permitir_futuro = _input_bool("Permitir data final no futuro (projeção pela média 12m)?", False)
    return dict(valor_inicial=vp, data_inicial=data_inicial, data_final=data_final,
                taxa_fixa_aa=taxa_fixa_aa, cenario=cenario, permitir_futuro=permitir_futuro)


def _mostrar_resultado(res) -> None:
    print("\nResultado:")
    print(f"- Período: {formatar_data(res.data_inicial)} - {formatar_data(res.data_final)}")
    print(f"- Valor inicial: {formatar_moeda(res.valor_inicial)}")
    print(f"- Valor final:   {formatar_moeda(res.valor_final)}")
    print(f"- Variação {res.rotulo or 'do índice'}: {formatar_percentual(res.variacao_total_pct)}")
    print(f"- Ganho total:   {formatar_percentual(res.ganho_total_pct)}")
    if res.meses_projetados:
        print(f"- Meses projetados (média 12m): {res.meses_projetados}")


# =========================
# Ações do menu
# =========================
def acao_calcular():
    params = _ler_parametros()
    res = calcular(**params)
    _mostrar_resultado(res)
    print("\nEvolução mensal:")
    for p in res.evolucao:
        marca = " (proj.)" if p.projetada else ""
        print(f"  {formatar_mes(p.data)}{marca}: {formatar_percentual(p.taxa, 4)} a.m. | "
              f"índice={formatar_moeda(p.valor_indice)} | combinado={formatar_moeda(p.valor_combinado)}")


def acao_relatorio():
    params = _ler_parametros()
    res = calcular(**params)
    _mostrar_resultado(res)

    outdir = "saida_relatorio"
    os.makedirs(outdir, exist_ok=True)
    base = datetime.now().strftime("%Y%m%d_%H%M%S")
    csv_path = os.path.join(outdir, f"evolucao_{base}.csv")
    png_path = os.path.join(outdir, f"grafico_{base}.png")
    html_path = os.path.join(outdir, f"relatorio_{base}.html")
    pdf_path = os.path.join(outdir, f"relatorio_{base}.pdf")

    salvar_csv(csv_path, res)
    grafico_png(png_path, res)
    html_relatorio(html_path, res, png_path, csv_path)
    pdf_relatorio(pdf_path, res, png_path)

    print("\nArquivos gerados:")
    print(f"• CSV:  {csv_path}")
    print(f"• PNG:  {png_path}")
    print(f"• HTML: {html_path}")
    print(f"• PDF:  {pdf_path}")


# =========================
# Loop principal
# =========================
def main():
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    while True:
        menu()
        op = input("Escolha: ").strip()
        try:
            if op == "1":
                acao_calcular()
            elif op == "2":
                acao_relatorio()
            elif op == "0":
                print("Até mais!")
                break
            else:
                print("Opção inválida.")
        except (ErroCorrecao, ValueError) as e:
            print(f"Erro: {e}")


if __name__ == "__main__":
    main()
