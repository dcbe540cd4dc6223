# app.py
from __future__ import annotations
import os, tempfile
from datetime import datetime

import streamlit as st

# Módulos do projeto
from finance.cenarios import Cenario, NOMES_CENARIO
from finance.erros import ErroCorrecao
from finance.validacao import DATA_MINIMA, periodo_padrao
from simulate import calcular
from report.formatacao import formatar_moeda, formatar_percentual, formatar_data
from report.report import (
    figura_evolucao, tabela_evolucao, salvar_csv, grafico_png, html_relatorio, pdf_relatorio
)

st.set_page_config(page_title="Calculadora de Correção", layout="wide")

# ===================== layout geral =====================
st.title("🧮 Calculadora de Correção")
st.caption("IPCA ou SELIC (API SGS/BCB) + taxa fixa, com projeção pela média de 12 meses quando faltam dados.")

with st.sidebar:
    st.header("⚙️ Preferências")
    permitir_futuro = st.toggle("Permitir data final no futuro (projeção)", value=False)
    st.caption("Meses sem IPCA/SELIC publicado usam a média das últimas 12 taxas.")

inicio_padrao, fim_padrao = periodo_padrao()

with st.form("calc_form"):
    cenario = st.radio("Cenário", list(Cenario), format_func=lambda c: NOMES_CENARIO[c], horizontal=True)
    c1, c2, c3, c4 = st.columns(4)
    vp = c1.number_input("Valor do investimento (R$)", min_value=0.0, value=10000.0, step=100.0)
    taxa_fixa_aa = c2.number_input("Taxa fixa (% a.a.)", value=6.0, step=0.5, format="%.2f")
    data_inicial = c3.date_input("Data inicial", value=inicio_padrao, min_value=DATA_MINIMA, format="DD/MM/YYYY")
    data_final = c4.date_input("Data final", value=fim_padrao, min_value=DATA_MINIMA, format="DD/MM/YYYY")
    submitted = st.form_submit_button("Calcular")

if submitted:
    # resultado anterior é descartado a cada novo pedido
    st.session_state.pop("_resultado", None)
    try:
        with st.spinner("Consultando o SGS/BCB..."):
            st.session_state["_resultado"] = calcular(vp, data_inicial, data_final, taxa_fixa_aa,
                                                      cenario, permitir_futuro=permitir_futuro)
    except ErroCorrecao as e:
        st.error(str(e))

res = st.session_state.get("_resultado")
if res is not None:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Valor inicial", formatar_moeda(res.valor_inicial))
    col2.metric("Valor final", formatar_moeda(res.valor_final))
    col3.metric(f"Variação {res.rotulo or 'do índice'}", formatar_percentual(res.variacao_total_pct))
    col4.metric("Ganho total", formatar_percentual(res.ganho_total_pct),
                f"{formatar_percentual(res.taxa_fixa_aa)} a.a. fixa")
    st.caption(f"Período: {formatar_data(res.data_inicial)} – {formatar_data(res.data_final)}")
    if res.meses_projetados:
        st.info(f"{res.meses_projetados} mês(es) projetado(s) pela média das últimas 12 taxas.")

    st.pyplot(figura_evolucao(res))
    st.dataframe(tabela_evolucao(res), use_container_width=True)

    # gerar arquivos em pasta temporária e oferecer downloads
    with tempfile.TemporaryDirectory() as tmp:
        base = datetime.now().strftime("%Y%m%d_%H%M%S")
        csv_path = os.path.join(tmp, f"evolucao_{base}.csv")
        png_path = os.path.join(tmp, f"grafico_{base}.png")
        html_path = os.path.join(tmp, f"relatorio_{base}.html")
        pdf_path = os.path.join(tmp, f"relatorio_{base}.pdf")

        salvar_csv(csv_path, res)
        grafico_png(png_path, res)
        html_relatorio(html_path, res, png_path, csv_path)
        pdf_relatorio(pdf_path, res, png_path)

        # ler bytes
        csv_bytes = open(csv_path, "rb").read()
        png_bytes = open(png_path, "rb").read()
        html_bytes = open(html_path, "rb").read()
        pdf_bytes = open(pdf_path, "rb").read()

    cdl1, cdl2, cdl3, cdl4 = st.columns(4)
    cdl1.download_button("⬇️ CSV", data=csv_bytes, file_name=f"evolucao_{base}.csv", mime="text/csv")
    cdl2.download_button("⬇️ PNG", data=png_bytes, file_name=f"grafico_{base}.png", mime="image/png")
    cdl3.download_button("⬇️ HTML", data=html_bytes, file_name=f"relatorio_{base}.html", mime="text/html")
    cdl4.download_button("⬇️ PDF", data=pdf_bytes, file_name=f"relatorio_{base}.pdf", mime="application/pdf")
