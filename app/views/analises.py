import pandas as pd
import plotly.express as px
import streamlit as st

from app.services.consultas import carregar_experimentos_analise, carregar_tratamentos
from app.utils.ui_components import exibir_barra, formatar_moeda, formatar_percentual, renderizar_cabecalho
from laboratorio.analise import (
    METRICAS,
    NOTA_MAXIMA,
    largura_barra,
    limite_grafico,
    montar_analise,
    rotulo_consistencia,
)

CORES_TRATAMENTOS = ["#2563EB", "#16A34A", "#9333EA"]


def _exibir_vencedor(melhor):
    consistencia = rotulo_consistencia(melhor["std_dev"])
    st.success(
        f"**Tratamento Vencedor: {melhor['treatment_name']}**  \n"
        f"Nota geral média: **{melhor['avg_overall']:.2f}** / {NOTA_MAXIMA:.1f} "
        f"com **{melhor['evaluations_count']}** avaliações  \n"
        f"Desvio padrão: **{melhor['std_dev']:.2f}** (consistência {consistencia})"
    )


def _exibir_comparacao(dados):
    with st.container(border=True):
        st.subheader("Comparação de Notas Sensoriais")

        df = pd.DataFrame(dados).melt(
            id_vars="treatment_name", value_vars=list(METRICAS), var_name="Métrica", value_name="Nota"
        )
        df["Métrica"] = df["Métrica"].map(METRICAS)

        fig = px.bar(
            df,
            x="Métrica",
            y="Nota",
            color="treatment_name",
            barmode="group",
            range_y=[0, limite_grafico(dados)],
            color_discrete_sequence=CORES_TRATAMENTOS,
            height=350,
        )
        fig.update_layout(legend_title="Tratamento", xaxis_title=None)
        st.plotly_chart(fig, width='stretch')

        for metrica, rotulo in METRICAS.items():
            st.markdown(f"**{rotulo}**")
            for linha in dados:
                exibir_barra(linha["treatment_name"], f"{linha[metrica]:.2f}", largura_barra(linha[metrica]))


def _exibir_custos(custos):
    with st.container(border=True):
        st.subheader("Análise de Custo")
        for item in custos:
            with st.container(border=True):
                c1, c2 = st.columns([2, 1])
                c1.markdown(f"**{item['name']}**")
                c2.markdown(f":green[**{formatar_moeda(item['total_cost'])}**]")
                c1.caption("ROI (Nota/Custo)")
                c2.markdown(f"**{formatar_percentual(item['roi'])}**")


def _exibir_consistencia(dados):
    with st.container(border=True):
        st.subheader("Consistência das Avaliações")
        for linha in dados:
            c1, c2 = st.columns([2, 1])
            c1.markdown(f"**{linha['treatment_name']}**")
            c1.caption(f"{linha['evaluations_count']} avaliações")
            c2.markdown(f"**σ = {linha['std_dev']:.2f}**")
            if rotulo_consistencia(linha["std_dev"]) == "excelente":
                c2.markdown(":green[Excelente]")
            else:
                c2.markdown(":orange[Boa]")

        st.caption(
            "σ (sigma) representa o desvio padrão. "
            "Valores menores indicam maior consistência entre os avaliadores."
        )


def renderizar(banco, usuario):
    renderizar_cabecalho("Análises", "Compare resultados e tome decisões baseadas em dados")

    experimentos = carregar_experimentos_analise(banco)
    nomes = {exp["id"]: exp.get("name", "") for exp in experimentos}

    with st.container(border=True):
        st.subheader("Análise Comparativa")
        st.caption("Selecione um experimento concluído para visualizar os resultados estatísticos")
        experimento_id = st.selectbox(
            "Selecione o Experimento",
            options=list(nomes),
            format_func=nomes.get,
            index=None,
            placeholder="Escolha um experimento...",
            key="experimento_analise",
        )

    if not experimento_id:
        return

    with st.spinner("Carregando análise..."):
        tratamentos = carregar_tratamentos(banco, experimento_id)

    if not tratamentos:
        st.info("Nenhum tratamento encontrado para este experimento.")
        return

    analise = montar_analise(tratamentos)

    _exibir_vencedor(analise["melhor"])

    col_esq, col_dir = st.columns(2)
    with col_esq:
        _exibir_comparacao(analise["dados"])
    with col_dir:
        _exibir_custos(analise["custos"])
        _exibir_consistencia(analise["dados"])
