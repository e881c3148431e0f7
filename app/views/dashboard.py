import pandas as pd
import streamlit as st

from app.services.consultas import carregar_todos_experimentos
from app.utils.ui_components import formatar_data, renderizar_cabecalho
from laboratorio.dominio import rotulo_status
from laboratorio.resumo import resumir_experimentos


def renderizar(banco, usuario):
    renderizar_cabecalho("Dashboard", "Visão geral dos experimentos de inovação em queijos")

    with st.spinner("Carregando..."):
        experimentos = carregar_todos_experimentos(banco)

    resumo = resumir_experimentos(experimentos)

    with st.container(border=True):
        kpi1, kpi2, kpi3, kpi4 = st.columns(4)
        kpi1.metric("Total de Experimentos", resumo["total"])
        kpi2.metric("Em Andamento", resumo["em_andamento"])
        kpi3.metric("Concluídos", resumo["concluidos"])
        kpi4.metric("Nota Média", f"{resumo['nota_media']:.1f}")

    st.markdown("###")
    st.subheader("Experimentos Recentes")

    if not resumo["recentes"]:
        with st.container(border=True):
            st.markdown("Nenhum experimento cadastrado ainda")
            st.caption("Crie seu primeiro experimento para começar")
        return

    df = pd.DataFrame([
        {
            "Nome": exp.get("name", ""),
            "Objetivo": exp.get("objective", ""),
            "Status": rotulo_status(exp.get("status")),
            "Data": formatar_data(exp.get("created_at")),
        }
        for exp in resumo["recentes"]
    ])

    st.dataframe(
        df,
        width='stretch',
        hide_index=True,
        column_config={
            "Objetivo": st.column_config.TextColumn("Objetivo", width="large"),
        }
    )
