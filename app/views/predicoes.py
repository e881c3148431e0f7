import streamlit as st

from app.services.consultas import carregar_experimentos_predicao, gerar_predicao
from app.utils.ui_components import exibir_barra, formatar_moeda, renderizar_cabecalho
from laboratorio.analise import NOTA_MAXIMA
from laboratorio.predicao import barras_notas, fracao_confianca


def _exibir_ingredientes(titulo, ingredientes):
    st.markdown(f"**{titulo}**")
    for ing in ingredientes:
        c1, c2 = st.columns([2, 1])
        c1.markdown(ing.get("name", ""))
        c1.caption(ing.get("quantity", ""))
        c2.markdown(f":green[**{formatar_moeda(ing.get('cost'))}**]")


def _exibir_predicao(predicao):
    with st.container(border=True):
        c1, c2 = st.columns([3, 1])
        c1.subheader("Nível de Confiança da IA")
        c2.markdown(f"## {predicao['confidence_level']}%")
        st.progress(fracao_confianca(predicao))

    col_notas, col_ing = st.columns(2)

    with col_notas:
        with st.container(border=True):
            st.subheader("Notas Previstas")
            for rotulo, valor, fracao in barras_notas(predicao):
                exibir_barra(rotulo, f"{valor} / {NOTA_MAXIMA:.1f}", fracao)

    with col_ing:
        with st.container(border=True):
            st.subheader("Ingredientes Recomendados")
            recomendados = predicao.get("recommended_ingredients", {})
            _exibir_ingredientes("Principais", recomendados.get("primary", []))
            if recomendados.get("alternatives"):
                _exibir_ingredientes("Alternativos", recomendados["alternatives"])

    st.info(f"**Análise da IA**  \n{predicao.get('reasoning', '')}")


def renderizar(banco, usuario):
    renderizar_cabecalho("Predições IA", "Recomendações inteligentes para otimização de fórmulas")

    experimentos = carregar_experimentos_predicao(banco)
    nomes = {exp["id"]: exp.get("name", "") for exp in experimentos}

    with st.container(border=True):
        st.subheader("Gerador de Recomendações")
        st.caption("Selecione um experimento em planejamento para receber sugestões otimizadas pela IA")

        c1, c2 = st.columns(2, vertical_alignment="bottom")
        experimento_id = c1.selectbox(
            "Selecione o Experimento",
            options=list(nomes),
            format_func=nomes.get,
            index=None,
            placeholder="Escolha um experimento...",
            key="experimento_predicao",
        )
        gerar = c2.button(
            "Gerar Predição", type="primary", disabled=not experimento_id, use_container_width=True
        )

    if gerar:
        with st.spinner("Gerando..."):
            predicao = gerar_predicao(banco, experimento_id)
        if predicao is None:
            st.error("Não foi possível gerar a predição.")
        else:
            st.session_state["predicao_atual"] = predicao

    if st.session_state.get("predicao_atual"):
        _exibir_predicao(st.session_state["predicao_atual"])
