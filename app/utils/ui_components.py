import math
from datetime import datetime

import streamlit as st

from laboratorio.dominio import Categoria, StatusExperimento, rotulo_categoria, rotulo_status
from app.utils.session_manager import NAVEGACAO, navegar_para

CORES_STATUS = {
    StatusExperimento.PLANEJAMENTO.value: "gray",
    StatusExperimento.EM_ANDAMENTO.value: "orange",
    StatusExperimento.CONCLUIDO.value: "green",
    StatusExperimento.VALIDADO.value: "blue",
}

CORES_CATEGORIA = {
    Categoria.FERMENTO.value: "violet",
    Categoria.COALHO.value: "blue",
    Categoria.SAL.value: "gray",
    Categoria.ADITIVO.value: "orange",
    Categoria.ESTABILIZANTE.value: "green",
    Categoria.OUTROS.value: "red",
}


def configurar_estilo_visual():
    st.markdown("""
        <style>
            [data-testid="stSidebarNav"] {display: none;}
            #MainMenu {visibility: hidden;}
            footer {visibility: hidden;}
            .block-container {padding-top: 2rem;}
        </style>
    """, unsafe_allow_html=True)


def formatar_moeda(valor) -> str:
    return f"R$ {float(valor or 0):.2f}"


def formatar_data(valor) -> str:
    if not valor:
        return ""
    try:
        data = datetime.fromisoformat(str(valor).replace("Z", "+00:00"))
    except ValueError:
        return str(valor)
    return data.strftime("%d/%m/%Y")


def formatar_percentual(valor: float) -> str:
    if math.isnan(valor):
        return "N/D"
    if math.isinf(valor):
        return "∞%" if valor > 0 else "-∞%"
    return f"{valor:.2f}%"


def badge_status(status: str) -> str:
    cor = CORES_STATUS.get(status, CORES_STATUS[StatusExperimento.PLANEJAMENTO.value])
    return f":{cor}[{rotulo_status(status)}]"


def badge_categoria(categoria: str) -> str:
    cor = CORES_CATEGORIA.get(categoria, CORES_CATEGORIA[Categoria.OUTROS.value])
    return f":{cor}[{rotulo_categoria(categoria)}]"


def exibir_barra(rotulo: str, texto_valor: str, fracao: float):
    c1, c2 = st.columns([3, 1])
    c1.caption(rotulo)
    c2.markdown(f"**{texto_valor}**")
    st.progress(fracao)


def renderizar_cabecalho(titulo: str, subtitulo: str):
    st.title(titulo)
    st.markdown(subtitulo)
    st.divider()


def renderizar_sidebar(auth, usuario, tela_atual):
    with st.sidebar:
        st.header("InovaQueijo")
        st.caption("Laboratório Digital para Inovação em Queijos")
        st.divider()

        for tela, nome in NAVEGACAO:
            tipo = "primary" if tela == tela_atual else "secondary"
            if st.button(nome, key=f"nav_{tela.value}", type=tipo, use_container_width=True):
                navegar_para(tela)
                st.rerun()

        st.divider()

        with st.container(border=True):
            st.markdown(f"**{usuario.inicial}** · {usuario.nome_exibicao}")
            st.caption("P&D")

        if st.button("Sair", use_container_width=True):
            auth.sair()
            st.rerun()
