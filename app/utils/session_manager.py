from enum import Enum

import streamlit as st


class Tela(str, Enum):
    DASHBOARD = "dashboard"
    EXPERIMENTOS = "experiments"
    PREDICOES = "predictions"
    ANALISES = "analysis"
    INSUMOS = "ingredients"


NAVEGACAO = [
    (Tela.DASHBOARD, "Dashboard"),
    (Tela.EXPERIMENTOS, "Experimentos"),
    (Tela.PREDICOES, "Predições"),
    (Tela.ANALISES, "Análises"),
    (Tela.INSUMOS, "Biblioteca"),
]

ESTADO_PADRAO = {
    "tela_atual": Tela.DASHBOARD,
}

CHAVES_TELAS = [
    "rascunho_experimento", "mostrar_form_experimento",
    "mostrar_form_insumo", "busca_insumo", "categoria_insumo",
    "experimento_analise", "experimento_predicao", "predicao_atual",
    "msg_sucesso",
]


def inicializar_estado(estado=None):
    estado = st.session_state if estado is None else estado
    for chave, valor in ESTADO_PADRAO.items():
        if chave not in estado:
            estado[chave] = valor


def limpar_sessao(estado=None):
    """Remove usuario e o estado das telas, mantendo apenas os valores padrao."""
    estado = st.session_state if estado is None else estado
    for chave in ["usuario"] + CHAVES_TELAS:
        if chave in estado:
            del estado[chave]
    for chave, valor in ESTADO_PADRAO.items():
        estado[chave] = valor


def navegar_para(tela: Tela, estado=None):
    estado = st.session_state if estado is None else estado
    estado["tela_atual"] = Tela(tela)
