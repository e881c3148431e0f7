import streamlit as st

from app.services.consultas import carregar_insumos, criar_insumo
from app.utils.ui_components import badge_categoria, formatar_moeda
from laboratorio.catalogo import filtrar_insumos
from laboratorio.dominio import Categoria, TODAS_CATEGORIAS, rotulo_categoria

OPCOES_FILTRO = [TODAS_CATEGORIAS] + [c.value for c in Categoria]


def _rotulo_filtro(valor: str) -> str:
    return "Todas as Categorias" if valor == TODAS_CATEGORIAS else rotulo_categoria(valor)


def _exibir_formulario(banco):
    with st.container(border=True):
        st.subheader("Novo Insumo")

        with st.form("form_insumo", clear_on_submit=True):
            nome = st.text_input("Nome do Insumo", placeholder="Ex: Fermento Lático L-450")
            c1, c2 = st.columns(2)
            categoria = c1.selectbox(
                "Categoria", options=[c.value for c in Categoria], format_func=rotulo_categoria
            )
            custo = c2.text_input("Custo por kg (R$)", placeholder="0.00")
            fornecedor = st.text_input("Fornecedor", placeholder="Nome do fornecedor")
            descricao = st.text_area(
                "Descrição (opcional)", placeholder="Informações adicionais sobre o insumo..."
            )

            col_cancelar, col_salvar = st.columns(2)
            cancelar = col_cancelar.form_submit_button("Cancelar", use_container_width=True)
            salvar = col_salvar.form_submit_button("Salvar Insumo", type="primary", use_container_width=True)

    if cancelar:
        st.session_state["mostrar_form_insumo"] = False
        st.rerun()

    if salvar:
        sucesso, msg = criar_insumo(banco, {
            "name": nome,
            "category": categoria,
            "supplier": fornecedor,
            "cost_per_kg": custo,
            "description": descricao,
        })
        if sucesso:
            st.session_state["mostrar_form_insumo"] = False
            st.session_state["msg_sucesso"] = msg
            st.rerun()
        else:
            st.error(msg)


def _exibir_cards(insumos):
    colunas = st.columns(3)
    for idx, insumo in enumerate(insumos):
        with colunas[idx % 3]:
            with st.container(border=True):
                st.markdown(badge_categoria(insumo.get("category")))
                st.markdown(f"#### {insumo.get('name', '')}")

                c1, c2 = st.columns(2)
                c1.caption("Fornecedor")
                c2.markdown(f"**{insumo.get('supplier', '')}**")
                c1.caption("Custo/kg")
                c2.markdown(f":green[**{formatar_moeda(insumo.get('cost_per_kg'))}**]")

                if insumo.get("description"):
                    st.caption(insumo["description"])


def renderizar(banco, usuario):
    c1, c2 = st.columns([3, 1], vertical_alignment="center")
    with c1:
        st.title("Biblioteca de Insumos")
        st.markdown("Gerencie os ingredientes e suas especificações")
    with c2:
        if st.button("Novo Insumo", type="primary", use_container_width=True):
            st.session_state["mostrar_form_insumo"] = True

    st.divider()

    if "msg_sucesso" in st.session_state:
        st.toast(st.session_state["msg_sucesso"])
        del st.session_state["msg_sucesso"]

    if st.session_state.get("mostrar_form_insumo"):
        _exibir_formulario(banco)
        st.markdown("###")

    with st.spinner("Carregando..."):
        insumos = carregar_insumos(banco)

    with st.container(border=True):
        f1, f2 = st.columns(2)
        termo = f1.text_input(
            "Buscar", key="busca_insumo", placeholder="Buscar por nome ou fornecedor...",
            label_visibility="collapsed"
        )
        categoria = f2.selectbox(
            "Categoria", options=OPCOES_FILTRO, key="categoria_insumo",
            format_func=_rotulo_filtro, label_visibility="collapsed"
        )

    filtrados = filtrar_insumos(insumos, termo, categoria)

    if not filtrados:
        with st.container(border=True):
            st.markdown("Nenhum insumo encontrado")
            st.caption("Adicione novos insumos à biblioteca")
        return

    _exibir_cards(filtrados)
