import streamlit as st

from app.services.consultas import carregar_experimentos_usuario
from app.utils.ui_components import badge_status, formatar_data
from laboratorio.formulario import RascunhoExperimento, submeter_rascunho


def _obter_rascunho() -> RascunhoExperimento:
    if "rascunho_experimento" not in st.session_state:
        st.session_state["rascunho_experimento"] = RascunhoExperimento()
        st.session_state["versao_form_experimento"] = 0
    return st.session_state["rascunho_experimento"]


def _reiniciar_formulario(rascunho: RascunhoExperimento):
    rascunho.resetar()
    # Chaves novas para os widgets voltarem vazios
    st.session_state["versao_form_experimento"] = st.session_state.get("versao_form_experimento", 0) + 1
    st.session_state["mostrar_form_experimento"] = False


def _exibir_cards(experimentos):
    if not experimentos:
        with st.container(border=True):
            st.markdown("Nenhum experimento cadastrado ainda")
            st.caption("Use o botão 'Novo Experimento' para começar")
        return

    colunas = st.columns(3)
    for idx, exp in enumerate(experimentos):
        with colunas[idx % 3]:
            with st.container(border=True):
                st.markdown(badge_status(exp.get("status")))
                st.markdown(f"**{exp.get('name', '')}**")
                st.caption(exp.get("objective", ""))
                st.caption(formatar_data(exp.get("created_at")))


def _exibir_formulario(banco, usuario, rascunho: RascunhoExperimento):
    versao = st.session_state.get("versao_form_experimento", 0)

    with st.container(border=True):
        st.subheader("Novo Experimento")

        rascunho.nome = st.text_input(
            "Nome do Experimento", key=f"exp_nome_{versao}",
            placeholder="Ex: Muçarela com baixo teor de sódio"
        )
        rascunho.objetivo = st.text_area(
            "Objetivo da Inovação", key=f"exp_objetivo_{versao}",
            placeholder="Descreva o objetivo do experimento..."
        )
        rascunho.formula_base = st.text_input(
            "Fórmula Base", key=f"exp_formula_{versao}", placeholder="Receita base utilizada"
        )

        st.divider()

        c1, c2 = st.columns([3, 1])
        c1.markdown("#### Tratamentos")
        if c2.button("+ Adicionar Tratamento", key=f"add_trat_{versao}"):
            rascunho.adicionar_tratamento()
            st.rerun()

        for t_idx, tratamento in enumerate(rascunho.tratamentos):
            with st.container(border=True):
                h1, h2 = st.columns([3, 1])
                h1.markdown(f"**{tratamento['name']}**")
                if h2.button("+ Ingrediente", key=f"add_ing_{versao}_{t_idx}"):
                    rascunho.adicionar_ingrediente(t_idx)
                    st.rerun()

                for i_idx, _ in enumerate(tratamento["ingredients"]):
                    col_nome, col_qtd = st.columns(2)
                    nome = col_nome.text_input(
                        "Nome do ingrediente", key=f"ing_{versao}_{t_idx}_{i_idx}_name",
                        placeholder="Nome do ingrediente", label_visibility="collapsed"
                    )
                    quantidade = col_qtd.text_input(
                        "Quantidade", key=f"ing_{versao}_{t_idx}_{i_idx}_quantity",
                        placeholder="Quantidade (kg/g)", label_visibility="collapsed"
                    )
                    rascunho.atualizar_ingrediente(t_idx, i_idx, "name", nome)
                    rascunho.atualizar_ingrediente(t_idx, i_idx, "quantity", quantidade)

        st.divider()

        col_vazio, col_cancelar, col_salvar = st.columns([2, 1, 1])
        if col_cancelar.button("Cancelar", use_container_width=True, key=f"cancelar_exp_{versao}"):
            _reiniciar_formulario(rascunho)
            st.rerun()

        if col_salvar.button("Criar Experimento", type="primary", use_container_width=True, key=f"salvar_exp_{versao}"):
            with st.spinner("Salvando experimento..."):
                resultado = submeter_rascunho(banco, rascunho, usuario.id)

            if resultado["sucesso"]:
                _reiniciar_formulario(rascunho)
                st.session_state["msg_sucesso"] = "Experimento criado com sucesso"
                st.rerun()
            elif resultado["experimento"] is not None:
                st.error(
                    f"{resultado['erro']}. O experimento e {resultado['tratamentos_inseridos']} "
                    f"tratamento(s) anteriores já foram gravados. Clique em 'Criar Experimento' "
                    f"novamente para gravar apenas os tratamentos restantes."
                )
            else:
                st.error(resultado["erro"])


def renderizar(banco, usuario):
    c1, c2 = st.columns([3, 1], vertical_alignment="center")
    with c1:
        st.title("Experimentos")
        st.markdown("Gerencie seus experimentos de formulação")
    with c2:
        if st.button("Novo Experimento", type="primary", use_container_width=True):
            st.session_state["mostrar_form_experimento"] = True

    st.divider()

    if "msg_sucesso" in st.session_state:
        st.toast(st.session_state["msg_sucesso"])
        del st.session_state["msg_sucesso"]

    rascunho = _obter_rascunho()
    if st.session_state.get("mostrar_form_experimento"):
        _exibir_formulario(banco, usuario, rascunho)
        st.markdown("###")

    with st.spinner("Carregando..."):
        experimentos = carregar_experimentos_usuario(banco, usuario.id)

    _exibir_cards(experimentos)
