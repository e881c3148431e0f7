import streamlit as st

EMAIL_DEMO = "email_teste@email.com"
SENHA_DEMO = "123"


def renderizar(auth):
    _, centro, _ = st.columns([1, 2, 1])

    with centro:
        st.title("InovaQueijo")
        st.markdown("Laboratório Digital para Inovação em Queijos")

        with st.container(border=True):
            st.subheader("Entrar no Sistema")

            if "erro_login" in st.session_state:
                st.error(st.session_state["erro_login"])
            else:
                st.info("Basta entrar com os dados abaixo.")

            with st.form("form_login"):
                email = st.text_input("Email", value=EMAIL_DEMO, placeholder="seu@email.com")
                senha = st.text_input("Senha", value=SENHA_DEMO, type="password")
                submit = st.form_submit_button("Entrar", type="primary", use_container_width=True)

            st.divider()
            st.caption("Sistema de Gestão de Experimentos · P&D | Produção | Análise Sensorial")

        st.caption("Para demonstração, use qualquer email/senha cadastrado no Supabase")

    if submit:
        with st.spinner("Entrando..."):
            sucesso, msg = auth.entrar(email, senha)

        if sucesso:
            st.session_state.pop("erro_login", None)
        else:
            st.session_state["erro_login"] = msg
        st.rerun()
