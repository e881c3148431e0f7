import streamlit as st
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.services.auth_manager import AuthManager
from app.services.database import BancoDados, ErroConfiguracao, obter_cliente
from app.services.logger import setup_logging
from app.utils.session_manager import Tela, inicializar_estado
from app.utils.ui_components import configurar_estilo_visual, renderizar_sidebar
from app.views import analises, dashboard, experimentos, insumos, login, predicoes

TELAS = {
    Tela.DASHBOARD: dashboard.renderizar,
    Tela.EXPERIMENTOS: experimentos.renderizar,
    Tela.PREDICOES: predicoes.renderizar,
    Tela.ANALISES: analises.renderizar,
    Tela.INSUMOS: insumos.renderizar,
}

st.set_page_config(
    page_title="InovaQueijo",
    layout="wide"
)

setup_logging()
configurar_estilo_visual()
inicializar_estado()

try:
    cliente = obter_cliente()
except ErroConfiguracao as e:
    st.error(f"Configuração do Supabase ausente: {e}")
    st.stop()

auth = AuthManager(cliente)

if "sessao_verificada" not in st.session_state:
    auth.restaurar_sessao()
    st.session_state["sessao_verificada"] = True

if not auth.verificar_autenticacao():
    login.renderizar(auth)
    st.stop()

usuario = auth.usuario_atual()
banco = BancoDados(cliente)
tela_atual = st.session_state["tela_atual"]

renderizar_sidebar(auth, usuario, tela_atual)

TELAS.get(tela_atual, dashboard.renderizar)(banco, usuario)
