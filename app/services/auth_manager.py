from dataclasses import dataclass
from typing import Optional, Tuple

import streamlit as st

from app.services.logger import get_logger
from app.utils.session_manager import limpar_sessao

logger = get_logger(__name__)

CHAVE_USUARIO = "usuario"
MSG_CREDENCIAIS_INVALIDAS = "Email ou senha incorretos. Tente novamente."


@dataclass
class SessaoUsuario:
    id: str
    email: str

    @property
    def nome_exibicao(self) -> str:
        return self.email.split("@")[0]

    @property
    def inicial(self) -> str:
        return self.email[:1].upper()


class AuthManager:
    """
    Sessao do usuario sobre o Supabase Auth.

    O usuario atual vive no estado recebido (por padrao ``st.session_state``):
    criado no login, atualizado por ``restaurar_sessao`` e apagado em ``sair``.
    """

    def __init__(self, cliente, estado=None):
        self.cliente = cliente
        self.estado = st.session_state if estado is None else estado

    def usuario_atual(self) -> Optional[SessaoUsuario]:
        return self.estado.get(CHAVE_USUARIO)

    def verificar_autenticacao(self) -> bool:
        return self.usuario_atual() is not None

    def entrar(self, email: str, senha: str) -> Tuple[bool, str]:
        try:
            resposta = self.cliente.auth.sign_in_with_password({"email": email, "password": senha})
        except Exception as e:
            logger.error("Erro de login: %s", e)
            return False, MSG_CREDENCIAIS_INVALIDAS

        usuario = getattr(resposta, "user", None)
        if usuario is None:
            return False, MSG_CREDENCIAIS_INVALIDAS

        self.estado[CHAVE_USUARIO] = SessaoUsuario(id=str(usuario.id), email=usuario.email or "")
        logger.info("Usuario %s autenticado", usuario.email)
        return True, "Login realizado"

    def restaurar_sessao(self) -> Optional[SessaoUsuario]:
        """Sincroniza o estado com a sessao mantida pelo cliente do Supabase."""
        try:
            resposta = self.cliente.auth.get_user()
        except Exception as e:
            logger.warning("Sessao do Supabase indisponivel: %s", e)
            return self.usuario_atual()

        usuario = getattr(resposta, "user", None) if resposta else None
        if usuario is None:
            self.estado.pop(CHAVE_USUARIO, None)
            return None

        self.estado[CHAVE_USUARIO] = SessaoUsuario(id=str(usuario.id), email=usuario.email or "")
        return self.estado[CHAVE_USUARIO]

    def sair(self):
        try:
            self.cliente.auth.sign_out()
        except Exception as e:
            logger.warning("Erro ao encerrar sessao no Supabase: %s", e)
        limpar_sessao(self.estado)
