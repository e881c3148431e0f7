import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import streamlit as st
from dotenv import load_dotenv
from supabase import Client, create_client

from app.services.logger import get_logger

ENV_PATH = Path(__file__).parent.parent / "secrets.env"

logger = get_logger(__name__)


class ErroConfiguracao(RuntimeError):
    pass


class ErroBancoDados(RuntimeError):
    pass


def carregar_credenciais():
    load_dotenv(ENV_PATH, override=True)
    url = os.getenv("SUPABASE_URL")
    chave = os.getenv("SUPABASE_ANON_KEY")

    if not url or not chave:
        raise ErroConfiguracao(
            f"Defina SUPABASE_URL e SUPABASE_ANON_KEY no ambiente ou em {ENV_PATH.name}"
        )
    return url, chave


CHAVE_CLIENTE = "cliente_supabase"


def obter_cliente(estado=None, fabrica=create_client) -> Client:
    """
    Um cliente por sessao do navegador; o token do usuario logado fica no
    cliente e nao passa para outras sessoes.
    """
    estado = st.session_state if estado is None else estado
    if CHAVE_CLIENTE not in estado:
        url, chave = carregar_credenciais()
        logger.info("Conectando ao Supabase em %s", url)
        estado[CHAVE_CLIENTE] = fabrica(url, chave)
    return estado[CHAVE_CLIENTE]


class BancoDados:
    """Acesso as tabelas do Supabase. Toda falha vira ErroBancoDados."""

    def __init__(self, cliente: Client):
        self.cliente = cliente

    def _executar(self, descricao: str, consulta) -> List[Dict]:
        try:
            resposta = consulta.execute()
        except Exception as e:
            raise ErroBancoDados(f"Falha ao {descricao}: {e}") from e
        return resposta.data or []

    def _inserir(self, tabela: str, dados: Dict) -> Dict:
        linhas = self._executar(f"inserir em {tabela}", self.cliente.table(tabela).insert(dados))
        if not linhas:
            raise ErroBancoDados(f"Insercao em {tabela} nao retornou a linha criada")
        logger.info("Registro %s criado em %s", linhas[0].get("id"), tabela)
        return linhas[0]

    def listar_experimentos(self, usuario_id: Optional[str] = None, status: Optional[Iterable[str]] = None,
                            colunas: str = "*") -> List[Dict]:
        consulta = self.cliente.table("experiments").select(colunas)
        if usuario_id:
            consulta = consulta.eq("created_by", usuario_id)
        if status:
            consulta = consulta.in_("status", [str(getattr(s, "value", s)) for s in status])
        consulta = consulta.order("created_at", desc=True)
        return self._executar("listar experimentos", consulta)

    def listar_tratamentos(self, experimento_id, colunas: str = "id, name, total_cost") -> List[Dict]:
        consulta = self.cliente.table("treatments").select(colunas).eq("experiment_id", experimento_id)
        return self._executar("listar tratamentos", consulta)

    def listar_insumos(self) -> List[Dict]:
        consulta = self.cliente.table("ingredients").select("*").order("name")
        return self._executar("listar insumos", consulta)

    def inserir_experimento(self, dados: Dict) -> Dict:
        return self._inserir("experiments", dados)

    def inserir_tratamento(self, dados: Dict) -> Dict:
        return self._inserir("treatments", dados)

    def inserir_insumo(self, dados: Dict) -> Dict:
        return self._inserir("ingredients", dados)

    def inserir_predicao(self, dados: Dict) -> Dict:
        return self._inserir("ai_predictions", dados)
