"""
Carregamento de dados por tela.

Cada funcao trata a falha do banco isoladamente: registra no log e devolve
uma lista vazia, deixando a tela no estado vazio em vez de quebrar o app.
"""

from typing import Dict, List, Optional, Tuple

from app.services.database import BancoDados, ErroBancoDados
from app.services.logger import get_logger
from laboratorio.catalogo import montar_insumo
from laboratorio.dominio import ErroFormulario, StatusExperimento
from laboratorio.predicao import montar_predicao

logger = get_logger(__name__)

STATUS_ANALISE = (StatusExperimento.CONCLUIDO, StatusExperimento.VALIDADO)
STATUS_PREDICAO = (StatusExperimento.PLANEJAMENTO,)


def carregar_todos_experimentos(banco: BancoDados) -> List[Dict]:
    try:
        return banco.listar_experimentos()
    except ErroBancoDados as e:
        logger.error("Erro ao carregar dashboard: %s", e)
        return []


def carregar_experimentos_usuario(banco: BancoDados, usuario_id: str) -> List[Dict]:
    try:
        return banco.listar_experimentos(usuario_id=usuario_id)
    except ErroBancoDados as e:
        logger.error("Erro ao carregar experimentos: %s", e)
        return []


def carregar_experimentos_analise(banco: BancoDados) -> List[Dict]:
    try:
        return banco.listar_experimentos(status=STATUS_ANALISE, colunas="id, name")
    except ErroBancoDados as e:
        logger.error("Erro ao carregar experimentos para analise: %s", e)
        return []


def carregar_experimentos_predicao(banco: BancoDados) -> List[Dict]:
    try:
        return banco.listar_experimentos(status=STATUS_PREDICAO, colunas="id, name, objective")
    except ErroBancoDados as e:
        logger.error("Erro ao carregar experimentos para predicao: %s", e)
        return []


def carregar_tratamentos(banco: BancoDados, experimento_id) -> List[Dict]:
    try:
        return banco.listar_tratamentos(experimento_id)
    except ErroBancoDados as e:
        logger.error("Erro ao carregar analise: %s", e)
        return []


def carregar_insumos(banco: BancoDados) -> List[Dict]:
    try:
        return banco.listar_insumos()
    except ErroBancoDados as e:
        logger.error("Erro ao carregar insumos: %s", e)
        return []


def criar_insumo(banco: BancoDados, formulario: Dict) -> Tuple[bool, str]:
    try:
        registro = montar_insumo(formulario)
    except ErroFormulario as e:
        return False, str(e)

    try:
        banco.inserir_insumo(registro)
    except ErroBancoDados as e:
        logger.error("Erro ao criar insumo: %s", e)
        return False, "Não foi possível salvar o insumo. Tente novamente."

    return True, f"Insumo '{registro['name']}' adicionado à biblioteca"


def gerar_predicao(banco: BancoDados, experimento_id) -> Optional[Dict]:
    """Cada chamada grava uma nova linha em ai_predictions; sem cache nem nova tentativa."""
    if not experimento_id:
        return None

    try:
        return banco.inserir_predicao(montar_predicao(experimento_id))
    except ErroBancoDados as e:
        logger.error("Erro ao gerar predicao: %s", e)
        return None
