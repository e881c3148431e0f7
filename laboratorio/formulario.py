import copy
import logging
from typing import Dict, List, Optional

from laboratorio.dominio import ErroFormulario, StatusExperimento

logger = logging.getLogger(__name__)

CAMPOS_INGREDIENTE = ("name", "quantity")


def nome_tratamento(indice: int) -> str:
    return f"Tratamento {chr(65 + indice)}"


def linha_vazia() -> Dict:
    return {"name": "", "quantity": ""}


class RascunhoExperimento:
    """
    Estado do formulario 'Novo Experimento': dados base do experimento e a
    lista ordenada de tratamentos, cada um com suas linhas de ingredientes.
    """

    def __init__(self):
        self.nome = ""
        self.objetivo = ""
        self.formula_base = ""
        self.tratamentos: List[Dict] = []
        self.experimento_gravado: Optional[Dict] = None
        self.tratamentos_gravados = 0
        self.resetar()

    def resetar(self):
        self.nome = ""
        self.objetivo = ""
        self.formula_base = ""
        self.tratamentos = [{"name": nome_tratamento(0), "ingredients": [linha_vazia()]}]
        self.experimento_gravado = None
        self.tratamentos_gravados = 0

    def adicionar_tratamento(self) -> Dict:
        tratamento = {"name": nome_tratamento(len(self.tratamentos)), "ingredients": [linha_vazia()]}
        self.tratamentos.append(tratamento)
        return tratamento

    def adicionar_ingrediente(self, indice_tratamento: int):
        self.tratamentos[indice_tratamento]["ingredients"].append(linha_vazia())

    def atualizar_ingrediente(self, indice_tratamento: int, indice_ingrediente: int, campo: str, valor: str):
        if campo not in CAMPOS_INGREDIENTE:
            raise ErroFormulario(f"Campo de ingrediente desconhecido: '{campo}'")
        self.tratamentos[indice_tratamento]["ingredients"][indice_ingrediente][campo] = valor

    def validar(self):
        if not self.nome.strip():
            raise ErroFormulario("Informe o nome do experimento")
        if not self.objetivo.strip():
            raise ErroFormulario("Descreva o objetivo da inovação")

    def registro_experimento(self, usuario_id: str) -> Dict:
        return {
            "name": self.nome,
            "objective": self.objetivo,
            "base_formula": {"formula": self.formula_base},
            "status": StatusExperimento.PLANEJAMENTO.value,
            "created_by": usuario_id,
        }

    def registros_tratamentos(self, experimento_id) -> List[Dict]:
        return [
            {
                "experiment_id": experimento_id,
                "name": tratamento["name"],
                "formula": {"ingredients": copy.deepcopy(tratamento["ingredients"])},
            }
            for tratamento in self.tratamentos
        ]


def submeter_rascunho(banco, rascunho: RascunhoExperimento, usuario_id: str) -> Dict:
    """
    Grava o experimento e depois cada tratamento, em ordem e um de cada vez.

    Nao ha transacao: se um tratamento falhar, o experimento e os tratamentos
    anteriores continuam gravados e a sequencia para no erro. O rascunho guarda
    o que ja foi gravado; submeter de novo grava so os tratamentos restantes,
    sem duplicar o experimento.
    """
    resultado = {
        "sucesso": False,
        "experimento": None,
        "tratamentos_inseridos": 0,
        "erro": None,
    }

    try:
        rascunho.validar()
    except ErroFormulario as e:
        resultado["erro"] = str(e)
        return resultado

    experimento = rascunho.experimento_gravado
    if experimento is None:
        try:
            experimento = banco.inserir_experimento(rascunho.registro_experimento(usuario_id))
        except Exception as e:
            logger.error("Erro ao criar experimento: %s", e)
            resultado["erro"] = f"Erro ao criar experimento: {e}"
            return resultado
        rascunho.experimento_gravado = experimento
    else:
        logger.info("Retomando tratamentos do experimento %s", experimento["id"])

    resultado["experimento"] = experimento
    resultado["tratamentos_inseridos"] = rascunho.tratamentos_gravados

    pendentes = rascunho.registros_tratamentos(experimento["id"])[rascunho.tratamentos_gravados:]
    for registro in pendentes:
        try:
            banco.inserir_tratamento(registro)
        except Exception as e:
            logger.error(
                "Erro ao criar %s do experimento %s: %s", registro["name"], experimento["id"], e
            )
            resultado["erro"] = f"Erro ao criar {registro['name']}: {e}"
            return resultado
        rascunho.tratamentos_gravados += 1
        resultado["tratamentos_inseridos"] = rascunho.tratamentos_gravados

    logger.info(
        "Experimento %s criado com %d tratamento(s)", experimento["id"], resultado["tratamentos_inseridos"]
    )
    resultado["sucesso"] = True
    return resultado
