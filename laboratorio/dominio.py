from enum import Enum


class StatusExperimento(str, Enum):
    PLANEJAMENTO = "planning"
    EM_ANDAMENTO = "in_progress"
    CONCLUIDO = "completed"
    VALIDADO = "validated"

    @property
    def rotulo(self) -> str:
        return _ROTULOS_STATUS[self]


class Categoria(str, Enum):
    FERMENTO = "ferment"
    COALHO = "rennet"
    SAL = "salt"
    ADITIVO = "additive"
    ESTABILIZANTE = "stabilizer"
    OUTROS = "other"

    @property
    def rotulo(self) -> str:
        return _ROTULOS_CATEGORIA[self]


_ROTULOS_STATUS = {
    StatusExperimento.PLANEJAMENTO: "Planejamento",
    StatusExperimento.EM_ANDAMENTO: "Em Andamento",
    StatusExperimento.CONCLUIDO: "Concluído",
    StatusExperimento.VALIDADO: "Validado",
}

_ROTULOS_CATEGORIA = {
    Categoria.FERMENTO: "Fermento",
    Categoria.COALHO: "Coalho",
    Categoria.SAL: "Sal",
    Categoria.ADITIVO: "Aditivo",
    Categoria.ESTABILIZANTE: "Estabilizante",
    Categoria.OUTROS: "Outros",
}

TODAS_CATEGORIAS = "all"


def rotulo_status(valor: str) -> str:
    """Rotulo em portugues do status; valores desconhecidos voltam como vieram do banco."""
    try:
        return StatusExperimento(valor).rotulo
    except ValueError:
        return str(valor)


def rotulo_categoria(valor: str) -> str:
    try:
        return Categoria(valor).rotulo
    except ValueError:
        return str(valor)


class ErroFormulario(ValueError):
    """Dados de formulario invalidos antes de chegar ao banco."""
