import math
from typing import Dict, List

from laboratorio.dominio import Categoria, ErroFormulario, TODAS_CATEGORIAS


def filtrar_insumos(insumos: List[Dict], termo: str, categoria: str = TODAS_CATEGORIAS) -> List[Dict]:
    """
    Filtra o catalogo pela busca (nome ou fornecedor, sem diferenciar
    maiusculas) e pela categoria selecionada. Mantem a ordem original.
    """
    termo_normalizado = (termo or "").lower()
    filtrados = []

    for insumo in insumos:
        nome = (insumo.get("name") or "").lower()
        fornecedor = (insumo.get("supplier") or "").lower()

        if termo_normalizado and termo_normalizado not in nome and termo_normalizado not in fornecedor:
            continue

        if categoria != TODAS_CATEGORIAS and insumo.get("category") != categoria:
            continue

        filtrados.append(insumo)

    return filtrados


def converter_custo(valor) -> float:
    if isinstance(valor, (int, float)):
        return _exigir_finito(float(valor), valor)

    texto = str(valor or "").strip().replace("R$", "").strip()
    # Aceita "12,50" e "1.234,50" alem do formato com ponto
    if "," in texto:
        texto = texto.replace(".", "").replace(",", ".")

    try:
        custo = float(texto)
    except ValueError:
        raise ErroFormulario(f"Custo por kg invalido: '{valor}'")
    return _exigir_finito(custo, valor)


def _exigir_finito(custo: float, valor) -> float:
    # float() aceita "nan" e "inf"
    if not math.isfinite(custo):
        raise ErroFormulario(f"Custo por kg invalido: '{valor}'")
    return custo


def montar_insumo(formulario: Dict) -> Dict:
    """Converte o formulario 'Novo Insumo' no registro enviado para a tabela ingredients."""
    nome = (formulario.get("name") or "").strip()
    fornecedor = (formulario.get("supplier") or "").strip()

    if not nome:
        raise ErroFormulario("Informe o nome do insumo")
    if not fornecedor:
        raise ErroFormulario("Informe o fornecedor")

    try:
        categoria = Categoria(formulario.get("category", Categoria.FERMENTO.value))
    except ValueError:
        raise ErroFormulario(f"Categoria desconhecida: '{formulario.get('category')}'")

    custo = converter_custo(formulario.get("cost_per_kg"))
    if custo < 0:
        raise ErroFormulario("O custo por kg nao pode ser negativo")

    return {
        "name": nome,
        "category": categoria.value,
        "supplier": fornecedor,
        "cost_per_kg": custo,
        "description": (formulario.get("description") or "").strip(),
    }
