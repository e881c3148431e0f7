import copy
from typing import Dict, List, Tuple

from laboratorio.analise import NOTA_MAXIMA, largura_barra

ROTULOS_NOTAS = {
    "flavor": "Sabor",
    "texture": "Textura",
    "aroma": "Aroma",
    "overall": "Geral",
}

RECOMENDACAO_PADRAO = {
    "recommended_ingredients": {
        "primary": [
            {"name": "Estabilizante Z", "quantity": "0.5 kg", "cost": 15.0},
            {"name": "Coalho Microbiano Premium", "quantity": "0.2 kg", "cost": 28.5},
            {"name": "Fermento Lático L-450", "quantity": "0.3 kg", "cost": 12.0},
        ],
        "alternatives": [
            {"name": "Cloreto de Cálcio", "quantity": "0.1 kg", "cost": 8.5},
        ],
    },
    "predicted_scores": {
        "flavor": 4.5,
        "texture": 4.3,
        "aroma": 4.2,
        "overall": 4.4,
    },
    "confidence_level": 87,
    "reasoning": (
        "Com base em 45 experimentos similares, esta combinação tem alta probabilidade de alcançar "
        "os objetivos. O Estabilizante Z demonstrou excelente desempenho em produtos com baixo teor "
        "de sódio, mantendo a elasticidade desejada. O Coalho Microbiano Premium garante consistência "
        "no processo de coagulação."
    ),
}


def montar_predicao(experimento_id) -> Dict:
    """Recomendacao fixa; nao depende da formula real do experimento."""
    predicao = copy.deepcopy(RECOMENDACAO_PADRAO)
    predicao["experiment_id"] = experimento_id
    return predicao


def barras_notas(predicao: Dict) -> List[Tuple[str, float, float]]:
    barras = []
    for chave, valor in predicao.get("predicted_scores", {}).items():
        barras.append((ROTULOS_NOTAS.get(chave, chave), valor, largura_barra(valor, NOTA_MAXIMA)))
    return barras


def fracao_confianca(predicao: Dict) -> float:
    return largura_barra(predicao.get("confidence_level", 0), 100)
