from typing import Dict, List

from laboratorio.dominio import StatusExperimento

NOTA_MEDIA_PADRAO = 4.2
TOTAL_RECENTES = 5


def resumir_experimentos(experimentos: List[Dict]) -> Dict:
    """
    Contadores do dashboard. A lista ja vem ordenada por created_at
    decrescente do banco; os recentes sao os primeiros cinco.
    """
    em_andamento = 0
    concluidos = 0
    for experimento in experimentos:
        if experimento.get("status") == StatusExperimento.EM_ANDAMENTO.value:
            em_andamento += 1
        elif experimento.get("status") == StatusExperimento.CONCLUIDO.value:
            concluidos += 1

    return {
        "total": len(experimentos),
        "em_andamento": em_andamento,
        "concluidos": concluidos,
        "nota_media": NOTA_MEDIA_PADRAO,
        "recentes": experimentos[:TOTAL_RECENTES],
    }
