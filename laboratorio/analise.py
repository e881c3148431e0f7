"""
Analise sensorial comparativa dos tratamentos de um experimento.

As notas sao simuladas: ``gerar_dados_sensoriais`` aplica ``base + indice * passo``
por metrica. Trocar essa funcao por uma agregacao real das avaliacoes nao
exige mudar a renderizacao.
"""

import math
from typing import Dict, List, Optional

NOTA_MAXIMA = 5.0
LIMITE_CONSISTENCIA = 0.5

METRICAS = {
    "avg_flavor": "Sabor",
    "avg_texture": "Textura",
    "avg_aroma": "Aroma",
    "avg_overall": "Geral",
}

# metrica: (base, passo)
PARAMETROS_SIMULACAO = {
    "avg_flavor": (3.8, 0.3),
    "avg_texture": (4.0, 0.2),
    "avg_aroma": (3.9, 0.25),
    "avg_overall": (3.9, 0.25),
    "std_dev": (0.4, -0.05),
    "evaluations_count": (8, 2),
}


def gerar_dados_sensoriais(tratamentos: List[Dict]) -> List[Dict]:
    dados = []
    for indice, tratamento in enumerate(tratamentos):
        linha = {"treatment_name": tratamento.get("name", "")}
        for metrica, (base, passo) in PARAMETROS_SIMULACAO.items():
            linha[metrica] = base + indice * passo
        dados.append(linha)
    return dados


def melhor_tratamento(dados: List[Dict]) -> Optional[Dict]:
    """Maior nota geral; em caso de empate vence o primeiro da lista."""
    melhor = None
    for linha in dados:
        if melhor is None or linha["avg_overall"] > melhor["avg_overall"]:
            melhor = linha
    return melhor


def rotulo_consistencia(desvio_padrao: float) -> str:
    return "excelente" if desvio_padrao < LIMITE_CONSISTENCIA else "boa"


def calcular_roi(nota_geral: float, custo_total) -> float:
    """
    ROI (nota/custo) em percentual. Custo zero nao e erro: o resultado segue
    a aritmetica IEEE (inf, -inf ou nan) e a tela mostra o valor nao finito.
    """
    custo = float(custo_total or 0)
    if custo == 0:
        if nota_geral == 0 or math.isnan(nota_geral):
            return math.nan
        return math.inf if nota_geral > 0 else -math.inf
    return (nota_geral / custo) * 100


def largura_barra(valor: float, maximo: float = NOTA_MAXIMA) -> float:
    """Fracao 0..1 usada nas barras de progresso."""
    if not maximo or not math.isfinite(valor):
        return 0.0
    return min(max(valor / maximo, 0.0), 1.0)


def limite_grafico(dados: List[Dict]) -> float:
    """Topo do eixo das notas: 5.0 ou a maior nota simulada, se passar disso."""
    notas = [linha[metrica] for linha in dados for metrica in METRICAS]
    return max([NOTA_MAXIMA] + notas)


def montar_analise(tratamentos: List[Dict]) -> Dict:
    dados = gerar_dados_sensoriais(tratamentos)

    custos = []
    for indice, tratamento in enumerate(tratamentos):
        custo = tratamento.get("total_cost") or 0
        nota = dados[indice]["avg_overall"]
        custos.append({
            "id": tratamento.get("id"),
            "name": tratamento.get("name", ""),
            "total_cost": float(custo),
            "roi": calcular_roi(nota, custo),
        })

    return {
        "dados": dados,
        "melhor": melhor_tratamento(dados),
        "custos": custos,
    }
