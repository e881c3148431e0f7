"""
Testes da predicao fixa e do resumo do dashboard.

Execute com: pytest tests/test_predicao_resumo.py -v
"""

import pytest

from laboratorio.predicao import barras_notas, fracao_confianca, montar_predicao
from laboratorio.resumo import resumir_experimentos


class TestPredicao:
    """Recomendacao fixa associada ao experimento escolhido."""

    def test_payload(self):
        predicao = montar_predicao("exp-1")

        assert predicao["experiment_id"] == "exp-1"
        assert predicao["confidence_level"] == 87
        assert predicao["predicted_scores"] == {"flavor": 4.5, "texture": 4.3, "aroma": 4.2, "overall": 4.4}
        assert [i["name"] for i in predicao["recommended_ingredients"]["primary"]] == [
            "Estabilizante Z", "Coalho Microbiano Premium", "Fermento Lático L-450"
        ]
        assert predicao["recommended_ingredients"]["alternatives"][0]["cost"] == 8.5

    def test_chamadas_independentes(self):
        primeira = montar_predicao("exp-1")
        primeira["recommended_ingredients"]["primary"].clear()

        assert len(montar_predicao("exp-2")["recommended_ingredients"]["primary"]) == 3

    def test_barras(self):
        barras = barras_notas(montar_predicao("exp-1"))

        assert [b[0] for b in barras] == ["Sabor", "Textura", "Aroma", "Geral"]
        assert barras[0][2] == pytest.approx(0.9)
        assert fracao_confianca(montar_predicao("exp-1")) == pytest.approx(0.87)


class TestResumo:
    """Contadores e recentes do dashboard."""

    def test_contagens(self, experimentos):
        resumo = resumir_experimentos(experimentos)

        assert resumo["total"] == 7
        assert resumo["em_andamento"] == 2
        assert resumo["concluidos"] == 2
        assert resumo["nota_media"] == 4.2

    def test_cinco_mais_recentes(self, experimentos):
        resumo = resumir_experimentos(experimentos)
        assert [e["id"] for e in resumo["recentes"]] == ["exp-0", "exp-1", "exp-2", "exp-3", "exp-4"]

    def test_sem_experimentos(self):
        resumo = resumir_experimentos([])
        assert resumo["total"] == 0
        assert resumo["recentes"] == []
