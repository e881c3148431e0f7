"""
Testes do filtro e do formulario da biblioteca de insumos.

Execute com: pytest tests/test_catalogo.py -v
"""

import pytest

from laboratorio.catalogo import converter_custo, filtrar_insumos, montar_insumo
from laboratorio.dominio import Categoria, ErroFormulario


# =============================================================================
# TESTES DO FILTRO DO CATALOGO
# =============================================================================

class TestFiltroInsumos:
    """Busca por nome/fornecedor combinada com a categoria."""

    def test_sem_filtro_retorna_tudo(self, insumos):
        """Busca vazia e 'all' devolvem a lista inteira, na mesma ordem."""
        assert filtrar_insumos(insumos, "", "all") == insumos

    def test_busca_por_nome(self, insumos):
        resultado = filtrar_insumos(insumos[:2], "sal", "all")
        assert [i["name"] for i in resultado] == ["Sal X"]

    def test_busca_por_fornecedor_ignora_maiusculas(self, insumos):
        resultado = filtrar_insumos(insumos[:2], "fornecedor a", "all")
        assert [i["name"] for i in resultado] == ["Sal X"]

    def test_busca_casa_nome_ou_fornecedor(self, insumos):
        """'sal' aparece no nome de um insumo e no fornecedor de outro."""
        resultado = filtrar_insumos(insumos, "SAL", "all")
        assert [i["id"] for i in resultado] == ["1", "4"]

    def test_filtro_por_categoria(self, insumos):
        resultado = filtrar_insumos(insumos, "", Categoria.COALHO.value)
        assert [i["id"] for i in resultado] == ["3"]

    def test_busca_e_categoria_combinadas(self, insumos):
        assert filtrar_insumos(insumos, "sal", "salt") == [insumos[0]]
        assert filtrar_insumos(insumos, "sal", "ferment") == []

    def test_resultado_vazio(self, insumos):
        assert filtrar_insumos(insumos, "mussarela", "all") == []

    @pytest.mark.parametrize("termo,categoria", [
        ("", "all"), ("a", "all"), ("fornecedor", "salt"), ("o", "rennet"), ("xyz", "other"),
    ])
    def test_resultado_e_subconjunto_que_satisfaz_o_filtro(self, insumos, termo, categoria):
        resultado = filtrar_insumos(insumos, termo, categoria)

        for insumo in resultado:
            assert insumo in insumos
            assert termo in insumo["name"].lower() or termo in insumo["supplier"].lower()
            assert categoria == "all" or insumo["category"] == categoria

    def test_campos_ausentes_nao_quebram(self):
        insumos = [{"id": "1", "name": None, "category": "salt"}]
        assert filtrar_insumos(insumos, "sal", "all") == []
        assert filtrar_insumos(insumos, "", "salt") == insumos


# =============================================================================
# TESTES DO FORMULARIO NOVO INSUMO
# =============================================================================

class TestMontarInsumo:
    """Conversao do formulario em registro da tabela ingredients."""

    def formulario(self, **campos):
        base = {
            "name": " Fermento Lático L-450 ",
            "category": "ferment",
            "supplier": "Fornecedor B",
            "cost_per_kg": "12.50",
            "description": "",
        }
        base.update(campos)
        return base

    def test_registro_valido(self):
        registro = montar_insumo(self.formulario())
        assert registro == {
            "name": "Fermento Lático L-450",
            "category": "ferment",
            "supplier": "Fornecedor B",
            "cost_per_kg": 12.5,
            "description": "",
        }

    def test_custo_com_virgula(self):
        assert montar_insumo(self.formulario(cost_per_kg="1.234,56"))["cost_per_kg"] == pytest.approx(1234.56)

    def test_custo_invalido(self):
        with pytest.raises(ErroFormulario):
            montar_insumo(self.formulario(cost_per_kg="abc"))

    @pytest.mark.parametrize("custo", ["nan", "inf", "-Infinity", float("nan"), float("inf")])
    def test_custo_nao_finito(self, custo):
        with pytest.raises(ErroFormulario):
            montar_insumo(self.formulario(cost_per_kg=custo))

    def test_custo_negativo(self):
        with pytest.raises(ErroFormulario):
            montar_insumo(self.formulario(cost_per_kg="-1"))

    def test_categoria_desconhecida(self):
        with pytest.raises(ErroFormulario):
            montar_insumo(self.formulario(category="queijo"))

    @pytest.mark.parametrize("campo", ["name", "supplier"])
    def test_campos_obrigatorios(self, campo):
        with pytest.raises(ErroFormulario):
            montar_insumo(self.formulario(**{campo: "  "}))

    def test_converter_custo_numerico(self):
        assert converter_custo(3) == 3.0
        assert converter_custo("R$ 7,90") == pytest.approx(7.9)

    @pytest.mark.parametrize("valor", ["nan", "NaN", "infinity", "1e400"])
    def test_converter_custo_rejeita_nao_finito(self, valor):
        with pytest.raises(ErroFormulario):
            converter_custo(valor)
