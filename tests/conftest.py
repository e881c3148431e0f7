"""
Fixtures compartilhadas para os testes do InovaQueijo.

O banco e o cliente de autenticacao do Supabase sao substituidos por
implementacoes em memoria, com injecao de falhas por tabela.
"""

import itertools
from types import SimpleNamespace

import pytest

from app.services.database import ErroBancoDados


class BancoMemoria:
    """Mesma interface do BancoDados, guardando as linhas em listas."""

    def __init__(self):
        self.tabelas = {"experiments": [], "treatments": [], "ingredients": [], "ai_predictions": []}
        self.falhas = {}
        self.falhas_leitura = set()
        self._ids = itertools.count(1)

    def falhar_em(self, tabela, apos=0):
        """Faz a insercao em `tabela` falhar depois de `apos` insercoes bem sucedidas."""
        self.falhas[tabela] = apos

    def falhar_leitura(self, tabela):
        self.falhas_leitura.add(tabela)

    def _inserir(self, tabela, dados):
        if tabela in self.falhas:
            if self.falhas[tabela] <= 0:
                raise ErroBancoDados(f"Falha ao inserir em {tabela}: erro simulado")
            self.falhas[tabela] -= 1

        linha = dict(dados, id=f"{tabela}-{next(self._ids)}")
        self.tabelas[tabela].append(linha)
        return linha

    def listar_experimentos(self, usuario_id=None, status=None, colunas="*"):
        if "experiments" in self.falhas_leitura:
            raise ErroBancoDados("Falha ao listar experimentos: erro simulado")
        linhas = self.tabelas["experiments"]
        if usuario_id:
            linhas = [l for l in linhas if l.get("created_by") == usuario_id]
        if status:
            valores = [getattr(s, "value", s) for s in status]
            linhas = [l for l in linhas if l.get("status") in valores]
        return sorted(linhas, key=lambda l: l.get("created_at", ""), reverse=True)

    def listar_tratamentos(self, experimento_id, colunas="id, name, total_cost"):
        return [l for l in self.tabelas["treatments"] if l["experiment_id"] == experimento_id]

    def listar_insumos(self):
        if "ingredients" in self.falhas_leitura:
            raise ErroBancoDados("Falha ao listar insumos: erro simulado")
        return sorted(self.tabelas["ingredients"], key=lambda l: l["name"])

    def inserir_experimento(self, dados):
        return self._inserir("experiments", dados)

    def inserir_tratamento(self, dados):
        return self._inserir("treatments", dados)

    def inserir_insumo(self, dados):
        return self._inserir("ingredients", dados)

    def inserir_predicao(self, dados):
        return self._inserir("ai_predictions", dados)


class AuthFalso:
    """Imita ``cliente.auth`` do supabase-py."""

    def __init__(self, usuarios):
        self.usuarios = usuarios
        self.logado = None
        self.saidas = 0

    def sign_in_with_password(self, credenciais):
        email = credenciais["email"]
        if self.usuarios.get(email) != credenciais["password"]:
            raise RuntimeError("Invalid login credentials")
        self.logado = SimpleNamespace(id=f"uid-{email}", email=email)
        return SimpleNamespace(user=self.logado, session=SimpleNamespace(access_token="token"))

    def get_user(self):
        if self.logado is None:
            return None
        return SimpleNamespace(user=self.logado)

    def sign_out(self):
        self.saidas += 1
        self.logado = None


@pytest.fixture
def banco():
    return BancoMemoria()


@pytest.fixture
def cliente_auth():
    return SimpleNamespace(auth=AuthFalso({"email_teste@email.com": "123"}))


@pytest.fixture
def insumos():
    """Catalogo pequeno com todas as categorias relevantes para o filtro."""
    return [
        {"id": "1", "name": "Sal X", "supplier": "Fornecedor A", "category": "salt", "cost_per_kg": 2.5},
        {"id": "2", "name": "Fermento Y", "supplier": "Fornecedor B", "category": "ferment", "cost_per_kg": 40.0},
        {"id": "3", "name": "Coalho Microbiano", "supplier": "Chr Hansen", "category": "rennet", "cost_per_kg": 95.0},
        {"id": "4", "name": "Cloreto de Cálcio", "supplier": "Salinas Ltda", "category": "additive", "cost_per_kg": 8.5},
    ]


@pytest.fixture
def experimentos():
    """Experimentos ja na ordem do banco (created_at decrescente)."""
    status = ["in_progress", "completed", "planning", "in_progress", "validated", "completed", "planning"]
    return [
        {
            "id": f"exp-{i}",
            "name": f"Experimento {i}",
            "objective": "Reduzir sódio",
            "status": s,
            "created_at": f"2024-05-{20 - i:02d}T10:00:00+00:00",
        }
        for i, s in enumerate(status)
    ]


@pytest.fixture
def tratamentos():
    return [
        {"id": "t1", "name": "Tratamento A", "total_cost": 12.0},
        {"id": "t2", "name": "Tratamento B", "total_cost": 15.5},
        {"id": "t3", "name": "Tratamento C", "total_cost": 0},
    ]


@pytest.fixture
def fabrica_cliente():
    """Imita ``create_client``: cada chamada devolve um cliente com auth proprio."""
    criados = []

    def fabrica(url, chave):
        cliente = SimpleNamespace(url=url, auth=AuthFalso({"email_teste@email.com": "123"}))
        criados.append(cliente)
        return cliente

    fabrica.criados = criados
    return fabrica
