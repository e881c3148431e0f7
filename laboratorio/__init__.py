"""
Regras do laboratorio digital InovaQueijo.

Funcoes puras usadas pelas telas do app: filtro do catalogo de insumos,
rascunho de experimentos, analise sensorial simulada, predicoes e resumo
do dashboard.
"""
