# App Streamlit do InovaQueijo
#
# app/
# ├── main.py          # Ponto de entrada: login, barra lateral e troca de telas
# ├── views/           # Telas (dashboard, experimentos, predicoes, analises, insumos)
# ├── services/        # Supabase (banco e autenticacao), consultas e logging
# └── utils/           # Estado da sessao e componentes visuais
#
# As regras de negocio ficam no pacote laboratorio/.
#
# Para executar:
#   streamlit run app/main.py
