"""API — camada de borda HTTP.

Responsabilidades:
- Receber requests locais (token, cobranças, health)
- Validar headers e corpo antes de qualquer chamada de saída
- Traduzir resultados e erros do gateway em respostas HTTP

Subpastas:
- routes/: endpoints HTTP (inter, health)

NÃO PODE conter: IO de saída, material TLS, regras do upstream.
"""
