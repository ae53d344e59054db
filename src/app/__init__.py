"""App — núcleo do bridge: gateway, infraestrutura e wiring.

Subpastas:
- bootstrap/: composition root (logging, validação, construção do gateway)
- services/: gateway de relay para o upstream Inter
- infra/: identidade TLS e cliente HTTP mTLS
- protocols/: contratos entre serviços e infraestrutura
- observability/: correlation_id e middleware HTTP

Padrão: api adapta; app executa; config configura; utils apoia.
"""
