"""App — orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo de borda (request → normalização → fan-out → resposta)
- use_cases/: casos de uso (fan-out para os chats)
- services/: funções puras (formatação, normalização, destinatários)
- domain/: modelos do lead e do resultado de entrega
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via log

Padrão: app executa; api adapta; utils apoia.
"""
