"""API — camada de borda do relay.

Responsabilidades:
- Receber requests (rota ASGI ou função serverless)
- Falar com a Telegram Bot API
- Construir payloads para a Bot API

Subpastas:
- connectors/: cliente HTTP da Bot API
- payload_builders/: construção do payload de sendMessage
- routes/: endpoints HTTP (relay, health)
- functions/: handlers no formato Lambda/Netlify

NÃO PODE conter: regra de formatação, parse de destinatários, fan-out.
"""
