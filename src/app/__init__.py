"""App: orquestração, casos de uso e infraestrutura do gateway.

Subpastas:
- bootstrap/: composition root (settings, logging, wiring)
- use_cases/: fachada de envio de mensagens
- tools/: registro das tools expostas ao protocolo
- infra/: IO concreto (leitura de arquivos de mídia)
- observability/: correlation_id por requisição

Padrão: app executa; api adapta; config configura; utils apoia.
"""
