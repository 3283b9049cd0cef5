"""API: camada de borda do gateway BMP.

Responsabilidades:
- Montar e validar payloads antes de qualquer chamada de rede
- Enviar requests à API BMP com retry limitado
- Expor as tools de envio via HTTP

Subpastas:
- connectors/: cliente HTTP da API BMP
- payload_builders/: construção de payloads no formato do fio
- validators/: schemas e limites por variante de mensagem
- routes/: endpoints HTTP (health, tools)

NÃO PODE conter: leitura de ambiente nem orquestração de envios.
"""
