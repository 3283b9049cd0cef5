"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- bmp/: envelope, interativos, mídia e produto
"""

__all__: list[str] = []
