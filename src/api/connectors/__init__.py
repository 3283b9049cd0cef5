"""Connectors: adapters de borda para APIs externas.

Estrutura:
- bmp/: Business Messaging Platform (JSON e multipart)
"""

__all__: list[str] = []
