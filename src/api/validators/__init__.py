"""Validators: schemas de payload para APIs externas.

Estrutura:
- bmp/: variantes de mensagem da Business Messaging Platform
"""

__all__: list[str] = []
