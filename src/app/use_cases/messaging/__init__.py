"""Casos de uso de envio de mensagens BMP."""

from app.use_cases.messaging.send_message import MessagingService

__all__ = ["MessagingService"]
