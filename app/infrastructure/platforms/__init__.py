"""Platform-agnostic models shared by chat platform handlers."""

from infrastructure.platforms.models import CommandPayload, CommandResponse

__all__ = ["CommandPayload", "CommandResponse"]
