"""Platform-agnostic data models for chat commands.

Platform handlers translate their native payloads into CommandPayload,
business logic returns a CommandResponse, and the platform handler renders
that response in its own format.

Usage:
    payload = CommandPayload(
        text="oncall PSCHED1",
        user_id="U12345",
        channel_id="C67890",
    )
    response = handle_pagerduty_command(payload)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class CommandPayload:
    """Platform-agnostic command data extracted from platform events.

    Attributes:
        text: Command arguments (e.g., "oncall PSCHED1")
        user_id: Platform-specific user ID
        user_email: User's email address (if available from platform)
        channel_id: Channel/conversation ID where command was invoked
        command: Command name as invoked (e.g., "/pagerduty")
        correlation_id: For distributed tracing and debugging
        platform_metadata: Platform-specific extras not normalized
    """

    text: str
    user_id: str
    user_email: Optional[str] = None
    channel_id: Optional[str] = None
    command: str = ""
    correlation_id: str = ""
    platform_metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Generate correlation ID if not provided."""
        if not self.correlation_id:
            self.correlation_id = f"cmd-{datetime.now(timezone.utc).timestamp()}"


@dataclass
class CommandResponse:
    """Platform-agnostic command response."""

    message: str
    ephemeral: bool = True
    blocks: Optional[List[Dict[str, Any]]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
