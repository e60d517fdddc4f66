"""Domain models. Pure values: no I/O happens in this package."""

from interactions.models.ids import random_id, timestamp_id
from interactions.models.interaction import Interaction, InteractionKind
from interactions.models.member import Member
from interactions.models.okr import KeyResult, Objective, OkrVisibility
from interactions.models.team import Team
from interactions.models.team_config import (
    BackupConfig,
    LintingConfig,
    PublishConfig,
    TeamConfig,
    WebhookConfig,
)

__all__ = [
    "BackupConfig",
    "Interaction",
    "InteractionKind",
    "KeyResult",
    "LintingConfig",
    "Member",
    "Objective",
    "OkrVisibility",
    "PublishConfig",
    "Team",
    "TeamConfig",
    "WebhookConfig",
    "random_id",
    "timestamp_id",
]
