"""interactions: team journal, member profiles and pincode credentials on disk."""

from interactions.auth import Credentials, MemberCredentials
from interactions.errors import (
    CredentialsNotFoundError,
    DecodeError,
    InteractionsError,
    TeamNotFoundError,
    ValidationError,
)
from interactions.models import (
    BackupConfig,
    Interaction,
    InteractionKind,
    KeyResult,
    LintingConfig,
    Member,
    Objective,
    OkrVisibility,
    PublishConfig,
    Team,
    TeamConfig,
    WebhookConfig,
)
from interactions.storage import TeamStore

__all__ = [
    "BackupConfig",
    "Credentials",
    "CredentialsNotFoundError",
    "DecodeError",
    "Interaction",
    "InteractionKind",
    "InteractionsError",
    "KeyResult",
    "LintingConfig",
    "Member",
    "MemberCredentials",
    "Objective",
    "OkrVisibility",
    "PublishConfig",
    "Team",
    "TeamConfig",
    "TeamNotFoundError",
    "TeamStore",
    "ValidationError",
    "WebhookConfig",
]
