"""Directory-backed store for team records, journals and credentials.

Two explicit roots are used: a *shared* root meant to be committed to version
control, and a *private* root that never leaves the machine. Every entity is
one YAML document; paths are built here and nowhere else.

Kudos and feedback are fanned out on write: one copy in the author's private
"sent" feed, one in every recipient's shared "received" feed, and one in the
team feed when the interaction is shared. Each copy is an independent atomic
file replace. There is no cross-file transaction, so a crash mid-way can
leave an interaction visible in some feeds and not others.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from interactions.auth import Credentials, MemberCredentials
from interactions.errors import (
    CredentialsNotFoundError,
    DecodeError,
    TeamNotFoundError,
    ValidationError,
)
from interactions.models import (
    Interaction,
    InteractionKind,
    Member,
    Objective,
    OkrVisibility,
    Team,
    TeamConfig,
)
from interactions.storage.documents import (
    atomic_write_text,
    dump_yaml,
    parse_document,
    read_document,
    read_text_document,
    write_document,
)

if TYPE_CHECKING:
    from interactions.config import AppConfig

logger = logging.getLogger(__name__)

DOC_SUFFIX = ".yaml"

SHARED_DIRS = [
    "members",
    "team/interactions",
    "team/okrs",
    "team/retrospectives",
    "drafts",
]

PRIVATE_DIRS = [
    "kudos/sent",
    "feedback/sent",
    "okrs",
    "journal",
    "drafts",
    "retrospectives",
]


class TeamStore:
    """Typed load/save over the shared and private directory trees."""

    def __init__(self, shared_root: Path, private_root: Path) -> None:
        self.shared_root = Path(shared_root)
        self.private_root = Path(private_root)

    @classmethod
    def for_workspace(
        cls,
        root: Path,
        shared_name: str = ".team",
        private_name: str = ".personal",
    ) -> TeamStore:
        root = Path(root)
        return cls(root / shared_name, root / private_name)

    @classmethod
    def from_config(cls, config: AppConfig) -> TeamStore:
        return cls.for_workspace(
            config.storage.workspace,
            shared_name=config.storage.shared_dir,
            private_name=config.storage.private_dir,
        )

    # ── Initialization ────────────────────────────────────────

    def initialize(self) -> None:
        """Create the full directory skeleton. Idempotent."""
        for d in SHARED_DIRS:
            (self.shared_root / d).mkdir(parents=True, exist_ok=True)
        for d in PRIVATE_DIRS:
            (self.private_root / d).mkdir(parents=True, exist_ok=True)
        logger.info("Initialized storage at %s and %s", self.shared_root, self.private_root)

    def is_initialized(self) -> bool:
        return self.members_root.is_dir()

    def missing_paths(self) -> list[Path]:
        """Skeleton directories and required files that do not exist yet.

        An empty list means the roots are fully initialized, including a profile
        and credentials for every stored leader. A non-empty list after
        ``initialize_team`` points at an interrupted initialization.
        """
        dirs = [self.shared_root / d for d in SHARED_DIRS]
        dirs += [self.private_root / d for d in PRIVATE_DIRS]
        missing = [d for d in dirs if not d.is_dir()]
        files = [self.config_path, self.team_path]
        team = self.load_team()
        for email in team.leaders if team else []:
            files += [self._profile_path(email), self._credentials_path(email)]
        missing += [f for f in files if not f.is_file()]
        return missing

    def initialize_team(
        self,
        team: Team,
        config: TeamConfig,
        leader: Member,
        pincode: str,
    ) -> None:
        """Set up a new team with its first leader.

        Steps run in order and stop at the first failure; nothing already
        written is rolled back.
        """
        self.initialize()
        self.save_config(config)
        self.save_team(team)
        self.save_member(leader)
        self.save_credentials(leader.email, Credentials.create(pincode))
        logger.info("Initialized team %r led by %s", team.name, leader.email)

    # ── Paths ─────────────────────────────────────────────────

    @property
    def config_path(self) -> Path:
        return self.shared_root / f"config{DOC_SUFFIX}"

    @property
    def team_path(self) -> Path:
        return self.shared_root / "team" / f"profile{DOC_SUFFIX}"

    @property
    def manifesto_path(self) -> Path:
        return self.shared_root / "manifesto.md"

    @property
    def vision_path(self) -> Path:
        return self.shared_root / "vision.md"

    @property
    def members_root(self) -> Path:
        return self.shared_root / "members"

    @property
    def team_feed_dir(self) -> Path:
        return self.shared_root / "team" / "interactions"

    @property
    def sent_kudos_dir(self) -> Path:
        return self.private_root / "kudos" / "sent"

    @property
    def sent_feedback_dir(self) -> Path:
        return self.private_root / "feedback" / "sent"

    @property
    def journal_dir(self) -> Path:
        return self.private_root / "journal"

    def member_dir(self, email: str) -> Path:
        if not email or email in (".", "..") or "/" in email or "\\" in email or "\0" in email:
            raise ValidationError(f"Invalid member identifier: {email!r}")
        return self.members_root / email

    def received_kudos_dir(self, email: str) -> Path:
        return self.member_dir(email) / "kudos"

    def received_feedback_dir(self, email: str) -> Path:
        return self.member_dir(email) / "feedback"

    def _objective_dir(self, visibility: OkrVisibility) -> Path:
        if visibility is OkrVisibility.SHARED:
            return self.shared_root / "team" / "okrs"
        return self.private_root / "okrs"

    @staticmethod
    def _entry_name(entry_id: str) -> str:
        unsafe = not entry_id or entry_id.startswith(".")
        if unsafe or any(c in entry_id for c in ("/", "\\", "\0")):
            raise ValidationError(f"Invalid entry id: {entry_id!r}")
        return f"{entry_id}{DOC_SUFFIX}"

    # ── Team-level singletons ─────────────────────────────────

    def load_config(self) -> TeamConfig | None:
        return read_document(self.config_path, TeamConfig.from_dict)

    def save_config(self, config: TeamConfig) -> None:
        write_document(self.config_path, config.to_dict())

    def load_team(self) -> Team | None:
        return read_document(self.team_path, Team.from_dict)

    def save_team(self, team: Team) -> None:
        write_document(self.team_path, team.to_dict())

    def load_manifesto(self) -> str | None:
        return read_text_document(self.manifesto_path)

    def save_manifesto(self, content: str) -> None:
        atomic_write_text(self.manifesto_path, content)

    def load_vision(self) -> str | None:
        return read_text_document(self.vision_path)

    def save_vision(self, content: str) -> None:
        atomic_write_text(self.vision_path, content)

    # ── Members ───────────────────────────────────────────────

    def list_members(self) -> list[str]:
        """Names of the member directories; no check that a profile exists."""
        if not self.members_root.is_dir():
            return []
        return sorted(p.name for p in self.members_root.iterdir() if p.is_dir())

    def _profile_path(self, email: str) -> Path:
        return self.member_dir(email) / f"profile{DOC_SUFFIX}"

    def load_member(self, email: str) -> Member | None:
        return read_document(self._profile_path(email), Member.from_dict)

    def save_member(self, member: Member) -> None:
        write_document(self._profile_path(member.email), member.to_dict())

    def add_member(self, member: Member) -> Team:
        """Save ``member``'s profile and record them in the stored team."""
        team = self.load_team()
        if team is None:
            raise TeamNotFoundError(f"No team stored under {self.shared_root}")
        self.save_member(member)
        team.add_member(member.email)
        self.save_team(team)
        logger.info("Added %s to team %r", member.email, team.name)
        return team

    # ── Credentials ───────────────────────────────────────────

    def _credentials_path(self, email: str) -> Path:
        return self.member_dir(email) / f"credentials{DOC_SUFFIX}"

    def load_credentials(self, email: str) -> Credentials | None:
        stored = read_document(self._credentials_path(email), MemberCredentials.from_dict)
        return None if stored is None else stored.credentials

    def save_credentials(self, email: str, credentials: Credentials) -> None:
        stored = MemberCredentials(email=email, credentials=credentials)
        write_document(self._credentials_path(email), stored.to_dict())

    def verify_pincode(self, email: str, pincode: str) -> bool:
        """True if ``pincode`` matches. Missing credentials raise, never return False."""
        credentials = self.load_credentials(email)
        if credentials is None:
            raise CredentialsNotFoundError(email)
        return credentials.verify(pincode)

    def update_pincode(self, email: str, new_pincode: str) -> None:
        credentials = self.load_credentials(email)
        if credentials is None:
            raise CredentialsNotFoundError(email)
        credentials.rotate(new_pincode)
        self.save_credentials(email, credentials)
        logger.info("Rotated pincode for %s", email)

    # ── Interaction feeds ─────────────────────────────────────

    def save_kudos(self, interaction: Interaction) -> list[Path]:
        """Fan an appreciation out to sent, received and (if shared) team feeds."""
        return self._fan_out(
            interaction,
            sent_dir=self.sent_kudos_dir,
            received_dir=self.received_kudos_dir,
        )

    def save_feedback(self, interaction: Interaction) -> list[Path]:
        """Fan feedback out to sent, received and (if shared) team feeds."""
        return self._fan_out(
            interaction,
            sent_dir=self.sent_feedback_dir,
            received_dir=self.received_feedback_dir,
        )

    def save_interaction(self, interaction: Interaction) -> list[Path]:
        """Route an interaction by kind; non-kudos kinds go to the private journal."""
        if interaction.kind is InteractionKind.APPRECIATION:
            return self.save_kudos(interaction)
        if interaction.kind is InteractionKind.FEEDBACK:
            return self.save_feedback(interaction)
        name = self._entry_name(interaction.id)
        text = dump_yaml(interaction.to_dict())
        targets = [self.journal_dir / name]
        if interaction.shared:
            targets.append(self.team_feed_dir / name)
        for path in targets:
            atomic_write_text(path, text)
        return targets

    def _fan_out(
        self,
        interaction: Interaction,
        sent_dir: Path,
        received_dir: Callable[[str], Path],
    ) -> list[Path]:
        name = self._entry_name(interaction.id)
        # Resolve every target before writing so a bad recipient id fails early.
        targets = [sent_dir / name]
        targets += [received_dir(email) / name for email in dict.fromkeys(interaction.recipients)]
        if interaction.shared:
            targets.append(self.team_feed_dir / name)

        text = dump_yaml(interaction.to_dict())
        for path in targets:
            atomic_write_text(path, text)
        logger.info(
            "Saved %s %s from %s to %d location(s)",
            interaction.kind.value,
            interaction.id,
            interaction.author,
            len(targets),
        )
        return targets

    def load_all(self, feed_dir: Path) -> list[Interaction]:
        """Every readable interaction in ``feed_dir``, newest first.

        Files that fail to decode are logged and skipped.
        """
        feed_dir = Path(feed_dir)
        if not feed_dir.is_dir():
            return []
        items: list[Interaction] = []
        for path in feed_dir.glob(f"*{DOC_SUFFIX}"):
            if not path.is_file():
                continue
            try:
                text = path.read_text(encoding="utf-8")
                items.append(parse_document(path, text, Interaction.from_dict))
            except UnicodeDecodeError as e:
                logger.warning("Skipping unreadable feed entry %s: %s", path, e)
            except DecodeError as e:
                logger.warning("Skipping corrupt feed entry: %s", e)
        items.sort(key=lambda i: i.timestamp, reverse=True)
        return items

    def load_sent_kudos(self) -> list[Interaction]:
        return self.load_all(self.sent_kudos_dir)

    def load_received_kudos(self, email: str) -> list[Interaction]:
        return self.load_all(self.received_kudos_dir(email))

    def load_sent_feedback(self) -> list[Interaction]:
        return self.load_all(self.sent_feedback_dir)

    def load_received_feedback(self, email: str) -> list[Interaction]:
        return self.load_all(self.received_feedback_dir(email))

    def load_team_feed(self) -> list[Interaction]:
        return self.load_all(self.team_feed_dir)

    def load_journal(self) -> list[Interaction]:
        return self.load_all(self.journal_dir)

    # ── Objectives ────────────────────────────────────────────

    def save_objective(self, objective: Objective) -> Path:
        """Write to the team okrs when shared, else the private okrs.

        A copy under the other visibility is removed so a visibility change
        never leaves the objective in both trees.
        """
        name = self._entry_name(objective.id)
        path = self._objective_dir(objective.visibility) / name
        other = (
            OkrVisibility.PRIVATE
            if objective.visibility is OkrVisibility.SHARED
            else OkrVisibility.SHARED
        )
        write_document(path, objective.to_dict())
        (self._objective_dir(other) / name).unlink(missing_ok=True)
        return path

    def load_objective(self, objective_id: str) -> Objective | None:
        name = self._entry_name(objective_id)
        for visibility in (OkrVisibility.PRIVATE, OkrVisibility.SHARED):
            found = read_document(self._objective_dir(visibility) / name, Objective.from_dict)
            if found is not None:
                return found
        return None

    def load_objectives(self) -> list[Objective]:
        """Private and shared objectives, ordered by id. Corrupt files are skipped."""
        objectives: list[Objective] = []
        for visibility in (OkrVisibility.PRIVATE, OkrVisibility.SHARED):
            okr_dir = self._objective_dir(visibility)
            if not okr_dir.is_dir():
                continue
            for path in okr_dir.glob(f"*{DOC_SUFFIX}"):
                try:
                    found = read_document(path, Objective.from_dict)
                except DecodeError as e:
                    logger.warning("Skipping corrupt objective: %s", e)
                    continue
                if found is not None:
                    objectives.append(found)
        return sorted(objectives, key=lambda o: o.id)

