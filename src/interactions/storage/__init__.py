"""Directory-backed persistence.

Layout:
    <shared>/                          # committed to version control
    ├── config.yaml                    # TeamConfig
    ├── manifesto.md, vision.md        # markdown, stored verbatim
    ├── team/
    │   ├── profile.yaml               # Team
    │   ├── interactions/<id>.yaml     # team-wide feed (shared entries only)
    │   ├── okrs/<id>.yaml             # shared objectives
    │   └── retrospectives/
    ├── drafts/
    └── members/<email>/
        ├── profile.yaml, credentials.yaml
        ├── kudos/<id>.yaml            # received kudos
        └── feedback/<id>.yaml         # received feedback
    <private>/                         # never committed
    ├── kudos/sent/, feedback/sent/
    ├── journal/, okrs/, drafts/, retrospectives/
"""

from interactions.storage.store import TeamStore

__all__ = ["TeamStore"]
