"""Characters a player can choose to play as."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Job(Enum):
    """The playable characters."""

    NOVELIST = 0
    EXPLORER = 1
    ENTOMOLOGIST = 2
    JOURNALIST = 3


_WALK_FRAME_PREFIX = {
    Job.NOVELIST: ":/NovelistWalk/resourse/NovelistWalk/NovelistWalk",
    Job.EXPLORER: ":/ExplorerWalk/resourse/ExplorerWalk/ExplorerWalk",
    Job.ENTOMOLOGIST: ":/KunchongWalk/resourse/KunchongWalk/KunchongWalk",
    Job.JOURNALIST: ":/JournalistWalk/resourse/JournalistWalk/JournalistWalk",
}

WALK_FRAME_COUNT = 5


@dataclass
class Identity:
    """A player's character together with the pictures that show it."""

    role: Job
    image_path: str = ""
    cartoon_path: str = ""

    def walk_frame_paths(self) -> list[str]:
        """Resource paths of the walking animation frames, in order."""
        prefix = _WALK_FRAME_PREFIX[self.role]
        return [f"{prefix}{n}.png" for n in range(1, WALK_FRAME_COUNT + 1)]


# Character buttons on the selection screen, in display order.  Only the first
# four buttons are bound to a character.
_CHOICES = (
    (Job.NOVELIST, ":/role/resourse/image/novelist.png",
     ":/role/resourse/image/NovelistKatong.png"),
    (Job.ENTOMOLOGIST, ":/role/resourse/image/kunchong.png",
     ":/role/resourse/image/kunchongKatong.png"),
    (Job.JOURNALIST, ":/role/resourse/image/journalist.png",
     ":/role/resourse/image/journalistKaTong.png"),
    (Job.EXPLORER, ":/role/resourse/image/explorer.png",
     ":/role/resourse/image/explorerKatong.png"),
)


def identity_for_choice(index: int) -> Identity:
    """The identity bound to character button ``index`` on the selection screen."""
    if not 0 <= index < len(_CHOICES):
        raise ValueError(f"no character bound to choice {index}")
    role, image, cartoon = _CHOICES[index]
    return Identity(role=role, image_path=image, cartoon_path=cartoon)