"""Weighted Selector

Picks what the character says each time the key is pressed.

Selection happens in two steps:
1. One group is drawn, with probability weight / total weight.
2. Inside that group, one sound and one caption are drawn uniformly and
   independently. A group with 3 sounds and 2 captions therefore offers
   6 combinations without listing them.

All randomness comes from a `random.Random` instance that callers may pass in,
so a fixed seed replays the same sequence of selections.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

from customsound.models.sound import SelectedSound, SoundGroup

T = TypeVar("T")

# Shared source for callers that do not bring their own
_default_rng = random.Random()


def _weight(group: SoundGroup) -> int:
    # Validated groups are never negative; raw ones count as disabled
    return max(0, group.weight)


def select_weighted(
    groups: Sequence[SoundGroup],
    rng: Optional[random.Random] = None,
) -> Optional[SoundGroup]:
    """Draw one group with probability proportional to its weight.

    Args:
        groups: Candidate groups, in config order.
        rng: Random source (default: a module-level `random.Random`).

    Returns:
        The chosen group, or None if the list is empty or all weights are 0.
    """
    if not groups:
        return None

    total = sum(_weight(g) for g in groups)
    if total <= 0:
        return None

    rng = rng or _default_rng
    r = rng.randrange(total)

    cumulative = 0
    for group in groups:
        cumulative += _weight(group)
        if r < cumulative:
            return group
    return None


def _choose(items: Sequence[T], rng: random.Random) -> Optional[T]:
    return rng.choice(items) if items else None


def pick(
    groups: Sequence[SoundGroup],
    rng: Optional[random.Random] = None,
) -> Optional[SelectedSound]:
    """Pick a group, then one of its sounds and one of its captions.

    Either the sound or the caption may come back as None (the group has none),
    and the sound may be '' (its file was missing at load time); callers must
    treat both as "nothing to play".

    Returns:
        A fresh SelectedSound, or None when no group can be drawn.
    """
    rng = rng or _default_rng

    group = select_weighted(groups, rng)
    if group is None:
        return None

    return SelectedSound(
        name=group.name,
        sound=_choose(group.sounds, rng),
        text=_choose(group.texts, rng),
        sound_type=group.sound_type,
        radius=group.radius,
    )
