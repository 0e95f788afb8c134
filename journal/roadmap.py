# journal/roadmap.py
"""
Multi-year learning plan made of time-boxed blocks.

Each block has
  - an active pool of 2 or 3 languages,
  - exactly one passive-incubation seed,
  - a maintenance pool (the pool DURING the block).

Languages move into maintenance only at a block boundary: the maintenance
pool of block i is the pool of block i-1 plus the languages flagged
graduate_at_end in block i-1's active pool, and nothing else. The pool never
shrinks. A Roadmap that breaks any of this is refused at construction.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

ACTIVE_MIN = 2
ACTIVE_MAX = 3
DEFAULT_FLAG = "🌍"


class ScheduleInvariantViolation(ImproperlyConfigured):
    """The authored roadmap is inconsistent; it must not be served."""


@dataclass(frozen=True)
class LangItem:
    name: str
    note: Optional[str] = None
    graduate_at_end: bool = False


@dataclass(frozen=True)
class RoadmapBlock:
    id: str
    title: str
    date_range: str
    active_pool: Tuple[LangItem, ...]
    passive_seed: LangItem
    maintenance_pool: Tuple[str, ...] = ()
    is_current: bool = False

    @property
    def graduates(self) -> List[str]:
        """Active languages that join maintenance when this block ends."""
        return [item.name for item in self.active_pool if item.graduate_at_end]


def flag_for(name: str, flags: Mapping[str, str]) -> str:
    return flags.get(name, DEFAULT_FLAG)


class Roadmap:
    def __init__(self, blocks: Iterable[RoadmapBlock], flags: Optional[Mapping[str, str]] = None):
        self.blocks: Tuple[RoadmapBlock, ...] = tuple(blocks)
        self.flags: Dict[str, str] = dict(flags or {})
        try:
            self._validate()
        except ScheduleInvariantViolation as e:
            logger.error("roadmap rejected: %s", e)
            raise

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def current(self) -> Optional[RoadmapBlock]:
        return next((b for b in self.blocks if b.is_current), None)

    def _validate(self) -> None:
        seen_ids = set()
        prev: Optional[RoadmapBlock] = None
        for block in self.blocks:
            if block.id in seen_ids:
                raise ScheduleInvariantViolation(f"duplicate block id {block.id!r}")
            seen_ids.add(block.id)
            _check_block(block)
            if prev is not None:
                _check_transition(prev, block)
            prev = block

    def as_list(self) -> List[Dict]:
        out = []
        for b in self.blocks:
            out.append({
                "id": b.id,
                "title": b.title,
                "date_range": b.date_range,
                "is_current": b.is_current,
                "active_pool": [self._item(i) for i in b.active_pool],
                "passive_seed": self._item(b.passive_seed),
                "maintenance_pool": [
                    {"name": n, "flag": flag_for(n, self.flags)} for n in b.maintenance_pool
                ],
            })
        return out

    def _item(self, item: LangItem) -> Dict:
        return {
            "name": item.name,
            "flag": flag_for(item.name, self.flags),
            "note": item.note,
            "graduate_at_end": item.graduate_at_end,
        }


def _check_block(block: RoadmapBlock) -> None:
    """Per-block shape: 2..3 active languages, one passive seed, no early graduation."""
    n = len(block.active_pool)
    if not ACTIVE_MIN <= n <= ACTIVE_MAX:
        raise ScheduleInvariantViolation(
            f"block {block.id!r}: active pool must hold {ACTIVE_MIN}..{ACTIVE_MAX} languages, got {n}"
        )
    if not isinstance(block.passive_seed, LangItem):
        raise ScheduleInvariantViolation(
            f"block {block.id!r}: exactly one passive seed is required"
        )
    early = [name for name in block.graduates if name in block.maintenance_pool]
    if early:
        raise ScheduleInvariantViolation(
            f"block {block.id!r}: {', '.join(early)} graduate at the end of the block "
            f"but are already in its maintenance pool"
        )


def _check_transition(prev: RoadmapBlock, block: RoadmapBlock) -> None:
    """Maintenance grows by exactly the previous block's graduates."""
    before = set(prev.maintenance_pool)
    after = set(block.maintenance_pool)

    dropped = before - after
    if dropped:
        raise ScheduleInvariantViolation(
            f"block {block.id!r}: maintenance pool dropped {', '.join(sorted(dropped))}"
        )
    missing = [name for name in prev.graduates if name not in after]
    if missing:
        raise ScheduleInvariantViolation(
            f"block {block.id!r}: {', '.join(missing)} graduated from {prev.id!r} "
            f"but is missing from the maintenance pool"
        )
    unexpected = after - before - set(prev.graduates)
    if unexpected:
        raise ScheduleInvariantViolation(
            f"block {block.id!r}: {', '.join(sorted(unexpected))} joined maintenance "
            f"without graduating from {prev.id!r}"
        )


def build_blocks(raw: Sequence[Mapping]) -> List[RoadmapBlock]:
    """Turn authored dicts (see blueprint.BLOCKS) into RoadmapBlock values."""
    def item(d: Mapping) -> LangItem:
        return LangItem(name=d["name"], note=d.get("note"), graduate_at_end=bool(d.get("graduate_at_end")))

    blocks = []
    for d in raw:
        seed = d.get("passive")
        blocks.append(RoadmapBlock(
            id=d["id"],
            title=d["title"],
            date_range=d["range"],
            active_pool=tuple(item(a) for a in d.get("active", ())),
            passive_seed=item(seed) if isinstance(seed, Mapping) else seed,
            maintenance_pool=tuple(d.get("maintenance", ())),
            is_current=bool(d.get("is_current")),
        ))
    return blocks
