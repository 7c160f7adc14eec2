"""
Partition store.

Owns the division count K, each group's color, name and membership, and
the pool of unassigned units. Every cataloged unit is always in exactly
one of {pool, group 1..K}.

Contains:
- POOL: Sentinel destination for the unassigned pool
- Group: A named, colored division
- PartitionStore: Resize / move / query operations
"""

from __future__ import annotations

import logging
import numbers
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..config.dataclasses import PartitionConfig
from ..exceptions import DivisionCountError, UnknownUnitError
from ..geo.catalog import UnitCatalog


logger = logging.getLogger(__name__)


class PoolLocation(str, Enum):
    """Location of units that are not in any group."""

    POOL = "pool"

    def __repr__(self) -> str:  # pragma: no cover
        return "POOL"


POOL = PoolLocation.POOL

Location = Union[PoolLocation, int]
Listener = Callable[["PartitionStore"], None]


@dataclass
class Group:
    """
    A named, colored division.

    Attributes
    ----------
    index : int
        1-based position, 1..K
    color : str
        Palette color for this index
    name : str
        User-editable display name
    members : List[str]
        Unit codes in display order
    """
    index: int
    color: str
    name: str
    members: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.members)


class PartitionStore:
    """
    Assignment of every cataloged unit to the pool or to one group.

    Mutations are ``resize``, ``move_unit``, ``move_batch``, ``rename``
    and ``reset``. Each is total over valid inputs: invalid inputs raise
    before anything changes. Subscribers are notified once per mutation
    (once per ``batch()`` block).

    Parameters
    ----------
    catalog : UnitCatalog
        The fixed universe of units
    config : PartitionConfig, optional
        Division limits, palette and naming
    """

    def __init__(self, catalog: UnitCatalog, config: Optional[PartitionConfig] = None):
        self.catalog = catalog
        self.config = config or PartitionConfig()
        self._groups: Dict[int, Group] = {}
        self._pool: List[str] = []
        self._location: Dict[str, Location] = {}
        self._listeners: List[Listener] = []
        self._batch_depth = 0
        self._pending = False
        self._init_state()

    # ---- Queries ----

    @property
    def K(self) -> int:
        """Current number of groups."""
        return len(self._groups)

    def location_of(self, unit_id: str) -> Location:
        """Return ``POOL`` or the 1-based index of the unit's group."""
        try:
            return self._location[unit_id]
        except KeyError:
            raise UnknownUnitError(unit_id) from None

    def group(self, index: int) -> Group:
        self._check_index(index)
        return self._groups[index]

    def groups(self) -> List[Group]:
        """Groups 1..K in index order."""
        return [self._groups[i] for i in range(1, self.K + 1)]

    def members(self, index: int) -> Tuple[str, ...]:
        return tuple(self.group(index).members)

    def pool_units(self) -> Tuple[str, ...]:
        """Pool contents in display order."""
        return tuple(self._pool)

    def remaining_count(self) -> int:
        """Number of units still in the pool."""
        return len(self._pool)

    def assignment(self) -> Dict[str, Location]:
        """Location of every unit, in catalog order."""
        return {uid: self._location[uid] for uid in self.catalog.ids}

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups())

    def __repr__(self) -> str:
        sizes = ", ".join(str(g.count) for g in self.groups())
        return f"PartitionStore(K={self.K}, pool={len(self._pool)}, groups=[{sizes}])"

    # ---- Mutations ----

    def resize(self, new_k: int) -> None:
        """
        Change the number of groups.

        Groups above ``new_k`` are dissolved into the pool. Groups up to
        ``min(K, new_k)`` keep members, color and name. New groups get the
        palette color for their index and the default name.

        Raises
        ------
        DivisionCountError
            If ``new_k`` is outside the configured bounds.
        """
        cfg = self.config
        if not isinstance(new_k, numbers.Integral) or not (cfg.min_divisions <= new_k <= cfg.max_divisions):
            raise DivisionCountError(new_k, cfg.min_divisions, cfg.max_divisions)
        old_k = self.K
        if new_k == old_k:
            return

        for index in range(old_k, new_k, -1):
            dissolved = self._groups.pop(index)
            for unit_id in dissolved.members:
                self._location[unit_id] = POOL
                self._pool.append(unit_id)
            logger.debug("Dissolved group %d, %d units back to pool", index, dissolved.count)

        for index in range(old_k + 1, new_k + 1):
            self._groups[index] = self._new_group(index)

        logger.debug("Resized partition: K %d -> %d", old_k, new_k)
        self._notify()

    def move_unit(self, unit_id: str, destination: Location) -> bool:
        """
        Move one unit to ``POOL`` or a group index.

        Moving a unit to where it already is does nothing and keeps its
        position.

        Returns
        -------
        bool
            True if the unit changed location.
        """
        current = self.location_of(unit_id)
        destination = self._check_destination(destination)
        if current == destination:
            return False
        self._relocate(unit_id, current, destination)
        self._notify()
        return True

    def move_batch(self, unit_ids: Iterable[str], destination: Location) -> List[str]:
        """
        Move several units to one destination as a single operation.

        Every id is validated before anything moves. Units already at the
        destination are left where they are.

        Returns
        -------
        List[str]
            The ids that changed location, in the order given.
        """
        ids = self.catalog.validate(unit_ids)
        destination = self._check_destination(destination)
        moved: List[str] = []
        seen = set()
        for unit_id in ids:
            if unit_id in seen:
                continue
            seen.add(unit_id)
            current = self._location[unit_id]
            if current == destination:
                continue
            self._relocate(unit_id, current, destination)
            moved.append(unit_id)
        if moved:
            logger.debug("Moved %d units to %s", len(moved), destination)
            self._notify()
        return moved

    def rename(self, index: int, name: str) -> None:
        """Set a group's display name."""
        group = self.group(index)
        if group.name == name:
            return
        group.name = name
        self._notify()

    def reset(self) -> None:
        """Restore the initial division count and put every unit back in the pool."""
        self._init_state()
        logger.debug("Partition reset to K=%d", self.K)
        self._notify()

    def bring_to_front(self, unit_ids: Iterable[str]) -> None:
        """
        Move units to the front of their current list, keeping their order.

        A display-order change only: locations are untouched and
        subscribers are not notified. The next mutation restores the
        sorted pool order.
        """
        ids = self.catalog.validate(unit_ids)
        wanted = set(ids)
        if not wanted:
            return
        lists = [self._pool] + [g.members for g in self.groups()]
        for lst in lists:
            front = [uid for uid in ids if uid in wanted and uid in lst]
            if not front:
                continue
            front_set = set(front)
            rest = [uid for uid in lst if uid not in front_set]
            lst[:] = front + rest

    @contextmanager
    def batch(self) -> Iterator["PartitionStore"]:
        """Defer subscriber notification until the block exits."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._pending:
                self._pending = False
                self._fire()

    # ---- Subscribers ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after each mutation.

        Returns
        -------
        Callable[[], None]
            Function that removes the callback.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- Invariant ----

    def check_invariant(self) -> None:
        """
        Verify that every unit is in exactly one location.

        Raises
        ------
        AssertionError
            If a unit is missing, duplicated, or its recorded location
            disagrees with the list holding it.
        """
        seen: Dict[str, Location] = {}
        for uid in self._pool:
            assert uid not in seen, f"{uid} listed twice"
            seen[uid] = POOL
        for group in self.groups():
            for uid in group.members:
                assert uid not in seen, f"{uid} listed twice"
                seen[uid] = group.index
        assert set(seen) == set(self.catalog.ids), "pool and groups do not cover the catalog"
        assert seen == self._location, "location index out of sync"

    # ---- Internals ----

    def _init_state(self) -> None:
        k = self.config.initial_divisions
        self._groups = {i: self._new_group(i) for i in range(1, k + 1)}
        self._pool = list(self.catalog.ids)
        self._location = {uid: POOL for uid in self.catalog.ids}
        self._sort_pool()

    def _new_group(self, index: int) -> Group:
        return Group(
            index=index,
            color=self.config.color_for(index),
            name=self.config.default_name(index),
        )

    def _sort_pool(self) -> None:
        catalog = self.catalog
        self._pool.sort(key=lambda uid: catalog.get(uid).sort_key)

    def _check_index(self, index: int) -> None:
        if index not in self._groups:
            raise DivisionCountError(index, 1, self.K)

    def _check_destination(self, destination: Location) -> Location:
        if destination is POOL or destination == POOL.value:
            return POOL
        self._check_index(destination)
        return destination

    def _relocate(self, unit_id: str, current: Location, destination: Location) -> None:
        if current is POOL:
            self._pool.remove(unit_id)
        else:
            self._groups[current].members.remove(unit_id)
        if destination is POOL:
            self._pool.append(unit_id)
        else:
            self._groups[destination].members.append(unit_id)
        self._location[unit_id] = destination

    def _notify(self) -> None:
        self._sort_pool()
        if self._batch_depth > 0:
            self._pending = True
            return
        self._fire()

    def _fire(self) -> None:
        for listener in list(self._listeners):
            listener(self)
