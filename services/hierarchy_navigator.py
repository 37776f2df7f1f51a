"""
Drill-down navigation over static reference hierarchies.

Two trees are exposed through the same navigator:

* the ISCO-08 occupation classification, stored as four flat arrays linked
  by parent codes (major -> sub-major -> minor -> unit group), and
* the Indian education pathway tree, stored as nested owned lists
  (curriculum -> stream -> UG -> PG -> PhD).

A navigator holds the current selection path. Selecting a node at level k
truncates everything deeper, so the candidates at k+1 are always exactly the
children of the node selected at k.
"""
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence
import logging

from core.errors import HierarchyNodeNotFound
from models.reference import (
    Breadcrumb,
    Curriculum,
    ISCOData,
    ISCOUnitGroup,
    IndianEducationSystem,
    LevelView,
    NavigationView,
    NodeRef,
)

logger = logging.getLogger(__name__)


class HierarchySource(ABC):
    level_names: Sequence[str] = ()

    @abstractmethod
    def roots(self) -> List[Any]:
        ...

    @abstractmethod
    def children(self, level: int, node: Any) -> List[Any]:
        """Children (at level + 1) of `node`, which sits at `level`."""

    @abstractmethod
    def key(self, node: Any) -> str:
        ...

    def label(self, node: Any) -> str:
        return getattr(node, "title", None) or getattr(node, "name", "")

    def detail(self, level: int, node: Any) -> Dict:
        return node.to_doc()

    @property
    def depth(self) -> int:
        return len(self.level_names)


# ---------- Occupations ----------
class OccupationIndex(HierarchySource):
    """Arena of ISCO groups with code lookups and parent-code child lists."""

    level_names = ("Major Group", "Sub-Major Group", "Minor Group", "Unit Group")

    def __init__(self, data: ISCOData) -> None:
        self.data = data
        self._levels = [data.major_groups, data.sub_major_groups, data.minor_groups, data.unit_groups]
        self._by_code = [{g.code: g for g in groups} for groups in self._levels]

        self._children: List[Dict[str, List[Any]]] = [defaultdict(list) for _ in range(3)]
        for group in data.sub_major_groups:
            self._children[0][group.major_group_code].append(group)
        for group in data.minor_groups:
            self._children[1][group.sub_major_group_code].append(group)
        for group in data.unit_groups:
            self._children[2][group.minor_group_code].append(group)

    def roots(self) -> List[Any]:
        return list(self.data.major_groups)

    def children(self, level: int, node: Any) -> List[Any]:
        if level >= 3:
            return []
        # .get so a missing parent never grows the defaultdict
        return list(self._children[level].get(node.code, []))

    def key(self, node: Any) -> str:
        return node.code

    def find(self, level: int, code: str) -> Optional[Any]:
        return self._by_code[level].get(code)

    def unit(self, code: str) -> Optional[ISCOUnitGroup]:
        return self._by_code[3].get(code)

    def parent(self, level: int, node: Any) -> Optional[Any]:
        if level == 1:
            return self.find(0, node.major_group_code)
        if level == 2:
            return self.find(1, node.sub_major_group_code)
        if level == 3:
            return self.find(2, node.minor_group_code)
        return None

    def search(self, term: str) -> List[ISCOUnitGroup]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(self.data.unit_groups)
        return [u for u in self.data.unit_groups if needle in u.title.lower() or needle in u.code.lower()]

    def ancestry(self, unit: ISCOUnitGroup) -> List[Any]:
        """Root-first chain ending at a unit group.

        Walks parent codes upward and stops at the first code that does not
        resolve, so a broken chain yields the unit plus whichever ancestors
        sit below the break. The chain reaches a major group only when every
        link resolves.
        """
        chain = [unit]
        node, level = unit, 3
        while level > 0:
            parent = self.parent(level, node)
            if parent is None:
                logger.warning(f"ISCO unit group {unit.code} has no resolvable ancestor at level {level - 1}")
                break
            chain.append(parent)
            node, level = parent, level - 1
        return list(reversed(chain))


# ---------- Education ----------
class EducationTree(HierarchySource):
    level_names = ("Curriculum", "Stream", "Undergraduate", "Postgraduate", "PhD")

    _CHILD_FIELDS = ("streams_after10th", "ug_options", "pg_options", "phd_options")

    def __init__(self, system: IndianEducationSystem) -> None:
        self.system = system

    def roots(self) -> List[Any]:
        return list(self.system.curricula)

    def children(self, level: int, node: Any) -> List[Any]:
        if level >= len(self._CHILD_FIELDS):
            return []
        return list(getattr(node, self._CHILD_FIELDS[level], None) or [])

    def key(self, node: Any) -> str:
        return node.id

    def label(self, node: Any) -> str:
        if isinstance(node, Curriculum):
            return node.short_name or node.name
        return node.name


# ---------- Navigator ----------
class HierarchyNavigator:
    def __init__(self, source: HierarchySource, root_label: str = "Explorer") -> None:
        self.source = source
        self.root_label = root_label
        self._path: List[Any] = []

    @classmethod
    def from_keys(cls, source: HierarchySource, keys: Sequence[str], root_label: str = "Explorer", **kwargs):
        """Rebuild a navigator by replaying a selection path given as keys."""
        navigator = cls(source, root_label, **kwargs)
        for level, key in enumerate(keys):
            navigator.select(level, key)
        return navigator

    @property
    def path(self) -> tuple:
        return tuple(self._path)

    @property
    def path_keys(self) -> List[str]:
        return [self.source.key(n) for n in self._path]

    @property
    def selected(self) -> Optional[Any]:
        return self._path[-1] if self._path else None

    def candidates(self, level: int) -> List[Any]:
        if level == 0:
            return self.source.roots()
        if level > len(self._path) or level >= self.source.depth:
            return []
        return self.source.children(level - 1, self._path[level - 1])

    def select(self, level: int, key: str) -> Any:
        if level < 0 or level > len(self._path):
            raise HierarchyNodeNotFound(level, key)
        for node in self.candidates(level):
            if self.source.key(node) == key:
                self._path = self._path[:level] + [node]
                return node
        raise HierarchyNodeNotFound(level, key)

    def clear(self, level: int = 0) -> None:
        """Select nothing at `level`; deeper selections go too."""
        self._path = self._path[:max(level, 0)]

    def _set_path(self, nodes: List[Any]) -> None:
        self._path = list(nodes)

    def breadcrumbs(self) -> List[Breadcrumb]:
        crumbs = [Breadcrumb(label=self.root_label, depth=0, clickable=bool(self._path))]
        for index, node in enumerate(self._path):
            depth = index + 1
            crumbs.append(Breadcrumb(label=self.source.label(node), depth=depth, clickable=depth < len(self._path)))
        return crumbs

    def _ref(self, level: int, node: Any) -> NodeRef:
        return NodeRef(level=level, key=self.source.key(node), title=self.source.label(node))

    def view(self) -> NavigationView:
        levels = []
        for level in range(min(len(self._path) + 1, self.source.depth)):
            levels.append(LevelView(
                level=level,
                name=self.source.level_names[level],
                candidates=[self._ref(level, n) for n in self.candidates(level)],
                selected=self.source.key(self._path[level]) if level < len(self._path) else None,
            ))
        detail = None
        if self._path:
            detail = self.source.detail(len(self._path) - 1, self._path[-1])
        return NavigationView(
            path=[self._ref(i, n) for i, n in enumerate(self._path)],
            levels=levels,
            breadcrumbs=self.breadcrumbs(),
            detail=detail,
        )


class OccupationNavigator(HierarchyNavigator):
    def __init__(self, source: OccupationIndex, root_label: str = "Occupations") -> None:
        super().__init__(source, root_label)
        self.search_term = ""
        # Search result whose chain never reaches a major group
        self._detached: List[Any] = []

    @property
    def selected(self) -> Optional[Any]:
        return self._detached[-1] if self._detached else super().selected

    def select(self, level: int, key: str) -> Any:
        node = super().select(level, key)
        self._detached = []
        return node

    def clear(self, level: int = 0) -> None:
        super().clear(level)
        self._detached = []

    def search(self, term: str) -> List[ISCOUnitGroup]:
        self.search_term = term or ""
        return self.source.search(self.search_term)

    def select_search_result(self, code: str) -> tuple:
        """Jump straight to a unit group, rebuilding the path above it.

        When the parent codes break before a major group, the drill-down path
        is left empty and the unit is still shown with the ancestors that do
        resolve.
        """
        unit = self.source.unit(code)
        if unit is None:
            raise HierarchyNodeNotFound(3, code)
        chain = self.source.ancestry(unit)
        if len(chain) == self.source.depth:
            self._set_path(chain)
            self._detached = []
        else:
            self._set_path([])
            self._detached = chain
        self.search_term = ""
        return tuple(chain)

    def _detached_level(self) -> int:
        return self.source.depth - len(self._detached)

    def breadcrumbs(self) -> List[Breadcrumb]:
        if not self._detached:
            return super().breadcrumbs()
        first_level = self._detached_level()
        crumbs = [Breadcrumb(label=self.root_label, depth=0, clickable=True)]
        for offset, node in enumerate(self._detached):
            crumbs.append(Breadcrumb(label=self.source.label(node), depth=first_level + offset + 1, clickable=False))
        return crumbs

    def view(self) -> NavigationView:
        view = super().view()
        if not self._detached:
            return view
        first_level = self._detached_level()
        return NavigationView(
            path=[self._ref(first_level + offset, n) for offset, n in enumerate(self._detached)],
            levels=view.levels,
            breadcrumbs=view.breadcrumbs,
            detail=self.source.detail(self.source.depth - 1, self._detached[-1]),
        )
