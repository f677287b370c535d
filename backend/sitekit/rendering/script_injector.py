"""Placement of admin-managed custom scripts into a rendered page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from markupsafe import Markup, escape

from sitekit.models.enums import ScriptPosition
from .records import ScriptRecord

logger = logging.getLogger(__name__)

POSITIONS = tuple(position.value for position in ScriptPosition)
PREPEND_POSITIONS = (ScriptPosition.HEAD_START.value, ScriptPosition.BODY_START.value)


@dataclass(frozen=True)
class ScriptNode:
    script_id: str
    content: str

    def render(self) -> Markup:
        # Script bodies are trusted admin input and are emitted verbatim
        return Markup('<script data-script-id="{}">{}</script>').format(
            escape(self.script_id), Markup(self.content)
        )


@dataclass
class PageDocument:
    """The four injection regions of a page: head-start, head-end,
    body-start and body-end. Other page content is not modelled."""

    regions: dict[str, list[ScriptNode]] = field(
        default_factory=lambda: {position: [] for position in POSITIONS}
    )

    def insert(self, position: str, node: ScriptNode, index: Optional[int] = None) -> None:
        nodes = self.regions[position]
        if index is None:
            nodes.append(node)
        else:
            nodes.insert(index, node)

    def remove(self, script_id: str) -> bool:
        removed = False
        for nodes in self.regions.values():
            for node in list(nodes):
                if node.script_id == script_id:
                    nodes.remove(node)
                    removed = True
        return removed

    def script_ids(self, position: str) -> list[str]:
        return [node.script_id for node in self.regions.get(position, ())]

    def render(self, position: str) -> Markup:
        return Markup("\n").join(node.render() for node in self.regions.get(position, ()))


class ScriptInjector:
    """Injects the scripts of one position into a document.

    Each script id is either absent or present. ``mount`` moves every
    matching script to present, ``unmount`` removes exactly the scripts this
    injector inserted. Scripts go in ascending ``priority`` order; at the
    ``*-start`` positions the block is placed ahead of existing nodes
    without reversing it.
    """

    def __init__(self, scripts: Iterable[ScriptRecord], position: str, *, path: Optional[str] = None):
        self.position = position
        self.path = path
        self._scripts = tuple(scripts)
        self._mounted: list[str] = []

    def matching(self) -> list[ScriptRecord]:
        if self.position not in POSITIONS:
            return []
        selected = [
            script
            for script in self._scripts
            if script.position == self.position and script.is_active and script.targets(self.path)
        ]
        return sorted(selected, key=lambda script: script.priority)

    @property
    def mounted_ids(self) -> tuple[str, ...]:
        return tuple(self._mounted)

    def mount(self, document: PageDocument) -> None:
        if self.position not in POSITIONS:
            logger.debug("Ignoring scripts for unknown position %r", self.position)
            return

        prepend = self.position in PREPEND_POSITIONS
        offset = 0
        for script in self.matching():
            if script.id in self._mounted:
                continue
            node = ScriptNode(script_id=script.id, content=script.script_content)
            document.insert(self.position, node, index=offset if prepend else None)
            offset += 1
            self._mounted.append(script.id)

    def unmount(self, document: PageDocument) -> None:
        for script_id in self._mounted:
            document.remove(script_id)
        self._mounted = []


def inject_all(document: PageDocument, scripts: Iterable[ScriptRecord], *, path: Optional[str] = None) -> list[ScriptInjector]:
    """Mount one injector per known position."""
    scripts = tuple(scripts)
    injectors = [ScriptInjector(scripts, position, path=path) for position in POSITIONS]
    for injector in injectors:
        injector.mount(document)
    return injectors
