from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from shapes import Shape, Triangle, Filled

from .factory import GraphFactory, ColorGraphFactory

logger = logging.getLogger(__name__)


PendingPolicy = Literal["register", "discard"]

# tag -> number of comma-separated numeric fields
ARITY = {"P": 2, "C": 3, "T": 6, "F": 0}


class InstructionError(ValueError):
    pass


@dataclass(frozen=True)
class Instruction:
    tag: str
    values: Tuple[float, ...]
    text: str

    @property
    def known(self) -> bool:
        return self.tag in ARITY


@dataclass(frozen=True)
class FacadeConfig:
    # What to do with an unresolved pending triangle when another T arrives.
    pending_policy: PendingPolicy = "register"

    def __post_init__(self):
        if self.pending_policy not in ("register", "discard"):
            raise ValueError(f"unknown pending policy: {self.pending_policy}")


@dataclass
class BuildResult:
    added: int = 0
    skipped: List[Tuple[str, str]] = field(default_factory=list)


def _parse_values(body: str, count: int) -> Tuple[float, ...]:
    fields = body.split(",")
    if len(fields) != count:
        raise InstructionError(f"expected {count} comma-separated numbers, got {len(fields)}")
    values: List[float] = []
    for f in fields:
        try:
            v = float(f)
        except ValueError:
            raise InstructionError(f"not a number: {f.strip()!r}") from None
        if not math.isfinite(v):
            raise InstructionError(f"not a finite number: {f.strip()!r}")
        values.append(v)
    return tuple(values)


def parse_instruction(text: str) -> Optional[Instruction]:
    """
    Parse one instruction such as "P 10,20" or "f".
    Returns None for blank text. Unknown tags come back with known == False.
    Raises InstructionError when a known tag carries malformed fields.
    """
    stripped = text.strip()
    if not stripped:
        return None
    tag = stripped[0].upper()
    count = ARITY.get(tag)
    if not count:
        # unknown tags and F carry no fields; anything after them is ignored
        return Instruction(tag=tag, values=(), text=stripped)
    return Instruction(tag=tag, values=_parse_values(stripped[1:], count), text=stripped)


class GraphicsFacade:
    """
    Builds a scene from a command string such as
    "P 10,20; C 50,50,25; T 0,0,100,0,50,80; F".

    Points and circles go through the factory. A triangle is held as the
    pending shape until F wraps it in Filled, another T replaces it, or the
    input ends (then it is registered as is).
    """

    def __init__(self, factory: GraphFactory, config: Optional[FacadeConfig] = None):
        self.factory = factory
        self.config = config or FacadeConfig()

    @property
    def scene(self):
        return self.factory.scene

    def build_scene_from_string(self, command: str) -> BuildResult:
        scene = self.scene
        scene.clear()
        result = BuildResult()
        pending: Optional[Shape] = None
        for text in command.split(";"):
            try:
                instr = parse_instruction(text)
            except InstructionError as e:
                logger.warning("rejected instruction %r: %s", text.strip(), e)
                result.skipped.append((text.strip(), str(e)))
                continue
            if instr is None:
                continue
            if not instr.known:
                logger.warning("ignored unknown instruction %r", instr.text)
                result.skipped.append((instr.text, f"unknown instruction tag {instr.tag!r}"))
                continue
            pending = self._apply(instr, pending)
        if pending is not None:
            logger.debug("registering unfilled pending triangle at end of input")
            scene.add_object(pending)
        result.added = len(scene)
        return result

    def _apply(self, instr: Instruction, pending: Optional[Shape]) -> Optional[Shape]:
        """Run one instruction and return the new pending shape."""
        if instr.tag == "P":
            self.factory.create_point(*instr.values)
        elif instr.tag == "C":
            self.factory.create_circle(*instr.values)
        elif instr.tag == "T":
            if pending is not None:
                if self.config.pending_policy == "register":
                    logger.debug("registering replaced pending triangle")
                    self.scene.add_object(pending)
                else:
                    logger.debug("discarding replaced pending triangle")
            return Triangle(*instr.values, colored=self.factory.colored)
        elif instr.tag == "F":
            if pending is not None:
                self.scene.add_object(Filled(pending))
                return None
            logger.debug("F without a pending triangle, nothing to fill")
        return pending


def build_scene_from_string(
    command: str,
    factory: Optional[GraphFactory] = None,
    config: Optional[FacadeConfig] = None,
) -> BuildResult:
    """Shortcut: colored factory on the process-wide scene unless told otherwise."""
    if factory is None:
        factory = ColorGraphFactory()
    return GraphicsFacade(factory, config).build_scene_from_string(command)
