"""Word-part catalog: prefixes, roots and suffixes."""

from __future__ import annotations

from vocab_battle.models.catalog import Part
from vocab_battle.models.enums import PartType


_P = PartType.PREFIX
_R = PartType.ROOT
_S = PartType.SUFFIX


PARTS: tuple[Part, ...] = (
    # Prefixes
    Part(id="pre", type=_P, text="pre", meaning="before"),
    Part(id="re", type=_P, text="re", meaning="again, back"),
    Part(id="un", type=_P, text="un", meaning="not"),
    Part(id="dis", type=_P, text="dis", meaning="apart, away"),
    Part(id="inter", type=_P, text="inter", meaning="between"),
    Part(id="sub", type=_P, text="sub", meaning="under"),
    Part(id="trans", type=_P, text="trans", meaning="across"),
    Part(id="con", type=_P, text="con", meaning="together"),
    Part(id="ex", type=_P, text="ex", meaning="out"),
    Part(id="in", type=_P, text="in", meaning="into"),
    Part(id="pro", type=_P, text="pro", meaning="forward"),
    Part(id="de", type=_P, text="de", meaning="down, away"),
    Part(id="contra", type=_P, text="contra", meaning="against"),
    # Roots
    Part(id="dict", type=_R, text="dict", meaning="say"),
    Part(id="port", type=_R, text="port", meaning="carry"),
    Part(id="spect", type=_R, text="spect", meaning="look"),
    Part(id="struct", type=_R, text="struct", meaning="build"),
    Part(id="rupt", type=_R, text="rupt", meaning="break"),
    Part(id="ject", type=_R, text="ject", meaning="throw"),
    Part(id="form", type=_R, text="form", meaning="shape"),
    Part(id="duct", type=_R, text="duct", meaning="lead"),
    Part(id="tract", type=_R, text="tract", meaning="pull"),
    # Suffixes
    Part(id="ion", type=_S, text="ion", meaning="act, result"),
    Part(id="ation", type=_S, text="ation", meaning="process of"),
    Part(id="able", type=_S, text="able", meaning="can be"),
    Part(id="or", type=_S, text="or", meaning="one who"),
    Part(id="er", type=_S, text="er", meaning="one who"),
    Part(id="ure", type=_S, text="ure", meaning="act, state"),
    Part(id="ive", type=_S, text="ive", meaning="tending to"),
)


__all__ = ["PARTS"]
