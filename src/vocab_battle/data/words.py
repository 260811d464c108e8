"""Word catalog.

Each word's ``parts``, composed in order, must spell its ``text`` exactly;
``Dictionary`` rejects the catalog otherwise.
"""

from __future__ import annotations

from vocab_battle.models.catalog import Word


def _word(text: str, parts: tuple[str, ...], level: int, meaning: str, *tags: str) -> Word:
    return Word(
        id=f"w_{text}",
        text=text,
        parts=parts,
        vocab_level=level,
        meaning=meaning,
        tags=frozenset(tags),
    )


WORDS: tuple[Word, ...] = (
    # dict: say
    _word("predict", ("pre", "dict"), 1, "say before it happens", "verb"),
    _word("diction", ("dict", "ion"), 3, "manner of speaking", "noun"),
    _word("prediction", ("pre", "dict", "ion"), 2, "a statement about the future", "noun"),
    _word("predictable", ("pre", "dict", "able"), 3, "able to be foretold", "adjective"),
    _word("unpredictable", ("un", "pre", "dict", "able"), 4, "not able to be foretold", "adjective"),
    _word("contradict", ("contra", "dict"), 3, "speak against", "verb"),
    # port: carry
    _word("report", ("re", "port"), 1, "carry back news", "verb", "noun"),
    _word("export", ("ex", "port"), 1, "carry out of a country", "verb"),
    _word("transport", ("trans", "port"), 2, "carry across", "verb"),
    _word("portable", ("port", "able"), 2, "able to be carried", "adjective"),
    _word("reporter", ("re", "port", "er"), 1, "one who reports", "noun"),
    _word("transportation", ("trans", "port", "ation"), 3, "the act of carrying across", "noun"),
    # spect: look
    _word("inspect", ("in", "spect"), 1, "look into", "verb"),
    _word("respect", ("re", "spect"), 1, "look back at with regard", "verb", "noun"),
    _word("prospect", ("pro", "spect"), 3, "a look forward", "noun"),
    _word("inspection", ("in", "spect", "ion"), 2, "the act of looking into", "noun"),
    _word("inspector", ("in", "spect", "or"), 2, "one who inspects", "noun"),
    _word("respectable", ("re", "spect", "able"), 3, "worthy of respect", "adjective"),
    # struct: build
    _word("construct", ("con", "struct"), 2, "build together", "verb"),
    _word("instruct", ("in", "struct"), 2, "build into the mind", "verb"),
    _word("structure", ("struct", "ure"), 1, "something built", "noun"),
    _word("construction", ("con", "struct", "ion"), 2, "the act of building", "noun"),
    _word("destruction", ("de", "struct", "ion"), 3, "the act of tearing down", "noun"),
    _word("instructor", ("in", "struct", "or"), 3, "one who instructs", "noun"),
    # rupt: break
    _word("interrupt", ("inter", "rupt"), 2, "break in between", "verb"),
    _word("disrupt", ("dis", "rupt"), 3, "break apart", "verb"),
    _word("rupture", ("rupt", "ure"), 4, "a break or burst", "noun"),
    _word("interruption", ("inter", "rupt", "ion"), 3, "a break in between", "noun"),
    _word("disruptive", ("dis", "rupt", "ive"), 4, "tending to break apart", "adjective"),
    # ject: throw
    _word("inject", ("in", "ject"), 2, "throw into", "verb"),
    _word("project", ("pro", "ject"), 2, "throw forward", "verb", "noun"),
    _word("reject", ("re", "ject"), 2, "throw back", "verb"),
    _word("subject", ("sub", "ject"), 1, "thrown under", "noun"),
    _word("projection", ("pro", "ject", "ion"), 4, "something thrown forward", "noun"),
    _word("rejection", ("re", "ject", "ion"), 3, "the act of throwing back", "noun"),
    # form: shape
    _word("transform", ("trans", "form"), 2, "change shape across", "verb"),
    _word("reform", ("re", "form"), 2, "shape again", "verb"),
    _word("inform", ("in", "form"), 1, "shape the mind", "verb"),
    _word("conform", ("con", "form"), 3, "take the same shape", "verb"),
    _word("formation", ("form", "ation"), 3, "the process of shaping", "noun"),
    _word("information", ("in", "form", "ation"), 1, "what informs", "noun"),
    _word("transformation", ("trans", "form", "ation"), 4, "a change of shape", "noun"),
    # duct: lead
    _word("conduct", ("con", "duct"), 2, "lead together", "verb"),
    _word("product", ("pro", "duct"), 1, "what is led forth", "noun"),
    _word("deduct", ("de", "duct"), 3, "lead away, subtract", "verb"),
    _word("production", ("pro", "duct", "ion"), 2, "the act of producing", "noun"),
    _word("conductor", ("con", "duct", "or"), 3, "one who leads", "noun"),
    # tract: pull
    _word("subtract", ("sub", "tract"), 1, "pull under, take away", "verb"),
    _word("extract", ("ex", "tract"), 3, "pull out", "verb"),
    _word("distract", ("dis", "tract"), 3, "pull apart", "verb"),
    _word("contract", ("con", "tract"), 2, "pull together", "noun", "verb"),
    _word("tractor", ("tract", "or"), 2, "machine that pulls", "noun"),
    _word("subtraction", ("sub", "tract", "ion"), 2, "the act of taking away", "noun"),
    _word("distraction", ("dis", "tract", "ion"), 4, "something that pulls attention", "noun"),
)


__all__ = ["WORDS"]
