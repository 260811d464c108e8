"""Prompt template catalog.

Every template must be answerable by at least one catalog word, which
``Dictionary.check_templates`` verifies. A difficulty with no template makes
``pick_prompt`` raise ``PromptPoolEmptyError``.
"""

from __future__ import annotations

from vocab_battle.models.catalog import PromptTemplate


def _template(
    template_id: str,
    description: str,
    parts: tuple[str, ...],
    min_difficulty: int,
    max_difficulty: int,
) -> PromptTemplate:
    return PromptTemplate(
        id=template_id,
        description=description,
        requires_parts=frozenset(parts),
        min_difficulty=min_difficulty,
        max_difficulty=max_difficulty,
    )


PROMPT_TEMPLATES: tuple[PromptTemplate, ...] = (
    # Single root
    _template("root_port", "Build a word with the root 'port' (carry).", ("port",), 1, 3),
    _template("root_dict", "Build a word with the root 'dict' (say).", ("dict",), 1, 3),
    _template("root_spect", "Build a word with the root 'spect' (look).", ("spect",), 1, 3),
    _template("root_form", "Build a word with the root 'form' (shape).", ("form",), 1, 4),
    _template("root_struct", "Build a word with the root 'struct' (build).", ("struct",), 1, 4),
    _template("root_tract", "Build a word with the root 'tract' (pull).", ("tract",), 2, 5),
    _template("root_ject", "Build a word with the root 'ject' (throw).", ("ject",), 2, 5),
    _template("root_duct", "Build a word with the root 'duct' (lead).", ("duct",), 2, 5),
    _template("root_rupt", "Build a word with the root 'rupt' (break).", ("rupt",), 3, 5),
    # Single prefix
    _template("prefix_re", "Use the prefix 're-' (again, back).", ("re",), 1, 3),
    _template("prefix_in", "Use the prefix 'in-' (into).", ("in",), 1, 3),
    _template("prefix_pro", "Use the prefix 'pro-' (forward).", ("pro",), 2, 4),
    _template("prefix_con", "Use the prefix 'con-' (together).", ("con",), 2, 5),
    _template("prefix_trans", "Use the prefix 'trans-' (across).", ("trans",), 2, 4),
    _template("prefix_sub", "Use the prefix 'sub-' (under).", ("sub",), 2, 5),
    _template("prefix_dis", "Use the prefix 'dis-' (apart).", ("dis",), 3, 5),
    _template("prefix_inter", "Use the prefix 'inter-' (between).", ("inter",), 3, 5),
    # Single suffix
    _template("suffix_ion", "End the word with '-ion' (act, result).", ("ion",), 2, 5),
    _template("suffix_able", "End the word with '-able' (can be).", ("able",), 2, 5),
    _template("suffix_or", "End the word with '-or' (one who).", ("or",), 3, 5),
    _template("suffix_ation", "End the word with '-ation' (process of).", ("ation",), 3, 5),
    _template("suffix_ure", "End the word with '-ure' (act, state).", ("ure",), 3, 5),
    # Two-part constraints
    _template("re_port", "Carry back: combine 're-' with 'port'.", ("re", "port"), 1, 5),
    _template("in_spect", "Look into: combine 'in-' with 'spect'.", ("in", "spect"), 2, 5),
    _template("pre_dict", "Say before: combine 'pre-' with 'dict'.", ("pre", "dict"), 2, 5),
    _template("con_struct", "Build together: combine 'con-' with 'struct'.", ("con", "struct"), 3, 5),
    _template("ject_ion", "A throwing act: combine 'ject' with '-ion'.", ("ject", "ion"), 4, 5),
    _template("tract_ion", "A pulling act: combine 'tract' with '-ion'.", ("tract", "ion"), 4, 5),
    _template("trans_form", "Shape across: combine 'trans-' with 'form'.", ("trans", "form"), 4, 5),
    _template("dis_rupt", "Break apart: combine 'dis-' with 'rupt'.", ("dis", "rupt"), 4, 5),
    _template("un_able", "Not able to be...: combine 'un-' with '-able'.", ("un", "able"), 5, 5),
    _template("rupt_ive", "Tending to break: combine 'rupt' with '-ive'.", ("rupt", "ive"), 5, 5),
)


__all__ = ["PROMPT_TEMPLATES"]
