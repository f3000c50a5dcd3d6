"""Rule table — the ordered catalog of bracket-tag transformations.

A :class:`Rule` is pure data: a regular expression plus two substitution
templates, one producing hypertext (render) and one keeping only the
captured text (strip).  :class:`RuleRegistry` compiles and validates a
sequence of rules once, at construction, and is immutable afterwards so a
single instance can be shared by every caller.

Rule order is part of the contract: the engine applies rules in exactly
the order the registry holds them.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# \g<name>, \g<1> or \1 .. \99 inside a substitution template.
_GROUP_REFERENCE = re.compile(r"\\g<([^>]*)>|\\(\d{1,2})")


class RegistryError(ValueError):
    """A rule table that cannot be used to build an engine.

    Raised only at construction time: bad pattern, duplicate id, or a
    template referencing a group the pattern does not define.
    """

    def __init__(self, message: str, *, rule_id: str | None = None) -> None:
        super().__init__(message)
        self.rule_id = rule_id


@dataclass(frozen=True)
class Rule:
    """One tag family: how to recognize it and what to substitute."""

    id: str
    pattern: str
    replacement: str  # render template, e.g. r"<b>\1</b>"
    content: str  # strip template, usually the innermost capture
    flags: int = re.DOTALL


@dataclass(frozen=True)
class CompiledRule:
    """A validated rule with both case variants precompiled."""

    rule: Rule
    case_sensitive: re.Pattern[str]
    case_insensitive: re.Pattern[str]

    @property
    def id(self) -> str:
        return self.rule.id

    def pattern_for(self, *, case_insensitive: bool) -> re.Pattern[str]:
        return self.case_insensitive if case_insensitive else self.case_sensitive


def _check_template(rule: Rule, compiled: re.Pattern[str], template: str, kind: str) -> None:
    """Reject templates whose group references the pattern cannot satisfy."""
    for match in _GROUP_REFERENCE.finditer(template):
        ref = match.group(1) if match.group(1) is not None else match.group(2)
        if ref.isdigit():
            known = int(ref) <= compiled.groups
        else:
            known = ref in compiled.groupindex
        if not known:
            msg = f"Rule '{rule.id}' {kind} template references unknown group '{ref}'"
            raise RegistryError(msg, rule_id=rule.id)


def compile_rule(rule: Rule) -> CompiledRule:
    """Compile and validate a single rule.

    Raises:
        RegistryError: If the pattern does not compile or a template refers
            to a group the pattern does not define.
    """
    if not rule.id:
        raise RegistryError("Rule id must be a non-empty string")
    try:
        sensitive = re.compile(rule.pattern, rule.flags)
        insensitive = re.compile(rule.pattern, rule.flags | re.IGNORECASE)
    except re.error as exc:
        msg = f"Rule '{rule.id}' has an invalid pattern: {exc}"
        raise RegistryError(msg, rule_id=rule.id) from exc
    _check_template(rule, sensitive, rule.replacement, "replacement")
    _check_template(rule, sensitive, rule.content, "content")
    return CompiledRule(rule=rule, case_sensitive=sensitive, case_insensitive=insensitive)


class RuleRegistry:
    """Immutable, ordered collection of compiled rules.

    Construction is all-or-nothing: any invalid rule raises
    :class:`RegistryError` and no registry is produced.

    Derived registries (:meth:`only`, :meth:`excluding`) are new objects;
    the source registry never changes.
    """

    __slots__ = ("_entries", "_by_id")

    def __init__(self, rules: Iterable[Rule]) -> None:
        entries: list[CompiledRule] = []
        by_id: dict[str, CompiledRule] = {}
        for rule in rules:
            if rule.id in by_id:
                raise RegistryError(f"Duplicate rule id '{rule.id}'", rule_id=rule.id)
            compiled = compile_rule(rule)
            entries.append(compiled)
            by_id[rule.id] = compiled
        object.__setattr__(self, "_entries", tuple(entries))
        object.__setattr__(self, "_by_id", by_id)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[CompiledRule]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleRegistry({len(self._entries)} rules)"

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Source rules in application order."""
        return tuple(entry.rule for entry in self._entries)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(entry.id for entry in self._entries)

    def get(self, rule_id: str) -> Rule | None:
        entry = self._by_id.get(rule_id)
        return entry.rule if entry else None

    def only(self, *rule_ids: str) -> RuleRegistry:
        """Return a registry limited to *rule_ids*, keeping registry order."""
        wanted = self._require(rule_ids)
        return RuleRegistry(r for r in self.rules if r.id in wanted)

    def excluding(self, *rule_ids: str) -> RuleRegistry:
        """Return a registry without *rule_ids*."""
        unwanted = self._require(rule_ids)
        return RuleRegistry(r for r in self.rules if r.id not in unwanted)

    def _require(self, rule_ids: Iterable[str]) -> set[str]:
        requested = set(rule_ids)
        unknown = sorted(requested - self._by_id.keys())
        if unknown:
            raise RegistryError(f"Unknown rule id(s): {', '.join(unknown)}")
        return requested


# ---------------------------------------------------------------------------
# Default catalog
# ---------------------------------------------------------------------------


def _wrap(rule_id: str, tag: str, element: str | None = None) -> Rule:
    """Plain ``[tag]x[/tag]`` -> ``<element>x</element>`` rule."""
    element = element or tag
    return Rule(
        id=rule_id,
        pattern=rf"\[{tag}\](.*?)\[/{tag}\]",
        replacement=rf"<{element}>\1</{element}>",
        content=r"\1",
    )


DEFAULT_RULES: tuple[Rule, ...] = (
    *(_wrap(f"h{level}", f"h{level}") for level in range(1, 7)),
    _wrap("bold", "b"),
    _wrap("italic", "i"),
    _wrap("underline", "u"),
    _wrap("strikethrough", "s"),
    _wrap("quote", "quote", "blockquote"),
    Rule(
        id="link",
        pattern=r"\[url\](.*?)\[/url\]",
        replacement=r'<a href="\1">\1</a>',
        content=r"\1",
    ),
    Rule(
        id="namedlink",
        pattern=r"\[url=(.*?)\](.*?)\[/url\]",
        replacement=r'<a href="\1">\2</a>',
        content=r"\2",
    ),
    Rule(
        id="image",
        pattern=r"\[img\](.*?)\[/img\]",
        replacement=r'<img src="\1" style="max-width: 100%">',
        content=r"\1",
    ),
    Rule(
        id="orderedlistnumerical",
        pattern=r"\[list=1\](.*?)\[/list\]",
        replacement=r"<ol>\1</ol>",
        content=r"\1",
    ),
    Rule(
        id="orderedlistalpha",
        pattern=r"\[list=a\](.*?)\[/list\]",
        replacement=r'<ol type="a">\1</ol>',
        content=r"\1",
    ),
    _wrap("unorderedlist", "list", "ul"),
    # Greedy to end of line; several [*] on one line end up in one item.
    Rule(
        id="listitem",
        pattern=r"\[\*\](.*)",
        replacement=r"<li>\1</li>",
        content=r"\1",
        flags=0,
    ),
    _wrap("code", "code"),
    Rule(
        id="youtube",
        pattern=r"\[youtube\](.*?)\[/youtube\]",
        replacement=(
            r'<iframe width="560" style="max-width: 100%" height="315" '
            r'src="//www.youtube-nocookie.com/embed/\1" frameborder="0" allowfullscreen></iframe>'
        ),
        content=r"\1",
    ),
    _wrap("sub", "sub"),
    _wrap("sup", "sup"),
    _wrap("small", "small"),
    _wrap("table", "table"),
    _wrap("table-row", "tr"),
    _wrap("table-data", "td"),
    Rule(
        id="color",
        pattern=r"\[color=(.*?)\](.*?)\[/color\]",
        replacement=r'<span style="color: \1">\2</span>',
        content=r"\2",
    ),
    Rule(
        id="email",
        pattern=r"\[email\](.*?)\[/email\]",
        replacement=r'<a href="mailto:\1">\1</a>',
        content=r"\1",
    ),
    Rule(
        id="emailmore",
        pattern=r"\[email=(.*?)\](.*?)\[/email\]",
        replacement=r'<a href="mailto: \1">\2</a>',
        content=r"\2",
    ),
)


@functools.cache
def default_registry() -> RuleRegistry:
    """The built-in rule table, compiled once per process."""
    return RuleRegistry(DEFAULT_RULES)
