"""
RuleRegistry - The fixed catalogue of lint rules and its dispatch.

A RuleRegistryBuilder collects rules once at startup, validating their ids,
and produces an immutable RuleRegistry. The registry runs every enabled rule
in ascending id order, so problems from a lower id always precede problems
from a higher one.

Usage:
    from bootlint.rules import create_default_registry

    registry = create_default_registry()
    registry.run_all(document, problems.append, disabled_ids={"W003"})

    # Or build a custom registry
    builder = RuleRegistryBuilder()
    builder.register(DoctypeRule())
    registry = builder.build()
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..contracts.errors import DuplicateRuleError
from ..contracts.problems import ElementRef, LintProblem, Severity
from ..core.config import Settings, settings as default_settings
from .base_rule import LintRule, Report


logger = logging.getLogger(__name__)

ProblemReporter = Callable[[LintProblem], None]


@dataclass(frozen=True)
class RegisteredRule:
    """A rule together with the metadata resolved at registration."""

    rule_id: str
    severity: Severity
    url: str
    rule: LintRule

    def bind(self, reporter: ProblemReporter) -> Report:
        """
        Create the report callback handed to the rule.

        Every problem the rule reports is tagged with this entry's id,
        severity and documentation URL.
        """

        def report(message: str, elements: Sequence[Tag] = ()) -> None:
            reporter(
                LintProblem(
                    id=self.rule_id,
                    severity=self.severity,
                    message=message,
                    url=self.url,
                    elements=_element_refs(elements),
                )
            )

        return report


def _element_refs(elements: Sequence[Tag]) -> Tuple[ElementRef, ...]:
    """Wrap elements in references, dropping repeats but keeping order."""
    seen = set()
    refs = []
    for element in elements:
        if id(element) in seen:
            continue
        seen.add(id(element))
        refs.append(ElementRef(element))
    return tuple(refs)


class RuleRegistry:
    """
    Immutable table of rules keyed by id.

    Holds no per-run state and can be shared by any number of lint passes.
    """

    def __init__(self, entries: Iterable[RegisteredRule]):
        ordered = sorted(entries, key=lambda entry: entry.rule_id)
        self._entries: Tuple[RegisteredRule, ...] = tuple(ordered)
        self._by_id: Mapping[str, RegisteredRule] = MappingProxyType(
            {entry.rule_id: entry for entry in ordered}
        )

    @property
    def ids(self) -> Tuple[str, ...]:
        """All registered ids in ascending order."""
        return tuple(entry.rule_id for entry in self._entries)

    @property
    def entries(self) -> Tuple[RegisteredRule, ...]:
        return self._entries

    def get(self, rule_id: str) -> Optional[RegisteredRule]:
        """Look up a registered rule by id."""
        return self._by_id.get(rule_id)

    def severity_of(self, rule_id: str) -> Severity:
        """
        Get the severity of a registered rule.

        Raises:
            KeyError: If no rule has this id
        """
        return self._by_id[rule_id].severity

    def run_all(
        self,
        document: DOMParser,
        reporter: ProblemReporter,
        disabled_ids: Iterable[str] = (),
    ) -> None:
        """
        Run every enabled rule against a document, in ascending id order.

        Exceptions raised by a rule are not swallowed: the pass is aborted
        and the exception reaches the caller.

        Args:
            document: Parsed document
            reporter: Called with each LintProblem as it is found
            disabled_ids: Ids of rules to skip (a single id may be passed as a string)
        """
        if isinstance(disabled_ids, str):
            disabled_ids = (disabled_ids,)
        disabled = frozenset(disabled_ids)
        ran = 0
        for entry in self._entries:
            if entry.rule_id in disabled:
                logger.debug(f"Skipping disabled rule {entry.rule_id}")
                continue
            try:
                entry.rule.check(document, entry.bind(reporter))
            except Exception as e:
                logger.error(f"Rule {entry.rule_id} ({entry.rule.name}) failed: {e}")
                raise
            ran += 1
        logger.debug(f"Ran {ran}/{len(self._entries)} rules")

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RuleRegistry({len(self._entries)} rules)"


class RuleRegistryBuilder:
    """
    Collects rules at startup and freezes them into a RuleRegistry.

    Registration validates each id once: it must be unique and of the form
    E### or W###. Violations are setup errors and abort the build.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings
        self._entries: Dict[str, RegisteredRule] = {}

    def register(self, rule: LintRule) -> None:
        """
        Register a rule.

        Args:
            rule: LintRule instance

        Raises:
            DuplicateRuleError: If a rule with the same id is registered
            InvalidRuleIdError: If the id does not start with E or W
        """
        rule_id = rule.rule_id
        if rule_id in self._entries:
            raise DuplicateRuleError(rule_id)
        severity = Severity.from_rule_id(rule_id)
        self._entries[rule_id] = RegisteredRule(
            rule_id=rule_id,
            severity=severity,
            url=self._settings.documentation_url(rule_id),
            rule=rule,
        )
        logger.debug(f"Registered rule: {rule_id} ({rule.name})")

    def register_all(self, rules: Iterable[LintRule]) -> None:
        """
        Register multiple rules at once.

        Args:
            rules: LintRule instances
        """
        for rule in rules:
            self.register(rule)

    def build(self) -> RuleRegistry:
        """Freeze the collected rules into an immutable registry."""
        return RuleRegistry(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def default_rules(settings: Optional[Settings] = None) -> List[LintRule]:
    """
    Instantiate every rule of the built-in catalogue.

    Args:
        settings: Settings handed to each rule (global settings if not provided)

    Returns:
        One instance of each rule class
    """
    from .document_rules import DOCUMENT_RULES
    from .grid_rules import GRID_RULES
    from .form_rules import FORM_RULES
    from .button_rules import BUTTON_RULES
    from .component_rules import COMPONENT_RULES
    from .deprecation_rules import DEPRECATION_RULES

    rule_classes = (
        DOCUMENT_RULES
        + GRID_RULES
        + FORM_RULES
        + BUTTON_RULES
        + COMPONENT_RULES
        + DEPRECATION_RULES
    )
    return [rule_class(settings) for rule_class in rule_classes]


def create_default_registry(settings: Optional[Settings] = None) -> RuleRegistry:
    """
    Create the registry of all built-in rules.

    With the global settings the registry is immutable and shared
    process-wide; any other Settings instance gets a registry of its own.

    Args:
        settings: Settings for documentation URLs and rule thresholds

    Returns:
        Configured RuleRegistry ready to use
    """
    if settings is None or settings is default_settings:
        return _shared_default_registry()
    return _build_default_registry(settings)


@lru_cache(maxsize=1)
def _shared_default_registry() -> RuleRegistry:
    return _build_default_registry(default_settings)


def _build_default_registry(settings: Settings) -> RuleRegistry:
    builder = RuleRegistryBuilder(settings=settings)
    builder.register_all(default_rules(settings))
    registry = builder.build()
    logger.info(f"Created default registry with {len(registry)} rules")
    return registry
