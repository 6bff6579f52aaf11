from __future__ import annotations

"""Fixed table of known distances used as a smoke test before benchmarking."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from ..engine import damerau_levenshtein
from ..utils import artefacts


class SelfTestCase(BaseModel):
    a: str
    b: str
    expected: int = Field(ge=0)


DEFAULT_CASES: List[SelfTestCase] = [
    SelfTestCase(a="", b="", expected=0),
    SelfTestCase(a="a", b="", expected=1),
    SelfTestCase(a="", b="abc", expected=3),
    SelfTestCase(a="abc", b="abc", expected=0),
    SelfTestCase(a="ca", b="ac", expected=1),
    SelfTestCase(a="abcd", b="abdc", expected=1),
    SelfTestCase(a="kitten", b="sitting", expected=3),
]


@dataclass(frozen=True)
class CaseOutcome:
    case: SelfTestCase
    got: int

    @property
    def passed(self) -> bool:
        return self.got == self.case.expected


class SelfTestError(RuntimeError):
    """Raised when one or more self-test cases disagree with the engine."""

    def __init__(self, failures: List[CaseOutcome]) -> None:
        self.failures = failures
        lines = [
            f'a="{o.case.a}" b="{o.case.b}" expected={o.case.expected} got={o.got}'
            for o in failures
        ]
        super().__init__("Self-test failed:\n" + "\n".join(lines))


def load_cases(path: Path) -> List[SelfTestCase]:
    """Read cases from a JSONL file with ``a``, ``b`` and ``expected`` keys."""

    cases: List[SelfTestCase] = []
    for entry in artefacts.read_jsonl(path):
        try:
            cases.append(SelfTestCase.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(f"Invalid self-test case in {path}: {exc}") from exc
    return cases


def run_self_tests(cases: Optional[Iterable[SelfTestCase]] = None) -> List[CaseOutcome]:
    selected = DEFAULT_CASES if cases is None else list(cases)
    return [
        CaseOutcome(case=case, got=damerau_levenshtein(case.a, case.b))
        for case in selected
    ]


def assert_self_tests(cases: Optional[Iterable[SelfTestCase]] = None) -> List[CaseOutcome]:
    """Run the cases and raise :class:`SelfTestError` if any of them fail."""

    outcomes = run_self_tests(cases)
    failures = [outcome for outcome in outcomes if not outcome.passed]
    for outcome in failures:
        logger.error(
            'FAIL a="{}" b="{}" expected={} got={}',
            outcome.case.a,
            outcome.case.b,
            outcome.case.expected,
            outcome.got,
        )
    if failures:
        raise SelfTestError(failures)
    logger.info("{} self-test cases passed", len(outcomes))
    return outcomes
