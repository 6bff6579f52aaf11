from .benchmark import BenchmarkRow, persist_benchmark, run_benchmark, write_results_csv
from .generators import DNA_ALPHABET, random_sequence
from .selftest import (
    DEFAULT_CASES,
    CaseOutcome,
    SelfTestCase,
    SelfTestError,
    assert_self_tests,
    load_cases,
    run_self_tests,
)
from .timing import time_pair_us
from . import reports

__all__ = [
    "BenchmarkRow",
    "persist_benchmark",
    "run_benchmark",
    "write_results_csv",
    "DNA_ALPHABET",
    "random_sequence",
    "DEFAULT_CASES",
    "CaseOutcome",
    "SelfTestCase",
    "SelfTestError",
    "assert_self_tests",
    "load_cases",
    "run_self_tests",
    "time_pair_us",
    "reports",
]
