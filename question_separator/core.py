from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass, replace
from functools import reduce
from typing import Any

import question_separator.passes  # noqa: F401
from question_separator.config import PipelineSpec
from question_separator.framework import Artifact, Pass, registry

logger = logging.getLogger(__name__)


def _pass_steps(spec: PipelineSpec) -> list[str]:
    """Return the pipeline steps; error on any that are not registered."""
    regs = registry()
    unknown = [s for s in spec.pipeline if s not in regs]
    if unknown:
        raise KeyError(f"unknown steps: {unknown}")
    return list(spec.pipeline)


def _ensure_validation_precedes_separation(steps: Sequence[str]) -> None:
    """Raise when ``separate_questions`` runs before ``validate_input``."""
    if "separate_questions" not in steps or "validate_input" not in steps:
        return
    if steps.index("validate_input") > steps.index("separate_questions"):
        raise ValueError("separate_questions requires validate_input to run beforehand")


def configure_pass(pass_obj: Pass, opts: Mapping[str, Any]) -> Pass:
    """Return a new pass with matching ``opts`` applied; ``pass_obj`` is untouched."""

    if not opts or not is_dataclass(pass_obj):
        return pass_obj
    names = {f.name for f in fields(pass_obj)} - {"name", "input_type", "output_type"}
    unused = sorted(set(opts) - names)
    if unused:
        logger.debug("ignoring options for %s: %s", pass_obj.name, unused)
    updates = {k: v for k, v in opts.items() if k in names}
    if not updates:
        return pass_obj
    return replace(pass_obj, **updates)  # type: ignore[type-var]


def _time_step(
    acc: tuple[Artifact, dict[str, float]],
    p: Pass,
) -> tuple[Artifact, dict[str, float]]:
    """Apply ``p`` to ``acc`` while recording its execution time."""
    a, timings = acc
    t0 = time.time()
    a = p(a)
    return a, {**timings, p.name: time.time() - t0}


def run_extract(text: str, spec: PipelineSpec) -> tuple[Artifact, dict[str, float]]:
    """Run the configured pipeline over ``text``; return artifact and timings."""

    steps = _pass_steps(spec)
    _ensure_validation_precedes_separation(steps)
    regs = registry()
    passes = [configure_pass(regs[s], spec.step_options(s)) for s in steps]
    initial: tuple[Artifact, dict[str, float]] = (Artifact(payload=text), {})
    return reduce(_time_step, passes, initial)
