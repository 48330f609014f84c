# topmark:header:start
#
#   project      : FeatureDocs
#   file         : pipelines.py
#   file_relpath : src/featuredocs/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named step sequences.

Loading runs in two phases so that the subject check can see the subjects
declared across *all* documents:

    LOAD:   ReaderStep → ExtractorStep          (per document)
    FINISH: SubjectCheckStep → BuilderStep      (per document, after LOAD for all)
"""

from __future__ import annotations

from typing import Final

from featuredocs.pipeline.steps.base import BaseStep
from featuredocs.pipeline.steps.builder import BuilderStep
from featuredocs.pipeline.steps.extractor import ExtractorStep
from featuredocs.pipeline.steps.reader import ReaderStep
from featuredocs.pipeline.steps.subjects import SubjectCheckStep

LOAD: Final[tuple[BaseStep, ...]] = (ReaderStep(), ExtractorStep())

FINISH: Final[tuple[BaseStep, ...]] = (SubjectCheckStep(), BuilderStep())

_PIPELINES: Final[dict[str, tuple[BaseStep, ...]]] = {
    "load": LOAD,
    "finish": FINISH,
    "full": (*LOAD, *FINISH),
}


def get_pipeline(name: str) -> tuple[BaseStep, ...]:
    """Return the step sequence registered under ``name``.

    Raises:
        KeyError: If no pipeline has that name.
    """
    return _PIPELINES[name]
