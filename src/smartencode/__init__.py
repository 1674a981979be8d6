"""SmartEncode: rule engine that turns probed media metadata into a transcode decision.

The engine is a pure, per-file pipeline:

- Metadata extraction (policy/extractor.py)
- Skip evaluation (policy/skip.py)
- Content classification (policy/classification.py)
- Command assembly (executor/command.py)

Usage:
    from smartencode import build_options, evaluate
    from smartencode.introspector import parse_ffprobe

    probe, file_info = parse_ffprobe(ffprobe_json)
    decision = evaluate(probe, file_info, build_options({"target_codec": "h265"}))
"""

__version__ = "0.1.0"

from smartencode.policy.options import EncodeOptions, build_options
from smartencode.workflow.decision import Decision, ProcessDecision, SkipDecision
from smartencode.workflow.processor import evaluate, evaluate_file

__all__ = [
    "__version__",
    "Decision",
    "EncodeOptions",
    "ProcessDecision",
    "SkipDecision",
    "build_options",
    "evaluate",
    "evaluate_file",
]
