"""Decision pipeline: evaluate a file and return a Decision."""

from smartencode.workflow.decision import Decision, ProcessDecision, SkipDecision
from smartencode.workflow.processor import evaluate, evaluate_file
from smartencode.workflow.summary import format_process_summary, format_skip_summary

__all__ = [
    "Decision",
    "ProcessDecision",
    "SkipDecision",
    "evaluate",
    "evaluate_file",
    "format_process_summary",
    "format_skip_summary",
]
