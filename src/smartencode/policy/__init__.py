"""Decision rules: options, metadata extraction, skip checks and classification.

Usage:
    from smartencode.policy import build_options, extract_media_view
    from smartencode.policy import evaluate_skip, classify_content
"""

from smartencode.policy.classification import (
    CLASSIFICATION_RULES,
    ClassificationResult,
    ClassificationRule,
    classify_content,
)
from smartencode.policy.exceptions import (
    EngineError,
    MissingProbeDataError,
    NoVideoStreamError,
    OptionsError,
)
from smartencode.policy.extractor import (
    MediaView,
    extract_media_view,
    extract_release_year,
    is_hdr_transfer,
)
from smartencode.policy.options import EncodeOptions, build_options
from smartencode.policy.skip import (
    PerfectFileCheck,
    SkipReason,
    check_already_perfect,
    evaluate_skip,
)
from smartencode.policy.tiers import TIER_BUNDLES, TierBundle, get_tier_bundle

__all__ = [
    # Options
    "EncodeOptions",
    "build_options",
    # Extraction
    "MediaView",
    "extract_media_view",
    "extract_release_year",
    "is_hdr_transfer",
    # Skip evaluation
    "PerfectFileCheck",
    "SkipReason",
    "check_already_perfect",
    "evaluate_skip",
    # Classification
    "CLASSIFICATION_RULES",
    "ClassificationResult",
    "ClassificationRule",
    "classify_content",
    # Tiers
    "TIER_BUNDLES",
    "TierBundle",
    "get_tier_bundle",
    # Exceptions
    "EngineError",
    "MissingProbeDataError",
    "NoVideoStreamError",
    "OptionsError",
]
