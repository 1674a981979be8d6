"""Content classification into encoder tiers.

Rules are an ordered table of (name, predicate, tier) evaluated top-down;
the first matching rule decides the tier and GENERAL is the fallback.

Detection priority:
1. ELITE: resolution above 1080p or HDR transfer
2. ANIMATION: animation keywords or studio names in the file name, animation
   folders in the path, bracketed release tags, or an episode number
   combined with an anime/toon keyword
3. CLASSIC: release year before 2000, film/grain keywords, or
   classics/criterion folders in the path
4. GENERAL: everything else
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from smartencode.domain import ContentTier
from smartencode.policy.extractor import MediaView

logger = logging.getLogger(__name__)

ANIMATION_NAME_PATTERN = re.compile(
    r"\b(anime|animation|animated|cartoon|pixar|dreamworks|disney|ghibli|studio)\b",
    re.IGNORECASE,
)
ANIMATION_PATH_KEYWORDS = ("anime", "animation", "cartoon")
EPISODE_PATTERN = re.compile(r"\bs\d{1,2}e\d{1,2}\b", re.IGNORECASE)
TOON_PATTERN = re.compile(r"\b(anime|toon)\b", re.IGNORECASE)

CLASSIC_NAME_PATTERN = re.compile(
    r"\b(classic|criterion|restored|remastered|noir|western|35mm|grain|vintage"
    r"|bw|black.?white)\b",
    re.IGNORECASE,
)
CLASSIC_PATH_KEYWORDS = ("classics", "criterion")
GRAIN_RELEASE_PATTERN = re.compile(r"\b(1080|720)p\.grain\.", re.IGNORECASE)

# Releases before this year are treated as classic film
CLASSIC_YEAR_CUTOFF = 2000


@dataclass(frozen=True)
class ClassificationRule:
    """One entry of the ordered classification table."""

    name: str
    tier: ContentTier
    matches: Callable[[MediaView], bool]
    description: str


@dataclass(frozen=True)
class ClassificationResult:
    """Chosen tier and why it was chosen."""

    tier: ContentTier
    rule: str  # Name of the matching rule, "fallback" or "forced"
    description: str

    @property
    def forced(self) -> bool:
        return self.rule == "forced"


def _lower_name(view: MediaView) -> str:
    return view.file_name.casefold()


def _lower_path(view: MediaView) -> str:
    return view.file_path.casefold()


def is_high_end(view: MediaView) -> bool:
    """High resolution or high dynamic range."""
    return view.is_high_resolution or view.is_hdr


def is_animation(view: MediaView) -> bool:
    """Animation keywords, animation folders, release tags or anime episodes."""
    name = _lower_name(view)
    path = _lower_path(view)
    if ANIMATION_NAME_PATTERN.search(name):
        return True
    if any(keyword in path for keyword in ANIMATION_PATH_KEYWORDS):
        return True
    if "[" in name and "]" in name:
        return True
    return bool(EPISODE_PATTERN.search(name) and TOON_PATTERN.search(name))


def is_classic(view: MediaView) -> bool:
    """Pre-2000 release, classic/grain keywords or classics folders."""
    if view.release_year is not None and view.release_year < CLASSIC_YEAR_CUTOFF:
        return True
    name = _lower_name(view)
    path = _lower_path(view)
    if CLASSIC_NAME_PATTERN.search(name) or GRAIN_RELEASE_PATTERN.search(name):
        return True
    return any(keyword in path for keyword in CLASSIC_PATH_KEYWORDS)


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        name="high_end",
        tier=ContentTier.ELITE,
        matches=is_high_end,
        description="4K/HDR content",
    ),
    ClassificationRule(
        name="animation",
        tier=ContentTier.ANIMATION,
        matches=is_animation,
        description="Animation/Anime content",
    ),
    ClassificationRule(
        name="classic",
        tier=ContentTier.CLASSIC,
        matches=is_classic,
        description="Classic/Grainy film",
    ),
)


def _with_year(description: str, year: int | None) -> str:
    return f"{description} from {year}" if year else description


def classify_content(
    view: MediaView, forced_tier: ContentTier | None = None
) -> ClassificationResult:
    """Assign a content tier to a file.

    Args:
        view: Extracted media view.
        forced_tier: Explicit tier from the options; skips the heuristics.

    Returns:
        ClassificationResult with exactly one tier.
    """
    if forced_tier is not None:
        return ClassificationResult(
            tier=forced_tier,
            rule="forced",
            description=f"User selected preset '{forced_tier.value}'",
        )

    for rule in CLASSIFICATION_RULES:
        if rule.matches(view):
            logger.debug("Classification rule '%s' matched", rule.name)
            description = rule.description
            if rule.tier is ContentTier.CLASSIC:
                description = _with_year(description, view.release_year)
            return ClassificationResult(
                tier=rule.tier, rule=rule.name, description=description
            )

    return ClassificationResult(
        tier=ContentTier.GENERAL,
        rule="fallback",
        description=_with_year("Modern content", view.release_year),
    )
