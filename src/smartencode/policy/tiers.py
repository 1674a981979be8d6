"""Encoder parameter bundles for each content tier.

Each tier maps to one fixed bundle. A user-supplied quality value replaces
only the bundle's quality; every other parameter is kept.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from smartencode.domain import ContentTier


@dataclass(frozen=True)
class TierBundle:
    """Encoder parameters for one content tier."""

    tier: ContentTier
    name: str
    preset: str
    tune: str | None
    quality: int
    maxrate: str
    bufsize: str
    # libx264-only settings
    x264_profile: str = "high"
    x264_level: str = "4.1"
    x264_params: str | None = None

    def with_quality(self, quality: int | None) -> TierBundle:
        """Return the bundle with its quality overridden, if one is given."""
        if quality is None:
            return self
        return replace(self, quality=quality)


TIER_BUNDLES: dict[ContentTier, TierBundle] = {
    ContentTier.GENERAL: TierBundle(
        tier=ContentTier.GENERAL,
        name="General Elite",
        preset="medium",
        tune="film",
        quality=22,
        maxrate="6000k",
        bufsize="12000k",
        x264_params=(
            "subme=0:me_range=4:rc_lookahead=10:me=hex:8x8dct=0:partitions=none:"
            "ref=3:bframes=3:b-adapt=1:direct=spatial:weightp=1:keyint=240:"
            "min-keyint=24:scenecut=40"
        ),
    ),
    ContentTier.ANIMATION: TierBundle(
        tier=ContentTier.ANIMATION,
        name="Animation Pro",
        preset="fast",
        tune="animation",
        quality=21,
        maxrate="6000k",
        bufsize="12000k",
        x264_params=(
            "subme=0:me_range=4:rc_lookahead=10:me=dia:no-chroma-me:8x8dct=0:"
            "partitions=none:ref=3:bframes=3:b-adapt=1:direct=spatial:weightp=1:"
            "keyint=240:min-keyint=24:scenecut=40:deblock=-1,-1:psy-rd=0.4:0"
        ),
    ),
    ContentTier.CLASSIC: TierBundle(
        tier=ContentTier.CLASSIC,
        name="Classic Master",
        preset="slower",
        tune="grain",
        quality=20,
        maxrate="6000k",
        bufsize="12000k",
        x264_params=(
            "subme=2:me_range=4:rc_lookahead=10:me=hex:8x8dct=1:ref=4:bframes=4:"
            "b-adapt=2:direct=auto:weightp=1:keyint=240:min-keyint=24:scenecut=40:"
            "rc-lookahead=50:aq-mode=1:aq-strength=0.8"
        ),
    ),
    ContentTier.ELITE: TierBundle(
        tier=ContentTier.ELITE,
        name="4K Elite",
        preset="slow",
        tune=None,
        quality=18,
        maxrate="8000k",
        bufsize="16000k",
        x264_params=(
            "subme=2:me_range=4:rc_lookahead=10:me=hex:8x8dct=1:partitions=none:"
            "ref=4:bframes=3:b-adapt=1:direct=spatial:weightp=1:keyint=240:"
            "min-keyint=24:scenecut=40:rc-lookahead=50"
        ),
    ),
}


def get_tier_bundle(tier: ContentTier, quality: int | None = None) -> TierBundle:
    """Look up a tier's bundle, applying a user quality override."""
    return TIER_BUNDLES[tier].with_quality(quality)
