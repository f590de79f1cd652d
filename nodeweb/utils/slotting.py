"""
SSC Slot Windows
================

Maps a slot index within an epoch to the SSC (shared seed computation) stage.

Epoch Timeline (default layout for security parameter k, epoch = 6k slots):
- Slots [0, k):   Commitment window (nodes publish commitments)
- Slots [2k, 3k): Opening window (nodes reveal openings)
- Slots [4k, 5k): Shares window (nodes publish decrypted shares)
- Anything else:  Ordinary slots

The gaps between windows give commitments/openings time to settle into
blocks before the next window starts.

Window bounds are configuration input; they are never assumed by the gateway.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nodeweb.models.types import SscStage


class SlotWindow(BaseModel):
    """Half-open slot index range [start, end)."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "SlotWindow":
        if self.end <= self.start:
            raise ValueError(f"Empty or inverted slot window [{self.start}, {self.end})")
        return self

    def __contains__(self, slot_index: int) -> bool:
        return self.start <= slot_index < self.end

    def overlaps(self, other: "SlotWindow") -> bool:
        return self.start < other.end and other.start < self.end

    @classmethod
    def parse(cls, text: str) -> "SlotWindow":
        """
        Parse a "start:end" window.

        Example:
            >>> SlotWindow.parse("0:5")
            SlotWindow(start=0, end=5)
        """
        try:
            start, end = text.split(":")
            return cls(start=int(start), end=int(end))
        except ValueError as e:
            raise ValueError(f"Invalid slot window {text!r} (expected 'start:end'): {e}") from e

    def __str__(self):
        return f"[{self.start}, {self.end})"


class SscWindows(BaseModel):
    """
    The three SSC windows of an epoch.

    Construction fails if any two windows overlap, so classification never
    depends on the order in which windows are checked.
    """
    model_config = ConfigDict(frozen=True)

    commitment: SlotWindow
    opening: SlotWindow
    shares: SlotWindow
    epoch_slots: Optional[int] = Field(None, gt=0)

    @model_validator(mode="after")
    def check_disjoint(self) -> "SscWindows":
        named = self.named()
        for i, (name_a, window_a) in enumerate(named):
            for name_b, window_b in named[i + 1:]:
                if window_a.overlaps(window_b):
                    raise ValueError(
                        f"SSC windows overlap: {name_a} {window_a} and {name_b} {window_b}"
                    )
        if self.epoch_slots is not None:
            for name, window in named:
                if window.end > self.epoch_slots:
                    raise ValueError(
                        f"SSC {name} window {window} exceeds epoch length {self.epoch_slots}"
                    )
        return self

    def named(self) -> Tuple[Tuple[str, SlotWindow], ...]:
        return (
            ("commitment", self.commitment),
            ("opening", self.opening),
            ("shares", self.shares),
        )

    @classmethod
    def for_security_param(cls, k: int) -> "SscWindows":
        """Default layout for security parameter k (epoch of 6k slots)."""
        if k <= 0:
            raise ValueError(f"Security parameter k must be positive, got {k}")
        return cls(
            commitment=SlotWindow(start=0, end=k),
            opening=SlotWindow(start=2 * k, end=3 * k),
            shares=SlotWindow(start=4 * k, end=5 * k),
            epoch_slots=6 * k,
        )


class SlotPhaseClassifier:
    """
    Classifies slot indices into SSC stages.

    Usage:
        classifier = SlotPhaseClassifier(SscWindows.for_security_param(2))
        classifier.classify(0)   # SscStage.COMMITMENT
        classifier.classify(1)   # SscStage.COMMITMENT
        classifier.classify(2)   # SscStage.ORDINARY
    """

    def __init__(self, windows: SscWindows):
        self.windows = windows

    def is_commitment_idx(self, slot_index: int) -> bool:
        return slot_index in self.windows.commitment

    def is_opening_idx(self, slot_index: int) -> bool:
        return slot_index in self.windows.opening

    def is_shares_idx(self, slot_index: int) -> bool:
        return slot_index in self.windows.shares

    def classify(self, slot_index: int) -> SscStage:
        if self.is_commitment_idx(slot_index):
            return SscStage.COMMITMENT
        if self.is_opening_idx(slot_index):
            return SscStage.OPENING
        if self.is_shares_idx(slot_index):
            return SscStage.SHARES
        return SscStage.ORDINARY
