"""Bank name detection.

A static dictionary of issuer patterns, matched against the sender ("from")
segment first, then the recipient ("to") segment, then the whole transcript.
For payment verification the payer's bank is the useful signal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from receiptocr.domain.models import BankPattern

_I = re.IGNORECASE


def _bank(name: str, *patterns: str) -> BankPattern:
    return BankPattern(name=name, patterns=tuple(re.compile(p, _I) for p in patterns))


# Order matters for whole-text scans: the first entry that matches wins.
BANK_PATTERNS: tuple[BankPattern, ...] = (
    _bank("GCash", r"gcash"),
    _bank("Maya", r"maya", r"pay\s*maya"),
    _bank("BDO", r"\bbdo\b", r"bdo\s+unibank"),
    _bank("BPI", r"\bbpi\b", r"bank of the philippine islands"),
    _bank("Metrobank", r"metrobank"),
    _bank("UnionBank", r"union\s*bank"),
    _bank("RCBC", r"\brcbc\b"),
    _bank("PNB", r"\bpnb\b", r"philippine national bank"),
    _bank("China Bank", r"china\s*bank"),
    _bank("LANDBANK", r"land\s*bank"),
    _bank("Security Bank", r"security\s*bank"),
    _bank("EastWest", r"east\s*west"),
    _bank("CIMB", r"\bcimb\b", r"cimb\s*bank", r"octo\s+by\s+cimb"),
    _bank("Tonik", r"\btonik\b", r"tonik\s+digital\s+bank"),
    _bank("MariBank", r"\bmaribank\b", r"mari\s*bank"),
    _bank("PSBank", r"\bpsbank\b", r"\bps\s*bank\b", r"philippine\s+savings\s+bank"),
)

_FROM_MARKERS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:transfer\s+from|from)\b", _I),
    re.compile(r"\b(?:sender|payer|source\s+account)\b", _I),
)
_TO_MARKERS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:transfer\s+to|to)\b", _I),
    re.compile(r"\b(?:recipient|beneficiary)\b", _I),
)

# A context segment ends at the earliest of these.
_BOUNDARIES: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, _I)
    for p in (
        r"\btransfer\s+to\b",
        r"\bto\b",
        r"\bbeneficiary\b",
        r"\brecipient\b",
        r"\bacct\.?\b",
        r"\baccount\b",
        r"\baccount\s*no\.?\b",
        r"\bref(?:erence)?\b",
        r"\bamount\b",
        r"\bdate\b",
        r"\btime\b",
        r"\bmethod\b",
        r"\bprocessing\b",
    )
)

SEGMENT_LOOKAHEAD = 320
SEGMENT_LOOKBEHIND = 80


@dataclass(frozen=True)
class BankContext:
    sender: str | None
    recipient: str | None


def match_bank(segment: str | None) -> str | None:
    """Return the first dictionary bank found anywhere in ``segment``."""
    if not segment:
        return None
    for bank in BANK_PATTERNS:
        if bank.matches(segment):
            return bank.name
    return None


def segment_after(text: str, marker: re.Pattern[str]) -> str | None:
    """Text following ``marker`` up to the earliest boundary keyword."""
    m = marker.search(text)
    if not m:
        return None
    rest = text[m.end() : m.end() + SEGMENT_LOOKAHEAD]
    end = len(rest)
    for boundary in _BOUNDARIES:
        b = boundary.search(rest)
        if b and b.start() < end:
            end = b.start()
    return rest[:end]


def segment_before(text: str, marker: re.Pattern[str]) -> str | None:
    """Text preceding ``marker`` back to the latest boundary keyword.

    Reads "BDO to BPI" as a transfer from BDO when no explicit sender label exists.
    """
    m = marker.search(text)
    if not m:
        return None
    head = text[max(0, m.start() - SEGMENT_LOOKBEHIND) : m.start()]
    start = 0
    for boundary in _BOUNDARIES:
        for b in boundary.finditer(head):
            start = max(start, b.end())
    return head[start:]


def _first_segment(text: str, markers: tuple[re.Pattern[str], ...]) -> str | None:
    for marker in markers:
        segment = segment_after(text, marker)
        if segment:
            return segment
    return None


def infer_bank_by_context(text: str) -> BankContext:
    sender = match_bank(_first_segment(text, _FROM_MARKERS))
    if sender is None:
        sender = match_bank(segment_before(text, _TO_MARKERS[0]))
    recipient = match_bank(_first_segment(text, _TO_MARKERS))
    return BankContext(sender=sender, recipient=recipient)


def find_bank(text: str) -> str | None:
    """Sender bank, else recipient bank, else any dictionary bank in the text."""
    if not text:
        return None
    context = infer_bank_by_context(text)
    return context.sender or context.recipient or match_bank(text)
