"""Engine for walking a variant transcript codon by codon and recording the changed codons."""
from collections import deque
from typing import Final

from mitolib.containers.variants import VariantMap


# Classes --------------------------------------------------------------------------------------------------------------
class CodonTranslator:
    """
    Reads a reference transcript with its variants applied and records every codon up to the last variant.

    Bases are drawn, in order of precedence, from pending inserted bases, from the next variant (once the reference
    cursor has reached it) and from the reference. Reading an insertion moves the reading frame back by its length
    and each of its queued bases moves it back by one more as it is drawn; each deleted base moves it by +1. Codons
    are keyed by amino acid position; a codon read out of frame carries a signed frame suffix (``'AUG +1'``).
    Once the variants and inserted bases are used up, the partial codon is completed from the reference (or padded
    with ``TAIL`` past its end) and the walk stops: later codons match the reference translation, apart from any
    frame shift, and are not materialised.

    Args:
        transcript: The full reference transcript.

    Examples:
        >>> CodonTranslator('AUGUUCGCC').translate(VariantMap({4: 'C'}))
        {1: 'AUG', 2: 'CUC'}
        >>> CodonTranslator('AUGUUCGCCUAA').translate(VariantMap({2: '-'}))
        {1: 'AGU +1'}
    """
    __slots__ = ('_transcript',)
    TAIL: Final = 'A'

    def __init__(self, transcript: str):
        self._transcript = transcript

    @property
    def transcript(self) -> str: return self._transcript

    @staticmethod
    def format_codon(codon: str, frame: int) -> str:
        """Returns the codon token, with the frame suffix when out of frame."""
        return f'{codon} {frame:+d}' if frame else codon

    def translate(self, variants: VariantMap) -> dict[int, str]:
        """
        Walks the transcript and returns the codon tokens for every amino acid up to the last variant.

        Args:
            variants: Variants keyed on transcript coordinates.

        Returns:
            A dictionary of ``amino acid position -> codon token``.
        """
        transcript, n = self._transcript, len(self._transcript)
        pending = deque(variants.variants())
        inserted = deque()
        cursor = 1  # next reference residue
        frame, aa_pos, codon = 0, 1, ''
        codons = {}
        while pending or inserted:
            if inserted:
                codon += inserted.popleft()
                frame -= 1
            elif cursor > n or pending[0].position <= cursor:
                variant = pending.popleft()
                if variant.is_deletion:
                    frame += len(variant)
                    cursor = max(cursor, variant.position.anchor + len(variant))
                    continue
                if variant.is_insertion:
                    frame -= len(variant)
                    codon += variant.token[0]
                    inserted.extend(variant.token[1:])
                else:
                    codon += variant.token
                    cursor = max(cursor, variant.position.anchor + 1)
            else:
                codon += transcript[cursor - 1]
                cursor += 1
            if len(codon) == 3:
                codons[aa_pos] = self.format_codon(codon, frame)
                codon = ''
                aa_pos += 1
        if codon:
            while len(codon) < 3:
                codon += transcript[cursor - 1] if cursor <= n else self.TAIL
                cursor += 1
            codons[aa_pos] = self.format_codon(codon, frame)
        return codons
