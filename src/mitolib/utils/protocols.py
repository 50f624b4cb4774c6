from typing import Optional, Protocol, runtime_checkable, Union


@runtime_checkable
class HasAlphabet(Protocol):
    """Protocol for objects that possess an Alphabet."""
    @property
    def alphabet(self) -> 'Alphabet': ...


@runtime_checkable
class ReferenceDataProvider(Protocol):
    """
    Protocol for the static reference tables a molecule is reconstructed against.

    Coordinates are 1-based and inclusive. ``get_codon`` returns a one-letter residue or ``'TERM'``. ``placeholder`` is a
    genome position the transcripts omit, or ``None``.
    """
    @property
    def genome_length(self) -> int: ...

    @property
    def placeholder(self) -> Optional[int]: ...

    def get_reference(self, start: int, end: int) -> str: ...

    def get_locus(self, locus: Union[int, str]) -> 'Locus': ...

    def get_codon(self, codon: str) -> str: ...

    def get_transcript(self, locus_id: int) -> str: ...

    def get_translation(self, locus_id: int) -> str: ...
