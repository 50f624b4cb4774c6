"""Engine for overlaying a sparse variant map onto a reference string."""
from mitolib.containers.variants import VariantMap
from mitolib.core.interval import sub_seq


# Functions ------------------------------------------------------------------------------------------------------------
def overlay(reference: str, variants: VariantMap, start: int, end: int) -> str:
    """
    Reconstructs the window ``[start, end]`` of ``reference`` with ``variants`` applied.

    The whole reference is assembled with the variants in place, then the window is cut out of it. Deleted residues
    stay in the output as gap markers, so only insertions move the window boundaries: every insertion sorting
    before ``start`` (or ``end``) pushes that boundary right by its length. A window with ``start > end`` is cut
    across the origin.

    Args:
        reference: The full reference string (1-based).
        variants: The variants to apply, keyed on reference coordinates.
        start: Window start (1-based, validated by the caller).
        end: Window end (1-based, inclusive, validated by the caller).

    Returns:
        The reconstructed string, possibly containing gap markers.

    Examples:
        >>> overlay('ACGTAC', VariantMap({2: 'T', '3.1': 'GG', 5: '-'}), 1, 6)
        'ATGGGT-C'
    """
    if not variants: return sub_seq(reference, start, end)
    parts = []
    cursor = 1  # next reference residue to copy
    trim_start, trim_end = start, end
    for variant in variants.variants():
        position, token = variant.position, variant.token
        anchor = position.anchor
        if variant.is_insertion:
            # The anchor residue precedes its insertion
            if cursor <= anchor: parts.append(reference[cursor - 1:anchor])
            cursor = max(cursor, anchor + 1)
            if position < start: trim_start += len(token)
            if position < end: trim_end += len(token)
        else:
            if cursor < anchor: parts.append(reference[cursor - 1:anchor - 1])
            cursor = anchor + len(token) if variant.is_deletion else anchor + 1
        parts.append(token)
    parts.append(reference[cursor - 1:])
    return sub_seq(''.join(parts), trim_start, trim_end)


def effective_length(window_length: int, variants: VariantMap, end: int) -> int:
    """
    Returns the gapless length of a reconstructed window.

    Insertions anchored on the window's last residue fall outside the window and are not counted.
    """
    inserted = sum(len(v) for v in variants.variants() if v.is_insertion and v.position.anchor != end)
    return window_length - variants.deleted + inserted
