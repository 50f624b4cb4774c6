"""Containers for the sparse variant maps overlaid on a reference molecule."""
from enum import IntEnum, auto
from collections.abc import Mapping
from typing import Iterable, Iterator, Union, Final

from mitolib.core.position import Position
from mitolib.utils import ValidationError


# Classes --------------------------------------------------------------------------------------------------------------
class VariantType(IntEnum):
    """
    Kind of change a variant token describes.

    Examples:
        >>> Variant(100, '---').kind
        <VariantType.DELETION: 3>
    """
    SUBSTITUTION = auto()
    INSERTION = auto()
    DELETION = auto()


class Variant:
    """
    A single ``position -> token`` entry.

    The kind is derived from the key and token: a fractional position is an insertion of the token's characters
    after the anchor, a token made only of ``GAP`` characters deletes that many residues starting at the
    position, and anything else substitutes the residue at the position.

    Args:
        position: Where the variant sits (anything ``Position.parse`` accepts).
        token: The observed symbol(s).

    Raises:
        ValidationError: If the token is empty, or an insertion carries gap markers.

    Examples:
        >>> v = Variant('100.01', 'AC')
        >>> v.kind, len(v)
        (<VariantType.INSERTION: 2>, 2)
    """
    __slots__ = ('_position', '_token', '_kind')
    GAP: Final = '-'
    SEPARATOR: Final = ':'

    def __init__(self, position: Union[Position, int, float, str], token: str):
        self._position = Position.parse(position)
        if not isinstance(token, str) or not token:
            raise ValidationError(f'Variant at {self._position} has an empty or non-string token: {token!r}')
        self._token = token
        if self._position.is_insertion:
            if self.GAP in token: raise ValidationError(f'Insertion at {self._position} contains gap markers: {token!r}')
            self._kind = VariantType.INSERTION
        elif token.strip(self.GAP) == '':
            self._kind = VariantType.DELETION
        else:
            self._kind = VariantType.SUBSTITUTION

    @classmethod
    def parse(cls, text: str) -> 'Variant':
        """
        Parses a ``POSITION:TOKEN`` string (e.g. ``'3308:C'``, ``'100.01:AC'`` or ``'310:--'``).

        Raises:
            ValidationError: If the separator is missing.
        """
        position, sep, token = text.partition(cls.SEPARATOR)
        if not sep: raise ValidationError(f'Variant {text!r} is not of the form POSITION{cls.SEPARATOR}TOKEN')
        return cls(position.strip(), token.strip())

    @property
    def position(self) -> Position: return self._position
    @property
    def token(self) -> str: return self._token
    @property
    def kind(self) -> VariantType: return self._kind
    @property
    def is_insertion(self) -> bool: return self._kind == VariantType.INSERTION
    @property
    def is_deletion(self) -> bool: return self._kind == VariantType.DELETION
    @property
    def is_substitution(self) -> bool: return self._kind == VariantType.SUBSTITUTION

    def __len__(self):
        return len(self._token)

    def __eq__(self, other):
        if not isinstance(other, Variant): return NotImplemented
        return self._position == other._position and self._token == other._token

    def __hash__(self):
        return hash((self._position, self._token))

    def __str__(self):
        return f'{self._position}{self.SEPARATOR}{self._token}'

    def __repr__(self):
        return f"Variant({str(self._position)!r}, {self._token!r})"


class VariantMap(Mapping):
    """
    Immutable, position-sorted collection of variants.

    Keys may be given as anything ``Position.parse`` accepts and are looked up the same way, so ``vmap[100]``,
    ``vmap['100']`` and ``vmap[Position(100)]`` address the same entry.

    Args:
        variants: A mapping of ``position -> token`` or an iterable of ``Variant`` objects.

    Raises:
        ValidationError: If two keys address the same position, or a variant addresses a residue already removed
            by a preceding deletion.

    Examples:
        >>> vmap = VariantMap({'100.01': 'AC', 73: 'G', 310: '--'})
        >>> [str(p) for p in vmap]
        ['73', '100.01', '310']
        >>> vmap.inserted, vmap.deleted
        (2, 2)
    """
    __slots__ = ('_variants', '_positions', '_inserted', '_deleted')

    def __init__(self, variants: Union[Mapping, Iterable[Variant], None] = None):
        if variants is None: variants = ()
        elif isinstance(variants, VariantMap): variants = variants.variants()
        elif isinstance(variants, Mapping): variants = (Variant(k, v) for k, v in variants.items())
        by_position: dict[Position, Variant] = {}
        for variant in variants:
            if not isinstance(variant, Variant): raise ValidationError(f'Expected a Variant, got {variant!r}')
            if variant.position in by_position:
                raise ValidationError(f'Duplicate variant position {variant.position}')
            by_position[variant.position] = variant
        self._positions: tuple[Position, ...] = tuple(sorted(by_position))
        self._variants: dict[Position, Variant] = {p: by_position[p] for p in self._positions}
        self._inserted = sum(len(v) for v in self._variants.values() if v.is_insertion)
        self._deleted = sum(len(v) for v in self._variants.values() if v.is_deletion)
        self._check_overlaps()

    def _check_overlaps(self):
        deleted_until = None  # (last deleted residue, deletion)
        for variant in self._variants.values():
            p = variant.position
            if deleted_until is not None and p.anchor <= deleted_until[0]:
                last, deletion = deleted_until
                if not (p.is_insertion and p.anchor == last):
                    raise ValidationError(f'Variant {variant} overlaps deletion {deletion}')
            if variant.is_deletion:
                deleted_until = (p.anchor + len(variant) - 1, variant)

    @property
    def inserted(self) -> int:
        """Total number of inserted residues."""
        return self._inserted

    @property
    def deleted(self) -> int:
        """Total number of deleted residues."""
        return self._deleted

    @property
    def positions(self) -> tuple[Position, ...]: return self._positions

    def __getitem__(self, key) -> str:
        return self._variants[Position.parse(key)].token

    def __contains__(self, key) -> bool:
        try:
            return Position.parse(key) in self._variants
        except ValidationError:
            return False

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __len__(self):
        return len(self._positions)

    def __eq__(self, other):
        if isinstance(other, VariantMap): return self._variants == other._variants
        if isinstance(other, Mapping):
            try:
                return self == VariantMap(other)
            except ValidationError:
                return False
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._variants.values()))

    def __repr__(self):
        return f"VariantMap({{{', '.join(repr(str(v)) for v in self._variants.values())}}})"

    def variants(self) -> Iterator[Variant]:
        """Iterates over the ``Variant`` objects in position order."""
        return iter(self._variants.values())

    def variant(self, key) -> Variant:
        """Returns the ``Variant`` object stored at ``key``."""
        return self._variants[Position.parse(key)]

    def to_dict(self) -> dict[str, str]:
        """Returns a plain ``{position text: token}`` dictionary."""
        return {str(p): v.token for p, v in self._variants.items()}
