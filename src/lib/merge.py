"""
Attribute merge policy

Extracted pairs are appended to a node's attribute collection, in order,
without overwriting or deduplicating anything. A markdown-it token keeps
its collection in token.meta["attrs"]; publishing folds the collection into
the token's HTML attribute mapping, joining repeated keys with spaces.
"""

from typing import Any, Dict, Iterable, List

from ..models.attrs import AttrPair, ScanResult


def attrs_merge(collection: List[AttrPair], result: ScanResult) -> bool:
    """
    Append the pairs of a successful scan to an attribute collection

    Args:
        collection: Ordered attribute pairs owned by a node
        result: Output of attrs_scan()

    Returns:
        True if pairs were appended, False if the scan failed (collection
        left untouched)

    Example:
        >>> collection = [("class", "lead")]
        >>> attrs_merge(collection, attrs_scan("{.wide}"))
        True
        >>> collection
        [('class', 'lead'), ('class', 'wide')]
    """
    if not result.matched:
        return False
    collection.extend(result.attrs)
    return True


def attrs_collection(token: Any) -> List[AttrPair]:
    """
    Get the ordered attribute collection of a markdown-it token

    Created on first access, seeded with whatever the token already carries
    in token.attrs.
    """
    if "attrs" not in token.meta:
        token.meta["attrs"] = [(key, str(value)) for key, value in token.attrs.items()]
    return token.meta["attrs"]


def attrs_flatten(pairs: Iterable[AttrPair]) -> Dict[str, str]:
    """
    Fold ordered pairs into one value per key

    Keys keep their first-appearance order; repeated keys are joined with
    a single space.

    Example:
        >>> attrs_flatten([("class", "a"), ("id", "x"), ("class", "b")])
        {'class': 'a b', 'id': 'x'}
    """
    grouped: Dict[str, List[str]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    return {key: ' '.join(values) for key, values in grouped.items()}


def attrs_publish(token: Any) -> None:
    """Write the token's attribute collection back to token.attrs"""
    token.attrs = attrs_flatten(attrs_collection(token))
