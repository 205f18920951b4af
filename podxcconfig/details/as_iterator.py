from typing import Iterable, Iterator, List, Set, Tuple, Union


# Make scalar string or container of strings iterable...
def str_iter(strings: Union[str, List[str], Set[str], Tuple[str, ...]]) -> Iterator[str]:
    if isinstance(strings, (list, set, tuple)):
        for v in strings:
            assert isinstance(v, str)
            yield v
    else:
        assert isinstance(strings, str)
        yield strings


# Drop repeated strings, keeping the first occurrence of each...
def unique(strings: Iterable[str]) -> List[str]:
    seen: Set[str] = set()
    deduped: List[str] = []
    for value in strings:
        if value not in seen:
            seen.add(value)
            deduped.append(value)
    return deduped
