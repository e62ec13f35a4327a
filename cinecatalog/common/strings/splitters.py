from typing import List

def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def split_delimited(v: str | None, sep: str = ",") -> List[str]:
    """
    Split a stored multi-value field. Unlike csv_to_list, empty segments are
    kept (as "") so the segment count always matches the stored value.
    """
    if v is None:
        return []
    return [s.strip() for s in v.split(sep)]


def join_delimited(values: List[str] | str | None, sep: str = ", ") -> str:
    if values is None:
        return ""
    if isinstance(values, str):
        return values
    return sep.join(str(x).strip() for x in values)
