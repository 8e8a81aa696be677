from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(s).strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def first_token(v: str | None, sep: str = ",") -> str:
    """
    First non-empty item of a separated list, lower-cased.
    ffprobe reports demuxer aliases this way ("mov,mp4,m4a,3gp,3g2,mj2").
    """
    for s in (v or "").split(sep):
        if s.strip():
            return s.strip().lower()
    return ""
