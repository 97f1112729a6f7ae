import json
from typing import Any, Dict


def filter_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Drops every key whose value is ``None``."""
    return dict(filter(lambda item: item[1] is not None, d.items()))


def to_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
