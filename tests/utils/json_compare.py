from typing import Dict, Iterable

SECRET_KEYS = frozenset(
    {"management_code", "private_url_code", "attendance_code", "managementCode", "privateUrlCode"}
)


def without_keys(data: Dict, keys: Iterable[str]) -> Dict:
    keys = set(keys)
    return {k: v for k, v in data.items() if k not in keys}


def assert_no_secrets(data: Dict) -> None:
    leaked = SECRET_KEYS & data.keys()
    assert not leaked, f"secrets exposed: {sorted(leaked)}"
