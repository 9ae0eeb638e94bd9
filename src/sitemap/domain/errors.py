from typing import Any, Sequence


class InvalidKeySetError(ValueError):
    def __init__(self, unknown_keys: Sequence[Any]) -> None:
        self.unknown_keys = list(unknown_keys)
        super().__init__(f"Unknown key(s): {', '.join(str(key) for key in self.unknown_keys)}")
