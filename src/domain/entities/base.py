"""Base entity class for domain entities."""

import uuid


class BaseEntity:
    """Base class for all domain entities.

    IDは生成時にUUID文字列で採番する。一覧上の位置が変わっても
    同じレコードを指し続けるための識別子として使う。
    """

    def __init__(self, id: str | None = None) -> None:
        self.id = id or str(uuid.uuid4())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))
