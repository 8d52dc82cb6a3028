"""
GuardState — разделяемое изменяемое состояние SaveWrapper

Три скаляра:
- owner: фиксируется при создании (deployer), операции передачи нет
- paused: emergency pause flag, стартует False, переключается только owner
- locked: reentrancy lock, стартует False, освобождается на каждом выходе

Состояние передается guards явно (не глобальная переменная), чтобы ядро
тестировалось изолированно с подставными коллабораторами.
"""

from dataclasses import dataclass, replace

from src.core.domain.units import normalize_address


@dataclass
class GuardState:
    """Owner / PauseFlag / ReentrancyLock."""

    owner: str
    paused: bool = False
    locked: bool = False

    def __post_init__(self):
        self.owner = normalize_address(self.owner)

    def copy(self) -> "GuardState":
        return replace(self)

    def restore_from(self, other: "GuardState") -> None:
        """Восстановление состояния из snapshot (in-place, ссылки сохраняются)."""
        self.owner = other.owner
        self.paused = other.paused
        self.locked = other.locked
