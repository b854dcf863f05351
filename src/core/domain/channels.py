"""
Channels — типы доменов цветовых каналов

Каждая цветовая модель объявляет свои каналы через ChannelSpec. Вид канала
(BOUNDED / CIRCULAR) определяет, какой набор операторов возмущения к нему
применяется: clamp для линейных каналов, wrap по модулю 1 для hue.
"""

from dataclasses import dataclass
from enum import Enum


class ChannelKind(str, Enum):
    """Вид домена канала."""

    BOUNDED = "bounded"  # [lo, hi], clamp на границах
    CIRCULAR = "circular"  # [0, 1), wrap по модулю 1


@dataclass(frozen=True)
class ChannelSpec:
    """Объявление канала цветовой модели: имя поля и вид домена."""

    name: str
    kind: ChannelKind = ChannelKind.BOUNDED

    @property
    def is_circular(self) -> bool:
        return self.kind == ChannelKind.CIRCULAR
