from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def validate(
    target: T,
    condition: Callable[[T], bool],
    on_failure: Callable[[], Exception],
) -> T:
    """条件を満たさない場合は on_failure が生成した例外を送出する

    条件を満たす場合は target をそのまま返すため、呼び出しを連結できる。
    condition 自体がストアを参照してもよい（存在チェックなど）。
    """
    if not condition(target):
        raise on_failure()
    return target


def is_empty(value: str | None) -> bool:
    """None または空文字列かどうか"""
    return value is None or value == ""


def make_string(items: Iterable[object] | None) -> str:
    """要素を ", " 区切りの文字列にする（None は除外）"""
    if not items:
        return ""
    return ", ".join(str(item) for item in items if item is not None)
