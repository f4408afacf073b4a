"""表单键名的方括号写法解码：``questions[0][options][1]=Paris`` -> 嵌套 dict。

浏览器提交的 application/x-www-form-urlencoded 只有扁平键值对，
创建测评表单用方括号表达题目列表与选项，这里还原成嵌套结构再交给 pydantic 校验。
``[]`` 表示追加：在末段时追加一个值；在中间段时，若上一个元素里还没有后续路径，
则并入上一个元素，否则新开一个元素（``q[][text]=A&q[][correct]=0`` 是同一道题）。
"""
import re
from typing import Any, Iterable

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


def _split_key(key: str) -> list[str]:
    m = _KEY_RE.match(key)
    if not m:
        return [key]
    return [m.group(1)] + _SEGMENT_RE.findall(m.group(2))


def _has_path(node: Any, parts: list[str]) -> bool:
    for part in parts:
        if part == "" or not isinstance(node, dict) or part not in node:
            return False
        node = node[part]
    return True


def _append_slot(cursor: dict[str, Any], rest: list[str]) -> str:
    """中间段 ``[]`` 对应的下标：复用上一个元素，或新开一个。"""
    if cursor:
        last = str(len(cursor) - 1)
        if isinstance(cursor.get(last), dict) and not _has_path(cursor[last], rest):
            return last
    return str(len(cursor))


def parse_nested_form(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """按提交顺序解码；同一键重复出现时后者覆盖前者。"""
    out: dict[str, Any] = {}
    for key, value in items:
        parts = _split_key(key)
        cursor = out
        for i, part in enumerate(parts[:-1]):
            if part == "" and i > 0:
                part = _append_slot(cursor, parts[i + 1:])
            node = cursor.get(part)
            if not isinstance(node, dict):
                node = {}
                cursor[part] = node
            cursor = node
        last = parts[-1]
        if last == "":
            last = str(len(cursor))
        cursor[last] = value
    return out


def ordered_values(value: Any) -> list[Any]:
    """把 {"0": a, "1": b, "10": c} 按数字下标排序成 [a, b, c]；已是列表则原样返回。

    出现非数字下标时抛 ValueError。
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, dict):
        bad = [k for k in value if not (isinstance(k, str) and k.isdigit())]
        if bad:
            raise ValueError(f"non-numeric list index: {bad[0]!r}")
        return [value[k] for k in sorted(value, key=int)]
    return [value]
