from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

TASK_ORDER = [
    "task_1",
    "task_2",
    "task_3",
    "task_4",
    "task_4_1",
    "task_5",
    "task_6",
    "task_7",
    "task_8",
    "task_9",
    "task_10",
    "task_11",
]


def _banner(task: str) -> str:
    label = task.replace("task_", "").replace("_", ".")
    return f"************** TASK {label} **************"


def _membership(rows: List[Dict[str, Any]]) -> List[str]:
    lines: List[str] = []
    for r in rows:
        lines.append(f"Student name: {r['name']}")
        lines.append(f"Student subjects count: {r['count']}")
        lines.append(f"Student subjects names: {r['subjects']}")
        lines.append("")
    return lines


def _several(who: str) -> Callable[[Dict[str, Any]], List[str]]:
    def fmt(block: Dict[str, Any]) -> List[str]:
        return [
            f"{who} several subjects count: {block['count']}",
            f"{who} several subjects names: {block['names']}",
            "",
        ]

    return fmt


def _partition(block: Dict[str, Any]) -> List[str]:
    return [
        f"Teachers intern count: {block['intern_count']}",
        f"Teachers intern names: {block['intern']}",
        "",
        f"Teachers extern count: {block['extern_count']}",
        f"Teachers extern names: {block['extern']}",
        "",
    ]


def _sorted_people(block: Dict[str, Any]) -> List[str]:
    return [
        f"Student age sorted: {block['students']}",
        "",
        f"Teachers age sorted: {block['teachers']}",
        "",
    ]


def _sorted_subjects(names: List[str]) -> List[str]:
    return [f"Subjects date sorted: {names}", ""]


def _dates(rows: List[Dict[str, Any]]) -> List[str]:
    lines: List[str] = []
    for r in rows:
        lines += [f"Subject name: {r['name']}", f"Subject date: {r['date_text']}", ""]
    return lines


def _salaries(rows: List[Dict[str, Any]]) -> List[str]:
    lines: List[str] = []
    for r in rows:
        lines += [
            f"Teacher name: {r['name']}",
            f"Teacher level: {r['level']}",
            f"Teacher salary: {r['amount']}",
            "",
        ]
    return lines


def _dump(block: Dict[str, Any]) -> List[str]:
    lines: List[str] = []
    for title, key in (("Students", "students"), ("Teachers", "teachers"), ("Subjects", "subjects")):
        lines.append(f"{title} data:")
        for entry in block[key]:
            lines.append(entry)
            lines.append("")
    return lines


def _ages(rows: List[Dict[str, Any]]) -> List[str]:
    lines: List[str] = []
    for r in rows:
        who = r["role"].title()
        lines += [f"{who} name: {r['name']}", f"{who} age: {r['age']}", ""]
    return lines


FORMATTERS: Dict[str, Callable[[Any], List[str]]] = {
    "task_1": _membership,
    "task_2": _several("Student"),
    "task_3": _several("Teachers"),
    "task_4": _partition,
    "task_4_1": _partition,
    "task_5": _sorted_people,
    "task_6": _sorted_subjects,
    "task_7": _dates,
    "task_8": _salaries,
    "task_9": _dates,
    "task_10": _dump,
    "task_11": _ages,
}


def format_task(report: Dict[str, Any], task: str) -> str:
    lines = [_banner(task)] + FORMATTERS[task](report[task])
    return "\n".join(lines)


def format_report(report: Dict[str, Any]) -> str:
    return "\n".join(format_task(report, t) for t in TASK_ORDER if t in report)


def write_report(text: str, report: Dict[str, Any], outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "report.txt").open("w", encoding="utf-8") as f:
        f.write(text)
    with (outputs_dir / "report.json").open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
