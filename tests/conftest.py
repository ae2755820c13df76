import re
from collections.abc import Callable
from html.parser import HTMLParser
from pathlib import Path

import pytest

from seotags.rules import RulesTagsAdapter, TagRules, load_rules

PROJECT_ROOT = Path(__file__).parent.parent

HEAD_ELEMENTS = {"title", "meta", "link"}
VOID_ELEMENTS = {"meta", "link"}
# name="value" pairs with nothing unescaped inside the quotes
ATTRIBUTE_RE = re.compile(r'\s([a-z:-]+)="([^"<>]*)"')


class _HeadChecker(HTMLParser):
    """Collects conformance problems for a head fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.problems: list[str] = []
        self._open: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag not in HEAD_ELEMENTS:
            self.problems.append(f"unexpected element <{tag}>")
        for name, value in attrs:
            if value is None:
                self.problems.append(f"attribute without value: {name}")
        if tag not in VOID_ELEMENTS:
            self._open.append(tag)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag not in VOID_ELEMENTS:
            self.problems.append(f"self-closed non-void element <{tag} />")
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_ELEMENTS:
            self.problems.append(f"end tag for void element </{tag}>")
        elif not self._open or self._open.pop() != tag:
            self.problems.append(f"unbalanced </{tag}>")


def html_problems(fragment: str) -> list[str]:
    """Return conformance problems in a rendered head fragment."""
    checker = _HeadChecker()
    checker.feed(fragment)
    checker.close()
    problems = list(checker.problems)
    if checker._open:
        problems.append(f"unclosed elements: {checker._open}")

    for line in fragment.splitlines():
        if line.startswith("<title>"):
            inner = line[len("<title>") : -len("</title>")]
            if "<" in inner or ">" in inner:
                problems.append(f"unescaped title text: {line}")
            continue
        body = line.rstrip("/> ").split(" ", 1)[-1]
        stripped = ATTRIBUTE_RE.sub("", " " + body).strip()
        if stripped:
            problems.append(f"malformed attributes in: {line}")
    return problems


@pytest.fixture
def assert_valid_html() -> Callable[[str], None]:
    def check(fragment: str) -> None:
        problems = html_problems(fragment)
        assert problems == [], problems

    return check


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> TagRules:
    """Load REAL rules from project root."""
    return load_rules(rules_path)


@pytest.fixture
def rules_adapter(rules: TagRules) -> RulesTagsAdapter:
    return RulesTagsAdapter(rules)
