"""Markdown link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# Inline link or image: [label](target "optional title"); both parts may span lines
MARKDOWN_URL_PATTERN = re.compile(r"(!)?\[([^\]]+)\]\(([^)]+)\)")
TITLE_PATTERN = re.compile(r'"[^)]*"')


class MarkdownParser(BaseParser):
    """Parser for inline markdown links and images."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for match in MARKDOWN_URL_PATTERN.finditer(text):
            # Drop the title and the blank it leaves; leading blanks stay part of the target
            target = TITLE_PATTERN.sub("", match.group(3)).rstrip()
            if not target:
                continue

            start = match.start()
            line_start = text.rfind("\n", 0, start) + 1
            is_embed = bool(match.group(1))

            yield LinkRef(
                line_number=text.count("\n", 0, start) + 1,
                column_number=start - line_start + 1,
                raw_target=target,
                link_type="image" if is_embed else "url",
                alias=match.group(2).strip(),
                is_embed=is_embed,
            )
