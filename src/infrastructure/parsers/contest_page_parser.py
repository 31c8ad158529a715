"""Parser for contest task lists and score tables."""

from bs4 import Tag
from loguru import logger

from domain.models.contest import Contest, Problem
from infrastructure.errors import ParsingError

from .document import parse_html, require_attr
from .selectors import (
    SCORE_ROW_CELLS,
    SCORE_TABLE_HEADER_CELLS,
    SCORE_TABLE_HEADERS,
    SCORE_TABLE_ROWS,
    SCORE_TABLES,
    TASK_ROW_CELLS,
    TASK_TABLE_ROWS,
)


class ContestPageParser:
    """Parser for extracting problem metadata from AtCoder contest pages."""

    def parse_tasks(self, html: str, contest_id: str) -> Contest:
        """
        Parse the ``/contests/{id}/tasks`` page.

        Raises:
            ParsingError: If a row does not have the expected four cells
        """
        soup = parse_html(html)
        problems = [
            self._parse_task_row(row, index)
            for index, row in enumerate(soup.select(TASK_TABLE_ROWS), start=1)
        ]

        logger.debug(f"Parsed {len(problems)} problem(s) for contest {contest_id}")
        return Contest(contest_id=contest_id, problems=problems)

    def parse_score_table(self, html: str) -> list[str] | None:
        """
        Parse problem ids from the score table on the contest top page.

        Returns:
            Problem ids in row order, or None unless exactly one table has
            a recognised header

        Raises:
            ParsingError: If a row of the matched table is malformed
        """
        soup = parse_html(html)
        tables = [table for table in soup.select(SCORE_TABLES) if self._is_score_table(table)]

        if len(tables) != 1:
            logger.debug(f"Found {len(tables)} score table candidate(s), ignoring")
            return None

        problem_ids = []
        for index, row in enumerate(tables[0].select(SCORE_TABLE_ROWS), start=1):
            cells = row.find_all("td")
            if len(cells) != SCORE_ROW_CELLS:
                logger.error(f"Score table row {index} has {len(cells)} cell(s)")
                raise ParsingError(
                    f"could not parse the score table: row {index} has {len(cells)} cell(s), "
                    f"expected {SCORE_ROW_CELLS}",
                    field="score_table",
                )
            problem_ids.append(cells[0].get_text(strip=True))

        return problem_ids

    @staticmethod
    def _is_score_table(table: Tag) -> bool:
        header = [th.get_text(strip=True) for th in table.select(SCORE_TABLE_HEADER_CELLS)]
        return header in SCORE_TABLE_HEADERS

    def _parse_task_row(self, row: Tag, index: int) -> Problem:
        cells = row.find_all("td")
        if len(cells) != TASK_ROW_CELLS:
            logger.error(f"Task row {index} has {len(cells)} cell(s)")
            raise ParsingError(
                f"task row {index} has {len(cells)} cell(s), expected {TASK_ROW_CELLS}",
                field="task_row",
            )

        id_cell, name_cell, time_cell, memory_cell = cells
        id_link = self._cell_link(id_cell, index, "id")
        name_link = self._cell_link(name_cell, index, "name")

        return Problem(
            id=id_link.get_text(strip=True),
            name=name_link.get_text(strip=True),
            url=require_attr(name_link, "href", f"url of task row {index}").strip(),
            time_limit=time_cell.get_text(strip=True),
            memory_limit=memory_cell.get_text(strip=True),
        )

    @staticmethod
    def _cell_link(cell: Tag, index: int, field: str) -> Tag:
        link = cell.find("a")
        if link is None:
            logger.error(f"Task row {index} has no {field} link")
            raise ParsingError(f"task row {index} has no {field} link", field=field)
        return link
