"""Parser for sample test cases on problem pages."""

from bs4 import Tag
from loguru import logger

from domain.models.test_case import SampleLabel, TestCase
from infrastructure.errors import SampleExtractionError

from .document import parse_html
from .selectors import SAMPLE_BODY, SAMPLE_HEADING


class ProblemPageParser:
    """Parser for extracting sample input/output pairs from a problem page."""

    def parse_test_cases(self, html: str) -> list[TestCase]:
        """
        Extract sample test cases.

        Japanese samples are preferred; English ones are used when the
        Japanese blocks are missing or unbalanced. Languages are never mixed.

        Raises:
            SampleExtractionError: If neither language has a usable set
        """
        soup = parse_html(html)
        samples: dict[SampleLabel, list[str]] = {label: [] for label in SampleLabel}

        for heading in soup.find_all(SAMPLE_HEADING):
            block = heading.parent
            if not isinstance(block, Tag):
                continue

            label = SampleLabel.classify(self._block_label(block))
            if label is SampleLabel.UNRECOGNIZED:
                continue
            samples[label].append(self._block_text(block, label))

        inputs, outputs = self._select_variant(samples)
        return [TestCase(input=i, output=o) for i, o in zip(inputs, outputs)]

    @staticmethod
    def _block_label(block: Tag) -> str:
        first_heading = block.find(SAMPLE_HEADING)
        return first_heading.get_text(strip=True) if first_heading else ""

    @staticmethod
    def _block_text(block: Tag, label: SampleLabel) -> str:
        bodies = block.find_all(SAMPLE_BODY)
        if len(bodies) != 1:
            logger.warning(f"Expected one <pre> in '{label.value}' block, found {len(bodies)}")
            return ""
        return bodies[0].get_text().strip()

    @staticmethod
    def _select_variant(samples: dict[SampleLabel, list[str]]) -> tuple[list[str], list[str]]:
        variants = (
            (SampleLabel.JA_INPUT, SampleLabel.JA_OUTPUT),
            (SampleLabel.EN_INPUT, SampleLabel.EN_OUTPUT),
        )
        for input_label, output_label in variants:
            inputs, outputs = samples[input_label], samples[output_label]
            if inputs and len(inputs) == len(outputs):
                logger.debug(f"Using {len(inputs)} sample(s) labelled '{input_label.value}'")
                return inputs, outputs

        error = SampleExtractionError(
            len(samples[SampleLabel.JA_INPUT]),
            len(samples[SampleLabel.JA_OUTPUT]),
            len(samples[SampleLabel.EN_INPUT]),
            len(samples[SampleLabel.EN_OUTPUT]),
        )
        logger.error(f"Failed to extract samples: {error}")
        raise error
