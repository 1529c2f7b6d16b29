"""Template rendering for search results using Jinja2.

The search core only returns an ordered list of notices; this module turns a
SearchRunResult into the text shown by the CLI.
"""

import logging
from typing import Dict, List

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from bidwatch.domain.models import NoticeStatus
from bidwatch.matching.utils import build_notice_payload, build_rationale_dict
from bidwatch.normalization import CriteriaNormalizer
from bidwatch.pipeline.models import SearchRunResult
from bidwatch.utils.highlighting import highlight_keywords

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    NoticeStatus.OPEN.value: "入札受付中",
    NoticeStatus.CLOSED.value: "入札終了",
}


class RenderError(Exception):
    """Raised when a result template cannot be rendered."""

    pass


class ResultRenderer:
    """Renders search results as text cards.

    Include keywords are highlighted in titles and agency names with the
    configured markers.
    """

    def __init__(
        self,
        template_dir: str = "result_templates",
        results_template: str = "results.txt.j2",
        marker_start: str = "【",
        marker_end: str = "】",
    ):
        """Initialize renderer with a Jinja2 environment.

        Args:
            template_dir: Directory name within the bidwatch.rendering package
            results_template: Filename of the results template
            marker_start: Marker inserted before a highlighted keyword
            marker_end: Marker inserted after a highlighted keyword
        """
        self.results_template_name = results_template
        self.marker_start = marker_start
        self.marker_end = marker_end
        self.normalizer = CriteriaNormalizer()

        # Plain-text output, so no HTML escaping
        self.env = Environment(
            loader=PackageLoader("bidwatch.rendering", template_dir),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def build_context(self, result: SearchRunResult) -> Dict:
        """Build the template context for a search result.

        Args:
            result: Search result to display

        Returns:
            Dict with cleared, matched_count, total_count, cards and explanations
        """
        keywords = self.normalizer.normalize(result.criteria).active_include_tokens
        cards: List[Dict] = []
        for notice in result.notices:
            card = build_notice_payload(notice)
            card["title"] = highlight_keywords(
                notice.title, keywords, self.marker_start, self.marker_end
            )
            card["agency"] = highlight_keywords(
                notice.agency, keywords, self.marker_start, self.marker_end
            )
            card["status_label"] = STATUS_LABELS.get(card["status"], card["status"])
            cards.append(card)

        return {
            "cleared": result.cleared,
            "matched_count": result.matched_count,
            "total_count": result.total_notices,
            "cards": cards,
            "explanations": [build_rationale_dict(item) for item in result.explanations],
        }

    def render(self, result: SearchRunResult) -> str:
        """Render a search result as text.

        Args:
            result: Search result to display

        Returns:
            Rendered text

        Raises:
            RenderError: If template rendering fails
        """
        try:
            template = self.env.get_template(self.results_template_name)
            text = template.render(self.build_context(result))
        except TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise RenderError(error_msg) from e

        logger.debug(f"Rendered {result.matched_count} result cards")
        return text
