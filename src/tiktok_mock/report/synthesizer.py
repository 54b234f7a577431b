"""
Report Synthesizer for the mock creative report API.

Builds one report row per requested material id, filling the info
block with random entity ids and the metrics block with values drawn
from plausible ranges. Output shape is fully determined by the inputs;
only the values are random.
"""

import random
import secrets
from typing import Optional, Sequence

from ..models.report import ReportEnvelope, ReportRow
from ..utils.constants import ENTITY_ID_LENGTH, FIXED_INFO_FIELDS
from ..utils.id_generator import generate_alphanumeric_id, generate_request_id
from .metrics import generate_metrics


class ReportSynthesizer:
    """
    Synthesizes creative report rows.

    Holds no state between calls apart from its random source, so a
    single instance per request (or a shared SystemRandom-backed one)
    is safe under concurrent use.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        random_seed: int | None = None,
    ):
        """
        Initialize the synthesizer.

        Args:
            rng: Random source to use (takes precedence over random_seed)
            random_seed: Optional seed for reproducible output
        """
        if rng is not None:
            self._rng = rng
        elif random_seed is not None:
            self._rng = random.Random(random_seed)
        else:
            self._rng = secrets.SystemRandom()

    def _entity_id(self) -> str:
        return generate_alphanumeric_id(ENTITY_ID_LENGTH, rng=self._rng)

    def build_info(self, material_id, info_fields: Sequence[str]) -> dict:
        """
        Build the info block for one material.

        The four fixed fields always come first; every other requested
        field gets its own fresh id. Requested names matching a fixed
        field are skipped.
        """
        info = {
            "material_id": material_id,
            "video_id": self._entity_id(),
            "page_id": self._entity_id(),
            "image_id": self._entity_id(),
        }
        for name in info_fields:
            if name in FIXED_INFO_FIELDS:
                continue
            info[name] = self._entity_id()
        return info

    def synthesize(
        self,
        material_ids: Sequence,
        info_fields: Sequence[str],
        metrics_fields: Sequence[str],
    ) -> list[ReportRow]:
        """
        Produce one row per material id, in input order.

        Duplicate material ids each get their own row.

        Args:
            material_ids: Material identifiers from the filtering parameter
            info_fields: Requested info field names
            metrics_fields: Requested metric names

        Returns:
            List of ReportRow, same length and order as material_ids
        """
        rows = []
        for material_id in material_ids:
            metrics = generate_metrics(metrics_fields, rng=self._rng)
            info = self.build_info(material_id, info_fields)
            rows.append(ReportRow(info=info, metrics=metrics))
        return rows

    def build_envelope(
        self,
        material_ids: Sequence,
        info_fields: Sequence[str],
        metrics_fields: Sequence[str],
        request_id: str | None = None,
    ) -> ReportEnvelope:
        """Synthesize rows and wrap them in a success envelope."""
        rows = self.synthesize(material_ids, info_fields, metrics_fields)
        return ReportEnvelope.success(
            rows,
            request_id=request_id or generate_request_id(rng=self._rng),
        )


def synthesize_report(
    material_ids: Sequence,
    info_fields: Sequence[str],
    metrics_fields: Sequence[str],
    random_seed: int | None = None,
) -> list[ReportRow]:
    """
    Convenience function to synthesize report rows.

    Args:
        material_ids: Material identifiers
        info_fields: Requested info field names
        metrics_fields: Requested metric names
        random_seed: Optional seed for reproducible output

    Returns:
        List of ReportRow
    """
    synthesizer = ReportSynthesizer(random_seed=random_seed)
    return synthesizer.synthesize(material_ids, info_fields, metrics_fields)
